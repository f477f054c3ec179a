"""
Service layer: session objects the UI talks to.
"""

from .dashboard_service import PatentDashboard

__all__ = ["PatentDashboard"]
