"""
Top-level package for the patent browser.

This package exposes the core architecture (pipeline, views, UI adapters).
Most code should import from submodules such as:
    patent_browser.core
    patent_browser.services
    patent_browser.views
    patent_browser.ui
"""

__all__: list[str] = []
