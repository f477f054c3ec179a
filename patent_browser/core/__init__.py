"""
Core domain layer: dataset store, filter selection, cross-filtering,
aggregations, view base class and the view registry
"""

from .dataset import DatasetStore
from .filter_state import FilterSelection
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["DatasetStore", "FilterSelection", "BaseView", "ViewRegistry"]
