from __future__ import annotations

import logging
from typing import Dict, List, Type

from .base_view import BaseView
from .dataset import DatasetStore

logger = logging.getLogger(__name__)


class ViewRegistry:
    """
    Chart views known to the dashboard, keyed by view id.

    The plot panel builds one graph per registered class and the render
    callback looks views up here by id, so adding a chart only means
    registering its class. Registration order is the order graphs appear
    in their tab.
    """

    def __init__(self) -> None:
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        :raises TypeError: view_cls is not a BaseView subclass
        :raises ValueError: another view already uses view_cls.id
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"{view_cls!r} is not a BaseView subclass")
        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls
        logger.debug("Registered view", extra={"view_id": view_cls.id})

    def create(self, view_id: str, store: DatasetStore) -> BaseView:
        """Build a fresh view over 'store'; KeyError for an unknown id."""
        if view_id not in self._views:
            raise KeyError(f"View '{view_id}' not found")
        return self._views[view_id](store)

    def ids(self) -> List[str]:
        return list(self._views)

    def all_classes(self) -> List[Type[BaseView]]:
        return list(self._views.values())
