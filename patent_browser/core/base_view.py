from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .cross_filter import FilteredData, apply_filters
from .dataset import DatasetStore
from .filter_state import FilterSelection

logger = logging.getLogger(__name__)

COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8", "#82CA9D", "#FFC658", "#FF7C7C"]


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the chart series for the current FilterSelection
    - implement 'render_figure' - render the series using Plotly
    """

    id: str = None
    label: str = None
    description: str = ""

    def __init__(self, store: DatasetStore):
        self.store = store

    @abstractmethod
    def compute_data(self, selection: FilterSelection) -> Any:
        """
        Compute the data given the current FilterSelection
        :param selection: the current {@link FilterSelection} - what filters the user has toggled for
        :return: data: a dataframe containing the series as per the FilterSelection
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, selection: FilterSelection) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param selection: the current {@link FilterSelection}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered(self, selection: FilterSelection) -> FilteredData:
        """
        Return the store's row sets filtered according to the given FilterSelection.

        All views should call this instead of filtering frames directly,
        so cross-filtering behaviour lives in one place.
        """
        return apply_filters(self.store, selection)

    def timed_compute(self, selection: FilterSelection) -> Any:
        start = time.perf_counter()
        data = self.compute_data(selection)
        logger.info(
            "compute_data finished",
            extra={
                "view_id": self.id,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def empty_figure(message: str = "No data to show") -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig

    @staticmethod
    def technology_suffix(selection: FilterSelection) -> str:
        """' (AI)' / ' (3 technologies)' / '' for chart titles."""
        if not selection.has_technology_filter:
            return ""
        techs = sorted(selection.technologies)
        if len(techs) == 1:
            return f" ({techs[0]})"
        return f" ({len(techs)} technologies)"
