from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from patent_browser.core.aggregations import technology_totals
from patent_browser.core.base_view import BaseView, COLORS
from patent_browser.core.filter_state import FilterSelection


class _TechnologyBase(BaseView):
    # Technology rows are filtered by the raw country selection (see cross_filter)
    def compute_data(self, selection: FilterSelection) -> pd.DataFrame:
        return technology_totals(self.filtered(selection).technology)


class TechnologyDistributionView(_TechnologyBase):
    """Pie of the top 8 technology domains."""

    id = "technology_distribution"
    label = "Technology Distribution"
    description = "Patent distribution by technology domain"

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure(
            go.Pie(
                labels=data["technology"],
                values=data["patents"],
                customdata=data["technology"],
                marker={"colors": COLORS[: len(data)]},
                textinfo="percent",
                sort=False,
            )
        )
        fig.update_layout(
            height=420,
            margin=dict(l=20, r=20, t=60, b=20),
            title=self.label,
        )
        return fig


class TechnologyTotalsView(_TechnologyBase):
    """Bar comparison of technology domains; clicking a bar filters on it."""

    id = "technology_totals"
    label = "Technology Trends"
    description = "Technology domain comparison - click a bar to filter on it"

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = px.bar(
            data,
            x="technology",
            y="patents",
            custom_data=["technology"],
            color_discrete_sequence=["#82ca9d"],
        )
        fig.update_layout(
            height=420,
            margin=dict(l=40, r=40, t=60, b=120),
            title=self.label,
            xaxis_title="Technology domain",
            yaxis_title="Patents",
            xaxis_tickangle=-45,
        )
        return fig
