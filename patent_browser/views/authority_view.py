from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from patent_browser.core.aggregations import authority_totals
from patent_browser.core.base_view import BaseView
from patent_browser.core.filter_state import FilterSelection


class AuthorityTotalsView(BaseView):
    """
    Top 10 patent authorities for the effective countries.

    Authority rows are year-span aggregates, so the year range is not applied.
    """

    id = "authority_totals"
    label = "Patent Authorities Analysis"
    description = "Distribution of patents by patent authority"

    def compute_data(self, selection: FilterSelection) -> pd.DataFrame:
        return authority_totals(self.filtered(selection).authority)

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = px.bar(
            data,
            x="authority",
            y="patents",
            color_discrete_sequence=["#ff7c7c"],
        )
        fig.update_layout(
            height=480,
            margin=dict(l=40, r=40, t=60, b=40),
            title=f"{self.label}{self.technology_suffix(selection)}",
            xaxis_title="Patent authority",
            yaxis_title="Patents",
        )
        return fig
