from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from patent_browser.core.aggregations import multi_country_trend, yearly_totals
from patent_browser.core.base_view import BaseView, COLORS
from patent_browser.core.filter_state import FilterSelection


class YearlyTrendView(BaseView):
    """
    Total patents per year for the effective countries.
    """

    id = "yearly_trend"
    label = "Yearly Patent Trend"
    description = "Patents per year across the selected countries"

    def compute_data(self, selection: FilterSelection) -> pd.DataFrame:
        return yearly_totals(self.filtered(selection).country_year)

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = px.line(data, x="year", y="patents", markers=True)
        fig.update_layout(
            height=420,
            margin=dict(l=40, r=40, t=60, b=40),
            title=f"{self.label}{self.technology_suffix(selection)}",
            xaxis_title="Year",
            yaxis_title="Patents",
            xaxis={"dtick": 1},
        )
        return fig


class CountryTrendsView(BaseView):
    """
    Stacked area of the top 5 countries over time.

    - one record per year present in the filtered rows
    - one column per top-5 country, 0 where a country has no row for a year
    """

    id = "country_trends"
    label = "Country Trends Comparison"
    description = "Multi-country patent trends over time"

    def compute_data(self, selection: FilterSelection) -> pd.DataFrame:
        return multi_country_trend(self.filtered(selection).country_year)

    def render_figure(self, data: pd.DataFrame, selection: FilterSelection) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure()

        fig = go.Figure()
        countries = [c for c in data.columns if c != "year"]
        for i, country in enumerate(countries):
            colour = COLORS[i % len(COLORS)]
            fig.add_trace(
                go.Scatter(
                    x=data["year"],
                    y=data[country],
                    name=country,
                    customdata=[country] * len(data),
                    mode="lines",
                    stackgroup="one",
                    line={"color": colour},
                )
            )

        fig.update_layout(
            height=420,
            margin=dict(l=40, r=40, t=60, b=40),
            title=f"{self.label}{self.technology_suffix(selection)}",
            xaxis_title="Year",
            yaxis_title="Patents",
            xaxis={"dtick": 1},
            legend_title="Country",
        )
        return fig
