from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from patent_browser.core.aggregations import Summary
from patent_browser.ui.helpers import summary_texts
from patent_browser.ui.ids import IDs


def _card(title: str, value: str, value_id: str) -> dbc.Col:
    return dbc.Col(
        dbc.Card(
            dbc.CardBody(
                [
                    html.P(title, className="text-muted small mb-1"),
                    html.H3(value, id=value_id, className="fw-bold mb-0"),
                ]
            ),
        ),
        md=3,
    )


def build_summary_panel(summary: Summary) -> dbc.Row:
    total, countries, top_country, growth = summary_texts(summary)
    return dbc.Row(
        [
            _card("Total Patents", total, IDs.Control.SUMMARY_TOTAL),
            _card("Countries", countries, IDs.Control.SUMMARY_COUNTRIES),
            _card("Top Country", top_country, IDs.Control.SUMMARY_TOP_COUNTRY),
            _card("Avg Growth", growth, IDs.Control.SUMMARY_GROWTH),
        ],
        className="g-3 mt-1",
    )
