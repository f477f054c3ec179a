from __future__ import annotations

from typing import Dict, List, Tuple

import dash_bootstrap_components as dbc
from dash import dcc, html

from patent_browser.core.view_registry import ViewRegistry
from patent_browser.ui.ids import IDs, graph_id

# (tab value, tab label, view ids shown in that tab)
CHART_TABS: List[Tuple[str, str, List[str]]] = [
    ("overview", "Overview", ["country_share", "country_totals", "country_trends"]),
    ("trend", "Trend", ["yearly_trend"]),
    ("technology", "Technology", ["technology_distribution", "technology_totals"]),
    ("authorities", "Authorities", ["authority_totals"]),
]

# Bootstrap column width per view inside its tab
_WIDTHS: Dict[str, int] = {"country_share": 4, "country_totals": 8}


def _graph_card(view_cls) -> dbc.Col:
    return dbc.Col(
        dbc.Card(
            [
                dbc.CardHeader(
                    [
                        html.Strong(view_cls.label),
                        html.Div(view_cls.description, className="text-muted small"),
                    ],
                    className="p-2",
                ),
                dbc.CardBody(
                    dcc.Loading(
                        type="default",
                        children=dcc.Graph(
                            id=graph_id(view_cls.id),
                            config={"responsive": True},
                        ),
                    )
                ),
            ],
            className="h-100",
        ),
        md=_WIDTHS.get(view_cls.id, 12),
        className="mb-3",
    )


def build_plot_panel(registry: ViewRegistry) -> html.Div:
    classes = {cls.id: cls for cls in registry.all_classes()}

    tabs = []
    for value, label, view_ids in CHART_TABS:
        cards = [_graph_card(classes[v]) for v in view_ids if v in classes]
        tabs.append(dcc.Tab(label=label, value=value, children=[dbc.Row(cards, className="g-3 mt-2")]))

    return html.Div(
        [
            dcc.Tabs(id=IDs.Control.CHART_TABS, value=CHART_TABS[0][0], children=tabs, className="mt-3"),
            html.Div(
                [
                    dbc.Button(
                        "Download filtered rows (CSV)",
                        id=IDs.Control.DOWNLOAD_DATA_BTN,
                        color="secondary",
                        size="sm",
                        className="mt-2 ms-auto me-2",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                ],
                className="d-flex justify-content-end align-items-center",
            ),
        ]
    )
