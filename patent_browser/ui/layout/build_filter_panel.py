from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from patent_browser.services.dashboard_service import PatentDashboard
from patent_browser.ui.helpers import count_label, searched_options, year_label
from patent_browser.ui.ids import IDs


def _search_block(
    *,
    label_id: str,
    label: str,
    search_id: str,
    search_placeholder: str,
    select_all_id: str,
    clear_id: str,
    select_id: str,
    options: list,
    value: list,
    select_placeholder: str,
) -> html.Div:
    return html.Div(
        [
            html.Label(label, id=label_id, className="form-label fw-semibold"),
            dcc.Input(
                id=search_id,
                type="text",
                placeholder=search_placeholder,
                debounce=True,
                className="form-control form-control-sm mb-2",
            ),
            html.Div(
                [
                    dbc.Button("Select All", id=select_all_id, color="primary", size="sm", className="me-2"),
                    dbc.Button("Clear All", id=clear_id, color="secondary", size="sm"),
                ],
                className="mb-2",
            ),
            dcc.Dropdown(
                id=select_id,
                options=options,
                value=value,
                multi=True,
                placeholder=select_placeholder,
                className="mb-3",
            ),
        ]
    )


def build_filter_panel(dashboard: PatentDashboard) -> dbc.Card:
    store = dashboard.store
    selection = dashboard.selection
    countries = store.all_countries()
    technologies = store.all_technologies()
    year_min, year_max = dashboard.bounds

    return dbc.Card(
        [
            dbc.CardHeader("Interactive Controls", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(
                            _search_block(
                                label_id=IDs.Control.COUNTRY_LABEL,
                                label=count_label("Countries", len(countries), len(selection.countries)),
                                search_id=IDs.Control.COUNTRY_SEARCH,
                                search_placeholder="Search countries...",
                                select_all_id=IDs.Control.COUNTRY_SELECT_ALL_BTN,
                                clear_id=IDs.Control.COUNTRY_CLEAR_BTN,
                                select_id=IDs.Control.COUNTRY_SELECT,
                                options=searched_options(countries, "", selection.countries),
                                value=sorted(selection.countries),
                                select_placeholder="No countries selected",
                            ),
                            md=4,
                        ),
                        dbc.Col(
                            html.Div(
                                [
                                    html.Label(
                                        year_label((selection.min_year, selection.max_year)),
                                        id=IDs.Control.YEAR_LABEL,
                                        className="form-label fw-semibold",
                                    ),
                                    dcc.RangeSlider(
                                        id=IDs.Control.YEAR_RANGE,
                                        min=year_min,
                                        max=year_max,
                                        step=1,
                                        value=[selection.min_year, selection.max_year],
                                        marks={y: str(y) for y in range(year_min, year_max + 1)},
                                        allowCross=False,
                                    ),
                                ]
                            ),
                            md=4,
                        ),
                        dbc.Col(
                            _search_block(
                                label_id=IDs.Control.TECH_LABEL,
                                label=count_label("Technology Domains", len(technologies), len(selection.technologies)),
                                search_id=IDs.Control.TECH_SEARCH,
                                search_placeholder="Search technologies...",
                                select_all_id=IDs.Control.TECH_SELECT_ALL_BTN,
                                clear_id=IDs.Control.TECH_CLEAR_BTN,
                                select_id=IDs.Control.TECH_SELECT,
                                options=searched_options(technologies, "", selection.technologies),
                                value=sorted(selection.technologies),
                                select_placeholder="All technologies",
                            ),
                            md=4,
                        ),
                    ]
                )
            ),
        ],
        className="pb-controls mt-3",
    )
