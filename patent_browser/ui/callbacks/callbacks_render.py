from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output, State, dcc, exceptions

from patent_browser.core.filter_state import FilterSelection
from patent_browser.services.dashboard_service import PatentDashboard
from patent_browser.ui.helpers import summary_texts
from patent_browser.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from patent_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def _selection_from_store(ctx: AppConfig, fs_data: dict[str, Any] | None) -> FilterSelection:
    if fs_data is None:
        return ctx.dashboard.selection
    return FilterSelection.from_dict(fs_data, bounds=ctx.global_config.year_bounds)


def render_view(ctx: AppConfig, view_id: str, selection: FilterSelection) -> go.Figure:
    """
    Compute + render one registered view, turning failures into an error figure.
    """
    try:
        view = ctx.registry.create(view_id, ctx.store)
        data = view.timed_compute(selection)
        return view.render_figure(data, selection)
    except Exception:
        logger.exception(
            "Error rendering view",
            extra={"view_id": view_id, "filter_state": selection.to_dict()},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    view_ids = ctx.registry.ids()

    # ---------------------------------------------------------
    # FilterSelection -> every chart
    # ---------------------------------------------------------
    @app.callback(
        *[Output(graph_id(v), "figure") for v in view_ids],
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_graphs_from_state(fs_data: dict[str, Any] | None):
        try:
            selection = _selection_from_store(ctx, fs_data)
        except Exception:
            logger.exception("Invalid filter state in graph callback: %r", fs_data)
            return tuple(_error_figure("Internal error: invalid filter state.") for _ in view_ids)

        logger.info(
            "render_start",
            extra={
                "n_countries": len(selection.countries),
                "n_technologies": len(selection.technologies),
                "year_range": list(selection.year_range),
            },
        )
        return tuple(render_view(ctx, v, selection) for v in view_ids)

    # ---------------------------------------------------------
    # Summary cards + technology badge
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SUMMARY_TOTAL, "children"),
        Output(IDs.Control.SUMMARY_COUNTRIES, "children"),
        Output(IDs.Control.SUMMARY_TOP_COUNTRY, "children"),
        Output(IDs.Control.SUMMARY_GROWTH, "children"),
        Output(IDs.Control.TECH_BADGE, "children"),
        Output(IDs.Control.TECH_BADGE, "style"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_summary(fs_data: dict[str, Any] | None):
        selection = _selection_from_store(ctx, fs_data)
        session = PatentDashboard.restore(ctx.store, selection, bounds=ctx.global_config.year_bounds)

        badge = session.technology_badge()
        badge_text = f"Filtered by Technologies: {badge}" if badge else ""
        badge_style = {} if badge else {"display": "none"}

        return (*summary_texts(session.get_summary()), badge_text, badge_style)

    # ---------------------------------------------------------
    # Download filtered tidy rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_filtered_rows(n_clicks, fs_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        selection = _selection_from_store(ctx, fs_data)
        session = PatentDashboard.restore(ctx.store, selection, bounds=ctx.global_config.year_bounds)
        tidy = session.get_filtered().tidy

        logger.info("Exporting filtered rows", extra={"n_rows": len(tidy)})
        return dcc.send_data_frame(tidy.to_csv, "filtered_patents.csv", index=False)
