import pandas as pd
import plotly.graph_objs as go

from patent_browser.core.dataset import DatasetStore
from patent_browser.core.filter_state import FilterSelection
from patent_browser.views.authority_view import AuthorityTotalsView


def _make_store() -> DatasetStore:
    authority = pd.DataFrame(
        {
            "PATENT_AUTHORITIES": ["EPO", "USPTO", "EPO", "JPO"],
            "COUNTRY_NAME": ["US", "US", "DE", "JP"],
            "OBS_VALUE_sum": ["10", "40", "15", "99"],
            "YEAR_min": ["2005", "2005", "2005", "2005"],
            "YEAR_max": ["2015", "2015", "2015", "2015"],
        }
    )
    technology = pd.DataFrame(
        {
            "Selected OECD technology domains": ["AI"],
            "COUNTRY_NAME": ["DE"],
            "OBS_VALUE_sum": ["1"],
        }
    )
    return DatasetStore.from_frames(technology=technology, authority=authority)


def test_authority_totals_ignore_year_range():
    view = AuthorityTotalsView(_make_store())

    df = view.compute_data(FilterSelection(countries={"US", "DE"}, year_range=(2020, 2021)))

    assert df["authority"].tolist() == ["USPTO", "EPO"]
    assert df["patents"].tolist() == [40.0, 25.0]


def test_authority_totals_use_effective_countries():
    view = AuthorityTotalsView(_make_store())

    df = view.compute_data(FilterSelection(countries={"US", "DE"}, technologies={"AI"}))

    assert df["authority"].tolist() == ["EPO"]
    assert df["patents"].tolist() == [15.0]


def test_authority_render_figure():
    view = AuthorityTotalsView(_make_store())
    selection = FilterSelection(countries={"US", "DE"}, technologies={"AI"})

    fig = view.render_figure(view.compute_data(selection), selection)

    assert isinstance(fig, go.Figure)
    assert fig.layout.title.text == "Patent Authorities Analysis (AI)"
    assert fig.layout.xaxis.title.text == "Patent authority"


def test_authority_render_empty():
    view = AuthorityTotalsView(_make_store())
    selection = FilterSelection()

    fig = view.render_figure(view.compute_data(selection), selection)

    assert (fig.layout.title.text or "") == "No data to show"
