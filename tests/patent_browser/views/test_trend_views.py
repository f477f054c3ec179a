import pandas as pd
import plotly.graph_objs as go

from patent_browser.core.dataset import DatasetStore
from patent_browser.core.filter_state import FilterSelection
from patent_browser.views.trend_view import CountryTrendsView, YearlyTrendView


def _make_store() -> DatasetStore:
    rows = [
        ("US", "2018", "100"),
        ("US", "2019", "150"),
        ("DE", "2018", "80"),
        ("JP", "2020", "60"),
        ("KR", "2019", "40"),
        ("FR", "2021", "20"),
        ("IT", "2021", "10"),
    ]
    country_year = pd.DataFrame(rows, columns=["COUNTRY_NAME", "YEAR", "OBS_VALUE_sum"])
    return DatasetStore.from_frames(country_year=country_year)


def _selection(**kwargs) -> FilterSelection:
    return FilterSelection(countries={"US", "DE", "JP", "KR", "FR", "IT"}, **kwargs)


def test_yearly_trend_compute_data():
    view = YearlyTrendView(_make_store())

    df = view.compute_data(_selection(year_range=(2018, 2019)))

    assert df["year"].tolist() == [2018, 2019]
    assert df["patents"].tolist() == [180.0, 190.0]


def test_yearly_trend_render_figure():
    view = YearlyTrendView(_make_store())
    selection = _selection()

    fig = view.render_figure(view.compute_data(selection), selection)

    assert isinstance(fig, go.Figure)
    assert fig.layout.xaxis.title.text == "Year"
    assert fig.layout.yaxis.title.text == "Patents"
    assert list(fig.data[0].x) == [2018, 2019, 2020, 2021]


def test_country_trends_one_trace_per_top_country():
    view = CountryTrendsView(_make_store())
    selection = _selection()

    df = view.compute_data(selection)
    fig = view.render_figure(df, selection)

    assert list(df.columns) == ["year", "US", "DE", "JP", "KR", "FR"]
    assert [trace.name for trace in fig.data] == ["US", "DE", "JP", "KR", "FR"]
    assert list(fig.data[0].y) == [100.0, 150.0, 0.0, 0.0]


def test_trend_views_render_empty():
    store = _make_store()
    selection = FilterSelection()

    for view_cls in (YearlyTrendView, CountryTrendsView):
        view = view_cls(store)
        fig = view.render_figure(view.compute_data(selection), selection)

        assert (fig.layout.title.text or "") == "No data to show"
