from __future__ import annotations

from patent_browser.core.aggregations import Summary
from patent_browser.ui.helpers import (
    clicked_value,
    count_label,
    searched_options,
    summary_texts,
    year_label,
)


def test_searched_options_keep_selected_first():
    options = searched_options(["France", "Germany", "Japan"], "ja", selected=["Germany", "Unknown"])

    assert [o["value"] for o in options] == ["Germany", "Japan"]


def test_searched_options_without_search():
    options = searched_options(["France", "Japan"], None)

    assert options == [{"label": "France", "value": "France"}, {"label": "Japan", "value": "Japan"}]


def test_labels():
    assert count_label("Countries", 40, 10) == "Countries (40 total, 10 selected)"
    assert year_label([2018, 2020]) == "Year Range: 2018 - 2020"


def test_summary_texts_flag_placeholder_growth():
    texts = summary_texts(Summary(total_patents=1234567, country_count=3, top_country="Japan"))

    assert texts == ("1,234,567", "3", "Japan", "5.2% (placeholder)")


def test_summary_texts_without_top_country():
    assert summary_texts(Summary())[2] == "-"


def test_clicked_value_prefers_customdata():
    assert clicked_value({"points": [{"customdata": ["Japan"], "x": "ignored"}]}) == "Japan"
    assert clicked_value({"points": [{"customdata": "Korea"}]}) == "Korea"
    assert clicked_value({"points": [{"label": "EPO"}]}) == "EPO"
    assert clicked_value({"points": [{"x": "AI"}]}) == "AI"


def test_clicked_value_handles_empty_clicks():
    assert clicked_value(None) is None
    assert clicked_value({"points": []}) is None
    assert clicked_value({"points": [{}]}) is None
