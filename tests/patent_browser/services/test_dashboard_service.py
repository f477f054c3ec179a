from __future__ import annotations

import pandas as pd

from patent_browser.core.dataset import DatasetStore
from patent_browser.core.filter_state import FilterSelection
from patent_browser.services.dashboard_service import (
    PatentDashboard,
    filter_options,
    technology_badge,
)


def _make_store(n_countries: int = 12) -> DatasetStore:
    names = [f"Country {i:02d}" for i in range(n_countries)]
    country_year = pd.DataFrame(
        {
            "COUNTRY_NAME": [n for n in names for _ in (2018, 2019)],
            "YEAR": [str(y) for _ in names for y in (2018, 2019)],
            "OBS_VALUE_sum": [str(10 * (i + 1)) for i in range(n_countries) for _ in (2018, 2019)],
        }
    )
    technology = pd.DataFrame(
        {
            "Selected OECD technology domains": ["AI", "AI", "Bio"],
            "COUNTRY_NAME": ["Country 00", "Country 01", "Country 00"],
            "OBS_VALUE_sum": ["100", "50", "30"],
        }
    )
    authority = pd.DataFrame(
        {
            "PATENT_AUTHORITIES": ["EPO", "JPO"],
            "COUNTRY_NAME": ["Country 00", "Country 02"],
            "OBS_VALUE_sum": ["5", "9"],
        }
    )
    return DatasetStore.from_frames(country_year, technology, None, authority)


def test_first_ten_countries_seeded_once():
    store = _make_store()
    dashboard = PatentDashboard(store)

    assert dashboard.initialized is True
    assert dashboard.selection.countries == frozenset(f"Country {i:02d}" for i in range(10))
    # Second call is a no-op
    assert dashboard.ensure_initialized() is False


def test_cleared_selection_is_not_reseeded():
    dashboard = PatentDashboard(_make_store())

    dashboard.clear_countries()
    dashboard.ensure_initialized()

    assert dashboard.selection.countries == frozenset()
    assert dashboard.get_country_totals().empty


def test_empty_store_defers_seeding():
    dashboard = PatentDashboard(DatasetStore.empty())

    assert dashboard.initialized is False
    assert dashboard.selection.countries == frozenset()


def test_existing_selection_is_kept_on_initialisation():
    selection = FilterSelection(countries={"Country 05"})
    dashboard = PatentDashboard(_make_store(), selection=selection)

    assert dashboard.initialized is True
    assert dashboard.selection.countries == frozenset({"Country 05"})


def test_restore_never_seeds():
    restored = PatentDashboard.restore(_make_store(), FilterSelection())

    assert restored.initialized is True
    assert restored.selection.countries == frozenset()


def test_default_country_count_is_configurable():
    dashboard = PatentDashboard(_make_store(), default_country_count=3)

    assert len(dashboard.selection.countries) == 3


def test_year_range_is_clamped_to_bounds():
    dashboard = PatentDashboard(_make_store(), bounds=(2017, 2021))

    dashboard.set_year_range(2025, 2000)

    assert dashboard.selection.year_range == (2017, 2021)

    dashboard.set_year_range(2019, 2019)
    assert [y for y in dashboard.get_yearly_totals()["year"]] == [2019]


def test_toggle_remove_and_focus_country():
    dashboard = PatentDashboard(_make_store(), default_country_count=2)

    dashboard.toggle_country("Country 05")
    assert "Country 05" in dashboard.selection.countries

    dashboard.remove_country("Country 00")
    assert dashboard.selection.countries == frozenset({"Country 01", "Country 05"})

    dashboard.focus_country("Country 11")
    assert dashboard.selection.countries == frozenset({"Country 11"})


def test_select_all_and_clear_technologies():
    dashboard = PatentDashboard(_make_store())

    dashboard.select_all_technologies()
    assert dashboard.selection.technologies == frozenset({"AI", "Bio"})
    assert dashboard.technology_badge() == "2 selected"

    dashboard.clear_technologies()
    assert dashboard.technology_badge() == ""

    dashboard.toggle_technology("Bio")
    assert dashboard.technology_badge() == "Bio"


def test_select_all_countries_uses_every_country():
    dashboard = PatentDashboard(_make_store())

    dashboard.select_all_countries()

    assert len(dashboard.selection.countries) == 12
    assert len(dashboard.get_country_totals()) == 12


def test_technology_filter_narrows_country_series():
    dashboard = PatentDashboard(_make_store())

    dashboard.focus_technology("Bio")

    assert dashboard.get_filtered().effective_countries == frozenset({"Country 00"})
    assert dashboard.get_country_totals()["country"].tolist() == ["Country 00"]
    assert dashboard.get_authority_totals()["authority"].tolist() == ["EPO"]
    assert dashboard.get_summary().technologies == ("Bio",)


def test_search_narrows_options_only():
    dashboard = PatentDashboard(_make_store())
    before = dashboard.get_country_totals()

    dashboard.set_country_search("  country 1")
    dashboard.set_technology_search("b")

    assert dashboard.country_options() == ["Country 10", "Country 11"]
    assert dashboard.technology_options() == ["Bio"]
    pd.testing.assert_frame_equal(dashboard.get_country_totals(), before)


def test_summary_and_top_countries():
    dashboard = PatentDashboard(_make_store(), default_country_count=3)

    summary = dashboard.get_summary()

    assert summary.total_patents == 2 * (10 + 20 + 30)
    assert summary.country_count == 3
    assert summary.top_country == "Country 02"
    assert dashboard.get_top_countries() == ["Country 02", "Country 01", "Country 00"]
    assert list(dashboard.get_multi_country_trend().columns) == [
        "year",
        "Country 02",
        "Country 01",
        "Country 00",
    ]


def test_filter_options_and_badge_helpers():
    assert filter_options(["Japan", "Korea"], "") == ["Japan", "Korea"]
    assert filter_options(["Japan", "Korea"], "JAP") == ["Japan"]
    assert technology_badge([]) == ""
    assert technology_badge(["AI"]) == "AI"
    assert technology_badge(["AI", "Bio", "ICT"]) == "3 selected"
