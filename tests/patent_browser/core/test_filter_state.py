from __future__ import annotations

import pytest

from patent_browser.core.filter_state import FilterSelection, clamp_year_range


def test_defaults_cover_known_year_bounds():
    selection = FilterSelection()

    assert selection.countries == frozenset()
    assert selection.technologies == frozenset()
    assert selection.year_range == (2017, 2021)
    assert selection.has_technology_filter is False


def test_iterables_are_stored_as_frozensets():
    selection = FilterSelection(countries=["US", "DE", "US"], technologies=("AI",))

    assert selection.countries == frozenset({"US", "DE"})
    assert selection.technologies == frozenset({"AI"})
    assert selection.has_technology_filter is True


def test_inverted_year_range_is_swapped():
    selection = FilterSelection(year_range=(2021, 2018))

    assert selection.min_year == 2018
    assert selection.max_year == 2021


@pytest.mark.parametrize(
    "lo, hi, expected",
    [
        (2010, 2030, (2017, 2021)),
        (2019, 2019, (2019, 2019)),
        (2025, 2015, (2017, 2021)),
        (2022, 2024, (2021, 2021)),
    ],
)
def test_clamp_year_range_never_raises(lo, hi, expected):
    assert clamp_year_range(lo, hi, bounds=(2017, 2021)) == expected


def test_with_methods_return_new_objects():
    original = FilterSelection(countries={"US"})

    updated = original.with_countries(["DE"]).with_year_range(2019, 2020)

    assert original.countries == frozenset({"US"})
    assert original.year_range == (2017, 2021)
    assert updated.countries == frozenset({"DE"})
    assert updated.year_range == (2019, 2020)


def test_selection_is_immutable():
    selection = FilterSelection()

    with pytest.raises(AttributeError):
        selection.countries = frozenset({"US"})


def test_toggle_adds_then_removes():
    selection = FilterSelection(countries={"US"})

    selection = selection.toggle_country("DE")
    assert selection.countries == frozenset({"US", "DE"})

    selection = selection.toggle_country("US")
    assert selection.countries == frozenset({"DE"})

    selection = selection.toggle_technology("AI").toggle_technology("AI")
    assert selection.technologies == frozenset()


def test_search_text_none_becomes_empty_string():
    selection = FilterSelection().with_country_search(None).with_technology_search("bio")

    assert selection.country_search == ""
    assert selection.technology_search == "bio"


def test_to_dict_is_json_friendly_and_sorted():
    selection = FilterSelection(
        countries={"US", "DE"},
        year_range=(2018, 2020),
        technologies={"Bio", "AI"},
        country_search="u",
    )

    assert selection.to_dict() == {
        "countries": ["DE", "US"],
        "year_range": [2018, 2020],
        "technologies": ["AI", "Bio"],
        "country_search": "u",
        "technology_search": "",
    }


def test_from_dict_restores_selection():
    selection = FilterSelection(countries={"US"}, year_range=(2019, 2019), technologies={"AI"})

    restored = FilterSelection.from_dict(selection.to_dict())

    assert restored == selection


def test_from_dict_fills_defaults_and_clamps():
    restored = FilterSelection.from_dict({"year_range": [1990, 2050]}, bounds=(2017, 2021))

    assert restored.countries == frozenset()
    assert restored.year_range == (2017, 2021)

    empty = FilterSelection.from_dict({}, bounds=(2018, 2020))
    assert empty.year_range == (2018, 2020)


def test_blank_names_are_dropped():
    selection = FilterSelection(countries=["", "US"], technologies=[""])

    assert selection.countries == frozenset({"US"})
    assert selection.has_technology_filter is False
    assert selection.toggle_country("").countries == frozenset({"US"})
