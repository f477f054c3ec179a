"""
Cross-filtering between the country, year and technology dimensions.

The technology selection narrows the *effective* country set, which is then
applied to the Country-Year, Tidy and Authority extracts. The Technology
extract itself is filtered by the user's raw country selection so the
technology charts keep showing every domain of the chosen countries while a
technology filter is active.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Tuple

import pandas as pd

from patent_browser.core.dataset import Columns, DatasetStore, to_year
from patent_browser.core.filter_state import FilterSelection

logger = logging.getLogger(__name__)


def resolve_effective_countries(
    selection: FilterSelection,
    technology_rows: pd.DataFrame,
) -> FrozenSet[str]:
    """
    Countries that are selected AND active in one of the selected technologies.

    With no technology filter, or no technology rows to narrow by, the
    selected countries are returned unchanged. The result is always a subset
    of selection.countries.
    """
    if not selection.has_technology_filter or technology_rows.empty:
        return selection.countries

    mask = technology_rows[Columns.TECHNOLOGY].isin(selection.technologies)
    tech_countries = set(technology_rows.loc[mask, Columns.COUNTRY])
    return frozenset(c for c in selection.countries if c in tech_countries)


def _in_year_range(years: pd.Series, year_range: Tuple[int, int]) -> pd.Series:
    parsed = to_year(years)
    lo, hi = year_range
    return ((parsed >= lo) & (parsed <= hi)).fillna(False).astype(bool)


def filter_country_year(
    rows: pd.DataFrame,
    countries: AbstractSet[str],
    year_range: Tuple[int, int],
) -> pd.DataFrame:
    mask = rows[Columns.COUNTRY].isin(countries) & _in_year_range(rows[Columns.YEAR], year_range)
    return rows[mask.to_numpy()]


def filter_technology(rows: pd.DataFrame, selection: FilterSelection) -> pd.DataFrame:
    # Raw selection, not the effective set
    mask = rows[Columns.COUNTRY].isin(selection.countries)
    if selection.has_technology_filter:
        mask &= rows[Columns.TECHNOLOGY].isin(selection.technologies)
    return rows[mask.to_numpy()]


def filter_tidy(
    rows: pd.DataFrame,
    countries: AbstractSet[str],
    year_range: Tuple[int, int],
) -> pd.DataFrame:
    mask = rows[Columns.TIDY_COUNTRY].isin(countries) & _in_year_range(
        rows[Columns.TIDY_YEAR], year_range
    )
    return rows[mask.to_numpy()]


def filter_authority(rows: pd.DataFrame, countries: AbstractSet[str]) -> pd.DataFrame:
    # Authority rows span several years, so the year range does not apply
    return rows[rows[Columns.COUNTRY].isin(countries).to_numpy()]


@dataclass(frozen=True, eq=False)
class FilteredData:
    """Row sets after applying one FilterSelection to a DatasetStore."""

    effective_countries: FrozenSet[str]
    country_year: pd.DataFrame
    technology: pd.DataFrame
    tidy: pd.DataFrame
    authority: pd.DataFrame


def apply_filters(store: DatasetStore, selection: FilterSelection) -> FilteredData:
    effective = resolve_effective_countries(selection, store.technology)

    filtered = FilteredData(
        effective_countries=effective,
        country_year=filter_country_year(store.country_year, effective, selection.year_range),
        technology=filter_technology(store.technology, selection),
        tidy=filter_tidy(store.tidy, effective, selection.year_range),
        authority=filter_authority(store.authority, effective),
    )

    logger.debug(
        "Filters applied",
        extra={
            "n_selected_countries": len(selection.countries),
            "n_effective_countries": len(effective),
            "n_technologies": len(selection.technologies),
            "year_range": list(selection.year_range),
            "n_country_year_rows": len(filtered.country_year),
        },
    )
    return filtered
