"""
Chart-ready reducers over filtered rows.

Every aggregator groups by a single key, sums one numeric column (values that
fail to parse count as 0) and skips rows whose key is empty. Ranked series are
sorted descending with a stable sort, so ties keep first-seen order; time
series are sorted ascending by year.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from patent_browser.core.dataset import Columns, to_number, to_year

COUNTRY_TOTALS_LIMIT = 15
TECHNOLOGY_TOTALS_LIMIT = 8
AUTHORITY_TOTALS_LIMIT = 10
TREND_COUNTRY_COUNT = 5

# Not derived from data; surfaced to the UI with an explicit placeholder flag.
PLACEHOLDER_AVG_GROWTH = 5.2


def _sum_by(rows: pd.DataFrame, key_col: str, value_col: str = Columns.OBS_SUM) -> pd.Series:
    """
    Sum value_col per key_col, keys in first-seen order.
    """
    keys = rows[key_col].astype(str)
    values = to_number(rows[value_col])
    keep = (keys != "").to_numpy()
    totals = values[keep].groupby(keys[keep], sort=False).sum()
    return totals.astype(float)


def _ranked(totals: pd.Series, key_name: str, limit: Optional[int]) -> pd.DataFrame:
    ranked = totals.sort_values(ascending=False, kind="mergesort")
    if limit is not None:
        ranked = ranked.head(limit)
    return pd.DataFrame({key_name: ranked.index.tolist(), "patents": ranked.to_numpy(dtype=float)})


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# -----------------------------------------------------------------------------
# Ranked series
# -----------------------------------------------------------------------------
def country_totals(
    country_year_rows: pd.DataFrame,
    limit: Optional[int] = COUNTRY_TOTALS_LIMIT,
) -> pd.DataFrame:
    """
    Patents per country, descending; pass limit=None for the full ranking.
    """
    return _ranked(_sum_by(country_year_rows, Columns.COUNTRY), "country", limit)


def technology_totals(
    technology_rows: pd.DataFrame,
    limit: Optional[int] = TECHNOLOGY_TOTALS_LIMIT,
) -> pd.DataFrame:
    return _ranked(_sum_by(technology_rows, Columns.TECHNOLOGY), "technology", limit)


def authority_totals(
    authority_rows: pd.DataFrame,
    limit: Optional[int] = AUTHORITY_TOTALS_LIMIT,
) -> pd.DataFrame:
    return _ranked(_sum_by(authority_rows, Columns.AUTHORITY), "authority", limit)


def top_countries(country_year_rows: pd.DataFrame, n: int = TREND_COUNTRY_COUNT) -> List[str]:
    """Names of the n countries with the highest totals, from the uncapped ranking."""
    ranking = country_totals(country_year_rows, limit=None)
    return ranking["country"].head(n).tolist()


# -----------------------------------------------------------------------------
# Time series
# -----------------------------------------------------------------------------
def yearly_totals(country_year_rows: pd.DataFrame) -> pd.DataFrame:
    years = to_year(country_year_rows[Columns.YEAR])
    values = to_number(country_year_rows[Columns.OBS_SUM])
    keep = years.notna().to_numpy()

    if not keep.any():
        return pd.DataFrame({"year": pd.Series(dtype=int), "patents": pd.Series(dtype=float)})

    totals = values[keep].groupby(years[keep].astype(int)).sum().sort_index()
    return pd.DataFrame({"year": totals.index.astype(int), "patents": totals.to_numpy(dtype=float)})


def multi_country_trend(
    country_year_rows: pd.DataFrame,
    n: int = TREND_COUNTRY_COUNT,
) -> pd.DataFrame:
    """
    One record per year present in the rows, with one column per top-n country.

    Countries outside the top n are dropped; country/year combinations absent
    from the data are 0. Columns follow the ranking order of the countries.
    """
    countries = top_countries(country_year_rows, n)
    columns = ["year"] + countries

    years = to_year(country_year_rows[Columns.YEAR])
    keep = years.notna().to_numpy()
    if not keep.any():
        return pd.DataFrame(columns=columns)

    frame = pd.DataFrame(
        {
            "year": years[keep].astype(int).to_numpy(),
            "country": country_year_rows[Columns.COUNTRY].to_numpy()[keep],
            "patents": to_number(country_year_rows[Columns.OBS_SUM]).to_numpy()[keep],
        }
    )

    all_years = sorted(frame["year"].unique().tolist())
    grid = pd.DataFrame(0.0, index=pd.Index(all_years, name="year"), columns=countries)

    in_top = frame[frame["country"].isin(countries)]
    if not in_top.empty:
        sums = in_top.groupby(["year", "country"])["patents"].sum()
        for (year, country), value in sums.items():
            grid.loc[year, country] = float(value)

    return grid.reset_index()[columns]


# -----------------------------------------------------------------------------
# Summary
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Summary:
    """
    Headline numbers shown above the charts.

    avg_growth is a fixed placeholder, not computed from the data;
    avg_growth_is_placeholder lets consumers label it as such.
    """

    total_patents: int = 0
    country_count: int = 0
    top_country: str = ""
    avg_growth: float = PLACEHOLDER_AVG_GROWTH
    technologies: Tuple[str, ...] = field(default_factory=tuple)

    avg_growth_is_placeholder: bool = True


def compute_summary(
    country_year_rows: pd.DataFrame,
    technologies: Iterable[str] = (),
) -> Summary:
    technologies = tuple(sorted(technologies))
    if country_year_rows.empty:
        return Summary(technologies=technologies)

    names = country_year_rows[Columns.COUNTRY]
    named = (names != "").to_numpy()
    total = float(to_number(country_year_rows[Columns.OBS_SUM])[named].sum())
    ranking = country_totals(country_year_rows, limit=1)

    return Summary(
        total_patents=round_half_up(total),
        country_count=int(names[named].nunique()),
        top_country=ranking["country"].iloc[0] if not ranking.empty else "",
        avg_growth=PLACEHOLDER_AVG_GROWTH,
        technologies=technologies,
    )
