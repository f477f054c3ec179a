from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from patent_browser.config.model import DEFAULT_YEAR_MAX, DEFAULT_YEAR_MIN


def clamp_year_range(
    lo: int,
    hi: int,
    bounds: Optional[Tuple[int, int]] = None,
) -> Tuple[int, int]:
    """
    Normalise a year range: swap inverted bounds, then clamp into 'bounds'.
    Never raises for out-of-range input.
    """
    lo, hi = int(lo), int(hi)
    if lo > hi:
        lo, hi = hi, lo
    if bounds is not None:
        bmin, bmax = bounds
        lo = min(max(lo, bmin), bmax)
        hi = min(max(hi, bmin), bmax)
    return lo, hi


@dataclass(frozen=True)
class FilterSelection:
    """
    Represents the current user selection/filters.

    Instances are immutable: every change produces a new FilterSelection, so a
    recomputation never observes a half-applied selection.

    Fields:

    - countries: Country names selected by the user.
    - year_range: Inclusive (min_year, max_year).
    - technologies: Technology domain labels selected by the user. Empty means
      "no technology filter", not "exclude everything".
    - country_search / technology_search: free-text narrowing of the options
      offered in the filter panel. They never change which rows are aggregated.
    """

    countries: FrozenSet[str] = field(default_factory=frozenset)
    year_range: Tuple[int, int] = (DEFAULT_YEAR_MIN, DEFAULT_YEAR_MAX)
    technologies: FrozenSet[str] = field(default_factory=frozenset)

    country_search: str = ""
    technology_search: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable from callers but always store frozensets/tuples.
        # Blank names are never selectable values.
        object.__setattr__(self, "countries", frozenset(c for c in self.countries if c))
        object.__setattr__(self, "technologies", frozenset(t for t in self.technologies if t))
        object.__setattr__(self, "year_range", clamp_year_range(*self.year_range))

    @property
    def min_year(self) -> int:
        return self.year_range[0]

    @property
    def max_year(self) -> int:
        return self.year_range[1]

    @property
    def has_technology_filter(self) -> bool:
        return bool(self.technologies)

    # ------------------------------------------------------------------
    # Wholesale replacement
    # ------------------------------------------------------------------
    def with_countries(self, countries: Iterable[str]) -> FilterSelection:
        return replace(self, countries=frozenset(countries))

    def with_technologies(self, technologies: Iterable[str]) -> FilterSelection:
        return replace(self, technologies=frozenset(technologies))

    def with_year_range(
        self,
        lo: int,
        hi: int,
        bounds: Optional[Tuple[int, int]] = None,
    ) -> FilterSelection:
        return replace(self, year_range=clamp_year_range(lo, hi, bounds))

    def with_country_search(self, text: Optional[str]) -> FilterSelection:
        return replace(self, country_search=text or "")

    def with_technology_search(self, text: Optional[str]) -> FilterSelection:
        return replace(self, technology_search=text or "")

    # ------------------------------------------------------------------
    # Badge-style toggles
    # ------------------------------------------------------------------
    def toggle_country(self, country: str) -> FilterSelection:
        return self.with_countries(self.countries ^ {country})

    def toggle_technology(self, technology: str) -> FilterSelection:
        return self.with_technologies(self.technologies ^ {technology})

    # ------------------------------------------------------------------
    # Serialisation for the Dash store
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "countries": sorted(self.countries),
            "year_range": list(self.year_range),
            "technologies": sorted(self.technologies),
            "country_search": self.country_search,
            "technology_search": self.technology_search,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        bounds: Optional[Tuple[int, int]] = None,
    ) -> FilterSelection:
        default_lo, default_hi = bounds or (DEFAULT_YEAR_MIN, DEFAULT_YEAR_MAX)
        year_range = data.get("year_range") or [default_lo, default_hi]
        return cls(
            countries=frozenset(data.get("countries") or []),
            year_range=clamp_year_range(year_range[0], year_range[1], bounds),
            technologies=frozenset(data.get("technologies") or []),
            country_search=data.get("country_search") or "",
            technology_search=data.get("technology_search") or "",
        )
