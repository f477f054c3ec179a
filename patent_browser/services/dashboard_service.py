from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from patent_browser.config.model import (
    DEFAULT_COUNTRY_COUNT,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
)
from patent_browser.core import aggregations as agg
from patent_browser.core.cross_filter import FilteredData, apply_filters
from patent_browser.core.dataset import DatasetStore
from patent_browser.core.filter_state import FilterSelection

logger = logging.getLogger(__name__)


def filter_options(values: Iterable[str], search: str) -> List[str]:
    """Case-insensitive substring match used by the search boxes."""
    query = (search or "").strip().lower()
    if not query:
        return list(values)
    return [v for v in values if query in v.lower()]


def technology_badge(technologies: Iterable[str]) -> str:
    """'' with no filter, the name for one technology, 'N selected' otherwise."""
    techs = sorted(technologies)
    if not techs:
        return ""
    if len(techs) == 1:
        return techs[0]
    return f"{len(techs)} selected"


def default_countries(store: DatasetStore, count: int = DEFAULT_COUNTRY_COUNT) -> List[str]:
    """The first 'count' distinct countries of the Country-Year rows, first-seen order."""
    return store.countries_in_order()[:count]


class PatentDashboard:
    """
    One dashboard session: a read-only DatasetStore plus the current FilterSelection.

    Every setter swaps the whole selection object, and every getter recomputes
    its series from the store and the current selection (no caching).

    Country seeding is a one-shot transition: the first time the store holds
    Country-Year rows and nothing is selected, the first N countries are
    selected. Once initialised, an empty selection stays empty.
    """

    def __init__(
        self,
        store: DatasetStore,
        bounds: Tuple[int, int] = (DEFAULT_YEAR_MIN, DEFAULT_YEAR_MAX),
        default_country_count: int = DEFAULT_COUNTRY_COUNT,
        selection: Optional[FilterSelection] = None,
        initialized: bool = False,
    ) -> None:
        self.store = store
        self.bounds = bounds
        self.default_country_count = default_country_count
        selection = selection or FilterSelection(year_range=bounds)
        self._selection = selection.with_year_range(*selection.year_range, bounds=bounds)
        self._initialized = initialized
        self.ensure_initialized()

    @classmethod
    def restore(
        cls,
        store: DatasetStore,
        selection: FilterSelection,
        bounds: Tuple[int, int] = (DEFAULT_YEAR_MIN, DEFAULT_YEAR_MAX),
    ) -> PatentDashboard:
        """
        Rebuild a session from a selection that already went through seeding
        (e.g. the one held in the Dash store). Never re-seeds, so a
        deliberately cleared country selection stays empty.
        """
        return cls(store, bounds=bounds, selection=selection, initialized=True)

    # ------------------------------------------------------------------
    # Selection lifecycle
    # ------------------------------------------------------------------
    @property
    def selection(self) -> FilterSelection:
        return self._selection

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ensure_initialized(self) -> bool:
        """
        Seed the default countries if this has not happened yet.
        Returns True only on the call that performed the transition.
        """
        if self._initialized or self.store.is_empty():
            return False

        self._initialized = True
        if not self._selection.countries:
            seeded = default_countries(self.store, self.default_country_count)
            self._selection = self._selection.with_countries(seeded)
            logger.info("Seeded default country selection", extra={"countries": seeded})
        return True

    # ------------------------------------------------------------------
    # Core API: wholesale replacement
    # ------------------------------------------------------------------
    def set_countries(self, countries: Iterable[str]) -> None:
        self._selection = self._selection.with_countries(countries)

    def set_year_range(self, min_year: int, max_year: int) -> None:
        self._selection = self._selection.with_year_range(min_year, max_year, bounds=self.bounds)

    def set_technologies(self, technologies: Iterable[str]) -> None:
        self._selection = self._selection.with_technologies(technologies)

    def set_country_search(self, text: Optional[str]) -> None:
        self._selection = self._selection.with_country_search(text)

    def set_technology_search(self, text: Optional[str]) -> None:
        self._selection = self._selection.with_technology_search(text)

    # ------------------------------------------------------------------
    # Convenience transitions used by the controls
    # ------------------------------------------------------------------
    def toggle_country(self, country: str) -> None:
        self._selection = self._selection.toggle_country(country)

    def remove_country(self, country: str) -> None:
        self.set_countries(self._selection.countries - {country})

    def toggle_technology(self, technology: str) -> None:
        self._selection = self._selection.toggle_technology(technology)

    def select_all_countries(self) -> None:
        self.set_countries(self.store.all_countries())

    def clear_countries(self) -> None:
        self.set_countries(())

    def select_all_technologies(self) -> None:
        self.set_technologies(self.store.all_technologies())

    def clear_technologies(self) -> None:
        self.set_technologies(())

    def focus_country(self, country: str) -> None:
        self.set_countries([country])

    def focus_technology(self, technology: str) -> None:
        self.set_technologies([technology])

    # ------------------------------------------------------------------
    # Options offered by the filter panel
    # ------------------------------------------------------------------
    def country_options(self) -> List[str]:
        return filter_options(self.store.all_countries(), self._selection.country_search)

    def technology_options(self) -> List[str]:
        return filter_options(self.store.all_technologies(), self._selection.technology_search)

    def technology_badge(self) -> str:
        return technology_badge(self._selection.technologies)

    # ------------------------------------------------------------------
    # Core API: derived series
    # ------------------------------------------------------------------
    def get_filtered(self) -> FilteredData:
        return apply_filters(self.store, self._selection)

    def get_country_totals(self) -> pd.DataFrame:
        return agg.country_totals(self.get_filtered().country_year)

    def get_yearly_totals(self) -> pd.DataFrame:
        return agg.yearly_totals(self.get_filtered().country_year)

    def get_technology_totals(self) -> pd.DataFrame:
        return agg.technology_totals(self.get_filtered().technology)

    def get_authority_totals(self) -> pd.DataFrame:
        return agg.authority_totals(self.get_filtered().authority)

    def get_top_countries(self) -> List[str]:
        return agg.top_countries(self.get_filtered().country_year)

    def get_multi_country_trend(self) -> pd.DataFrame:
        return agg.multi_country_trend(self.get_filtered().country_year)

    def get_summary(self) -> agg.Summary:
        return agg.compute_summary(
            self.get_filtered().country_year,
            technologies=self._selection.technologies,
        )
