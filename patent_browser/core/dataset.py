from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Larger parsed years are treated as unparsable
MAX_YEAR_MAGNITUDE = 2**31


class Columns:
    """
    Column names of the four OECD extracts.
    """

    COUNTRY = "COUNTRY_NAME"
    YEAR = "YEAR"
    OBS_SUM = "OBS_VALUE_sum"
    OBS_MEAN = "OBS_VALUE_mean"
    OBS_COUNT = "OBS_VALUE_count"
    OBS_STD = "OBS_VALUE_std"
    AUTHORITY = "PATENT_AUTHORITIES"
    TECHNOLOGY = "Selected OECD technology domains"
    YEAR_MIN = "YEAR_min"
    YEAR_MAX = "YEAR_max"
    YEAR_COUNT = "YEAR_count"

    TIDY_COUNTRY = "country"
    TIDY_YEAR = "year"


COUNTRY_YEAR_COLUMNS: List[str] = [
    Columns.COUNTRY,
    Columns.YEAR,
    Columns.OBS_SUM,
    Columns.OBS_MEAN,
    Columns.OBS_COUNT,
    "PATENT_AUTHORITIES_nunique",
    "MEASURE_nunique",
]

TECHNOLOGY_COLUMNS: List[str] = [
    "WIPO",
    "OECD_TECHNOLOGY_PATENT",
    Columns.TECHNOLOGY,
    Columns.COUNTRY,
    Columns.OBS_SUM,
    Columns.OBS_MEAN,
    Columns.YEAR_MIN,
    Columns.YEAR_MAX,
    Columns.YEAR_COUNT,
]

TIDY_COLUMNS: List[str] = [
    Columns.TIDY_COUNTRY,
    "country_code",
    Columns.TIDY_YEAR,
    "patent_authority",
    "measure_type",
    "unit",
    "patent_count",
    "agent_role",
    "date_type",
]

AUTHORITY_COLUMNS: List[str] = [
    Columns.AUTHORITY,
    Columns.COUNTRY,
    Columns.OBS_SUM,
    Columns.OBS_MEAN,
    Columns.OBS_STD,
    Columns.YEAR_MIN,
    Columns.YEAR_MAX,
    Columns.YEAR_COUNT,
]

SCHEMAS: Dict[str, List[str]] = {
    "country_year": COUNTRY_YEAR_COLUMNS,
    "technology": TECHNOLOGY_COLUMNS,
    "tidy": TIDY_COLUMNS,
    "authority": AUTHORITY_COLUMNS,
}


def normalise_frame(df: pd.DataFrame, kind: str) -> pd.DataFrame:
    """
    Return a string-only copy of df carrying every column expected for 'kind'.

    Cells are stripped of surrounding quotes/whitespace and missing values
    become "". Expected columns absent from the file are added empty so that
    downstream filters and aggregations never hit a KeyError.
    """
    out = df.copy()
    out.columns = [str(c).strip().strip('"') for c in out.columns]

    missing = [c for c in SCHEMAS[kind] if c not in out.columns]
    if missing:
        logger.warning(
            "Dataset is missing expected columns; filling with empty values",
            extra={"kind": kind, "missing_columns": missing},
        )
        for col in missing:
            out[col] = ""

    out = out.fillna("").astype(str)
    for col in out.columns:
        out[col] = out[col].str.strip().str.strip('"')
    return out.reset_index(drop=True)


def to_number(series: pd.Series) -> pd.Series:
    """Lenient float parse: anything unparsable (or empty) counts as 0."""
    numeric = pd.to_numeric(series, errors="coerce").astype(float)
    return numeric.where(np.isfinite(numeric), 0.0)


def to_year(series: pd.Series) -> pd.Series:
    """
    Parse a year column to nullable integers.
    Values like "2018.0" are accepted; unparsable values and values outside
    the int32 range become <NA>.
    """
    numeric = pd.to_numeric(series, errors="coerce").astype(float)
    numeric = numeric.where(np.isfinite(numeric) & (numeric.abs() < MAX_YEAR_MAGNITUDE))
    return np.trunc(numeric).astype("Int64")


@dataclass(frozen=True, eq=False)
class DatasetStore:
    """
    Read-only holder of the four row collections the pipeline works on.

    Each frame keeps every value as a string; numbers are only parsed at
    aggregation time (see to_number / to_year). The store is built once at
    startup and never mutated afterwards.
    """

    country_year: pd.DataFrame
    technology: pd.DataFrame
    tidy: pd.DataFrame
    authority: pd.DataFrame

    @classmethod
    def from_frames(
        cls,
        country_year: pd.DataFrame | None = None,
        technology: pd.DataFrame | None = None,
        tidy: pd.DataFrame | None = None,
        authority: pd.DataFrame | None = None,
    ) -> DatasetStore:
        def norm(df: pd.DataFrame | None, kind: str) -> pd.DataFrame:
            if df is None:
                df = pd.DataFrame(columns=SCHEMAS[kind])
            return normalise_frame(df, kind)

        return cls(
            country_year=norm(country_year, "country_year"),
            technology=norm(technology, "technology"),
            tidy=norm(tidy, "tidy"),
            authority=norm(authority, "authority"),
        )

    @classmethod
    def empty(cls) -> DatasetStore:
        return cls.from_frames()

    # -------------------------------------------------------------------------
    # Distinct values
    # -------------------------------------------------------------------------
    def countries_in_order(self) -> List[str]:
        """Distinct non-empty Country-Year country names, first-seen order."""
        names = self.country_year[Columns.COUNTRY]
        return [c for c in names.drop_duplicates().tolist() if c]

    def all_countries(self) -> List[str]:
        return sorted(self.countries_in_order())

    def all_technologies(self) -> List[str]:
        labels = self.technology[Columns.TECHNOLOGY]
        return sorted({t for t in labels.tolist() if t})

    def is_empty(self) -> bool:
        return self.country_year.empty

    def sizes(self) -> Tuple[int, int, int, int]:
        return (
            len(self.country_year),
            len(self.technology),
            len(self.tidy),
            len(self.authority),
        )
