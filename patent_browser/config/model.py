from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

DATASET_KINDS: Tuple[str, ...] = ("country_year", "technology", "tidy", "authority")

DEFAULT_YEAR_MIN = 2017
DEFAULT_YEAR_MAX = 2021
DEFAULT_COUNTRY_COUNT = 10


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single CSV extract.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Dataset {self.index}")

    @property
    def kind(self) -> Optional[str]:
        return self.raw.get("kind")

    @property
    def path(self) -> Path:
        return Path(self.raw["file"])

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    ui_title: str
    subtitle: str
    datasets: List[DatasetConfig] = field(default_factory=list)
    data_root: Optional[Path] = None
    year_min: int = DEFAULT_YEAR_MIN
    year_max: int = DEFAULT_YEAR_MAX
    default_country_count: int = DEFAULT_COUNTRY_COUNT

    @property
    def year_bounds(self) -> Tuple[int, int]:
        return self.year_min, self.year_max

    def dataset_for(self, kind: str) -> Optional[DatasetConfig]:
        for cfg in self.datasets:
            if cfg.kind == kind:
                return cfg
        return None
