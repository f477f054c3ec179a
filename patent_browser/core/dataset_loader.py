from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from patent_browser.config.model import DATASET_KINDS, DatasetConfig, GlobalConfig
from patent_browser.core.dataset import DatasetStore
from patent_browser.core.exceptions import ConfigError, DatasetLoadError

logger = logging.getLogger(__name__)


def resolve_path(cfg: DatasetConfig, data_root: Optional[Path]) -> Path:
    """
    Absolute paths are used as-is; relative paths resolve against data_root,
    falling back to the directory of the dataset config file.
    """
    path = cfg.path
    if path.is_absolute():
        return path
    if data_root is not None:
        return data_root / path
    return cfg.source_path.parent / path


def read_table(path: Path) -> pd.DataFrame:
    """
    Read one delimited extract keeping every cell as a string.
    Empty cells stay "" (no NaN coercion); quoting is handled by pandas.
    """
    if not path.is_file():
        raise DatasetLoadError(f"CSV file not found at {path}.")
    try:
        return pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=True,
            on_bad_lines="warn",
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetLoadError(f"Could not read {path}: {e}") from e


def load_store(global_config: GlobalConfig, max_workers: int = 4) -> DatasetStore:
    """
    Load the four extracts concurrently and build the DatasetStore.

    All four must load: if any read fails the whole load fails with
    DatasetLoadError and no partial store is returned.
    """
    cfg_by_kind: Dict[str, DatasetConfig] = {}
    for kind in DATASET_KINDS:
        cfg = global_config.dataset_for(kind)
        if cfg is None:
            raise ConfigError(f"No dataset configured for kind '{kind}'")
        cfg_by_kind[kind] = cfg

    frames: Dict[str, pd.DataFrame] = {}
    errors: Dict[str, str] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(read_table, resolve_path(cfg, global_config.data_root)): kind
            for kind, cfg in cfg_by_kind.items()
        }
        for future in as_completed(futures):
            kind = futures[future]
            try:
                frames[kind] = future.result()
            except DatasetLoadError as e:
                logger.error(
                    "Dataset failed to load",
                    extra={"dataset": cfg_by_kind[kind].name, "kind": kind, "error": str(e)},
                )
                errors[kind] = str(e)

    if errors:
        raise DatasetLoadError(
            "Could not load all datasets: "
            + "; ".join(f"{kind}: {msg}" for kind, msg in sorted(errors.items()))
        )

    store = DatasetStore.from_frames(
        country_year=frames["country_year"],
        technology=frames["technology"],
        tidy=frames["tidy"],
        authority=frames["authority"],
    )

    logger.info(
        "Datasets loaded",
        extra={
            "n_country_year": len(store.country_year),
            "n_technology": len(store.technology),
            "n_tidy": len(store.tidy),
            "n_authority": len(store.authority),
        },
    )
    return store
