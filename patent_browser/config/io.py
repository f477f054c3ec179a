from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List

from patent_browser.config.model import (
    DATASET_KINDS,
    DEFAULT_COUNTRY_COUNT,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
    DatasetConfig,
    GlobalConfig,
)
from patent_browser.core.exceptions import ConfigError, DatasetSchemaError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            datasets/
                country_year.json
                technology.json
                tidy.json
                authority.json

    Each file in 'datasets/' is parsed into a DatasetConfig carrying a 'kind'
    (one of country_year, technology, tidy, authority) and a 'file'.
    The resulting GlobalConfig includes:

    - ui_title / subtitle: UI text
    - datasets: list of DatasetConfigs, exactly one per kind
    - data_root: directory relative CSV paths resolve against. If relative in
                 global.json it is resolved relative to 'root'. The
                 PATENT_BROWSER_DATA_ROOT env var overrides it.
    - year_min / year_max: known year bounds of the extracts
    - default_country_count: how many countries are pre-selected on first load

    :param root: Directory containing 'global.json' and 'datasets/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if the dataset configs are inconsistent.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    datasets_dir = root / "datasets"
    datasets: List[DatasetConfig] = []

    if datasets_dir.is_dir():
        files = sorted(datasets_dir.glob("*.json"))
        if not files:
            logger.warning("No .json files found in %s", datasets_dir)

        for idx, config_file in enumerate(files):
            logger.info("Loading dataset config: %s", config_file.name)
            try:
                with config_file.open() as f:
                    raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {config_file}: {e}") from e
            datasets.append(
                DatasetConfig.from_raw(raw, source_path=config_file, index=idx)
            )
    else:
        logger.warning("Datasets directory not found at: %s", datasets_dir)

    _validate_dataset_kinds(datasets)

    year_min = int(raw_global.get("year_min", DEFAULT_YEAR_MIN))
    year_max = int(raw_global.get("year_max", DEFAULT_YEAR_MAX))
    if year_min > year_max:
        raise ConfigError(f"year_min ({year_min}) is greater than year_max ({year_max})")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "OECD Patent Analytics Dashboard"),
        subtitle=raw_global.get(
            "subtitle", "Interactive visualization of global patent data and trends"
        ),
        datasets=datasets,
        data_root=_resolve_data_root(root, raw_global.get("data_root")),
        year_min=year_min,
        year_max=year_max,
        default_country_count=int(
            raw_global.get("default_country_count", DEFAULT_COUNTRY_COUNT)
        ),
    )


def _resolve_data_root(root: Path, data_root_raw: str | None) -> Path | None:
    # Env override wins, then global.json (relative to the config dir)
    env_root = os.environ.get("PATENT_BROWSER_DATA_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if data_root_raw is None:
        return None

    data_root_path = Path(data_root_raw)
    if data_root_path.is_absolute():
        return data_root_path
    return (root / data_root_path).resolve()


def _validate_dataset_kinds(datasets: List[DatasetConfig]) -> None:
    seen: dict[str, str] = {}
    for cfg in datasets:
        if "file" not in cfg.raw:
            raise ConfigError(f"Dataset config {cfg.source_path.name} has no 'file'")
        if cfg.kind not in DATASET_KINDS:
            raise DatasetSchemaError(
                f"Dataset '{cfg.name}' has unknown kind {cfg.kind!r}; "
                f"expected one of {list(DATASET_KINDS)}"
            )
        if cfg.kind in seen:
            raise ConfigError(
                f"Datasets '{seen[cfg.kind]}' and '{cfg.name}' both declare kind '{cfg.kind}'"
            )
        seen[cfg.kind] = cfg.name

    missing = [k for k in DATASET_KINDS if k not in seen]
    if missing:
        raise ConfigError(f"Missing dataset configs for: {missing}")
