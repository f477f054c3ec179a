import json
from pathlib import Path

import pytest

from patent_browser.config.io import load_global_config
from patent_browser.core.exceptions import ConfigError, DatasetSchemaError

KINDS = ["country_year", "technology", "tidy", "authority"]


def _make_config_dir(tmp_path: Path, global_json=None, kinds=KINDS) -> Path:
    # root/
    #   global.json
    #   datasets/
    #     <kind>.json
    config_root = tmp_path / "config"
    datasets_dir = config_root / "datasets"
    datasets_dir.mkdir(parents=True)

    (config_root / "global.json").write_text(json.dumps(global_json or {}))
    for kind in kinds:
        entry = {"name": kind.title(), "kind": kind, "file": f"{kind}.csv"}
        (datasets_dir / f"{kind}.json").write_text(json.dumps(entry))
    return config_root


def test_load_global_config_from_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("PATENT_BROWSER_DATA_ROOT", raising=False)
    config_root = _make_config_dir(
        tmp_path,
        {
            "ui_title": "Patents",
            "data_root": "../data",
            "year_min": 2018,
            "year_max": 2020,
            "default_country_count": 3,
        },
    )

    global_config = load_global_config(config_root)

    assert global_config.ui_title == "Patents"
    assert global_config.year_bounds == (2018, 2020)
    assert global_config.default_country_count == 3
    assert global_config.data_root == (tmp_path / "data").resolve()
    assert sorted(d.kind for d in global_config.datasets) == sorted(KINDS)
    assert global_config.dataset_for("tidy").path == Path("tidy.csv")


def test_defaults_when_global_json_is_sparse(tmp_path, monkeypatch):
    monkeypatch.delenv("PATENT_BROWSER_DATA_ROOT", raising=False)

    global_config = load_global_config(_make_config_dir(tmp_path))

    assert global_config.ui_title == "OECD Patent Analytics Dashboard"
    assert global_config.year_bounds == (2017, 2021)
    assert global_config.default_country_count == 10
    assert global_config.data_root is None


def test_env_var_overrides_data_root(tmp_path, monkeypatch):
    monkeypatch.setenv("PATENT_BROWSER_DATA_ROOT", str(tmp_path / "elsewhere"))

    global_config = load_global_config(_make_config_dir(tmp_path, {"data_root": "../data"}))

    assert global_config.data_root == (tmp_path / "elsewhere").resolve()


def test_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_missing_kind_is_reported(tmp_path):
    config_root = _make_config_dir(tmp_path, kinds=["country_year", "technology", "tidy"])

    with pytest.raises(ConfigError, match="authority"):
        load_global_config(config_root)


def test_unknown_kind_is_rejected(tmp_path):
    config_root = _make_config_dir(tmp_path)
    (config_root / "datasets" / "extra.json").write_text(
        json.dumps({"name": "Extra", "kind": "genes", "file": "x.csv"})
    )

    with pytest.raises(DatasetSchemaError, match="genes"):
        load_global_config(config_root)


def test_duplicate_kind_is_rejected(tmp_path):
    config_root = _make_config_dir(tmp_path)
    (config_root / "datasets" / "tidy_2.json").write_text(
        json.dumps({"name": "Tidy again", "kind": "tidy", "file": "t.csv"})
    )

    with pytest.raises(ConfigError, match="both declare kind 'tidy'"):
        load_global_config(config_root)


def test_invalid_json_in_dataset_config(tmp_path):
    config_root = _make_config_dir(tmp_path)
    (config_root / "datasets" / "broken.json").write_text("{not json")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_global_config(config_root)


def test_inverted_year_bounds_are_rejected(tmp_path, monkeypatch):
    monkeypatch.delenv("PATENT_BROWSER_DATA_ROOT", raising=False)
    config_root = _make_config_dir(tmp_path, {"year_min": 2022, "year_max": 2018})

    with pytest.raises(ConfigError, match="year_min"):
        load_global_config(config_root)


def test_invalid_global_json(tmp_path):
    config_root = _make_config_dir(tmp_path)
    (config_root / "global.json").write_text("[1, 2")

    with pytest.raises(ConfigError, match="global.json"):
        load_global_config(config_root)
