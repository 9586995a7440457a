import json
from pathlib import Path

import pytest

from percolation.src.utils import config_loader
from percolation.src.utils.config_loader import load_config, load_percolation_config


def test_load_yaml_and_json(tmp_path: Path):
    y = tmp_path / "c.yaml"
    y.write_text("stats:\n  trials: 7\n")
    j = tmp_path / "c.json"
    j.write_text(json.dumps({"stats": {"trials": 9}}))
    assert load_config(str(y)) == {"stats": {"trials": 7}}
    assert load_config(str(j)) == {"stats": {"trials": 9}}


def test_empty_yaml_is_empty_dict(tmp_path: Path):
    y = tmp_path / "empty.yml"
    y.write_text("")
    assert load_config(str(y)) == {}


def test_unsupported_format(tmp_path: Path):
    p = tmp_path / "c.toml"
    p.write_text("x = 1")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_missing_project_config(tmp_path: Path):
    assert load_percolation_config(tmp_path / "nope.yaml") == {}


def test_shipped_defaults():
    assert config_loader.CONFIDENCE_Z == pytest.approx(1.96)
    assert config_loader.DEFAULT_TRIALS >= 1


def test_apply_config_overrides(monkeypatch):
    monkeypatch.setattr(config_loader, "PERCOLATION_CONFIG", {})
    for name in ("DEFAULT_GRID_SIZE", "DEFAULT_TRIALS", "CONFIDENCE_Z", "DEFAULT_SEED", "LOG_FILE", "LOG_LEVEL"):
        monkeypatch.setattr(config_loader, name, getattr(config_loader, name))
    config_loader.apply_config(
        {"stats": {"grid_size": 12, "trials": 3, "confidence_z": 2.576, "seed": 5}, "logging": {"level": "debug"}}
    )
    assert config_loader.DEFAULT_GRID_SIZE == 12
    assert config_loader.DEFAULT_TRIALS == 3
    assert config_loader.CONFIDENCE_Z == 2.576
    assert config_loader.DEFAULT_SEED == 5
    assert config_loader.LOG_LEVEL == "DEBUG"
    assert config_loader.PERCOLATION_CONFIG["stats"]["trials"] == 3


def test_print_runtime_config(capsys):
    config_loader.print_runtime_config()
    out = capsys.readouterr().out
    assert "Runtime configuration:" in out
    assert "confidence_z" in out


def test_apply_config_tolerates_empty_sections(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(config_loader, "PERCOLATION_CONFIG", {})
    monkeypatch.setattr(config_loader, "DEFAULT_TRIALS", config_loader.DEFAULT_TRIALS)
    cfg = tmp_path / "empty_sections.yaml"
    cfg.write_text("stats:\nlogging:\n")
    loaded = load_config(str(cfg))
    assert loaded == {"stats": None, "logging": None}
    before = config_loader.DEFAULT_TRIALS
    config_loader.apply_config(loaded)
    assert config_loader.DEFAULT_TRIALS == before
