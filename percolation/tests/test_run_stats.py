from pathlib import Path

import pytest

from percolation.scripts.run_stats import build_parser, main
from percolation.src.utils import config_loader


@pytest.fixture
def isolated_config(monkeypatch):
    monkeypatch.setattr(config_loader, "PERCOLATION_CONFIG", {})
    for name in ("DEFAULT_GRID_SIZE", "DEFAULT_TRIALS", "CONFIDENCE_Z", "DEFAULT_SEED", "LOG_FILE", "LOG_LEVEL"):
        monkeypatch.setattr(config_loader, name, getattr(config_loader, name))


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.n is None
    assert args.trials is None
    assert args.plot is None


def test_prints_summary(capsys, isolated_config):
    assert main(["6", "8", "--seed", "11"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0].startswith("mean                    = ")
    assert lines[1].startswith("stddev                  = ")
    assert lines[2].startswith("95% confidence interval = [")


def test_seeded_runs_are_reproducible(capsys, isolated_config):
    main(["5", "4", "--seed", "2"])
    first = capsys.readouterr().out
    main(["5", "4", "--seed", "2"])
    assert capsys.readouterr().out == first


def test_config_file_supplies_defaults(tmp_path: Path, capsys, isolated_config):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("stats:\n  grid_size: 3\n  trials: 2\n  seed: 9\n")
    assert main(["--config", str(cfg)]) == 0
    assert config_loader.DEFAULT_TRIALS == 2
    assert "mean" in capsys.readouterr().out


def test_plot_and_log_file(tmp_path: Path, capsys, isolated_config):
    png = tmp_path / "grid.png"
    log = tmp_path / "logs" / "run.log"
    assert main(["4", "2", "--seed", "1", "--plot", str(png), "--log-file", str(log)]) == 0
    assert png.exists()
    assert log.exists()
    assert "scan agrees: True" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["0", "5"], ["5", "0"], ["--config", "missing.yaml"]])
def test_invalid_arguments_exit_with_usage_error(argv, isolated_config):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
