from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from staffgen.cli import app
from staffgen.sampling.corpora import NAMES

ARGS = ["generate", "--count", "6", "--min-age", "20", "--max-age", "30"]


def _strip_dates(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{k: v for k, v in item.items() if k != "birthdate"} for item in data]


def test_generate_to_stdout(monkeypatch: Any) -> None:
    monkeypatch.delenv("STAFFGEN_SEED", raising=False)
    runner = CliRunner()
    result = runner.invoke(app, ARGS)
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data) == 6
    for item in data:
        assert item["name"] in NAMES[item["gender"]]
        assert item["workload"] in {10, 20, 30, 40}


def test_seed_reproducible(monkeypatch: Any) -> None:
    monkeypatch.delenv("STAFFGEN_SEED", raising=False)
    runner = CliRunner()
    first = runner.invoke(app, [*ARGS, "--seed", "42"])
    second = runner.invoke(app, [*ARGS, "--seed", "42"])
    assert first.exit_code == 0 and second.exit_code == 0
    assert _strip_dates(json.loads(first.stdout)) == _strip_dates(json.loads(second.stdout))


def test_generate_to_file(tmp_path: Path) -> None:
    out = tmp_path / "staff.json"
    runner = CliRunner()
    result = runner.invoke(app, [*ARGS, "--out", str(out), "--names", "uniform"])
    assert result.exit_code == 0
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 6


def test_config_file_applies(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("workloads: [25]\noutput:\n  indent: null\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, [*ARGS, "--config", str(cfg)])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert {item["workload"] for item in data} == {25}


def test_verbose_reports_progress(tmp_path: Path) -> None:
    out = tmp_path / "staff.jsonl"
    runner = CliRunner()
    result = runner.invoke(app, [*ARGS, "--out", str(out), "--verbose"])
    assert result.exit_code == 0
    assert "Generated 6 records" in result.output
    assert out.exists()


def test_repeated_runs_share_one_runner(tmp_path: Path) -> None:
    runner = CliRunner()
    first = runner.invoke(app, [*ARGS, "--verbose"])
    second = runner.invoke(app, ARGS)
    third = runner.invoke(app, [*ARGS, "--out", str(tmp_path / "staff.json"), "--verbose"])
    for result in (first, second, third):
        assert result.exception is None
        assert result.exit_code == 0
    assert len(json.loads(second.stdout)) == 6


def test_malformed_seed_is_used_as_text() -> None:
    runner = CliRunner()
    first = runner.invoke(app, [*ARGS, "--seed=--5"])
    second = runner.invoke(app, [*ARGS, "--seed=--5"])
    assert first.exit_code == 0 and second.exit_code == 0
    assert _strip_dates(json.loads(first.stdout)) == _strip_dates(json.loads(second.stdout))
