from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bingo_sim.cli import app
from bingo_sim.version import __version__

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def invoke(*args: str):
    return runner.invoke(app, list(args), env={})


def test_version():
    result = invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_run_prints_both_scores(sample_file: Path):
    result = invoke("run", "--input", str(sample_file), "--colors", "never")
    assert result.exit_code == 0, result.output
    assert "Part 1: 4512" in result.output
    assert "Part 2: 1924" in result.output


def test_run_writes_report(sample_file: Path, tmp_path: Path):
    report_path = tmp_path / "out" / "report.json"
    result = invoke("run", "--input", str(sample_file), "--out-report", str(report_path))
    assert result.exit_code == 0, result.output
    data = json.loads(report_path.read_text(encoding="utf-8"))
    assert data["answers"]["first_winner"]["score"] == 4512
    assert data["answers"]["last_winner"]["score"] == 1924
    assert [w["board_index"] for w in data["win_order"]] == [2, 0, 1]
    assert data["checks"]["boards"] == 3
    assert data["run_meta"]["params_hash"].startswith("sha256:")

    again = invoke("run", "--input", str(sample_file), "--out-report", str(report_path))
    assert again.exit_code == 1
    forced = invoke("run", "--input", str(sample_file), "--out-report", str(report_path), "--force")
    assert forced.exit_code == 0


def test_run_writes_log_file(sample_file: Path, tmp_path: Path):
    log_path = tmp_path / "run.log"
    result = invoke("run", "--input", str(sample_file), "--log-file", str(log_path))
    assert result.exit_code == 0
    text = log_path.read_text(encoding="utf-8")
    assert "Loaded 3 boards and 27 draws" in text
    assert "bingo_sim.cli" in text


def test_run_without_winner_prints_none(tmp_path: Path):
    path = tmp_path / "input.txt"
    path.write_text("1,4\n\n1 2\n3 4\n", encoding="utf-8")
    result = invoke("run", "--input", str(path))
    assert result.exit_code == 0
    assert "Part 1: none" in result.output
    assert "Part 2: none" in result.output


def test_run_parse_failure_exits_nonzero(tmp_path: Path):
    path = tmp_path / "input.txt"
    path.write_text("1,2\n\n1 2\n3\n", encoding="utf-8")
    result = invoke("run", "--input", str(path))
    assert result.exit_code == 1
    assert "Part 1" not in result.output


def test_run_missing_input_exits_nonzero(tmp_path: Path):
    result = invoke("run", "--input", str(tmp_path / "absent.txt"))
    assert result.exit_code == 1


def test_run_reads_input_from_config(sample_file: Path, tmp_path: Path):
    cfg = tmp_path / "bingo.yaml"
    cfg.write_text(f"input: {sample_file.name}\nlog_level: WARNING\n", encoding="utf-8")
    result = invoke("run", "--config", str(cfg))
    assert result.exit_code == 0, result.output
    assert "Part 1: 4512" in result.output


def test_check_reports_json(sample_file: Path):
    result = invoke("check", "--input", str(sample_file))
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["boards"] == 3
    assert data["ok_no_duplicates_within_boards"] is True


def test_check_parse_failure(tmp_path: Path):
    path = tmp_path / "input.txt"
    path.write_text("a,b\n\n1 2\n", encoding="utf-8")
    result = invoke("check", "--input", str(path))
    assert result.exit_code == 1


def test_run_creates_log_file_directory(sample_file: Path, tmp_path: Path):
    log_path = tmp_path / "logs" / "nested" / "run.log"
    result = invoke("run", "--input", str(sample_file), "--log-file", str(log_path))
    assert result.exit_code == 0, result.output
    assert log_path.exists()


def test_run_log_file_missing_directory_with_no_mkdirs(sample_file: Path, tmp_path: Path):
    log_path = tmp_path / "nope" / "run.log"
    result = invoke(
        "run", "--input", str(sample_file), "--log-file", str(log_path), "--no-mkdirs"
    )
    assert result.exit_code == 1
    assert not isinstance(result.exception, FileNotFoundError)
    assert "Part 1" not in result.output
    assert not log_path.exists()


def test_run_rejects_unknown_colors(sample_file: Path):
    result = invoke("run", "--input", str(sample_file), "--colors", "banana")
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "Part 1" not in result.output
