import json
from pathlib import Path

import pytest

from playerstats import cli


def _write_sample(directory: Path) -> None:
    players = [
        {"id": 1, "name": "A", "matches": 10, "wins": 5, "hoursPlayed": 100},
        {"id": 2, "name": "B", "matches": 0, "wins": 0, "hoursPlayed": 50},
    ]
    (directory / "players.json").write_text(json.dumps(players), encoding="utf-8")


def test_main_without_arguments_writes_report_and_summary(tmp_path: Path, monkeypatch, capsys):
    _write_sample(tmp_path)
    monkeypatch.chdir(tmp_path)

    cli.main([])

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Report created successfully!",
        "Top player: A (50.0% wins)",
        "Average win rate: 25.00%",
        "Most active player: A",
    ]
    report = json.loads((tmp_path / "report.json").read_text(encoding="utf-8"))
    assert report["stats"][0]["avgHours"] == pytest.approx(10.0)
    assert report["stats"][1]["avgHours"] == pytest.approx(5.0)


def test_main_with_custom_paths_and_weeks(tmp_path: Path, capsys):
    _write_sample(tmp_path)
    output = tmp_path / "out.json"

    cli.main(["--players", str(tmp_path / "players.json"), "--output", str(output), "--weeks", "20"])

    report = json.loads(output.read_text(encoding="utf-8"))
    assert report["stats"][0]["avgHours"] == pytest.approx(5.0)
    assert "Most active player: A" in capsys.readouterr().out


def test_main_exits_nonzero_on_invalid_input(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "players.json").write_text("not json", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert "not valid JSON" in str(excinfo.value.code)
    assert capsys.readouterr().out == ""
    assert not (tmp_path / "report.json").exists()


def test_help_describes_default_invocation(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])

    assert excinfo.value.code == 0
    out = " ".join(capsys.readouterr().out.split())
    assert "With no arguments, reads ./players.json" in out
    assert "only override those defaults" in out
