from __future__ import annotations

import json
from pathlib import Path

import pytest

from gradient_slice import __version__, cli


def test_cli_windows_over_hex_bytes(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["windows", "--hex", "1BADB002", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["n"] == 4
    assert payload["total"] == 10
    assert [row["values"] for row in payload["windows"]] == [
        [27], [173], [176], [2],
        [27, 173], [173, 176], [176, 2],
        [27, 173, 176], [173, 176, 2],
        [27, 173, 176, 2],
    ]
    assert payload["windows"][5] == {"start": 1, "length": 2, "values": [173, 176]}


def test_cli_windows_over_text_with_max_width(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["windows", "--text", " abc ", "--max-width", "2", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["max_width"] == 2
    assert payload["total"] == 9
    assert [row["values"] for row in payload["windows"]] == [" ", "a", "b", "c", " ", " a", "ab", "bc", "c "]


def test_cli_windows_plain_output_respects_limit(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["windows", "--text", "abc", "--limit", "2"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[0, 1) 'a'", "[1, 2) 'b'"]


def test_cli_windows_separator(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["windows", "--text", "abc", "--separator", "-", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["windows"][-1]["values"] == "a-b-c"


def test_cli_windows_from_file_to_output(tmp_path: Path) -> None:
    samples_path = tmp_path / "samples.json"
    samples_path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    output_path = tmp_path / "out" / "windows.json"

    cli.main(["windows", "--file", str(samples_path), "--output", str(output_path)])

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["n"] == 3
    assert [row["values"] for row in payload["windows"]] == [[1], [2], [3], [1, 2], [2, 3], [1, 2, 3]]


def test_cli_config_file_supplies_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "gradient.yml"
    config_path.write_text("max_width: 1\n", encoding="utf-8")

    cli.main(["--config", str(config_path), "windows", "--text", "abc", "--json"])
    from_config = json.loads(capsys.readouterr().out)
    cli.main(["--config", str(config_path), "windows", "--text", "abc", "--max-width", "2", "--json"])
    overridden = json.loads(capsys.readouterr().out)

    assert len(from_config["windows"]) == 3
    assert len(overridden["windows"]) == 5


def test_cli_at_returns_single_window(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["at", "5", "--hex", "1BADB002", "--json"])

    result = json.loads(capsys.readouterr().out)
    assert result == {"index": 5, "start": 1, "length": 2, "values": [173, 176]}


def test_cli_at_out_of_range_exits() -> None:
    with pytest.raises(SystemExit):
        cli.main(["at", "99", "--text", "abc"])


def test_cli_count(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["count", "5"])
    assert capsys.readouterr().out.strip() == "15"

    cli.main(["count", "5", "--max-width", "2", "--json"])
    assert json.loads(capsys.readouterr().out) == {"n": 5, "max_width": 2, "total": 9}

    with pytest.raises(SystemExit):
        cli.main(["count", "-1"])
    with pytest.raises(SystemExit):
        cli.main(["count", "3", "--max-width", "0"])


def test_cli_missing_source_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["windows", "--file", str(tmp_path / "missing.json")])


def test_cli_requires_exactly_one_source() -> None:
    with pytest.raises(SystemExit):
        cli.main(["windows"])
    with pytest.raises(SystemExit):
        cli.main(["windows", "--text", "a", "--hex", "01"])


def test_cli_validate(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "gradient.yml"
    config_path.write_text("max_width: 0\n", encoding="utf-8")

    cli.main(["validate", str(config_path), "--json"])

    result = json.loads(capsys.readouterr().out)
    assert result["ok"] is False
    assert result["errors"]


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["version"])

    assert capsys.readouterr().out.strip() == __version__


def test_cli_count_uses_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "gradient.yml"
    config_path.write_text("max_width: 2\n", encoding="utf-8")

    cli.main(["--config", str(config_path), "count", "5"])
    assert capsys.readouterr().out.strip() == "9"

    cli.main(["--config", str(config_path), "count", "5", "--max-width", "1", "--json"])
    assert json.loads(capsys.readouterr().out) == {"n": 5, "max_width": 1, "total": 5}
