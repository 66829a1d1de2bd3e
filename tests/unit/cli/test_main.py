"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def _records_args() -> list[str]:
    return ["--records", str(fixture_path("records.jsonl"))]


def _output_rows(capsys: pytest.CaptureFixture[str]) -> list[dict[str, object]]:
    output = capsys.readouterr().out
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_cli_get_prints_record(capsys: pytest.CaptureFixture[str]) -> None:
    """get should print the record stored under the identifier."""
    exit_code = main(_records_args() + ["get", "grace"])
    rows = _output_rows(capsys)

    assert exit_code == 0 and rows[0]["id"] == "grace"


def test_cli_get_reports_missing_identifier(capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown identifiers exit with status 1 and an error line."""
    exit_code = main(_records_args() + ["get", "nobody"])
    output = capsys.readouterr().out

    assert exit_code == 1 and output.startswith("error=")


def test_cli_get_matches_integer_identifiers(
    tmp_path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Numeric identifiers from --id-field should be reachable from the command line."""
    records_path = tmp_path / "records.jsonl"
    records_path.write_text('{"n": 1, "v": "a"}\n{"n": 2, "v": "b"}\n', encoding="utf-8")

    exit_code = main(["--records", str(records_path), "--id-field", "n", "get", "2"])
    rows = _output_rows(capsys)

    assert exit_code == 0 and rows == [{"id": 2, "record": {"n": 2, "v": "b"}}]


def test_cli_count_prints_record_count(capsys: pytest.CaptureFixture[str]) -> None:
    """count should print how many records were loaded."""
    exit_code = main(_records_args() + ["count"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "4"


def test_cli_find_prints_matching_rows(capsys: pytest.CaptureFixture[str]) -> None:
    """find should print one row per matching record."""
    exit_code = main(_records_args() + ["find", "--where", "profile.age>=18"])
    rows = _output_rows(capsys)

    assert exit_code == 0 and [row["id"] for row in rows] == ["ada", "grace"]


def test_cli_find_repeated_where_includes_any_match(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Repeated --where without --one keeps find_by's OR behavior."""
    exit_code = main(
        _records_args()
        + ["find", "--where", "name=Linus", "--where", "profile.city IN [Arlington, Paris]"]
    )
    rows = _output_rows(capsys)

    assert exit_code == 0 and [row["id"] for row in rows] == ["grace", "linus"]


def test_cli_find_one_requires_all_criteria(capsys: pytest.CaptureFixture[str]) -> None:
    """--one should print the first record matching every criterion."""
    exit_code = main(
        _records_args()
        + ["find", "--one", "--where", "profile.age>18", "--where", "profile.city=Arlington"]
    )
    rows = _output_rows(capsys)

    assert exit_code == 0 and [row["id"] for row in rows] == ["grace"]


@pytest.mark.parametrize(
    "expression",
    ["country=NO", "created=2024-01-01", "zip=0755"],
)
def test_cli_find_keeps_string_like_values_as_strings(
    expression: str, tmp_path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Country codes, dates and zero-padded codes should match their stored strings."""
    records_path = tmp_path / "records.jsonl"
    records_path.write_text(
        '{"id": "a", "country": "NO", "created": "2024-01-01", "zip": "0755"}\n'
        '{"id": "b", "country": "SE", "created": "2023-12-31", "zip": "0756"}\n'
        '{"id": "c", "country": ""}\n',
        encoding="utf-8",
    )

    exit_code = main(["--records", str(records_path), "find", "--where", expression])
    rows = _output_rows(capsys)

    assert exit_code == 0 and [row["id"] for row in rows] == ["a"]


def test_cli_query_runs_yaml_spec(capsys: pytest.CaptureFixture[str]) -> None:
    """query should execute a YAML query spec."""
    spec_path = fixture_path("queries/london_adult.yaml")

    exit_code = main(_records_args() + ["query", str(spec_path)])
    rows = _output_rows(capsys)

    assert exit_code == 0 and [row["id"] for row in rows] == ["ada"]


def test_cli_reports_invalid_expression(capsys: pytest.CaptureFixture[str]) -> None:
    """Malformed --where expressions exit with status 1."""
    exit_code = main(_records_args() + ["find", "--where", "profile.age"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "Invalid criterion expression" in output
