"""Tests for the show command."""

import json

import pytest
from click.testing import CliRunner

from budget.cli.commands import main


@pytest.fixture
def quarterly_ledger(tmp_path):
    path = tmp_path / "ledger"
    path.write_text(
        "2016-09-01|1000\n2016-10-01|1200\n2016-11-01|1100\n2016-12-01|1300\n",
        encoding="utf-8",
    )
    return path


def _invoke(ledger, *args):
    return CliRunner().invoke(main, ["--file", str(ledger), "show", *args])


def test_show_prints_delta_lines(ledger_file):
    result = _invoke(ledger_file)

    assert result.exit_code == 0
    assert result.output == "2016-01-01 -> 2016-02-01: 1000.00 -> 2000.00 | 1000\n"


def test_show_last_n_entries(quarterly_ledger):
    result = _invoke(quarterly_ledger, "--number", "2")

    assert result.exit_code == 0
    assert result.output.splitlines() == ["2016-11-01 -> 2016-12-01: 1100 -> 1300 | 200"]


def test_show_since_date(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-d", "2016-10-15")

    assert result.exit_code == 0
    assert result.output.splitlines() == ["2016-11-01 -> 2016-12-01: 1100 -> 1300 | 200"]


def test_show_number_wins_over_date(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-n", "3", "-d", "2016-12-01")

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 2


def test_show_single_entry_prints_nothing(tmp_path):
    ledger = tmp_path / "ledger"
    ledger.write_text("2016-01-01|1000.00\n", encoding="utf-8")

    result = _invoke(ledger)

    assert result.exit_code == 0
    assert result.output == ""


def test_show_missing_file_exits_with_read_failure(tmp_path):
    result = _invoke(tmp_path / "missing")

    assert result.exit_code == 2
    assert "Could not read ledger" in result.output


def test_show_invalid_number(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-n", "lots")

    assert result.exit_code == 1
    assert "Invalid number lots" in result.output


def test_show_number_out_of_range(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-n", "10")

    assert result.exit_code == 1
    assert "Requested 10 entries" in result.output


def test_show_number_out_of_range_lenient(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-n", "10", "--lenient")

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 3


def test_show_invalid_date_lenient(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-d", "10/15/2016", "--lenient")

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 3


def test_show_date_after_last_entry(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-d", "2017-06-01")

    assert result.exit_code == 1
    assert "No entries on or after 2017-06-01" in result.output


def test_show_skips_malformed_lines(tmp_path):
    ledger = tmp_path / "ledger"
    ledger.write_text("2016-01-01|1000.00\ngarbage\n2016-02-01|2000.00\n2016-03", encoding="utf-8")

    result = _invoke(ledger)

    assert result.exit_code == 0
    assert result.output.splitlines() == ["2016-01-01 -> 2016-02-01: 1000.00 -> 2000.00 | 1000"]


def test_show_strict_ledger_rejects_malformed_lines(tmp_path):
    ledger = tmp_path / "ledger"
    ledger.write_text("2016-01-01|1000.00\ngarbage\n", encoding="utf-8")

    result = _invoke(ledger, "--strict-ledger")

    assert result.exit_code == 2
    assert "Line 2" in result.output


def test_show_json_format(quarterly_ledger):
    result = _invoke(quarterly_ledger, "-n", "2", "--format", "json")

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload == {
        "deltas": [
            {
                "start": {"date": "2016-11-01", "amount": "1100"},
                "end": {"date": "2016-12-01", "amount": "1300"},
                "delta": 200.0,
            }
        ]
    }


def test_show_table_format(quarterly_ledger):
    result = _invoke(quarterly_ledger, "--format", "table")

    assert result.exit_code == 0
    assert "Balance Changes" in result.output
    assert "2016-12-01" in result.output


def test_show_table_format_without_deltas(tmp_path):
    ledger = tmp_path / "ledger"
    ledger.write_text("2016-01-01|1000.00\n", encoding="utf-8")

    result = _invoke(ledger, "--format", "table")

    assert result.exit_code == 0
    assert "Not enough entries to compare." in result.output


def test_show_skips_undecodable_line(tmp_path):
    ledger = tmp_path / "ledger"
    ledger.write_bytes(b"2016-01-01|1000\n\xff\xfe|junk\n2016-02-01|1200\n")

    result = _invoke(ledger)

    assert result.exit_code == 0
    assert result.output.splitlines() == ["2016-01-01 -> 2016-02-01: 1000 -> 1200 | 200"]
