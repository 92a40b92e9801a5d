"""Tests for the add command."""

from click.testing import CliRunner

from budget.cli.commands import main


def _invoke(ledger, *args):
    return CliRunner().invoke(main, ["--file", str(ledger), "add", *args])


def test_add_appends_entry(ledger_file):
    result = _invoke(ledger_file, "2016-09-01", "1000")

    assert result.exit_code == 0
    assert "Added 2016-09-01 1000" in result.output
    assert ledger_file.read_text(encoding="utf-8").splitlines() == [
        "2016-01-01|1000.00",
        "2016-02-01|2000.00",
        "2016-09-01|1000",
    ]


def test_add_accepts_negative_amount(tmp_path):
    ledger = tmp_path / "ledger"

    result = _invoke(ledger, "2016-09-01", "-250.75")

    assert result.exit_code == 0
    assert ledger.read_text(encoding="utf-8") == "2016-09-01|-250.75\n"


def test_add_rejects_invalid_date(ledger_file):
    original = ledger_file.read_text(encoding="utf-8")

    result = _invoke(ledger_file, "9/1/16", "1000")

    assert result.exit_code == 1
    assert "Invalid Date 9/1/16; must format as yyyy-mm-dd" in result.output
    assert ledger_file.read_text(encoding="utf-8") == original


def test_add_rejects_invalid_amount(ledger_file):
    original = ledger_file.read_text(encoding="utf-8")

    result = _invoke(ledger_file, "2016-09-01", "hello")

    assert result.exit_code == 1
    assert "Invalid Amount hello; must be a float" in result.output
    assert ledger_file.read_text(encoding="utf-8") == original


def test_add_reports_date_error_first(tmp_path):
    result = _invoke(tmp_path / "ledger", "someday", "lots")

    assert result.exit_code == 1
    assert "Invalid Date someday" in result.output
    assert "Invalid Amount" not in result.output


def test_add_write_failure(tmp_path):
    ledger = tmp_path / "missing-dir" / "ledger"

    result = _invoke(ledger, "2016-09-01", "1000")

    assert result.exit_code == 1
    assert "Could not write ledger" in result.output


def test_add_requires_both_arguments(tmp_path):
    result = _invoke(tmp_path / "ledger", "2016-09-01")

    assert result.exit_code != 0
    assert "Missing argument" in result.output
