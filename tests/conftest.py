"""Pytest configuration and fixtures."""

import pytest

from budget.core.models import Entry
from budget.persistence import storage as storage_module


@pytest.fixture(autouse=True)
def isolated_ledger_env(monkeypatch):
    """Keep a developer's BUDGET_FILE from leaking into CLI tests."""
    monkeypatch.delenv(storage_module.LEDGER_ENV_VAR, raising=False)


@pytest.fixture
def ledger_file(tmp_path):
    """Ledger file holding two monthly entries."""
    path = tmp_path / "ledger"
    path.write_text("2016-01-01|1000.00\n2016-02-01|2000.00\n", encoding="utf-8")
    return path


@pytest.fixture
def quarterly_entries():
    """Four consecutive monthly entries used by the filter tests."""
    return [
        Entry("2016-09-01", "1000"),
        Entry("2016-10-01", "1200"),
        Entry("2016-11-01", "1100"),
        Entry("2016-12-01", "1300"),
    ]
