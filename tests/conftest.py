from decimal import Decimal
from pathlib import Path

import pytest

from dividends.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # keep .env files and DIVIDENDS_* variables from the host out of the tests
    for name in ("DIVIDENDS_OUTPUT_PATH", "DIVIDENDS_OUTPUT_FORMAT", "DIVIDENDS_LOG_LEVEL", "DIVIDENDS_INPUT_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_ledger(tmp_path):
    """Write ledger lines to a file and return its path."""
    def _write(*lines: str, name: str = "ledger.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_payouts():
    return {
        "R2": {"B": Decimal("250000.00")},
        "R1": {"C": Decimal("20000.00"), "A": Decimal("175000.00")},
    }
