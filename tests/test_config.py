import pytest
from pydantic import ValidationError

from bank.config import Settings
from bank.rates import DEFAULT_RATES, RateTable


def test_defaults_match_default_rates(monkeypatch):
    monkeypatch.delenv("BANK_SAVINGS_RATE", raising=False)
    monkeypatch.delenv("BANK_FIXED_RATE", raising=False)
    s = Settings(_env_file=None)
    assert RateTable.from_settings(s) == DEFAULT_RATES
    assert s.log_level == "INFO"


def test_rates_from_environment(monkeypatch):
    monkeypatch.setenv("BANK_SAVINGS_RATE", "0.04")
    monkeypatch.setenv("BANK_FIXED_RATE", "0.06")
    table = RateTable.from_settings(Settings(_env_file=None))
    assert table == RateTable(savings=0.04, fixed=0.06)


def test_negative_rate_rejected(monkeypatch):
    monkeypatch.setenv("BANK_FIXED_RATE", "-0.01")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
