import logging
import math
from statutory.core.config import Settings
from statutory.core.utils import setup_logging, to_number, to_optional_number

def test_setup_logging_idempotent():
    logger1 = setup_logging("tmptest")
    handlers_before = len(logger1.handlers)
    logger2 = setup_logging("tmptest")
    assert logger1 is logger2
    assert len(logger2.handlers) == handlers_before
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger2.handlers)

def test_to_number_fail_safe():
    assert to_number("1,250.50") == 1250.5
    assert to_number(None) == 0
    assert to_number(math.nan) == 0
    assert to_number("abc") == 0
    assert to_number("") == 0
    assert to_number([1]) == 0
    assert to_number(-3) == -3

def test_to_optional_number_keeps_unset():
    assert to_optional_number(None) is None
    assert to_optional_number(" ") is None
    assert to_optional_number(float("nan")) is None
    assert to_optional_number("0") == 0

def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ROUND_DIGITS", "0")
    monkeypatch.setenv("NSSF_RATE", "10")
    s = Settings()
    assert s.ROUND_DIGITS == 0
    assert s.NSSF_RATE == 10.0
    assert s.PAYE_BANDS[-1][1] is None
