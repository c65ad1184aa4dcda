# tests/test_log.py
import json
import logging

from fincalc import log as fincalc_log
from fincalc.config import settings


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "chatty")
    logger = fincalc_log.get_logger("fincalc.tests.unknown_level")
    assert logger.level == logging.WARNING


def test_known_log_level_is_used(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "debug")
    logger = fincalc_log.get_logger("fincalc.tests.debug_level")
    assert logger.level == logging.DEBUG


def test_json_formatter_renders_arguments():
    record = logging.LogRecord("fincalc.engine", logging.WARNING, __file__, 1, "balance %.2f", (12.345,), None)
    payload = json.loads(fincalc_log.JsonFormatter().format(record))
    assert payload["msg"] == "balance 12.35"
    assert payload["level"] == "WARNING"
