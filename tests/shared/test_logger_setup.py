"""
🧪 test_logger_setup.py — unit-тести для init_logging

Перевіряє:
- Налаштування кореневого логера `ppp_calc`
- Відсутність дублювання хендлерів
- JSON-формат файлового логу з extra-полями
"""

import json
import logging

import pytest

from ppp_calc.shared.errors import RatesFetchError
from ppp_calc.shared.utils.logger import LOG_NAME, JsonFormatter, get_logger, init_logging, init_logging_from_config


@pytest.fixture(autouse=True)
def _reset_root_logger():
    yield
    root = logging.getLogger(LOG_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)


def test_console_logger_creation():
    logger = init_logging(level="DEBUG", console=True)

    assert logger.name == LOG_NAME
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_handlers_are_not_duplicated():
    init_logging(console=True)
    logger = init_logging(console=True)

    assert len(logger.handlers) == 1


def test_noisy_libraries_are_suppressed():
    init_logging(console=False, suppress={"httpcore": "ERROR"})

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.ERROR


def test_json_file_log_contains_extra(tmp_path):
    log_file = tmp_path / "logs" / "ppp.log"
    init_logging_from_config({"level": "INFO", "console": False, "json": True, "file": str(log_file)})

    error = RatesFetchError("boom", url="https://rates.example.org", status_code=503)
    get_logger("tests").error("❌ %s", error, extra=error.to_log_extra())
    for handler in logging.getLogger(LOG_NAME).handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["name"] == f"{LOG_NAME}.tests"
    assert record["level"] == "ERROR"
    assert record["error_code"] == "rates_fetch_error"
    assert record["status_code"] == 503
    assert record["url"] == "https://rates.example.org"


def test_json_formatter_stringifies_unserializable_extra():
    record = logging.LogRecord(LOG_NAME, logging.INFO, __file__, 1, "msg", (), None)
    record.payload = object()

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "msg"
    assert isinstance(data["payload"], str)


def test_get_logger_prefix():
    assert get_logger().name == LOG_NAME
    assert get_logger("infrastructure").name == f"{LOG_NAME}.infrastructure"
