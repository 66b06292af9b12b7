import json
import logging

from propfile.config import LoggingConfig
from propfile.logging_utils import JsonFormatter, PlainFormatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("propfile.properties", logging.ERROR, __file__, 1, "load %s", ("failed",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record(resource="app.properties", category="i/o failure")))
    assert payload == {
        "level": "ERROR",
        "name": "propfile.properties",
        "message": "load failed",
        "resource": "app.properties",
        "category": "i/o failure",
    }


def test_plain_formatter_appends_known_extras() -> None:
    line = PlainFormatter().format(_record(resource="app.properties", category="i/o failure"))
    assert line == "ERROR propfile.properties load failed [resource=app.properties category=i/o failure]"
    assert PlainFormatter().format(_record()) == "ERROR propfile.properties load failed"


def test_json_formatter_skips_unset_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record()))
    assert "resource" not in payload
    assert "key" not in payload


def test_configure_logging_with_rotating_file(tmp_path) -> None:
    log_file = tmp_path / "propfile.log"
    configure_logging(LoggingConfig(level="debug", json_format=True, log_file=str(log_file)))
    logging.getLogger("propfile.test").info("hello", extra={"key": "host"})
    for handler in logging.getLogger().handlers:
        handler.flush()
    line = log_file.read_text().strip().splitlines()[-1]
    assert json.loads(line) == {"level": "INFO", "name": "propfile.test", "message": "hello", "key": "host"}
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_returns_installed_handlers(tmp_path) -> None:
    log_file = tmp_path / "plain.log"
    handlers = configure_logging(LoggingConfig(level="WARNING", log_file=str(log_file)))
    assert handlers == logging.getLogger().handlers
    assert isinstance(handlers[0].formatter, PlainFormatter)
    logging.getLogger("propfile.properties").error("load failed", extra={"resource": "app.properties"})
    handlers[0].flush()
    assert log_file.read_text().strip() == "ERROR propfile.properties load failed [resource=app.properties]"
