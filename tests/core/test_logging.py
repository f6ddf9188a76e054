import logging

import pytest
import structlog

from cmdlog.core import logging as log_config
from cmdlog.core.logging import REDACTED, redact_sensitive_data


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_redacts_secret_keys():
    event = {
        "event": "connecting",
        "password": "hunter2",
        "Authorization": "Bearer abc",
        "db_token": "xyz",
        "command": "ls -la",
    }

    redacted = redact_sensitive_data(None, "info", event)

    assert redacted["password"] == REDACTED
    assert redacted["Authorization"] == REDACTED
    assert redacted["db_token"] == REDACTED
    assert redacted["command"] == "ls -la"
    # Original is untouched
    assert event["password"] == "hunter2"


def test_development_logging(monkeypatch):
    monkeypatch.setattr(log_config.settings, "DEBUG", True)
    monkeypatch.setattr(log_config.settings, "LOG_LEVEL", "DEBUG")

    log_config.setup_logging()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_production_logging_emits_json(monkeypatch, capsys):
    monkeypatch.setattr(log_config.settings, "DEBUG", False)
    monkeypatch.setattr(log_config.settings, "LOG_LEVEL", "INFO")

    log_config.setup_logging()
    logging.getLogger("cmdlog.test").info("hello %s", "world")

    out = capsys.readouterr().out
    assert '"event": "hello world"' in out
    assert '"level": "info"' in out
