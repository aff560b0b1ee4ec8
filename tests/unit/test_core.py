import json
import logging
import sys

from smarta_feedback.config import settings
from smarta_feedback.core import errors
from smarta_feedback.core.logging import JSONFormatter, setup_logging


def test_invalid_field_message():
    err = errors.InvalidField("kind", "sdf")
    assert err.status_code == 400
    assert err.error_code == "INVALID_FIELD"
    assert err.details == {"field": "kind", "value": "sdf"}
    assert str(err) == "invalid value `sdf` for `kind`"


def test_unauthorized_defaults():
    err = errors.Unauthorized()
    assert err.status_code == 401
    assert err.message == "expected X-Smarta-Auth-* headers not present"


def test_persistence_failure_wraps_cause():
    cause = RuntimeError("insert failed")
    err = errors.PersistenceFailure("saving feedback", cause)
    assert err.status_code == 500
    assert err.message == "failed saving feedback: insert failed"
    assert err.details["exception_type"] == "RuntimeError"
    assert err.cause is cause


def test_json_formatter_includes_extras():
    record = logging.LogRecord("smarta_feedback.test", logging.ERROR, __file__, 1, "boom %s", ("now",), None)
    record.error_code = "PERSISTENCE_FAILURE"
    record.details = {"operation": "saving feedback"}

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "error"
    assert payload["msg"] == "boom now"
    assert payload["time"].endswith("+00:00")
    assert "module" not in payload
    assert payload["logger"] == "smarta_feedback.test"
    assert payload["error_code"] == "PERSISTENCE_FAILURE"
    assert payload["details"] == {"operation": "saving feedback"}


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("debug")
        setup_logging("debug")
        added = [h for h in root.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(added) == 1
        assert root.level == logging.DEBUG
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(level)


def test_settings_read_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://feedback@db:5432/feedback")
    monkeypatch.setenv("OUTAGE_REPORT_ALERT_TTL_HOURS", "12")
    monkeypatch.setenv("MIGRATE_ON_STARTUP", "false")

    loaded = settings.Settings()

    assert loaded.DATABASE_URL == "postgresql://feedback@db:5432/feedback"
    assert loaded.OUTAGE_REPORT_ALERT_TTL_HOURS == 12
    assert loaded.MIGRATE_ON_STARTUP is False
    assert loaded.PORT == 8080
    assert loaded.LOG_LEVEL == "INFO"


def test_json_formatter_reports_exception():
    try:
        raise RuntimeError("insert failed")
    except RuntimeError:
        record = logging.getLogger("smarta_feedback.test").makeRecord(
            "smarta_feedback.test", logging.ERROR, __file__, 1, "save failed", (), sys.exc_info(),
        )

    payload = json.loads(JSONFormatter().format(record))

    assert payload["msg"] == "save failed"
    assert "RuntimeError: insert failed" in payload["error"]
