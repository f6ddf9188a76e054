from cmdlog.core.exceptions import (
    LogServiceError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def test_status_codes():
    assert ValidationError("bad").status_code == 400
    assert NotFoundError().status_code == 404
    assert PersistenceError("create", "Failed to create log").status_code == 500


def test_not_found_default_message():
    err = NotFoundError()
    assert str(err) == "Log not found"
    assert err.message == "Log not found"


def test_persistence_error_keeps_operation():
    err = PersistenceError("update", "Failed to update log")
    assert err.operation == "update"
    assert err.message == "Failed to update log"
    assert isinstance(err, LogServiceError)
