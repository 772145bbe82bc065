"""Error hierarchy tests: codes, categories, HTTP hints and the REST envelope."""

import pytest

from app.core.errors import (
    DanglingReferenceError,
    DuplicateSlugError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    EventBookError,
    InvalidDateError,
    InvalidEmailError,
    InvalidTimeError,
    MissingFieldError,
    ResourceNotFoundError,
    StoreUnavailableError,
)


@pytest.mark.parametrize("error, code, category, status", [
    (MissingFieldError("title"), "MISSING_FIELD", ErrorCategory.VALIDATION, 400),
    (InvalidDateError("x"), "INVALID_DATE", ErrorCategory.VALIDATION, 400),
    (InvalidTimeError("x"), "INVALID_TIME", ErrorCategory.VALIDATION, 400),
    (InvalidEmailError(), "INVALID_EMAIL", ErrorCategory.VALIDATION, 400),
    (DanglingReferenceError("event"), "DANGLING_REFERENCE", ErrorCategory.BUSINESS_RULE, 422),
    (DuplicateSlugError("a"), "DUPLICATE_SLUG", ErrorCategory.CONFLICT, 409),
    (ResourceNotFoundError("Event", "1"), "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404),
    (StoreUnavailableError("down", "exists"), "STORE_UNAVAILABLE", ErrorCategory.DATABASE, 503),
])
def test_error_taxonomy(error, code, category, status):
    assert isinstance(error, EventBookError)
    assert error.code == code
    assert error.category == category
    assert error.http_status == status


def test_store_errors_are_critical():
    assert StoreUnavailableError("down", "exists").severity == ErrorSeverity.CRITICAL
    assert MissingFieldError("title").severity == ErrorSeverity.ERROR


def test_field_errors_record_the_field_in_context():
    assert MissingFieldError("agenda").context.field == "agenda"
    assert InvalidDateError("x").context.field == "date"
    assert InvalidTimeError("x").context.field == "time"
    assert InvalidEmailError().context.field == "email"


def test_to_response_envelope():
    err = MissingFieldError("tags", ErrorContext(event_id="e-1"))
    body = err.to_response()["error"]
    assert body["code"] == "MISSING_FIELD"
    assert body["message"] == 'Field "tags" is required and cannot be empty'
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"] == {"event_id": "e-1", "booking_id": None, "field": "tags"}


def test_user_message_overrides_internal_message():
    err = StoreUnavailableError(
        "connection refused", "exists",
        ErrorContext(user_message="Bookings are temporarily unavailable"),
    )
    assert err.to_response()["error"]["message"] == "Bookings are temporarily unavailable"
    assert "connection refused" in str(err)
