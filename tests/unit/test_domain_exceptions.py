"""Tests for domain exceptions (error_code, message, details, envelope)."""

from portal.domain.exceptions import (
    InvalidLimitException,
    InvalidPageException,
    PortalException,
    SeedDataException,
    ValidationException,
)


def test_portal_exception_default_error_code() -> None:
    """Base PortalException uses class name as error_code when not provided."""
    exc = PortalException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PortalException"
    assert exc.details == {}


def test_to_dict_envelope_without_details() -> None:
    exc = PortalException("Oops", error_code="CUSTOM")
    assert exc.to_dict() == {"success": False, "error": {"message": "Oops", "code": "CUSTOM"}}


def test_validation_exception_field() -> None:
    exc = ValidationException("Invalid", field="q")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "q"}


def test_invalid_page() -> None:
    exc = InvalidPageException()
    assert isinstance(exc, ValidationException)
    assert exc.to_dict()["error"] == {
        "message": "Page number must be greater than 0",
        "code": "INVALID_PAGE",
        "details": {"field": "page"},
    }


def test_invalid_limit_message_uses_max() -> None:
    exc = InvalidLimitException(max_limit=50)
    assert exc.error_code == "INVALID_LIMIT"
    assert exc.message == "Limit must be between 1 and 50"


def test_seed_data_exception_source() -> None:
    exc = SeedDataException("bad", source="seed.json")
    assert exc.error_code == "SEED_DATA_ERROR"
    assert exc.details == {"source": "seed.json"}
