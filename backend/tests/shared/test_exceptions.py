"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    CoiError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
)


class TestCoiError:
    def test_coi_error_message(self):
        """CoiError should store message."""
        error = CoiError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_coi_error_default_code(self):
        """CoiError should default code to class name."""
        error = CoiError("Test error")
        assert error.code == "CoiError"

    def test_coi_error_custom_code(self):
        error = CoiError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_coi_error_default_details(self):
        error = CoiError("Test error")
        assert error.details == {}

    def test_coi_error_to_dict(self):
        """CoiError should convert to dict."""
        error = CoiError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [NotFoundError, ValidationError, AuthenticationError, AuthorizationError, ConflictError],
    )
    def test_subclasses_inherit_from_coi_error(self, error_class):
        error = error_class("Something went wrong")
        assert isinstance(error, CoiError)
        assert error.code == error_class.__name__

    def test_can_catch_by_base_class(self):
        with pytest.raises(CoiError):
            raise NotFoundError("Certificate not found")
