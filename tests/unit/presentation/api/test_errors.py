"""Tests for the domain exception to HTTP error mapping."""

import warnings

from web_identifiers.domain.exceptions import (
    DomainException,
    InvalidTLDError,
    NonASCIICharactersError,
)
from web_identifiers.presentation.api.errors import error_detail, to_http_exception


class TestToHttpException:
    """Test cases for to_http_exception."""

    def test_validation_error_is_422(self) -> None:
        """Test that grammar failures become unprocessable entity errors."""
        error = InvalidTLDError("123")

        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            exception = to_http_exception(error)

        assert exception.status_code == 422
        assert exception.detail == {
            "code": "invalid_tld",
            "message": str(error),
            "context": error.context,
        }

    def test_conversion_error_is_409(self) -> None:
        """Test that refused conversions become conflicts."""
        exception = to_http_exception(NonASCIICharactersError("josé@example.com"))

        assert exception.status_code == 409
        assert exception.detail["context"] == {"address": "josé@example.com"}

    def test_other_domain_errors_are_400(self) -> None:
        """Test the fallback status."""
        exception = to_http_exception(DomainException("broken"))

        assert exception.status_code == 400
        assert error_detail(DomainException("broken")) == {
            "code": "domain_error",
            "message": "broken",
            "context": {},
        }
