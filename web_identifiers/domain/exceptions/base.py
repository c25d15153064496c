"""Base domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    code: str = "domain_error"

    @property
    def context(self) -> dict[str, Any]:
        """Structured details describing the failure."""
        return {}


class IdentifierValidationError(DomainException, ValueError):
    """Raised when text does not satisfy an identifier grammar.

    Subclassing ValueError lets pydantic report these as field errors.
    """

    code = "invalid_identifier"
