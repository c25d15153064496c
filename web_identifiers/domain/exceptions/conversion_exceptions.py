"""Email address profile conversion exceptions."""

from typing import Any

from .base import DomainException


class ConversionError(DomainException):
    """Base exception for refused profile conversions."""

    code = "conversion_error"


class NonASCIICharactersError(ConversionError):
    """Exception raised when an internationalized address is not pure ASCII."""

    code = "non_ascii_characters"

    def __init__(self, address: str) -> None:
        super().__init__(
            "Cannot convert internationalized email address to ASCII-only format"
        )
        self.address = address

    @property
    def context(self) -> dict[str, Any]:
        return {"address": self.address}


class UnsupportedConversionError(ConversionError):
    """Exception raised when no conversion exists between two profiles."""

    code = "unsupported_conversion"

    def __init__(self, source: str, target: str, reason: str | None = None) -> None:
        message = f"Cannot convert {source} address to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.source = source
        self.target = target
        self.reason = reason

    @property
    def context(self) -> dict[str, Any]:
        return {"source": self.source, "target": self.target, "reason": self.reason}
