"""Address literal (RFC 5321 domain) exceptions."""

from typing import Any

from .base import IdentifierValidationError


class AddressLiteralError(IdentifierValidationError):
    """Base exception for bracketed IP address literals."""

    code = "invalid_address_literal"


class EmptyAddressLiteralError(AddressLiteralError):
    """Exception raised for ``[]``."""

    code = "empty_address_literal"

    def __init__(self) -> None:
        super().__init__("Address literal cannot be empty")


class InvalidIPv4Error(AddressLiteralError):
    """Exception raised when a literal body is not a dotted quad."""

    code = "invalid_ipv4"

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid IPv4 address literal '{address}'")
        self.address = address

    @property
    def context(self) -> dict[str, Any]:
        return {"address": self.address}


class InvalidIPv6Error(AddressLiteralError):
    """Exception raised when a literal body is not an IPv6 address."""

    code = "invalid_ipv6"

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid IPv6 address literal '{address}'")
        self.address = address

    @property
    def context(self) -> dict[str, Any]:
        return {"address": self.address}
