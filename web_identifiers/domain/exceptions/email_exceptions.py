"""Email address and local-part validation exceptions."""

from typing import Any

from .base import IdentifierValidationError


class EmailAddressValidationError(IdentifierValidationError):
    """Base exception for email address errors."""

    code = "invalid_email_address"


class MissingAtSignError(EmailAddressValidationError):
    """Exception raised when the address has no ``@``."""

    code = "missing_at_sign"

    def __init__(self) -> None:
        super().__init__("Email address must contain @")


class LocalPartTooLongError(EmailAddressValidationError):
    """Exception raised when the local-part exceeds its profile limit.

    ``unit`` is either ``"characters"`` or ``"utf8_bytes"``.
    """

    code = "local_part_too_long"

    def __init__(self, length: int, limit: int = 64, unit: str = "characters") -> None:
        if unit == "utf8_bytes":
            message = f"Local-part UTF-8 byte length {length} exceeds maximum of {limit}"
        else:
            message = f"Local-part length {length} exceeds maximum of {limit}"
        super().__init__(message)
        self.length = length
        self.limit = limit
        self.unit = unit

    @property
    def context(self) -> dict[str, Any]:
        return {"length": self.length, "limit": self.limit, "unit": self.unit}


class InvalidDotAtomError(EmailAddressValidationError):
    """Exception raised when an unquoted local-part has disallowed characters."""

    code = "invalid_dot_atom"

    def __init__(self, local_part: str) -> None:
        super().__init__(f"Invalid local-part format (before @): '{local_part}'")
        self.local_part = local_part

    @property
    def context(self) -> dict[str, Any]:
        return {"local_part": self.local_part}


class InvalidUTF8AtomError(EmailAddressValidationError):
    """Exception raised when one atom of an internationalized local-part is invalid."""

    code = "invalid_utf8_atom"

    def __init__(self, atom: str) -> None:
        super().__init__(f"Invalid UTF-8 atom format: '{atom}'")
        self.atom = atom

    @property
    def context(self) -> dict[str, Any]:
        return {"atom": self.atom}


class InvalidQuotedStringError(EmailAddressValidationError):
    """Exception raised when a quoted local-part is malformed or empty."""

    code = "invalid_quoted_string"

    def __init__(self, local_part: str) -> None:
        super().__init__(f"Invalid quoted string format in local-part: {local_part}")
        self.local_part = local_part

    @property
    def context(self) -> dict[str, Any]:
        return {"local_part": self.local_part}


class ConsecutiveDotsError(EmailAddressValidationError):
    """Exception raised for ``..`` in a dot-atom."""

    code = "consecutive_dots"

    def __init__(self, local_part: str) -> None:
        super().__init__("Local-part cannot contain consecutive dots")
        self.local_part = local_part

    @property
    def context(self) -> dict[str, Any]:
        return {"local_part": self.local_part}


class LeadingOrTrailingDotError(EmailAddressValidationError):
    """Exception raised when a dot-atom begins or ends with a dot."""

    code = "leading_or_trailing_dot"

    def __init__(self, local_part: str) -> None:
        super().__init__("Local-part cannot begin or end with a dot")
        self.local_part = local_part

    @property
    def context(self) -> dict[str, Any]:
        return {"local_part": self.local_part}


class InvalidEmailFormatError(EmailAddressValidationError):
    """Exception raised when text matches neither name-addr nor addr-spec."""

    code = "invalid_format"

    def __init__(self, text: str) -> None:
        super().__init__(
            "Invalid email format. Expected 'Name <local@domain>' or 'local@domain'"
        )
        self.text = text

    @property
    def context(self) -> dict[str, Any]:
        return {"text": self.text}


class InvalidLocalPartError(EmailAddressValidationError):
    """Exception raised by the legacy address for a bad local part."""

    code = "invalid_local_part"

    def __init__(self, local_part: str) -> None:
        super().__init__(f"Invalid local part (before @): '{local_part}'")
        self.local_part = local_part

    @property
    def context(self) -> dict[str, Any]:
        return {"local_part": self.local_part}


class InvalidDomainError(EmailAddressValidationError):
    """Exception raised by the legacy address for a bad domain."""

    code = "invalid_domain"

    def __init__(self, domain: str) -> None:
        super().__init__(f"Invalid domain (after @): '{domain}'")
        self.domain = domain

    @property
    def context(self) -> dict[str, Any]:
        return {"domain": self.domain}
