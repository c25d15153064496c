"""Host name (RFC 1123) validation exceptions."""

from typing import Any

from .base import IdentifierValidationError

MAX_HOSTNAME_LENGTH = 255
MAX_HOSTNAME_LABELS = 127
MAX_LABEL_LENGTH = 63


class HostnameValidationError(IdentifierValidationError):
    """Base exception for host name errors."""

    code = "invalid_hostname"


class EmptyHostnameError(HostnameValidationError):
    """Exception raised when a host name has no labels."""

    code = "empty"

    def __init__(self) -> None:
        super().__init__("Host name cannot be empty")


class TooManyLabelsError(HostnameValidationError):
    """Exception raised when a host name has more than 127 labels."""

    code = "too_many_labels"

    def __init__(self, count: int) -> None:
        """Initialize the exception.

        Args:
            count: The number of labels found
        """
        super().__init__(
            f"Host name has too many labels ({count}, maximum {MAX_HOSTNAME_LABELS})"
        )
        self.count = count
        self.limit = MAX_HOSTNAME_LABELS

    @property
    def context(self) -> dict[str, Any]:
        return {"count": self.count, "limit": self.limit}


class HostnameTooLongError(HostnameValidationError):
    """Exception raised when the rendered host name exceeds 255 characters."""

    code = "too_long"

    def __init__(self, length: int) -> None:
        """Initialize the exception.

        Args:
            length: The rendered length, dots included
        """
        super().__init__(
            f"Host name length {length} exceeds maximum of {MAX_HOSTNAME_LENGTH}"
        )
        self.length = length
        self.limit = MAX_HOSTNAME_LENGTH

    @property
    def context(self) -> dict[str, Any]:
        return {"length": self.length, "limit": self.limit}


class InvalidLabelError(HostnameValidationError):
    """Exception raised when an interior label is malformed."""

    code = "invalid_label"

    def __init__(self, label: str) -> None:
        super().__init__(
            f"Invalid label '{label}'. Must start and end with letter/digit, "
            "and contain only letters/digits/hyphens"
        )
        self.label = label

    @property
    def context(self) -> dict[str, Any]:
        return {"label": self.label, "max_length": MAX_LABEL_LENGTH}


class InvalidTLDError(HostnameValidationError):
    """Exception raised when the rightmost label is not a valid TLD."""

    code = "invalid_tld"

    def __init__(self, tld: str) -> None:
        super().__init__(
            f"Invalid TLD '{tld}'. Must start and end with letter, "
            "and contain only letters/digits/hyphens"
        )
        self.tld = tld

    @property
    def context(self) -> dict[str, Any]:
        return {"tld": self.tld, "max_length": MAX_LABEL_LENGTH}
