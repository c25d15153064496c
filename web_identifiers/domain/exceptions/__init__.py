"""Domain exception package."""

from .address_literal_exceptions import (
    AddressLiteralError,
    EmptyAddressLiteralError,
    InvalidIPv4Error,
    InvalidIPv6Error,
)
from .base import DomainException, IdentifierValidationError
from .conversion_exceptions import (
    ConversionError,
    NonASCIICharactersError,
    UnsupportedConversionError,
)
from .email_exceptions import (
    ConsecutiveDotsError,
    EmailAddressValidationError,
    InvalidDomainError,
    InvalidDotAtomError,
    InvalidEmailFormatError,
    InvalidLocalPartError,
    InvalidQuotedStringError,
    InvalidUTF8AtomError,
    LeadingOrTrailingDotError,
    LocalPartTooLongError,
    MissingAtSignError,
)
from .hostname_exceptions import (
    EmptyHostnameError,
    HostnameTooLongError,
    HostnameValidationError,
    InvalidLabelError,
    InvalidTLDError,
    TooManyLabelsError,
)

__all__ = [
    # Base
    "DomainException",
    "IdentifierValidationError",
    # Hostname
    "HostnameValidationError",
    "EmptyHostnameError",
    "TooManyLabelsError",
    "HostnameTooLongError",
    "InvalidLabelError",
    "InvalidTLDError",
    # Address literal
    "AddressLiteralError",
    "EmptyAddressLiteralError",
    "InvalidIPv4Error",
    "InvalidIPv6Error",
    # Email
    "EmailAddressValidationError",
    "MissingAtSignError",
    "LocalPartTooLongError",
    "InvalidDotAtomError",
    "InvalidUTF8AtomError",
    "InvalidQuotedStringError",
    "ConsecutiveDotsError",
    "LeadingOrTrailingDotError",
    "InvalidEmailFormatError",
    "InvalidLocalPartError",
    "InvalidDomainError",
    # Conversion
    "ConversionError",
    "NonASCIICharactersError",
    "UnsupportedConversionError",
]
