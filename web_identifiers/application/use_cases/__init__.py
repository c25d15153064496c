"""Use cases package."""

from .convert_email_address import (
    ConvertEmailAddressInput,
    ConvertEmailAddressOutput,
    ConvertEmailAddressUseCase,
)
from .parse_identifier import (
    IdentifierKind,
    ParseIdentifierInput,
    ParseIdentifierOutput,
    ParseIdentifierUseCase,
)

__all__ = [
    "ConvertEmailAddressInput",
    "ConvertEmailAddressOutput",
    "ConvertEmailAddressUseCase",
    "IdentifierKind",
    "ParseIdentifierInput",
    "ParseIdentifierOutput",
    "ParseIdentifierUseCase",
]
