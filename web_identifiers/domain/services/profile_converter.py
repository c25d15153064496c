"""Conversion between email address profiles."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from ..exceptions import ConversionError, UnsupportedConversionError
from ..value_objects import (
    EmailAddressProfile,
    EmailAddressRFC5321,
    EmailAddressRFC5322,
    EmailAddressRFC6531,
)

logger = logging.getLogger(__name__)


class EmailProfile(str, Enum):
    """Email address grammar profiles."""

    RFC5321 = "rfc5321"
    RFC5322 = "rfc5322"
    RFC6531 = "rfc6531"

    @property
    def address_type(self) -> type[EmailAddressProfile]:
        return _ADDRESS_TYPES[self]

    @classmethod
    def of(cls, address: EmailAddressProfile) -> "EmailProfile":
        """Return the profile an address value belongs to."""
        for profile, address_type in _ADDRESS_TYPES.items():
            if type(address) is address_type:
                return profile
        raise TypeError(f"Not an email address profile: {type(address).__name__}")


_ADDRESS_TYPES: dict[EmailProfile, type[EmailAddressProfile]] = {
    EmailProfile.RFC5321: EmailAddressRFC5321,
    EmailProfile.RFC5322: EmailAddressRFC5322,
    EmailProfile.RFC6531: EmailAddressRFC6531,
}

_CONVERSIONS: dict[tuple[EmailProfile, EmailProfile], Callable[[Any], EmailAddressProfile]] = {
    (EmailProfile.RFC6531, EmailProfile.RFC5322): EmailAddressRFC6531.to_rfc5322,
    (EmailProfile.RFC6531, EmailProfile.RFC5321): EmailAddressRFC6531.to_rfc5321,
    (EmailProfile.RFC5322, EmailProfile.RFC5321): EmailAddressRFC5322.to_rfc5321,
    (EmailProfile.RFC5321, EmailProfile.RFC5322): EmailAddressRFC5321.to_rfc5322,
}


class ProfileConverter:
    """Explicit, fallible conversion between email address profiles.

    Supported directions:
        RFC 6531 -> RFC 5322 and RFC 5321 (ASCII addresses only)
        RFC 5322 -> RFC 5321 (always succeeds)
        RFC 5321 -> RFC 5322 (host name domains only)

    Nothing converts into RFC 6531 and a profile never converts to itself.
    """

    def supports(self, source: EmailProfile, target: EmailProfile) -> bool:
        return (source, target) in _CONVERSIONS

    def convert(
        self, address: EmailAddressProfile, target: EmailProfile
    ) -> EmailAddressProfile:
        """Convert ``address`` to the ``target`` profile.

        Args:
            address: An RFC 5321, RFC 5322 or RFC 6531 address
            target: The profile to convert to

        Returns:
            A new, fully validated address of the target profile

        Raises:
            UnsupportedConversionError: If no conversion exists for the pair
            NonASCIICharactersError: If an RFC 6531 address is not pure ASCII
            IdentifierValidationError: If the local-part is invalid in the target
        """
        source = EmailProfile.of(address)
        conversion = _CONVERSIONS.get((source, target))
        if conversion is None:
            raise UnsupportedConversionError(
                source.address_type.PROFILE, target.address_type.PROFILE
            )

        try:
            return conversion(address)
        except ConversionError as e:
            logger.debug(
                "Refused %s -> %s conversion of %s: %s",
                source.value,
                target.value,
                address,
                e,
            )
            raise
