"""RFC 5321 (basic SMTP) email address."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from ..exceptions import UnsupportedConversionError
from .domain_or_literal import DomainOrLiteral
from .email_address_profile import EmailAddressProfile
from .local_part import RFC5321LocalPart

if TYPE_CHECKING:
    from .email_address_rfc5322 import EmailAddressRFC5322


@dataclass(frozen=True)
class EmailAddressRFC5321(EmailAddressProfile):
    """Email address as accepted in the SMTP envelope.

    The domain may be a host name or a bracketed IPv4/IPv6 literal, e.g.
    ``postmaster@[192.168.1.1]``.
    """

    PROFILE: ClassVar[str] = "RFC 5321"
    LOCAL_PART_TYPE: ClassVar[type[RFC5321LocalPart]] = RFC5321LocalPart
    DOMAIN_TYPE: ClassVar[type[DomainOrLiteral]] = DomainOrLiteral

    local_part: RFC5321LocalPart
    domain: DomainOrLiteral
    display_name: str | None = None

    def to_rfc5322(self) -> "EmailAddressRFC5322":
        """Convert to the message format profile.

        Raises:
            UnsupportedConversionError: If the domain is an address literal
            EmailAddressValidationError: If the local-part is not valid
                under RFC 5322 (e.g. contains ``!`` or ``..``)
        """
        from .email_address_rfc5322 import EmailAddressRFC5322
        from .local_part import RFC5322LocalPart

        if self.domain.hostname is None:
            raise UnsupportedConversionError(
                self.PROFILE,
                EmailAddressRFC5322.PROFILE,
                "address literal domains have no RFC 5322 equivalent",
            )
        return EmailAddressRFC5322(
            local_part=RFC5322LocalPart(self.local_part.value),
            domain=self.domain.hostname,
            display_name=self.display_name,
        )
