"""RFC 6531 (SMTPUTF8) internationalized email address."""

from dataclasses import dataclass
from typing import ClassVar

from ..exceptions import NonASCIICharactersError
from .domain_or_literal import DomainOrLiteral
from .email_address_profile import EmailAddressProfile
from .email_address_rfc5321 import EmailAddressRFC5321
from .email_address_rfc5322 import EmailAddressRFC5322
from .hostname import Hostname, InternationalizedHostname
from .local_part import RFC5321LocalPart, RFC5322LocalPart, RFC6531LocalPart


@dataclass(frozen=True)
class EmailAddressRFC6531(EmailAddressProfile):
    """Internationalized email address.

    The local-part may contain Unicode letters and digits and is limited to
    64 UTF-8 bytes. Domain labels may be U-labels such as ``exämple``.
    Display names with non-ASCII characters are quoted.
    """

    PROFILE: ClassVar[str] = "RFC 6531"
    LOCAL_PART_TYPE: ClassVar[type[RFC6531LocalPart]] = RFC6531LocalPart
    DOMAIN_TYPE: ClassVar[type[InternationalizedHostname]] = InternationalizedHostname
    QUOTE_NON_ASCII_NAMES: ClassVar[bool] = True

    local_part: RFC6531LocalPart
    domain: InternationalizedHostname
    display_name: str | None = None

    def _require_ascii(self) -> None:
        if not self.is_ascii:
            raise NonASCIICharactersError(str(self))

    def to_rfc5322(self) -> EmailAddressRFC5322:
        """Convert to the message format profile.

        Raises:
            NonASCIICharactersError: If the rendered address is not pure ASCII
            EmailAddressValidationError: If the local-part is not valid
                under RFC 5322
        """
        self._require_ascii()
        return EmailAddressRFC5322(
            local_part=RFC5322LocalPart(self.local_part.value),
            domain=Hostname(labels=self.domain.labels),
            display_name=self.display_name,
        )

    def to_rfc5321(self) -> EmailAddressRFC5321:
        """Convert to the basic SMTP profile.

        Raises:
            NonASCIICharactersError: If the rendered address is not pure ASCII
        """
        self._require_ascii()
        return EmailAddressRFC5321(
            local_part=RFC5321LocalPart(self.local_part.value),
            domain=DomainOrLiteral.standard(Hostname(labels=self.domain.labels)),
            display_name=self.display_name,
        )
