"""RFC 5322 (Internet Message Format) email address."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic_core import core_schema

from ..exceptions import MissingAtSignError
from .domain_or_literal import DomainOrLiteral
from .email_address_profile import EmailAddressProfile
from .email_address_record import EmailAddressRecord
from .email_address_rfc5321 import EmailAddressRFC5321
from .hostname import Hostname
from .local_part import RFC5321LocalPart, RFC5322LocalPart


@dataclass(frozen=True)
class EmailAddressRFC5322(EmailAddressProfile):
    """Email address as written in message headers.

    Besides its canonical string this profile can be stored as an
    ``EmailAddressRecord`` (``address`` plus optional ``displayName``).
    """

    PROFILE: ClassVar[str] = "RFC 5322"
    LOCAL_PART_TYPE: ClassVar[type[RFC5322LocalPart]] = RFC5322LocalPart
    DOMAIN_TYPE: ClassVar[type[Hostname]] = Hostname

    local_part: RFC5322LocalPart
    domain: Hostname
    display_name: str | None = None

    @classmethod
    def from_record(
        cls, record: EmailAddressRecord | Mapping[str, Any]
    ) -> "EmailAddressRFC5322":
        """Create an address from its record form.

        The address field is split at its first ``@``; the display name is
        taken verbatim (only trimmed).
        """
        if not isinstance(record, EmailAddressRecord):
            record = EmailAddressRecord.model_validate(record)

        local_part, at_sign, domain = record.address.partition("@")
        if not at_sign:
            raise MissingAtSignError()
        return cls(
            local_part=RFC5322LocalPart(local_part),
            domain=Hostname.parse(domain),
            display_name=record.display_name,
        )

    def to_record(self) -> EmailAddressRecord:
        return EmailAddressRecord(address=self.address_value, display_name=self.display_name)

    def to_rfc5321(self) -> EmailAddressRFC5321:
        """Convert to the basic SMTP profile; only the domain wrapper changes."""
        return EmailAddressRFC5321(
            local_part=RFC5321LocalPart(self.local_part.value),
            domain=DomainOrLiteral.standard(self.domain),
            display_name=self.display_name,
        )

    @classmethod
    def _string_schema(cls) -> core_schema.CoreSchema:
        return core_schema.union_schema(
            [
                core_schema.no_info_after_validator_function(
                    cls.parse, core_schema.str_schema()
                ),
                core_schema.no_info_after_validator_function(
                    cls.from_record, EmailAddressRecord.__pydantic_core_schema__
                ),
            ]
        )
