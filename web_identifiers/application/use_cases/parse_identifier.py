"""Identifier parsing use case."""

from enum import Enum

from pydantic import BaseModel, Field

from ...domain.services import EmailProfile
from ...domain.value_objects import (
    DomainOrLiteral,
    EmailAddress,
    EmailAddressProfile,
    EmailAddressRFC6531,
    Hostname,
)
from ...infrastructure.config.settings import Settings

Identifier = Hostname | DomainOrLiteral | EmailAddressProfile | EmailAddress


class IdentifierKind(str, Enum):
    """Identifier types that can be parsed."""

    HOSTNAME = "hostname"
    DOMAIN = "domain"
    EMAIL = "email"
    EMAIL_RFC5321 = "email_rfc5321"
    EMAIL_RFC5322 = "email_rfc5322"
    EMAIL_RFC6531 = "email_rfc6531"

    @property
    def email_profile(self) -> EmailProfile | None:
        return _EMAIL_PROFILES.get(self)


_EMAIL_PROFILES = {
    IdentifierKind.EMAIL_RFC5321: EmailProfile.RFC5321,
    IdentifierKind.EMAIL_RFC5322: EmailProfile.RFC5322,
    IdentifierKind.EMAIL_RFC6531: EmailProfile.RFC6531,
}


class ParseIdentifierInput(BaseModel):
    """Input DTO for identifier parsing.

    Attributes:
        kind: Which grammar to parse with
        text: Raw identifier text
    """

    kind: IdentifierKind = Field(..., description="Identifier grammar")
    text: str = Field(..., description="Raw identifier text")


class ParseIdentifierOutput(BaseModel):
    """Output DTO describing a parsed identifier.

    Attributes:
        kind: The grammar used
        canonical: Canonical string form
        display_name: Display name of an email address
        local_part: Local-part of an email address
        local_part_form: ``dot_atom`` or ``quoted``
        domain: Domain of an email address, or the domain itself
        domain_kind: ``standard``, ``ipv4_literal`` or ``ipv6_literal``
        labels: Host name labels, left to right
        is_ascii: Whether the canonical form is pure ASCII
    """

    kind: IdentifierKind = Field(..., description="Identifier grammar")
    canonical: str = Field(..., description="Canonical string form")
    display_name: str | None = Field(None, description="Display name")
    local_part: str | None = Field(None, description="Local-part")
    local_part_form: str | None = Field(None, description="Local-part form")
    domain: str | None = Field(None, description="Domain")
    domain_kind: str | None = Field(None, description="Domain variant")
    labels: list[str] = Field(default_factory=list, description="Host name labels")
    is_ascii: bool = Field(..., description="Whether the canonical form is ASCII")

    @classmethod
    def from_domain(cls, kind: IdentifierKind, value: Identifier) -> "ParseIdentifierOutput":
        """Build the output DTO from a parsed value object.

        Args:
            kind: The grammar used
            value: The parsed identifier

        Returns:
            Output DTO
        """
        canonical = str(value)
        fields: dict = {
            "kind": kind,
            "canonical": canonical,
            "is_ascii": canonical.isascii(),
        }

        if isinstance(value, EmailAddressProfile):
            fields["display_name"] = value.display_name
            fields["local_part"] = value.local_part.value
            fields["local_part_form"] = value.local_part.form.value
            domain = value.domain
        elif isinstance(value, EmailAddress):
            fields["display_name"] = value.name
            fields["local_part"] = value.local_part
            fields["domain"] = value.domain
            fields["labels"] = value.domain.split(".")
            return cls(**fields)
        else:
            domain = value

        fields["domain"] = str(domain)
        if isinstance(domain, DomainOrLiteral):
            fields["domain_kind"] = domain.kind.value
            domain = domain.hostname
        if isinstance(domain, Hostname):
            fields["labels"] = [label.value for label in domain.labels]
        return cls(**fields)


class ParseIdentifierUseCase:
    """Parse raw text into one of the identifier value objects."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the use case.

        Args:
            settings: Settings selecting grammar strictness
        """
        self._settings = settings

    def parse(self, kind: IdentifierKind, text: str) -> Identifier:
        """Parse ``text`` with the grammar for ``kind``.

        Raises:
            IdentifierValidationError: If the text is invalid
        """
        if kind is IdentifierKind.HOSTNAME:
            return Hostname.parse(text)
        if kind is IdentifierKind.DOMAIN:
            return DomainOrLiteral.parse(text)
        if kind is IdentifierKind.EMAIL:
            return EmailAddress.parse(text)

        profile = kind.email_profile
        if profile is None:
            raise AssertionError(f"Unhandled identifier kind: {kind}")
        return self.parse_email_address(profile, text)

    def parse_email_address(self, profile: EmailProfile, text: str) -> EmailAddressProfile:
        """Parse ``text`` as an address of ``profile``."""
        address_type = profile.address_type
        if address_type is EmailAddressRFC6531:
            return address_type.parse(text, self._settings.rfc6531_grammar)
        return address_type.parse(text)

    def execute(self, input_dto: ParseIdentifierInput) -> ParseIdentifierOutput:
        """Parse the identifier and describe it.

        Args:
            input_dto: Input DTO

        Returns:
            Output DTO

        Raises:
            IdentifierValidationError: If the text is invalid
        """
        value = self.parse(input_dto.kind, input_dto.text)
        return ParseIdentifierOutput.from_domain(input_dto.kind, value)
