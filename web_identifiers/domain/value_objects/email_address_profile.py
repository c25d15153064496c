"""Behaviour shared by the three email address profiles."""

from typing import Any, ClassVar, TypeVar

from ..exceptions import InvalidQuotedStringError
from ..grammars import (
    LocalPartGrammar,
    normalize_display_name,
    render_address,
    split_address,
)
from .domain_or_literal import DomainOrLiteral
from .hostname import Hostname
from .local_part import LocalPart
from .scalar import ScalarIdentifier

A = TypeVar("A", bound="EmailAddressProfile")


class EmailAddressProfile(ScalarIdentifier):
    """Parsing and rendering skeleton for an email address profile.

    Concrete profiles are frozen dataclasses with the fields
    ``local_part``, ``domain`` and ``display_name`` and set the class
    variables below.
    """

    PROFILE: ClassVar[str]
    LOCAL_PART_TYPE: ClassVar[type[LocalPart]]
    DOMAIN_TYPE: ClassVar[type[Hostname] | type[DomainOrLiteral]]
    QUOTE_NON_ASCII_NAMES: ClassVar[bool] = False

    local_part: Any
    domain: Any
    display_name: str | None

    def __post_init__(self) -> None:
        """Coerce string parts and normalize the display name.

        Typed parts are taken as they are; a local-part of another profile
        is rejected instead of being silently re-validated.

        A quoted local-part containing ``@`` is valid on its own but is
        rejected here, since the address text splits at the first ``@``.
        """
        if isinstance(self.local_part, str):
            object.__setattr__(self, "local_part", self.LOCAL_PART_TYPE(self.local_part))
        elif type(self.local_part) is not self.LOCAL_PART_TYPE:
            raise TypeError(
                f"{type(self).__name__} expects a {self.LOCAL_PART_TYPE.__name__}, "
                f"got {type(self.local_part).__name__}"
            )

        if "@" in self.local_part.value:
            raise InvalidQuotedStringError(self.local_part.value)

        if isinstance(self.domain, str):
            object.__setattr__(self, "domain", self.DOMAIN_TYPE.parse(self.domain))
        elif type(self.domain) is self.DOMAIN_TYPE:
            pass
        elif isinstance(self.domain, Hostname) and issubclass(
            self.DOMAIN_TYPE, type(self.domain)
        ):
            # Widening, e.g. an ASCII host name as an internationalized one
            object.__setattr__(self, "domain", self.DOMAIN_TYPE(labels=self.domain.labels))
        else:
            raise TypeError(
                f"{type(self).__name__} expects a {self.DOMAIN_TYPE.__name__} domain, "
                f"got {type(self.domain).__name__}"
            )

        object.__setattr__(
            self, "display_name", normalize_display_name(self.display_name)
        )

    @classmethod
    def parse(cls: type[A], text: str, grammar: LocalPartGrammar | None = None) -> A:
        """Parse ``Name <local@domain>``, ``<local@domain>`` or ``local@domain``.

        The local-part is validated before the domain.

        Args:
            text: The address text
            grammar: Optional replacement local-part grammar for this profile

        Raises:
            MissingAtSignError: If no ``@`` separates local-part and domain
            EmailAddressValidationError: If the local-part is invalid
            HostnameValidationError: If the domain is invalid
            AddressLiteralError: If an address literal domain is invalid
        """
        parts = split_address(text)
        local_part = cls.LOCAL_PART_TYPE(parts.local_part, grammar)
        domain = cls.DOMAIN_TYPE.parse(parts.domain)
        return cls(local_part=local_part, domain=domain, display_name=parts.display_name)

    @property
    def address_value(self) -> str:
        """``local@domain`` without the display name."""
        return f"{self.local_part}@{self.domain}"

    @property
    def is_ascii(self) -> bool:
        """True if every byte of the rendered address is below 128."""
        return all(byte < 128 for byte in str(self).encode("utf-8"))

    def __str__(self) -> str:
        return render_address(
            self.display_name, self.address_value, self.QUOTE_NON_ASCII_NAMES
        )
