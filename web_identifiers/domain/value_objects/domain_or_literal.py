"""RFC 5321 domain value object: a host name or an IP address literal."""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import EmptyAddressLiteralError, InvalidIPv4Error, InvalidIPv6Error
from ..grammars import IPV4_PATTERN, IPV6_PATTERN
from .hostname import Hostname
from .scalar import ScalarIdentifier


class DomainKind(str, Enum):
    """Variants of an RFC 5321 domain."""

    STANDARD = "standard"
    IPV4_LITERAL = "ipv4_literal"
    IPV6_LITERAL = "ipv6_literal"


@dataclass(frozen=True)
class DomainOrLiteral(ScalarIdentifier):
    """Domain as accepted by the SMTP envelope.

    Exactly one payload is set: ``hostname`` for ``STANDARD``, ``literal``
    (the address without brackets) for the two literal kinds.
    """

    kind: DomainKind
    hostname: Hostname | None = None
    literal: str | None = None

    def __post_init__(self) -> None:
        """Check that the payload matches the kind and validate literals."""
        kind = DomainKind(self.kind)
        object.__setattr__(self, "kind", kind)

        if kind is DomainKind.STANDARD:
            if type(self.hostname) is not Hostname or self.literal is not None:
                raise TypeError("A standard domain carries exactly one Hostname")
            return

        if self.hostname is not None or self.literal is None:
            raise TypeError("An address literal carries exactly one literal string")

        if kind is DomainKind.IPV4_LITERAL:
            if not IPV4_PATTERN.fullmatch(self.literal):
                raise InvalidIPv4Error(self.literal)
        elif kind is DomainKind.IPV6_LITERAL:
            if not IPV6_PATTERN.fullmatch(self.literal):
                raise InvalidIPv6Error(self.literal)
        else:
            raise AssertionError(f"Unhandled domain kind: {kind}")

    @classmethod
    def standard(cls, hostname: Hostname) -> "DomainOrLiteral":
        return cls(kind=DomainKind.STANDARD, hostname=hostname)

    @classmethod
    def ipv4(cls, literal: str) -> "DomainOrLiteral":
        return cls(kind=DomainKind.IPV4_LITERAL, literal=literal)

    @classmethod
    def ipv6(cls, literal: str) -> "DomainOrLiteral":
        return cls(kind=DomainKind.IPV6_LITERAL, literal=literal)

    @classmethod
    def address_literal(cls, literal: str) -> "DomainOrLiteral":
        """Create an address literal from its unbracketed body.

        A body containing ``:`` is treated as IPv6, anything else as IPv4.
        """
        if not literal:
            raise EmptyAddressLiteralError()
        if ":" in literal:
            return cls.ipv6(literal)
        return cls.ipv4(literal)

    @classmethod
    def parse(cls, text: str) -> "DomainOrLiteral":
        """Parse ``[literal]`` as an address literal, anything else as a host name.

        A malformed bracketed body never falls back to host name parsing.
        """
        if text.startswith("[") and text.endswith("]"):
            return cls.address_literal(text[1:-1])
        return cls.standard(Hostname.parse(text))

    @property
    def is_standard(self) -> bool:
        return self.kind is DomainKind.STANDARD

    @property
    def is_address_literal(self) -> bool:
        return self.kind is not DomainKind.STANDARD

    @property
    def standard_hostname(self) -> Hostname | None:
        """The host name, if this is a standard domain."""
        return self.hostname

    @property
    def address_literal_value(self) -> str | None:
        """The IP address without brackets, if this is an address literal."""
        return self.literal

    @property
    def name(self) -> str:
        """The domain string, brackets included for address literals."""
        if self.kind is DomainKind.STANDARD:
            return str(self.hostname)
        return f"[{self.literal}]"

    def __str__(self) -> str:
        return self.name
