"""Legacy combined email address value object.

Predates the per-profile types: one permissive grammar, parts kept as plain
strings. New code should prefer the RFC 5321/5322/6531 types.
"""

import re
from dataclasses import dataclass

from ..exceptions import InvalidDomainError, InvalidEmailFormatError, InvalidLocalPartError
from ..grammars import normalize_display_name, unquote_display_name
from .scalar import ScalarIdentifier

MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_LENGTH = 255

_ATOM = r"[a-zA-Z0-9!#$%&'*+\-/=?^_`{|}~]+"
_DOT_ATOM = rf"{_ATOM}(?:\.{_ATOM})*"
_QUOTED_TEXT = r'(?:[^"\\@]|\\["\\])+'
_LOCAL_PART = rf'(?:{_DOT_ATOM}|"{_QUOTED_TEXT}")'
_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])?"
_DOMAIN = rf"{_LABEL}(?:\.{_LABEL})+"

DOT_ATOM_PATTERN = re.compile(_DOT_ATOM)
QUOTED_LOCAL_PART_PATTERN = re.compile(_QUOTED_TEXT)
DOMAIN_PATTERN = re.compile(_DOMAIN)

NAME_ADDR_PATTERN = re.compile(
    r'(?:(?:(?P<quoted>"(?:[^"\\]|\\["\\])+")|(?P<plain>[^<]+))?\s*)?'
    rf"<(?P<local_part>{_LOCAL_PART})@(?P<domain>{_DOMAIN})>"
)
ADDR_SPEC_PATTERN = re.compile(rf"(?P<local_part>{_LOCAL_PART})@(?P<domain>{_DOMAIN})")


@dataclass(frozen=True)
class EmailAddress(ScalarIdentifier):
    """Email address with plain string parts.

    Attributes:
        local_part: Text before ``@``
        domain: Text after ``@``; at least two labels
        name: Optional display name
    """

    local_part: str
    domain: str
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate the local part and the domain."""
        if not _is_valid_local_part(self.local_part):
            raise InvalidLocalPartError(self.local_part)
        if not _is_valid_domain(self.domain):
            raise InvalidDomainError(self.domain)
        object.__setattr__(self, "name", normalize_display_name(self.name))

    @classmethod
    def parse(cls, text: str) -> "EmailAddress":
        """Parse ``Name <local@domain>`` or ``local@domain``.

        Raises:
            InvalidEmailFormatError: If the text matches neither form
        """
        match = NAME_ADDR_PATTERN.fullmatch(text)
        if match:
            quoted = match.group("quoted")
            name = unquote_display_name(quoted) if quoted else match.group("plain")
            return cls(
                local_part=match.group("local_part"),
                domain=match.group("domain"),
                name=name,
            )

        match = ADDR_SPEC_PATTERN.fullmatch(text)
        if match:
            return cls(local_part=match.group("local_part"), domain=match.group("domain"))

        raise InvalidEmailFormatError(text)

    @classmethod
    def unnamed(cls, address: str) -> "EmailAddress":
        return cls.parse(address)

    @classmethod
    def named(cls, name: str, address: str) -> "EmailAddress":
        """Create an address with a display name from a bare ``local@domain``."""
        unnamed = cls.parse(address)
        return cls(local_part=unnamed.local_part, domain=unnamed.domain, name=name)

    @property
    def address(self) -> str:
        return f"{self.local_part}@{self.domain}"

    def __str__(self) -> str:
        if self.name is None:
            return self.address
        if any(not char.isalnum() and char != " " for char in self.name):
            escaped = self.name.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}" <{self.address}>'
        return f"{self.name} <{self.address}>"


def _is_valid_local_part(local_part: str) -> bool:
    if not local_part or len(local_part) > MAX_LOCAL_PART_LENGTH:
        return False
    if len(local_part) >= 2 and local_part.startswith('"') and local_part.endswith('"'):
        return QUOTED_LOCAL_PART_PATTERN.fullmatch(local_part[1:-1]) is not None
    return DOT_ATOM_PATTERN.fullmatch(local_part) is not None


def _is_valid_domain(domain: str) -> bool:
    if not domain or len(domain) > MAX_DOMAIN_LENGTH:
        return False
    return DOMAIN_PATTERN.fullmatch(domain) is not None
