"""Address grammar shared by the email address profiles.

Recognizes ``"Display Name" <local@domain>``, ``Display Name <local@domain>``,
``<local@domain>`` and, as a fallback, bare ``local@domain``.
"""

import re
from dataclasses import dataclass

from ..exceptions import MissingAtSignError

NAME_ADDR_PATTERN = re.compile(
    r'(?:(?P<display_name>"(?:\\["\\]|[^"\\])*"|[^<]+?)\s+)?'
    r"<(?P<local_part>[^@]+)@(?P<domain>[^>]+)>"
)

_ESCAPED_PAIR = re.compile(r'\\(["\\])')


@dataclass(frozen=True)
class AddressParts:
    """Raw, not yet validated pieces of an address."""

    display_name: str | None
    local_part: str
    domain: str


def unquote_display_name(name: str) -> str:
    """Strip one layer of double quotes and reverse backslash escaping."""
    stripped = name.strip()
    if len(stripped) >= 2 and stripped.startswith('"') and stripped.endswith('"'):
        return _ESCAPED_PAIR.sub(r"\1", stripped[1:-1])
    return stripped


def normalize_display_name(name: str | None) -> str | None:
    """Trim surrounding whitespace; an empty name counts as absent."""
    if name is None:
        return None
    trimmed = name.strip()
    return trimmed or None


def split_address(text: str) -> AddressParts:
    """Split ``text`` into display name, local-part and domain.

    Raises:
        MissingAtSignError: If the text is not in angle-bracket form and
            contains no ``@``
    """
    match = NAME_ADDR_PATTERN.fullmatch(text)
    if match:
        display_name = match.group("display_name")
        return AddressParts(
            display_name=unquote_display_name(display_name) if display_name else None,
            local_part=match.group("local_part"),
            domain=match.group("domain"),
        )

    local_part, at_sign, domain = text.partition("@")
    if not at_sign:
        raise MissingAtSignError()
    return AddressParts(display_name=None, local_part=local_part, domain=domain)


def display_name_needs_quoting(name: str, quote_non_ascii: bool = False) -> bool:
    for char in name:
        if not (char.isalnum() or char.isspace()):
            return True
        if quote_non_ascii and not char.isascii():
            return True
    return False


def render_display_name(name: str, quote_non_ascii: bool = False) -> str:
    """Return ``name`` as it appears before ``<``, quoted when necessary."""
    if not display_name_needs_quoting(name, quote_non_ascii):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_address(
    display_name: str | None, address: str, quote_non_ascii: bool = False
) -> str:
    """Render the canonical form, one space between name and ``<``."""
    if display_name is None:
        return address
    return f"{render_display_name(display_name, quote_non_ascii)} <{address}>"
