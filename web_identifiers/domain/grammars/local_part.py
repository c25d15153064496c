"""Parametrized local-part grammar shared by the email address profiles.

One scanning algorithm (dot-atom loop plus quoted-string loop) is
instantiated once per profile with that profile's character tables,
dot placement rules and length unit.
"""

import string
import unicodedata
from dataclasses import dataclass
from enum import Enum

from ..exceptions import (
    ConsecutiveDotsError,
    InvalidDotAtomError,
    InvalidQuotedStringError,
    InvalidUTF8AtomError,
    LeadingOrTrailingDotError,
    LocalPartTooLongError,
)

MAX_LOCAL_PART_LENGTH = 64

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
RFC5321_ATOM_SYMBOLS = frozenset("!#$%&'*+-/=?^_`{|}~")
RFC5322_ATOM_SYMBOLS = RFC5321_ATOM_SYMBOLS - {"!", "|"}

_QUOTE = '"'
_BACKSLASH = "\\"
_LINE_BREAKS = frozenset("\r\n")

# Unicode categories accepted by the strict internationalized qtext.
_PRINTABLE_CATEGORY_GROUPS = frozenset("LMNPS")
_PRINTABLE_CATEGORIES = frozenset({"Zs"})


class LengthUnit(str, Enum):
    """Unit a local-part length limit is measured in."""

    CHARACTERS = "characters"
    UTF8_BYTES = "utf8_bytes"


class LocalPartForm(str, Enum):
    """The two syntactic forms of a local-part."""

    DOT_ATOM = "dot_atom"
    QUOTED = "quoted"


@dataclass(frozen=True)
class LocalPartGrammar:
    """Character tables and rules for one local-part profile.

    Attributes:
        atom_characters: ASCII characters allowed in a dot-atom run
        unicode_atoms: Also allow Unicode letters and digits in atoms, and
            report the offending atom on failure
        dot_placement_rules: Reject ``..`` and leading/trailing dots
        quoted_exclusions: Characters never allowed unescaped in quoted text
            (besides the quote and backslash)
        printable_quoted_only: Restrict quoted text to printable Unicode
            (letters, marks, numbers, punctuation, symbols, spaces)
        length_unit: Whether the limit counts characters or UTF-8 bytes
        max_length: Maximum local-part length in ``length_unit``
    """

    atom_characters: frozenset[str]
    unicode_atoms: bool = False
    dot_placement_rules: bool = False
    quoted_exclusions: frozenset[str] = frozenset()
    printable_quoted_only: bool = False
    length_unit: LengthUnit = LengthUnit.CHARACTERS
    max_length: int = MAX_LOCAL_PART_LENGTH

    def measure(self, text: str) -> int:
        """Return the length of ``text`` in this grammar's unit."""
        if self.length_unit is LengthUnit.UTF8_BYTES:
            return len(text.encode("utf-8"))
        return len(text)

    def is_atom_character(self, char: str) -> bool:
        if char in self.atom_characters:
            return True
        return self.unicode_atoms and not char.isascii() and char.isalnum()

    def is_qtext(self, char: str) -> bool:
        if char in (_QUOTE, _BACKSLASH) or char in self.quoted_exclusions:
            return False
        if not self.printable_quoted_only:
            return True
        category = unicodedata.category(char)
        return category[0] in _PRINTABLE_CATEGORY_GROUPS or category in _PRINTABLE_CATEGORIES

    def validate(self, text: str) -> LocalPartForm:
        """Validate ``text`` and return which form it takes.

        Checks run in a fixed order: length, form detection, character
        grammar, then dot placement.

        Raises:
            LocalPartTooLongError: If the text exceeds ``max_length``
            InvalidQuotedStringError: If a quoted local-part is malformed
            InvalidDotAtomError: If a dot-atom has disallowed characters
            InvalidUTF8AtomError: If an internationalized atom is invalid
            ConsecutiveDotsError: If the dot-atom contains ``..``
            LeadingOrTrailingDotError: If the dot-atom starts or ends with a dot
        """
        length = self.measure(text)
        if length > self.max_length:
            raise LocalPartTooLongError(length, self.max_length, self.length_unit.value)

        if len(text) >= 2 and text.startswith(_QUOTE) and text.endswith(_QUOTE):
            self._scan_quoted(text)
            return LocalPartForm.QUOTED

        self._scan_dot_atom(text)
        return LocalPartForm.DOT_ATOM

    def _scan_quoted(self, text: str) -> None:
        interior = text[1:-1]
        if not interior:
            raise InvalidQuotedStringError(text)

        escaped = False
        for char in interior:
            if escaped:
                if char not in (_QUOTE, _BACKSLASH):
                    raise InvalidQuotedStringError(text)
                escaped = False
            elif char == _BACKSLASH:
                escaped = True
            elif not self.is_qtext(char):
                raise InvalidQuotedStringError(text)

        # A trailing lone backslash escapes the closing quote.
        if escaped:
            raise InvalidQuotedStringError(text)

    def _scan_dot_atom(self, text: str) -> None:
        if not text:
            raise InvalidDotAtomError(text)

        for atom in text.split("."):
            if all(self.is_atom_character(char) for char in atom):
                continue
            if self.unicode_atoms:
                raise InvalidUTF8AtomError(atom)
            raise InvalidDotAtomError(text)

        if self.dot_placement_rules:
            if ".." in text:
                raise ConsecutiveDotsError(text)
            if text.startswith(".") or text.endswith("."):
                raise LeadingOrTrailingDotError(text)
        elif not text.strip("."):
            raise InvalidDotAtomError(text)


RFC5321_GRAMMAR = LocalPartGrammar(
    atom_characters=ALPHANUMERIC | RFC5321_ATOM_SYMBOLS,
)

RFC5322_GRAMMAR = LocalPartGrammar(
    atom_characters=ALPHANUMERIC | RFC5322_ATOM_SYMBOLS,
    dot_placement_rules=True,
    quoted_exclusions=_LINE_BREAKS,
)

RFC6531_GRAMMAR = LocalPartGrammar(
    atom_characters=ALPHANUMERIC | RFC5321_ATOM_SYMBOLS,
    unicode_atoms=True,
    dot_placement_rules=True,
    quoted_exclusions=_LINE_BREAKS,
    length_unit=LengthUnit.UTF8_BYTES,
)

RFC6531_STRICT_GRAMMAR = LocalPartGrammar(
    atom_characters=ALPHANUMERIC | RFC5321_ATOM_SYMBOLS,
    unicode_atoms=True,
    dot_placement_rules=True,
    quoted_exclusions=_LINE_BREAKS,
    printable_quoted_only=True,
    length_unit=LengthUnit.UTF8_BYTES,
)
