"""Tests for the local-part value objects."""

from dataclasses import replace

import pytest

from web_identifiers.domain.exceptions import (
    ConsecutiveDotsError,
    EmailAddressValidationError,
    InvalidDotAtomError,
    InvalidQuotedStringError,
    InvalidUTF8AtomError,
    LeadingOrTrailingDotError,
    LocalPartTooLongError,
)
from web_identifiers.domain.grammars import (
    RFC6531_GRAMMAR,
    RFC6531_STRICT_GRAMMAR,
    LocalPartForm,
    LocalPartGrammar,
)
from web_identifiers.domain.value_objects import (
    LocalPart,
    RFC5321LocalPart,
    RFC5322LocalPart,
    RFC6531LocalPart,
)


class TestRFC5321LocalPart:
    """Test cases for the basic SMTP local-part."""

    def test_dot_atoms(self) -> None:
        """Test accepted dot-atoms, including the SMTP-only symbols."""
        for value in ["user", "first.last", "user+tag", "a!b", "a|b", "x_y-z", "{id}"]:
            local_part = RFC5321LocalPart(value)
            assert local_part.value == value
            assert local_part.form is LocalPartForm.DOT_ATOM
            assert local_part.is_dot_atom
            assert str(local_part) == value

    def test_dot_placement_is_not_enforced(self) -> None:
        """Test that dots may repeat or sit at either end."""
        for value in ["a..b", ".a", "a."]:
            assert RFC5321LocalPart(value).value == value

    def test_dots_only_is_rejected(self) -> None:
        """Test that at least one atom character is required."""
        for value in ["", ".", "..."]:
            with pytest.raises(InvalidDotAtomError):
                RFC5321LocalPart(value)

    def test_invalid_characters(self) -> None:
        """Test characters outside the atom set."""
        for value in ["a b", "a@b", "a(b)", "a,b", "jösé"]:
            with pytest.raises(InvalidDotAtomError) as exc_info:
                RFC5321LocalPart(value)
            assert exc_info.value.local_part == value

    def test_quoted_strings(self) -> None:
        """Test quoted local-parts keep their quotes."""
        for value in ['"john doe"', '"a@b"', '"a\\"b"', '"a\\\\b"', '"..."']:
            local_part = RFC5321LocalPart(value)
            assert local_part.value == value
            assert local_part.is_quoted

    def test_invalid_quoted_strings(self) -> None:
        """Test malformed quoted local-parts."""
        for value in ['""', '"a"b"', '"a\\"', '"a\\xb"', '"a\\b"']:
            with pytest.raises(InvalidQuotedStringError):
                RFC5321LocalPart(value)

    def test_length_boundary(self) -> None:
        """Test the 64 character limit."""
        assert RFC5321LocalPart("a" * 64).value == "a" * 64

        with pytest.raises(LocalPartTooLongError) as exc_info:
            RFC5321LocalPart("a" * 65)
        assert exc_info.value.length == 65
        assert exc_info.value.limit == 64
        assert exc_info.value.unit == "characters"


class TestRFC5322LocalPart:
    """Test cases for the message format local-part."""

    def test_dot_atoms(self) -> None:
        """Test accepted dot-atoms."""
        for value in ["user", "first.last", "user+tag", "a/b", "x=y"]:
            assert RFC5322LocalPart(value).is_dot_atom

    def test_smtp_only_symbols_are_rejected(self) -> None:
        """Test that ``!`` and ``|`` are not atom characters here."""
        for value in ["a!b", "a|b"]:
            with pytest.raises(InvalidDotAtomError):
                RFC5322LocalPart(value)

    def test_consecutive_dots(self) -> None:
        """Test ``..`` is rejected."""
        with pytest.raises(ConsecutiveDotsError):
            RFC5322LocalPart("a..b")

    def test_leading_or_trailing_dot(self) -> None:
        """Test dots at either end."""
        for value in [".a", "a."]:
            with pytest.raises(LeadingOrTrailingDotError):
                RFC5322LocalPart(value)

    def test_consecutive_dots_checked_before_ends(self) -> None:
        """Test the order of the dot checks."""
        with pytest.raises(ConsecutiveDotsError):
            RFC5322LocalPart("..a")

    def test_character_check_before_dot_check(self) -> None:
        """Test that disallowed characters are reported first."""
        with pytest.raises(InvalidDotAtomError):
            RFC5322LocalPart("a..b c")

    def test_quoted_strings(self) -> None:
        """Test quoted local-parts, where dots are free."""
        for value in ['"john..doe"', '".a"', '"a b"']:
            assert RFC5322LocalPart(value).is_quoted

    def test_line_breaks_in_quoted_string(self) -> None:
        """Test CR and LF are rejected inside quotes."""
        for value in ['"a\nb"', '"a\rb"']:
            with pytest.raises(InvalidQuotedStringError):
                RFC5322LocalPart(value)


class TestRFC6531LocalPart:
    """Test cases for the internationalized local-part."""

    def test_unicode_atoms(self) -> None:
        """Test Unicode letters and digits."""
        for value in ["josé", "用户", "δοκιμή", "Pelé.99", "a!b"]:
            local_part = RFC6531LocalPart(value)
            assert local_part.value == value
            assert local_part.is_dot_atom

    def test_invalid_atom_is_reported(self) -> None:
        """Test that the offending atom is reported."""
        with pytest.raises(InvalidUTF8AtomError) as exc_info:
            RFC6531LocalPart("ok.a b")
        assert exc_info.value.atom == "a b"

        with pytest.raises(InvalidUTF8AtomError):
            RFC6531LocalPart("star★")

    def test_dot_placement(self) -> None:
        """Test the same dot rules as RFC 5322."""
        with pytest.raises(ConsecutiveDotsError):
            RFC6531LocalPart("jo..sé")
        with pytest.raises(LeadingOrTrailingDotError):
            RFC6531LocalPart(".josé")

    def test_length_counts_utf8_bytes(self) -> None:
        """Test the 64 byte limit."""
        at_limit = RFC6531LocalPart("é" * 32)
        assert at_limit.byte_length == 64

        with pytest.raises(LocalPartTooLongError) as exc_info:
            RFC6531LocalPart("é" * 64)
        assert exc_info.value.length == 128
        assert exc_info.value.unit == "utf8_bytes"
        assert "128" in str(exc_info.value)

    def test_quoted_strings(self) -> None:
        """Test quoted local-parts with Unicode text."""
        for value in ['"josé silva"', '"用户 名"']:
            assert RFC6531LocalPart(value).is_quoted

    def test_permissive_quoted_text(self) -> None:
        """Test that the default grammar accepts other code points in quotes."""
        assert RFC6531LocalPart('"a\u0001b"').is_quoted

        with pytest.raises(InvalidQuotedStringError):
            RFC6531LocalPart('"a\nb"')

    def test_strict_quoted_text(self) -> None:
        """Test the printable-only grammar."""
        assert RFC6531LocalPart('"héllo wörld ★"', RFC6531_STRICT_GRAMMAR).is_quoted

        with pytest.raises(InvalidQuotedStringError):
            RFC6531LocalPart('"a\u0001b"', RFC6531_STRICT_GRAMMAR)


class TestLocalPart:
    """Test cases shared by all local-part profiles."""

    def test_profiles_are_distinct_types(self) -> None:
        """Test that equal text in different profiles is not equal."""
        assert RFC5321LocalPart("user") != RFC5322LocalPart("user")
        assert RFC5322LocalPart("user") == RFC5322LocalPart("user")

    def test_base_class_has_no_grammar(self) -> None:
        """Test that the abstract local-part cannot be built."""
        with pytest.raises(TypeError):
            LocalPart("user")

    def test_grammar_is_defined_by_its_rules(self) -> None:
        """Test grammars built and compared from character tables and limits."""
        grammar = LocalPartGrammar(atom_characters=frozenset("abc"), max_length=3)

        assert RFC5321LocalPart("a.c", grammar).value == "a.c"
        with pytest.raises(InvalidDotAtomError):
            RFC5321LocalPart("abd", grammar)
        with pytest.raises(LocalPartTooLongError):
            RFC5321LocalPart("abca", grammar)

        assert replace(RFC6531_STRICT_GRAMMAR, printable_quoted_only=False) == RFC6531_GRAMMAR

    def test_errors_share_base_class(self) -> None:
        """Test that all local-part errors are EmailAddressValidationError."""
        for local_part_type, value in [
            (RFC5321LocalPart, "a b"),
            (RFC5322LocalPart, "a..b"),
            (RFC6531LocalPart, "a b"),
            (RFC5321LocalPart, '"a"b"'),
        ]:
            with pytest.raises(EmailAddressValidationError):
                local_part_type(value)

    def test_immutability(self) -> None:
        """Test that local-parts are immutable."""
        local_part = RFC5321LocalPart("user")

        with pytest.raises(AttributeError):
            local_part.value = "other"  # type: ignore
