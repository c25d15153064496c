"""Tests for Hostname value object."""

import pytest
from pydantic import BaseModel

from web_identifiers.domain.exceptions import (
    EmptyHostnameError,
    HostnameTooLongError,
    HostnameValidationError,
    InvalidLabelError,
    InvalidTLDError,
    TooManyLabelsError,
)
from web_identifiers.domain.value_objects import (
    Hostname,
    InternationalizedHostname,
    Label,
)


class TestHostname:
    """Test cases for Hostname value object."""

    def test_parse_valid_hostnames(self) -> None:
        """Test parsing valid host names."""
        for text in [
            "example.com",
            "www.example.com",
            "mail-01.example.co.uk",
            "123.example.com",
            "localhost",
            "x.y-z",
        ]:
            hostname = Hostname.parse(text)
            assert hostname.name == text
            assert str(hostname) == text

    def test_labels_are_left_to_right(self) -> None:
        """Test label order."""
        hostname = Hostname.parse("mail.example.com")
        assert hostname.labels == (Label("mail"), Label("example"), Label("com"))

    def test_construct_from_string(self) -> None:
        """Test passing the dotted form to the constructor."""
        assert Hostname("example.com") == Hostname.parse("example.com")

    def test_empty_pieces_are_dropped(self) -> None:
        """Test that empty pieces between dots are ignored."""
        assert Hostname.parse("example..com").name == "example.com"
        assert Hostname.parse(".example.com.").name == "example.com"

    def test_empty_hostname(self) -> None:
        """Test empty input."""
        for text in ["", ".", "..."]:
            with pytest.raises(EmptyHostnameError):
                Hostname.parse(text)

    def test_invalid_labels(self) -> None:
        """Test labels rejected with the offending label."""
        cases = {
            "-example.com": "-example",
            "example-.com": "example-",
            "exa_mple.com": "exa_mple",
            "a" * 64 + ".com": "a" * 64,
        }
        for text, label in cases.items():
            with pytest.raises(InvalidLabelError) as exc_info:
                Hostname.parse(text)
            assert exc_info.value.label == label

    def test_invalid_tld(self) -> None:
        """Test top-level label strictness."""
        for text, tld in [("example.123", "123"), ("example.1com", "1com"), ("example.com-", "com-")]:
            with pytest.raises(InvalidTLDError) as exc_info:
                Hostname.parse(text)
            assert exc_info.value.tld == tld

    def test_label_length_boundary(self) -> None:
        """Test a 63 character label."""
        hostname = Hostname.parse("a" * 63 + ".com")
        assert len(hostname.labels[0].value) == 63

    def test_total_length_boundary(self) -> None:
        """Test the 255 character limit."""
        at_limit = ".".join(["a" * 63] * 4)
        assert len(at_limit) == 255
        assert Hostname.parse(at_limit).name == at_limit

        over_limit = ".".join(["a" * 63] * 3 + ["a" * 62, "a"])
        assert len(over_limit) == 256
        with pytest.raises(HostnameTooLongError) as exc_info:
            Hostname.parse(over_limit)
        assert exc_info.value.length == 256

    def test_label_count_boundary(self) -> None:
        """Test the 127 label limit."""
        assert len(Hostname.parse(".".join(["a"] * 127)).labels) == 127

        with pytest.raises(TooManyLabelsError):
            Hostname.parse(".".join(["a"] * 128))

    def test_label_count_checked_before_labels(self) -> None:
        """Test that the label count is checked first."""
        with pytest.raises(TooManyLabelsError):
            Hostname.parse(".".join(["-"] * 128))

    def test_errors_share_base_class(self) -> None:
        """Test that all host name errors are HostnameValidationError."""
        for text in ["", "-a.com", "a.123"]:
            with pytest.raises(HostnameValidationError):
                Hostname.parse(text)

    def test_try_parse(self) -> None:
        """Test parsing without raising."""
        assert Hostname.try_parse("example.com") == Hostname.parse("example.com")
        assert Hostname.try_parse("-bad.com") is None

    def test_tld_and_sld(self) -> None:
        """Test accessors for the rightmost labels."""
        hostname = Hostname.parse("www.example.com")
        assert hostname.tld == Label("com")
        assert hostname.sld == Label("example")

        single = Hostname.parse("localhost")
        assert single.tld == Label("localhost")
        assert single.sld is None

    def test_convenience_constructors(self) -> None:
        """Test from_root, subdomain and from_labels."""
        assert Hostname.from_root("example", "com").name == "example.com"
        assert Hostname.subdomain("com", "example", "www").name == "www.example.com"
        assert Hostname.from_labels(["www", "example", "com"]).name == "www.example.com"

    def test_is_subdomain_of(self) -> None:
        """Test the strict subdomain relation."""
        parent = Hostname.parse("example.com")

        assert Hostname.parse("www.example.com").is_subdomain_of(parent)
        assert Hostname.parse("a.b.example.com").is_subdomain_of(parent)
        assert not Hostname.parse("example.com").is_subdomain_of(parent)
        assert not Hostname.parse("notexample.com").is_subdomain_of(parent)
        assert not parent.is_subdomain_of(Hostname.parse("www.example.com"))

    def test_adding_subdomain(self) -> None:
        """Test prepending labels."""
        parent = Hostname.parse("example.com")
        child = parent.adding_subdomain("www")

        assert child.name == "www.example.com"
        assert child.is_subdomain_of(parent)
        assert child.parent() == parent
        assert parent.adding_subdomain("a", "b").name == "a.b.example.com"

    def test_adding_invalid_subdomain(self) -> None:
        """Test that prepended labels are validated."""
        with pytest.raises(InvalidLabelError):
            Hostname.parse("example.com").adding_subdomain("-bad")

    def test_parent(self) -> None:
        """Test removing the leftmost label."""
        assert Hostname.parse("a.b.example.com").parent() == Hostname.parse("b.example.com")
        assert Hostname.parse("example.com").parent() == Hostname.parse("com")
        assert Hostname.parse("com").parent() is None

    def test_root(self) -> None:
        """Test keeping the rightmost two labels."""
        assert Hostname.parse("a.b.example.com").root() == Hostname.parse("example.com")
        assert Hostname.parse("example.com").root() == Hostname.parse("example.com")
        assert Hostname.parse("com").root() is None

    def test_equality_is_case_sensitive(self) -> None:
        """Test equality by label sequence."""
        assert Hostname.parse("example.com") == Hostname.parse("example.com")
        assert Hostname.parse("Example.com") != Hostname.parse("example.com")
        assert len({Hostname.parse("example.com"), Hostname.parse("example.com")}) == 1

    def test_immutability(self) -> None:
        """Test that Hostname is immutable."""
        hostname = Hostname.parse("example.com")

        with pytest.raises(AttributeError):
            hostname.labels = ()  # type: ignore

    def test_pydantic_field(self) -> None:
        """Test use as a pydantic field."""

        class Server(BaseModel):
            host: Hostname

        server = Server(host="mail.example.com")  # type: ignore[arg-type]
        assert server.host == Hostname.parse("mail.example.com")
        assert server.model_dump() == {"host": "mail.example.com"}
        assert server.model_dump_json() == '{"host":"mail.example.com"}'
        assert Server.model_validate_json('{"host":"mail.example.com"}') == server

    def test_pydantic_field_rejects_invalid(self) -> None:
        """Test that pydantic reports invalid host names."""

        class Server(BaseModel):
            host: Hostname

        with pytest.raises(ValueError):
            Server(host="-bad.com")  # type: ignore[arg-type]


class TestInternationalizedHostname:
    """Test cases for InternationalizedHostname value object."""

    def test_parse_unicode_labels(self) -> None:
        """Test U-labels."""
        hostname = InternationalizedHostname.parse("mail.exämple.com")
        assert hostname.name == "mail.exämple.com"
        assert isinstance(hostname, Hostname)

    def test_same_structure_rules(self) -> None:
        """Test that hyphen and TLD rules still apply."""
        with pytest.raises(InvalidLabelError):
            InternationalizedHostname.parse("-exämple.com")
        with pytest.raises(InvalidTLDError):
            InternationalizedHostname.parse("exämple.123")
        for text in ["example.²", "example.½", "example.Ⅻ"]:
            with pytest.raises(InvalidTLDError):
                InternationalizedHostname.parse(text)

    def test_derived_values_keep_type(self) -> None:
        """Test that parent and root stay internationalized."""
        hostname = InternationalizedHostname.parse("a.exämple.com")
        assert type(hostname.parent()) is InternationalizedHostname
        assert type(hostname.root()) is InternationalizedHostname
        assert hostname.is_subdomain_of(Hostname.parse("com"))

    def test_ascii_hostname_rejects_unicode(self) -> None:
        """Test that the plain host name stays ASCII only."""
        with pytest.raises(InvalidLabelError):
            Hostname.parse("exämple.com")
