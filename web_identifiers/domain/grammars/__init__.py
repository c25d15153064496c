"""Process-wide, read-only grammar tables and matchers."""

from .address import (
    AddressParts,
    normalize_display_name,
    render_address,
    render_display_name,
    split_address,
    unquote_display_name,
)
from .local_part import (
    RFC5321_GRAMMAR,
    RFC5322_GRAMMAR,
    RFC6531_GRAMMAR,
    RFC6531_STRICT_GRAMMAR,
    LengthUnit,
    LocalPartForm,
    LocalPartGrammar,
)
from .network import (
    IPV4_PATTERN,
    IPV6_PATTERN,
    LABEL_PATTERN,
    TLD_PATTERN,
    UNICODE_LABEL_PATTERN,
)

__all__ = [
    "AddressParts",
    "normalize_display_name",
    "render_address",
    "render_display_name",
    "split_address",
    "unquote_display_name",
    "LengthUnit",
    "LocalPartForm",
    "LocalPartGrammar",
    "RFC5321_GRAMMAR",
    "RFC5322_GRAMMAR",
    "RFC6531_GRAMMAR",
    "RFC6531_STRICT_GRAMMAR",
    "IPV4_PATTERN",
    "IPV6_PATTERN",
    "LABEL_PATTERN",
    "TLD_PATTERN",
    "UNICODE_LABEL_PATTERN",
]
