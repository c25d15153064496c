"""Compiled grammars for host name labels and IP address literals.

All patterns are built once at import time and only ever read afterwards.
They are meant to be used with ``fullmatch``.
"""

import re

# Label: starts and ends with a letter or digit, hyphens only inside.
LABEL_PATTERN = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])?")

# TLD: starts and ends with a letter, hyphens only inside.
TLD_PATTERN = re.compile(r"[a-zA-Z](?:[a-zA-Z0-9\-]*[a-zA-Z])?")

_DEC_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_IPV4 = rf"{_DEC_OCTET}(?:\.{_DEC_OCTET}){{3}}"
_H16 = r"[0-9a-fA-F]{1,4}"
_LS32 = rf"(?:{_H16}:{_H16}|{_IPV4})"

IPV4_PATTERN = re.compile(_IPV4)

# RFC 4291 text form, at most one "::" (RFC 3986 IPv6address).
IPV6_PATTERN = re.compile(
    "|".join(
        [
            rf"(?:{_H16}:){{6}}{_LS32}",
            rf"::(?:{_H16}:){{5}}{_LS32}",
            rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,3}}{_H16})?::{_H16}:{_LS32}",
            rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
            rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
            rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
        ]
    )
)

# Internationalized variant: any Unicode letter or digit where the ASCII
# grammar allows one. Used for RFC 6531 domains (U-labels), no normalization.
# The re module has no letters-only class, so the TLD rule for U-labels is
# checked with str.isalpha() in Label.
_U_ALNUM = r"[^\W_]"
UNICODE_LABEL_PATTERN = re.compile(rf"{_U_ALNUM}(?:(?:{_U_ALNUM}|-)*{_U_ALNUM})?")
