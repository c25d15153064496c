"""Identifier value objects package."""

from .domain_or_literal import DomainKind, DomainOrLiteral
from .email_address import EmailAddress
from .email_address_profile import EmailAddressProfile
from .email_address_record import EmailAddressRecord
from .email_address_rfc5321 import EmailAddressRFC5321
from .email_address_rfc5322 import EmailAddressRFC5322
from .email_address_rfc6531 import EmailAddressRFC6531
from .hostname import Hostname, InternationalizedHostname
from .label import Label, LabelKind
from .local_part import LocalPart, RFC5321LocalPart, RFC5322LocalPart, RFC6531LocalPart
from .scalar import ScalarIdentifier

__all__ = [
    "ScalarIdentifier",
    # Domain names
    "Label",
    "LabelKind",
    "Hostname",
    "InternationalizedHostname",
    "DomainKind",
    "DomainOrLiteral",
    # Local parts
    "LocalPart",
    "RFC5321LocalPart",
    "RFC5322LocalPart",
    "RFC6531LocalPart",
    # Email addresses
    "EmailAddress",
    "EmailAddressProfile",
    "EmailAddressRecord",
    "EmailAddressRFC5321",
    "EmailAddressRFC5322",
    "EmailAddressRFC6531",
]
