"""RFC 1123 host name value object."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from ..exceptions import EmptyHostnameError, HostnameTooLongError, TooManyLabelsError
from ..exceptions.hostname_exceptions import MAX_HOSTNAME_LABELS, MAX_HOSTNAME_LENGTH
from .label import Label, LabelKind
from .scalar import ScalarIdentifier


@dataclass(frozen=True)
class Hostname(ScalarIdentifier):
    """Value object representing an RFC 1123 host name.

    Labels are stored leftmost (least significant) first. Every instance is
    validated from scratch on construction, including the ones produced by
    ``parent``, ``root`` and ``adding_subdomain``.

    Attributes:
        labels: The validated labels; the last one is the TLD
    """

    labels: tuple[Label, ...]

    UNICODE_LABELS: ClassVar[bool] = False

    def __post_init__(self) -> None:
        """Validate labels and total length.

        Checks run in order: emptiness, label count, each label left to
        right (the last one as a TLD), total length.
        """
        if isinstance(self.labels, str):
            raw = _split(self.labels)
        else:
            raw = [str(label) for label in self.labels]

        if not raw:
            raise EmptyHostnameError()
        if len(raw) > MAX_HOSTNAME_LABELS:
            raise TooManyLabelsError(len(raw))

        unicode = self.UNICODE_LABELS
        validated = tuple(
            Label(value, LabelKind.INTERIOR, unicode) for value in raw[:-1]
        )
        validated += (Label(raw[-1], LabelKind.TOP_LEVEL, unicode),)
        object.__setattr__(self, "labels", validated)

        length = len(self.name)
        if length > MAX_HOSTNAME_LENGTH:
            raise HostnameTooLongError(length)

    @classmethod
    def parse(cls, text: str) -> "Hostname":
        """Create a host name from its dotted form, e.g. ``"mail.example.com"``.

        Empty pieces between dots are dropped.
        """
        return cls(labels=tuple(_split(text)))

    @classmethod
    def from_labels(cls, labels: Iterable[str | Label]) -> "Hostname":
        """Create a host name from labels in textual (left to right) order."""
        return cls(labels=tuple(labels))

    @classmethod
    def from_root(cls, sld: str, tld: str) -> "Hostname":
        """Create a two-label host name such as ``example.com``."""
        return cls(labels=(sld, tld))

    @classmethod
    def subdomain(cls, *components: str) -> "Hostname":
        """Create a host name from components, most significant first.

        ``Hostname.subdomain("com", "example", "www")`` is ``www.example.com``.
        """
        return cls(labels=tuple(reversed(components)))

    @property
    def name(self) -> str:
        """The host name as a dotted string."""
        return ".".join(label.value for label in self.labels)

    @property
    def tld(self) -> Label:
        """The top-level (rightmost) label."""
        return self.labels[-1]

    @property
    def sld(self) -> Label | None:
        """The second-level label, if any."""
        if len(self.labels) < 2:
            return None
        return self.labels[-2]

    def is_subdomain_of(self, parent: "Hostname") -> bool:
        """Return True if this host name lies strictly below ``parent``."""
        if len(self.labels) <= len(parent.labels):
            return False
        return self.labels[-len(parent.labels) :] == parent.labels

    def adding_subdomain(self, *components: str | Label) -> "Hostname":
        """Return a new host name with ``components`` prepended."""
        return type(self)(labels=tuple(components) + self.labels)

    def parent(self) -> "Hostname | None":
        """Return the host name without its leftmost label.

        Returns None for a single-label host name.
        """
        if len(self.labels) <= 1:
            return None
        return type(self)(labels=self.labels[1:])

    def root(self) -> "Hostname | None":
        """Return the rightmost two labels, or None if there are fewer."""
        if len(self.labels) < 2:
            return None
        return type(self)(labels=self.labels[-2:])

    def __str__(self) -> str:
        return self.name


def _split(text: str) -> list[str]:
    return [piece for piece in text.split(".") if piece]


@dataclass(frozen=True)
class InternationalizedHostname(Hostname):
    """Host name whose labels may contain Unicode letters and digits (U-labels).

    Structure and limits are the same as ``Hostname``; lengths are counted
    in characters and no normalization or IDNA encoding is applied.
    """

    UNICODE_LABELS: ClassVar[bool] = True
