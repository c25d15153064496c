"""Host name label value object."""

from dataclasses import InitVar, dataclass
from enum import Enum

from ..exceptions import InvalidLabelError, InvalidTLDError
from ..exceptions.hostname_exceptions import MAX_LABEL_LENGTH
from ..grammars import (
    LABEL_PATTERN,
    TLD_PATTERN,
    UNICODE_LABEL_PATTERN,
)


class LabelKind(str, Enum):
    """Strictness level a label is validated at."""

    INTERIOR = "interior"
    TOP_LEVEL = "top_level"


@dataclass(frozen=True)
class Label:
    """A single validated segment of a host name.

    Interior labels may start with a letter or digit; top-level labels
    (TLDs) must start and end with a letter. The kind only selects the
    validation rule and is not part of the value, so equality is plain
    string equality.

    With ``allow_unicode`` any Unicode letter or digit counts as a letter
    or digit; otherwise only ASCII ones do. A top-level label must still
    start and end with an alphabetic character, so numerics such as ``²``
    or ``Ⅻ`` do not qualify.
    """

    value: str
    kind: InitVar[LabelKind] = LabelKind.INTERIOR
    allow_unicode: InitVar[bool] = False

    def __post_init__(self, kind: LabelKind, allow_unicode: bool) -> None:
        """Validate the label against the grammar for ``kind``."""
        if self.value and len(self.value) <= MAX_LABEL_LENGTH:
            if allow_unicode:
                valid = UNICODE_LABEL_PATTERN.fullmatch(self.value) is not None
                if kind is LabelKind.TOP_LEVEL:
                    valid = valid and self.value[0].isalpha() and self.value[-1].isalpha()
            else:
                pattern = TLD_PATTERN if kind is LabelKind.TOP_LEVEL else LABEL_PATTERN
                valid = pattern.fullmatch(self.value) is not None
            if valid:
                return

        if kind is LabelKind.TOP_LEVEL:
            raise InvalidTLDError(self.value)
        raise InvalidLabelError(self.value)

    def __str__(self) -> str:
        return self.value
