"""Local-part (text before ``@``) value objects, one per address profile."""

from dataclasses import InitVar, dataclass, field
from typing import ClassVar

from ..grammars import (
    RFC5321_GRAMMAR,
    RFC5322_GRAMMAR,
    RFC6531_GRAMMAR,
    LocalPartForm,
    LocalPartGrammar,
)


@dataclass(frozen=True)
class LocalPart:
    """Validated local-part; concrete profiles set ``GRAMMAR``.

    Quoted local-parts keep their surrounding quotes in ``value``.

    Attributes:
        value: The local-part text exactly as validated
        form: Whether the text is a dot-atom or a quoted string
    """

    GRAMMAR: ClassVar[LocalPartGrammar]

    value: str
    grammar: InitVar[LocalPartGrammar | None] = None
    form: LocalPartForm = field(init=False, compare=False)

    def __post_init__(self, grammar: LocalPartGrammar | None) -> None:
        if grammar is None:
            grammar = getattr(type(self), "GRAMMAR", None)
        if grammar is None:
            raise TypeError(f"{type(self).__name__} has no local-part grammar")
        object.__setattr__(self, "form", grammar.validate(self.value))

    @property
    def is_quoted(self) -> bool:
        return self.form is LocalPartForm.QUOTED

    @property
    def is_dot_atom(self) -> bool:
        return self.form is LocalPartForm.DOT_ATOM

    def __str__(self) -> str:
        if self.form in (LocalPartForm.DOT_ATOM, LocalPartForm.QUOTED):
            return self.value
        raise AssertionError(f"Unhandled local-part form: {self.form}")


@dataclass(frozen=True)
class RFC5321LocalPart(LocalPart):
    """Local-part under the basic SMTP (RFC 5321) rules."""

    GRAMMAR: ClassVar[LocalPartGrammar] = RFC5321_GRAMMAR


@dataclass(frozen=True)
class RFC5322LocalPart(LocalPart):
    """Local-part under the Internet Message Format (RFC 5322) rules."""

    GRAMMAR: ClassVar[LocalPartGrammar] = RFC5322_GRAMMAR


@dataclass(frozen=True)
class RFC6531LocalPart(LocalPart):
    """Internationalized (SMTPUTF8) local-part, limited to 64 UTF-8 bytes."""

    GRAMMAR: ClassVar[LocalPartGrammar] = RFC6531_GRAMMAR

    @property
    def byte_length(self) -> int:
        return len(self.value.encode("utf-8"))
