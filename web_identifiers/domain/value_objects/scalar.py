"""Shared behaviour for identifiers whose canonical form is a single string."""

from typing import Any, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..exceptions import IdentifierValidationError

T = TypeVar("T", bound="ScalarIdentifier")


class ScalarIdentifier:
    """Mixin for value objects that round-trip through their canonical string.

    Subclasses implement ``parse`` and ``__str__``. The mixin adds
    ``try_parse`` and lets the type be used as a pydantic field that is
    validated from a string and serialized back to one.
    """

    @classmethod
    def parse(cls: type[T], text: str) -> T:
        raise NotImplementedError

    @classmethod
    def try_parse(cls: type[T], text: str) -> T | None:
        """Parse ``text``, returning None instead of raising on invalid input."""
        try:
            return cls.parse(text)
        except IdentifierValidationError:
            return None

    @classmethod
    def _string_schema(cls) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_string = cls._string_schema()
        return core_schema.json_or_python_schema(
            json_schema=from_string,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_string]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )
