"""Schema capability and the modifier decorators shared by every schema.

A schema is anything with ``check`` / ``parse`` / ``documentation``.
Concrete schemas are frozen dataclasses mixing in ``SchemaBase``, which
supplies the raising ``parse`` and the chainable modifiers. Modifiers wrap
the receiver in a new schema and never touch it::

    tags = array(string()).max(10).optional().describe("Filter tags")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from wren.validation.result import ParseResult


@runtime_checkable
class Schema[T](Protocol):
    """Validates untrusted input into a ``T`` and describes its shape."""

    def check(self, obj: object) -> ParseResult[T]: ...

    def parse(self, obj: object) -> T: ...

    def documentation(self) -> dict[str, Any]: ...


class SchemaBase[T]:
    """Shared behaviour for the built-in schemas.

    Subclasses implement ``check`` and ``documentation`` from ``Schema``.
    """

    __slots__ = ()

    def parse(self, obj: object) -> T:
        """Return the validated value or raise ``ValidationError``."""
        return self.check(obj).unwrap()  # type: ignore[attr-defined]

    @property
    def required(self) -> bool:
        """Whether a mapping property using this schema must be present."""
        return True

    def optional(self) -> OptionalSchema[T]:
        """Accept ``None`` (or an absent mapping property) as well."""
        return OptionalSchema(self)

    def describe(self, description: str) -> DescribedSchema[T]:
        """Attach a human-readable description to the documentation."""
        return DescribedSchema(self, description)


@dataclass(frozen=True, slots=True)
class OptionalSchema[T](SchemaBase[T | None]):
    """Wraps *inner* so that ``None`` validates to ``None``."""

    inner: Schema[T]

    def check(self, obj: object) -> ParseResult[T | None]:
        if obj is None:
            return ParseResult.success(None)
        return self.inner.check(obj)

    def documentation(self) -> dict[str, Any]:
        return self.inner.documentation()

    @property
    def required(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class DescribedSchema[T](SchemaBase[T]):
    """Wraps *inner* with a ``description`` for the docs generator."""

    inner: Schema[T]
    description: str

    def check(self, obj: object) -> ParseResult[T]:
        return self.inner.check(obj)

    def documentation(self) -> dict[str, Any]:
        return {**self.inner.documentation(), "description": self.description}

    @property
    def required(self) -> bool:
        return is_required(self.inner)


def is_required(schema: Schema[Any]) -> bool:
    """True unless *schema* was made optional.

    Schemas that only implement the ``Schema`` protocol count as required.
    """
    return getattr(schema, "required", True)
