"""Parse result — immutable container for a validated value or its issues."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from wren.validation.issues import Issue, ValidationError


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """The outcome of checking one value against a schema.

    ``ok`` is True when there are no issues. The result is falsy when
    invalid, so callers branch on the outcome rather than on exceptions::

        result = schema.check(payload)
        if not result:
            return error_response(result.error().format())
        use(result.value)

    ``value`` is only meaningful on success.
    """

    value: T | None = None
    issues: tuple[Issue, ...] = ()

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, issues: Iterable[Issue]) -> ParseResult[Any]:
        issues = tuple(issues)
        if not issues:
            msg = "A failed ParseResult needs at least one issue."
            raise ValueError(msg)
        return cls(issues=issues)

    @property
    def ok(self) -> bool:
        """True if validation passed with no issues."""
        return not self.issues

    def __bool__(self) -> bool:
        """Falsy when invalid, enabling the ``if not result:`` pattern."""
        return self.ok

    def error(self) -> ValidationError:
        """Wrap the issues in a ``ValidationError``.

        Raises ``ValueError`` when called on a successful result.
        """
        if self.ok:
            msg = "A successful ParseResult has no error."
            raise ValueError(msg)
        return ValidationError(self.issues)

    def unwrap(self) -> T:
        """Return the value, or raise ``ValidationError`` with every issue."""
        if not self.ok:
            raise self.error()
        return self.value  # type: ignore[return-value]
