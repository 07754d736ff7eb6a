"""Validation issues and the error that carries them.

An ``Issue`` is one atomic failure: what went wrong (``kind``), where
(``path``, a tuple of field names and array indices as strings), and what
was ``expected`` versus what was ``actual``ly found. A ``ValidationError``
is the ordered aggregate of every issue found by one parse call.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum

from wren.errors import WrenError


class IssueKind(Enum):
    """Machine-readable category of a validation issue."""

    INVALID_TYPE = "invalidType"
    TOO_SHORT = "tooShort"
    TOO_LONG = "tooLong"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class Issue:
    """A single validation failure at a structural location."""

    kind: IssueKind
    path: tuple[str, ...]
    expected: str
    actual: str

    def with_prefix(self, segment: str) -> Issue:
        """Return a copy of this issue with *segment* prepended to its path."""
        return Issue(self.kind, (segment, *self.path), self.expected, self.actual)

    @property
    def location(self) -> str:
        """Dotted path, or ``<root>`` for the top-level value."""
        return ".".join(self.path) or "<root>"

    @property
    def message(self) -> str:
        match self.kind:
            case IssueKind.INVALID_TYPE:
                return f"expected {self.expected}, got {self.actual}"
            case IssueKind.TOO_SHORT:
                return f"expected length >= {self.expected}, got {self.actual}"
            case IssueKind.TOO_LONG:
                return f"expected length <= {self.expected}, got {self.actual}"
            case IssueKind.MISSING:
                return "required property is missing"


class ValidationError(WrenError):
    """Untrusted input failed validation.

    Carries every issue found in one pass. Recoverable: the calling layer
    catches it and turns ``format()`` into a client-facing 400 response.
    """

    def __init__(self, issues: Iterable[Issue]) -> None:
        self.issues: tuple[Issue, ...] = tuple(issues)
        super().__init__(self.format())

    def with_prefix(self, segment: str) -> tuple[Issue, ...]:
        """Return this error's issues with *segment* prepended to each path.

        The error itself is left untouched. Composite schemas use this to
        attribute a child's failure to its index or field in the parent.
        """
        return tuple(issue.with_prefix(segment) for issue in self.issues)

    def format(self) -> str:
        """Render the issues as a deterministic one-line message."""
        return "; ".join(f"{issue.location}: {issue.message}" for issue in self.issues)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"ValidationError({list(self.issues)!r})"


def type_tag(obj: object) -> str:
    """Name the JSON-ish type of *obj* for ``Issue.actual``."""
    match obj:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list() | tuple():
            return "array"
        case Mapping():
            return "object"
        case date():
            return "date"
    return type(obj).__name__
