"""String schema with optional length bounds."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from wren.validation.issues import Issue, IssueKind, type_tag
from wren.validation.result import ParseResult
from wren.validation.schema import SchemaBase


@dataclass(frozen=True, slots=True)
class StringSchema(SchemaBase[str]):
    """Matches strings, optionally bounded in length (inclusive)."""

    min_length: int | None = None
    max_length: int | None = None

    def min(self, length: int) -> StringSchema:
        return replace(self, min_length=length)

    def max(self, length: int) -> StringSchema:
        return replace(self, max_length=length)

    def length(self, length: int) -> StringSchema:
        return replace(self, min_length=length, max_length=length)

    def check(self, obj: object) -> ParseResult[str]:
        if not isinstance(obj, str):
            return ParseResult.failure(
                [Issue(IssueKind.INVALID_TYPE, (), "string", type_tag(obj))]
            )
        if self.min_length is not None and len(obj) < self.min_length:
            return ParseResult.failure(
                [Issue(IssueKind.TOO_SHORT, (), str(self.min_length), str(len(obj)))]
            )
        if self.max_length is not None and len(obj) > self.max_length:
            return ParseResult.failure(
                [Issue(IssueKind.TOO_LONG, (), str(self.max_length), str(len(obj)))]
            )
        return ParseResult.success(obj)

    def documentation(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": "string"}
        if self.min_length is not None:
            doc["minLength"] = self.min_length
        if self.max_length is not None:
            doc["maxLength"] = self.max_length
        return doc


def string() -> StringSchema:
    """A schema matching any string."""
    return StringSchema()
