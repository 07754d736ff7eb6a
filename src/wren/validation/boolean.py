"""Boolean schema."""

from dataclasses import dataclass
from typing import Any

from wren.validation.issues import Issue, IssueKind, type_tag
from wren.validation.result import ParseResult
from wren.validation.schema import SchemaBase


@dataclass(frozen=True, slots=True)
class BooleanSchema(SchemaBase[bool]):
    """Matches ``True`` and ``False`` only; no truthiness coercion."""

    def check(self, obj: object) -> ParseResult[bool]:
        if not isinstance(obj, bool):
            return ParseResult.failure(
                [Issue(IssueKind.INVALID_TYPE, (), "boolean", type_tag(obj))]
            )
        return ParseResult.success(obj)

    def documentation(self) -> dict[str, Any]:
        return {"type": "boolean"}


def boolean() -> BooleanSchema:
    """A schema matching any boolean."""
    return BooleanSchema()
