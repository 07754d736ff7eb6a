"""Array schema — validates every item and aggregates their issues."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from wren.validation.issues import Issue, IssueKind, ValidationError, type_tag
from wren.validation.result import ParseResult
from wren.validation.schema import Schema, SchemaBase


@dataclass(frozen=True, slots=True)
class ArraySchema[T](SchemaBase[list[T]]):
    """Matches lists (or tuples) whose items all match *item_schema*.

    Bounds are inclusive. Every builder method returns a new schema; the
    original is unchanged::

        pair = array(boolean()).length(2)
    """

    item_schema: Schema[T]
    min_items: int | None = None
    max_items: int | None = None

    def min(self, items: int) -> ArraySchema[T]:
        """Set the minimum number of items."""
        return replace(self, min_items=items)

    def max(self, items: int) -> ArraySchema[T]:
        """Set the maximum number of items."""
        return replace(self, max_items=items)

    def length(self, items: int) -> ArraySchema[T]:
        """Set the exact number of items (both ``min`` and ``max``)."""
        return replace(self, min_items=items, max_items=items)

    def check(self, obj: object) -> ParseResult[list[T]]:
        if not isinstance(obj, list | tuple):
            return ParseResult.failure(
                [Issue(IssueKind.INVALID_TYPE, (), "array", type_tag(obj))]
            )

        # Bound violations short-circuit: items are not inspected
        if self.min_items is not None and len(obj) < self.min_items:
            return ParseResult.failure(
                [Issue(IssueKind.TOO_SHORT, (), str(self.min_items), str(len(obj)))]
            )
        if self.max_items is not None and len(obj) > self.max_items:
            return ParseResult.failure(
                [Issue(IssueKind.TOO_LONG, (), str(self.max_items), str(len(obj)))]
            )

        items: list[T] = []
        issues: list[Issue] = []
        for index, item in enumerate(obj):
            try:
                result = self.item_schema.check(item)
            except ValidationError as exc:
                # Custom schemas may raise instead of returning a failure
                issues.extend(exc.with_prefix(str(index)))
                continue
            if result:
                items.append(result.value)  # type: ignore[arg-type]
            else:
                issues.extend(result.error().with_prefix(str(index)))

        if issues:
            return ParseResult.failure(issues)
        return ParseResult.success(items)

    def documentation(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "type": "array",
            "items": self.item_schema.documentation(),
        }
        if self.min_items is not None:
            doc["minItems"] = self.min_items
        if self.max_items is not None:
            doc["maxItems"] = self.max_items
        return doc


def array[T](item_schema: Schema[T]) -> ArraySchema[T]:
    """A schema matching arrays of the provided item type."""
    return ArraySchema(item_schema)
