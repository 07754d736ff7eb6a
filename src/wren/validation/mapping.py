"""Mapping schema — named properties, each validated by its own schema.

This is the object-like schema whose documentation carries ``properties``
and ``required``, which is what a docs generator inspects to list query
and header parameters::

    query = mapping({
        "page": string().optional(),
        "tags": array(string()).describe("Filter tags"),
    })
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from wren.validation.issues import Issue, IssueKind, ValidationError, type_tag
from wren.validation.result import ParseResult
from wren.validation.schema import Schema, SchemaBase, is_required


@dataclass(frozen=True, slots=True)
class MappingSchema(SchemaBase[dict[str, Any]]):
    """Matches mappings carrying the declared properties.

    Issues from every property are collected in declaration order.
    Undeclared keys are ignored and dropped from the result.
    """

    properties: Mapping[str, Schema[Any]]

    def check(self, obj: object) -> ParseResult[dict[str, Any]]:
        if not isinstance(obj, Mapping):
            return ParseResult.failure(
                [Issue(IssueKind.INVALID_TYPE, (), "object", type_tag(obj))]
            )

        values: dict[str, Any] = {}
        issues: list[Issue] = []
        for name, schema in self.properties.items():
            if name not in obj:
                if is_required(schema):
                    expected = schema.documentation().get("type")
                    if not isinstance(expected, str):
                        expected = "value"
                    issues.append(Issue(IssueKind.MISSING, (name,), expected, "undefined"))
                continue
            try:
                result = schema.check(obj[name])
            except ValidationError as exc:
                issues.extend(exc.with_prefix(name))
                continue
            if result:
                values[name] = result.value
            else:
                issues.extend(result.error().with_prefix(name))

        if issues:
            return ParseResult.failure(issues)
        return ParseResult.success(values)

    def documentation(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                name: schema.documentation() for name, schema in self.properties.items()
            },
            "required": [
                name for name, schema in self.properties.items() if is_required(schema)
            ],
        }


def mapping(properties: Mapping[str, Schema[Any]]) -> MappingSchema:
    """A schema matching mappings with the given named properties."""
    return MappingSchema(MappingProxyType(dict(properties)))
