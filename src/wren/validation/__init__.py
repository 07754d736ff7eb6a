"""Schema validation — typed values in, every issue out.

Usage::

    from wren.validation import ValidationError, array, boolean, date, mapping

    query = mapping({
        "flags": array(boolean()).min(1).max(4),
        "since": date().optional(),
    })

    result = query.check(raw_query)
    if not result:
        # result.issues == (Issue(kind=IssueKind.INVALID_TYPE, path=("flags", "1"), ...),)
        return 400, result.error().format()
    params = result.value

``parse()`` is the raising shortcut: it returns the value or raises
``ValidationError`` carrying every issue found.
"""

from wren.validation.array import ArraySchema, array
from wren.validation.boolean import BooleanSchema, boolean
from wren.validation.date import DateSchema, date
from wren.validation.issues import Issue, IssueKind, ValidationError, type_tag
from wren.validation.mapping import MappingSchema, mapping
from wren.validation.result import ParseResult
from wren.validation.schema import (
    DescribedSchema,
    OptionalSchema,
    Schema,
    SchemaBase,
    is_required,
)
from wren.validation.string import StringSchema, string

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "DateSchema",
    "DescribedSchema",
    "Issue",
    "IssueKind",
    "MappingSchema",
    "OptionalSchema",
    "ParseResult",
    "Schema",
    "SchemaBase",
    "StringSchema",
    "ValidationError",
    "array",
    "boolean",
    "date",
    "is_required",
    "mapping",
    "string",
    "type_tag",
]
