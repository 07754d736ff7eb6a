"""Date schema.

Accepts datetimes as they are, plus strings and numbers that can be
turned into one:

- numbers are milliseconds since the Unix epoch, in UTC;
- strings are ISO 8601 (``datetime.fromisoformat``) or, unless the schema
  was narrowed with ``iso_only()``, RFC 2822 (``Tue, 15 Nov 1994 08:12:31 GMT``).

Naive results are taken to be UTC so parsing never depends on the
server's local timezone.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import UTC, datetime, time
from datetime import date as calendar_date
from email.utils import parsedate_to_datetime
from typing import Any

from wren.validation.issues import Issue, IssueKind, type_tag
from wren.validation.result import ParseResult
from wren.validation.schema import SchemaBase


@dataclass(frozen=True, slots=True)
class DateSchema(SchemaBase[datetime]):
    """Matches datetimes, or strings and numbers that denote one."""

    strict: bool = False

    def iso_only(self) -> DateSchema:
        """Only accept ISO 8601 strings (numbers and datetimes still pass)."""
        return replace(self, strict=True)

    def check(self, obj: object) -> ParseResult[datetime]:
        value = self._coerce(obj)
        if value is None:
            return ParseResult.failure(
                [Issue(IssueKind.INVALID_TYPE, (), "date", type_tag(obj))]
            )
        return ParseResult.success(value)

    def _coerce(self, obj: object) -> datetime | None:
        match obj:
            case datetime():
                return obj
            case calendar_date():
                return datetime.combine(obj, time(), UTC)
            case bool():
                return None
            case int() | float():
                return _from_millis(obj)
            case str():
                return self._from_string(obj)
        return None

    def _from_string(self, text: str) -> datetime | None:
        try:
            return _as_utc(datetime.fromisoformat(text))
        except ValueError:
            pass
        if self.strict:
            return None
        try:
            return _as_utc(parsedate_to_datetime(text))
        except (TypeError, ValueError):
            return None

    def documentation(self) -> dict[str, Any]:
        return {"type": "string", "format": "date-time"}


def _from_millis(millis: float) -> datetime | None:
    if not math.isfinite(millis):
        return None
    try:
        return datetime.fromtimestamp(millis / 1000, UTC)
    except (OverflowError, OSError, ValueError):
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def date() -> DateSchema:
    """A schema matching datetimes, or strings and numbers that denote one."""
    return DateSchema()
