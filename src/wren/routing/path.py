"""Route path patterns — compiled once, matched by a linear scan.

Grammar::

    /users                 literal segment
    /users/:id             named parameter, captures one segment
    /users/:id/posts?      trailing optional segment (literal or parameter)

Segments are lowercase letters, digits and ``-``. Once a segment is
optional, every later segment must be optional too, so a match can stop
as soon as the request path runs out.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import NoReturn

from wren.errors import InvalidPathError

logger = logging.getLogger("wren.routing")

_SEGMENT_RE = re.compile(r"^(:?)([a-z0-9-]+)(\??)$")
_SEGMENT_GRAMMAR = r"^(:?[a-z0-9-]+\??)$"

_OPTIONAL_ORDER = "Optional segment cannot be followed by non-optional segment."


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Matches one path segment equal to ``text``."""

    text: str
    optional: bool = False

    def __str__(self) -> str:
        return self.text + ("?" if self.optional else "")


@dataclass(frozen=True, slots=True)
class ParamSegment:
    """Captures one path segment under ``name``."""

    name: str
    optional: bool = False

    def __str__(self) -> str:
        return ":" + self.name + ("?" if self.optional else "")


type Segment = LiteralSegment | ParamSegment


def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Compile a pattern string into segments.

    Examples::

        "/users"        -> (LiteralSegment("users"),)
        "/users/:id"    -> (LiteralSegment("users"), ParamSegment("id"))
        "/users/:id?"   -> (LiteralSegment("users"), ParamSegment("id", optional=True))

    Raises ``InvalidPathError`` for a missing leading ``/``, a segment
    outside the grammar, or a required segment after an optional one.
    """
    if not pattern.startswith("/"):
        _fail(pattern, "Must start with '/'.")

    if pattern == "/":
        return ()

    segments: list[Segment] = []
    for part in pattern.split("/")[1:]:
        m = _SEGMENT_RE.match(part)
        if m is None:
            _fail(pattern, f"Segment {part} does not match regex {_SEGMENT_GRAMMAR}.")
        is_param, token, optional = m.group(1) == ":", m.group(2), m.group(3) == "?"
        if is_param:
            segments.append(ParamSegment(token, optional))
        else:
            segments.append(LiteralSegment(token, optional))

    check_optional_order(pattern, segments)
    return tuple(segments)


def check_optional_order(pattern: str, segments: list[Segment] | tuple[Segment, ...]) -> None:
    """Raise ``InvalidPathError`` if a required segment follows an optional one."""
    locked = False
    for segment in segments:
        if segment.optional:
            locked = True
        elif locked:
            _fail(pattern, _OPTIONAL_ORDER)


def _fail(pattern: str, reason: str) -> NoReturn:
    logger.debug("rejected route path %r: %s", pattern, reason)
    raise InvalidPathError(pattern, reason)


def _render(segments: tuple[Segment, ...]) -> str:
    return "/" + "/".join(str(segment) for segment in segments)


class Path:
    """A compiled route path pattern.

    Built once at route registration, then matched against every request
    path. Immutable, so one instance can be shared by any number of
    concurrent requests.

    Usage::

        path = Path("/users/:id/posts?")
        path.match("/users/42")         # {"id": "42"}
        path.match("/users/42/posts")   # {"id": "42"}
        path.match("/users")            # None
    """

    __slots__ = ("_segments",)

    _segments: tuple[Segment, ...]

    def __init__(self, pattern: str) -> None:
        object.__setattr__(self, "_segments", parse_pattern(pattern))
        logger.debug("compiled route path %s (%d segments)", pattern, len(self._segments))

    @classmethod
    def _from_segments(cls, segments: tuple[Segment, ...]) -> Path:
        path = object.__new__(cls)
        object.__setattr__(path, "_segments", segments)
        return path

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of the parameters, in pattern order."""
        return tuple(s.name for s in self._segments if isinstance(s, ParamSegment))

    def match(self, candidate: str) -> dict[str, str] | None:
        """Match a request path (query string already removed).

        Returns the captured parameters on success, or ``None``. Optional
        parameters the request path did not reach are absent from the
        result, never present with an empty value.
        """
        if not candidate.startswith("/"):
            return None
        parts = [p for p in candidate.split("/") if p]

        params: dict[str, str] = {}
        for index, segment in enumerate(self._segments):
            if index >= len(parts):
                # Everything from here on is optional as well
                if segment.optional:
                    return params
                return None
            part = parts[index]
            match segment:
                case LiteralSegment(text=text):
                    if part != text:
                        return None
                case ParamSegment(name=name):
                    params[name] = part

        # No catch-all: unconsumed parts mean a different route
        if len(parts) > len(self._segments):
            return None
        return params

    def with_prefix(self, prefix: str | Path) -> Path:
        """Return a new path mounted under *prefix*.

        The combined pattern is re-checked, so mounting an optional prefix
        in front of required segments fails here rather than silently::

            Path("/abc").with_prefix("/:id")     # /:id/abc
            Path("/abc").with_prefix("/:id?")    # InvalidPathError
        """
        if isinstance(prefix, str):
            prefix = Path(prefix)
        segments = prefix.segments + self._segments
        check_optional_order(_render(segments), segments)
        logger.debug("mounted route path %s under %s", self, prefix)
        return Path._from_segments(segments)

    def __str__(self) -> str:
        return _render(self._segments)

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)
