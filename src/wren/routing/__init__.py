"""Routing — route path patterns compiled into reusable matchers.

Patterns are compiled once at route registration; matching a request
path is a linear scan over the compiled segments.
"""

from wren.routing.path import (
    LiteralSegment,
    ParamSegment,
    Path,
    Segment,
    check_optional_order,
    parse_pattern,
)

__all__ = [
    "LiteralSegment",
    "ParamSegment",
    "Path",
    "Segment",
    "check_optional_order",
    "parse_pattern",
]
