"""wren — the validation and routing core of a small typed JSON-API toolkit.

Schemas turn untrusted input into typed values and report every issue
with its location. Paths compile URL patterns into reusable matchers.

Basic usage::

    from wren import Path, ValidationError
    from wren.validation import array, boolean

    path = Path("/flags/:id?")
    params = path.match("/flags/7")          # {"id": "7"}

    flags = array(boolean()).min(1)
    try:
        values = flags.parse(body)
    except ValidationError as exc:
        return 400, exc.format()
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "InvalidPathError",
    "ParseResult",
    "Path",
    "Schema",
    "ValidationError",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Path":
        from wren.routing.path import Path

        return Path

    if name in ("ParseResult", "Schema", "ValidationError"):
        from wren import validation as _validation

        return getattr(_validation, name)

    if name in ("ConfigurationError", "InvalidPathError", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
