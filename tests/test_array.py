"""Tests for wren.validation.array — bounds, aggregation, builders."""

from typing import Any

import pytest

from wren.validation import (
    ArraySchema,
    Issue,
    IssueKind,
    ParseResult,
    ValidationError,
    array,
    boolean,
    string,
)


def _bounded() -> ArraySchema[bool]:
    return array(boolean()).min(2).max(4)


def _issues(schema: ArraySchema[Any], value: object) -> tuple[Issue, ...]:
    with pytest.raises(ValidationError) as exc_info:
        schema.parse(value)
    return exc_info.value.issues


class _Exploding:
    """Item schema that fails with something other than a ValidationError."""

    def check(self, obj: object) -> ParseResult[Any]:
        raise RuntimeError(f"boom on {obj!r}")

    def parse(self, obj: object) -> Any:
        return self.check(obj).unwrap()

    def documentation(self) -> dict[str, Any]:
        return {}


class _Raising:
    """Item schema that raises ValidationError instead of returning a failure."""

    def check(self, obj: object) -> ParseResult[int]:
        if obj != 1:
            raise ValidationError([Issue(IssueKind.INVALID_TYPE, (), "one", str(obj))])
        return ParseResult.success(1)

    def parse(self, obj: object) -> int:
        return self.check(obj).unwrap()

    def documentation(self) -> dict[str, Any]:
        return {"const": 1}


class TestArrayType:
    def test_valid(self) -> None:
        assert array(boolean()).parse([True, False]) == [True, False]

    def test_empty(self) -> None:
        assert array(boolean()).parse([]) == []

    def test_tuple_becomes_list(self) -> None:
        assert array(boolean()).parse((True,)) == [True]

    @pytest.mark.parametrize(
        ("value", "actual"), [("abc", "string"), ({}, "object"), (None, "null"), (3, "number")]
    )
    def test_rejects_non_arrays(self, value: object, actual: str) -> None:
        (issue,) = _issues(array(boolean()), value)
        assert issue == Issue(IssueKind.INVALID_TYPE, (), "array", actual)


class TestBounds:
    def test_too_short(self) -> None:
        assert _issues(_bounded(), []) == (Issue(IssueKind.TOO_SHORT, (), "2", "0"),)

    def test_too_long(self) -> None:
        assert _issues(_bounded(), [True, False, True, False, True]) == (
            Issue(IssueKind.TOO_LONG, (), "4", "5"),
        )

    def test_bounds_are_inclusive(self) -> None:
        assert _bounded().parse([True, True]) == [True, True]
        assert _bounded().parse([True] * 4) == [True] * 4

    def test_bounds_short_circuit_item_checks(self) -> None:
        # Items are invalid too, but only the bound is reported
        assert _issues(_bounded(), [1]) == (Issue(IssueKind.TOO_SHORT, (), "2", "1"),)

    def test_length(self) -> None:
        schema = array(boolean()).length(2)
        assert schema.parse([True, False]) == [True, False]
        assert _issues(schema, [True])[0].kind is IssueKind.TOO_SHORT
        assert _issues(schema, [True] * 3)[0].kind is IssueKind.TOO_LONG

    def test_zero_max(self) -> None:
        assert _issues(array(boolean()).max(0), [True]) == (Issue(IssueKind.TOO_LONG, (), "0", "1"),)


class TestItemAggregation:
    def test_single_bad_item(self) -> None:
        (issue,) = _issues(_bounded(), [True, 1, False])
        assert issue.path == ("1",)
        assert issue.kind is IssueKind.INVALID_TYPE
        assert issue.actual == "number"

    def test_every_bad_item_reported(self) -> None:
        issues = _issues(_bounded(), [1, 2])
        assert [i.path for i in issues] == [("0",), ("1",)]

    def test_nested_paths(self) -> None:
        schema = array(array(boolean()))
        issues = _issues(schema, [[True], [True, "x", 0]])
        assert [i.path for i in issues] == [("1", "1"), ("1", "2")]

    def test_nested_bound_reported_at_index(self) -> None:
        schema = array(array(string()).min(1))
        assert _issues(schema, [["a"], []]) == (Issue(IssueKind.TOO_SHORT, ("1",), "1", "0"),)

    def test_raised_validation_error_is_aggregated(self) -> None:
        issues = _issues(array(_Raising()), [1, 2, 3])
        assert [i.path for i in issues] == [("1",), ("2",)]

    def test_other_exceptions_propagate(self) -> None:
        with pytest.raises(RuntimeError, match="boom on 1"):
            array(_Exploding()).parse([1, 2])

    def test_check_collects_without_raising(self) -> None:
        result = _bounded().check([True, "no", None])
        assert not result
        assert [i.path for i in result.issues] == [("1",), ("2",)]


class TestBuilders:
    def test_builders_do_not_mutate(self) -> None:
        base = array(boolean())
        bounded = base.min(1).max(3)
        assert base.min_items is None
        assert base.max_items is None
        assert (bounded.min_items, bounded.max_items) == (1, 3)

    def test_frozen(self) -> None:
        schema = array(boolean())
        with pytest.raises(AttributeError):
            schema.min_items = 3  # type: ignore[misc]


class TestDocumentation:
    def test_unbounded(self) -> None:
        assert array(boolean()).documentation() == {"type": "array", "items": {"type": "boolean"}}

    def test_bounded(self) -> None:
        assert _bounded().documentation() == {
            "type": "array",
            "items": {"type": "boolean"},
            "minItems": 2,
            "maxItems": 4,
        }
