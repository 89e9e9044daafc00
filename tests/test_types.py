"""
Tests for types.py
Logic testing: Equivalence partitioning, Decision/Branch coverage
"""
import enum
from decimal import Decimal

import pytest

from fetch_request_builder.types import (
    HTTP_METHOD,
    UNDEFINED,
    TypeKind,
    classify,
    type_of,
)


class Color(enum.Enum):
    RED = "red"


def _func():
    return None


class TestClassify:
    """Tests for classify function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, TypeKind.NULL),
            (UNDEFINED, TypeKind.UNDEFINED),
            ([], TypeKind.ARRAY),
            ([1, 2], TypeKind.ARRAY),
            ((1,), TypeKind.ARRAY),
            (float("nan"), TypeKind.NAN),
            (Decimal("NaN"), TypeKind.NAN),
            (True, TypeKind.BOOLEAN),
            (False, TypeKind.BOOLEAN),
            (0, TypeKind.NUMBER),
            (1.5, TypeKind.NUMBER),
            (float("inf"), TypeKind.NUMBER),
            (Decimal("1.1"), TypeKind.NUMBER),
            ("", TypeKind.STRING),
            ("text", TypeKind.STRING),
            (Color.RED, TypeKind.SYMBOL),
            (_func, TypeKind.FUNCTION),
            (lambda: None, TypeKind.FUNCTION),
            ({}, TypeKind.OBJECT),
            ({"a": 1}, TypeKind.OBJECT),
            (b"bytes", TypeKind.OBJECT),
            (object(), TypeKind.OBJECT),
        ],
    )
    def test_classify(self, value, expected):
        assert classify(value) is expected

    # Decision: bool is checked before number
    def test_bool_is_not_number(self):
        assert type_of(True).is_number() is False
        assert type_of(True).is_boolean() is True

    # Decision: NaN is not a number
    def test_nan_is_not_number(self):
        probe = type_of(float("nan"))
        assert probe.is_nan() is True
        assert probe.is_number() is False

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("sNaN")])
    def test_decimal_nan_is_not_number(self, value):
        probe = type_of(value)
        assert probe.is_nan() is True
        assert probe.is_number() is False

    # Decision: array wins over object
    def test_list_is_not_object(self):
        probe = type_of([])
        assert probe.is_array() is True
        assert probe.is_object() is False

    # Decision: async functions are functions
    def test_coroutine_function(self):
        async def handler(headers):
            return headers

        assert type_of(handler).is_function() is True


class TestTypeProbe:
    """Tests for TypeProbe convenience predicates."""

    def test_is_not_string(self):
        assert type_of(1).is_not_string() is True
        assert type_of("1").is_not_string() is False

    @pytest.mark.parametrize("value", [None, UNDEFINED])
    def test_is_undefined_or_null_true(self, value):
        assert type_of(value).is_undefined_or_null() is True

    @pytest.mark.parametrize("value", [0, "", False, [], {}, float("nan")])
    def test_is_undefined_or_null_false(self, value):
        assert type_of(value).is_undefined_or_null() is False

    def test_exactly_one_category(self):
        probe = type_of("text")
        predicates = [
            probe.is_null(),
            probe.is_undefined(),
            probe.is_nan(),
            probe.is_array(),
            probe.is_symbol(),
            probe.is_string(),
            probe.is_object(),
            probe.is_number(),
            probe.is_boolean(),
            probe.is_function(),
        ]
        assert predicates.count(True) == 1


class TestUndefined:
    """Tests for the UNDEFINED sentinel."""

    def test_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED

    def test_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == "undefined"


class TestHttpMethod:
    def test_supported_methods(self):
        assert set(HTTP_METHOD) == {"GET", "POST", "PUT", "DELETE"}
        assert all(key == value for key, value in HTTP_METHOD.items())
