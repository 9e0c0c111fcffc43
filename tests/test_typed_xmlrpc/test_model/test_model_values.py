"""Tests for the typed value and envelope model."""

import dataclasses
from datetime import datetime

import pytest

from typed_xmlrpc.model import (
    INT32_MAX,
    INT32_MIN,
    VALUE_TYPES,
    Array,
    Base64,
    Bool,
    Call,
    DateTime,
    Double,
    Fault,
    Int,
    String,
    Struct,
    Success,
)


class TestScalarValues:
    """Test scalar variants."""

    def test_int_range_is_enforced(self) -> None:
        assert Int(INT32_MAX).value == INT32_MAX
        assert Int(INT32_MIN).value == INT32_MIN

        with pytest.raises(ValueError, match="outside the 32-bit signed range"):
            Int(INT32_MAX + 1)

    def test_variants_with_equal_payload_are_distinct(self) -> None:
        assert Bool(True) != Int(1)
        assert String("x") != DateTime("x")
        assert DateTime("x") != Base64("x")

    def test_values_are_immutable(self) -> None:
        value = String("frozen")

        with pytest.raises(dataclasses.FrozenInstanceError):
            value.value = "thawed"  # type: ignore

    def test_datetime_keeps_raw_text(self) -> None:
        assert DateTime("19980717T14:08:55").to_python() == "19980717T14:08:55"

    @pytest.mark.parametrize(
        "text",
        ["19980717T14:08:55", "19980717T140855", "1998-07-17T14:08:55"],
    )
    def test_datetime_to_datetime(self, text: str) -> None:
        assert DateTime(text).to_datetime() == datetime(1998, 7, 17, 14, 8, 55)

    def test_datetime_to_datetime_rejects_other_layouts(self) -> None:
        with pytest.raises(ValueError, match="Unsupported dateTime.iso8601 value"):
            DateTime("yesterday").to_datetime()

    def test_base64_decode(self) -> None:
        payload = Base64("aGVsbG8g\n d29ybGQ=")

        assert payload.to_python() == "aGVsbG8g\n d29ybGQ="
        assert payload.decode() == b"hello world"

    def test_base64_decode_rejects_invalid_payload(self) -> None:
        with pytest.raises(ValueError, match="Invalid base64 payload"):
            Base64("not*base64").decode()


class TestCompositeValues:
    """Test Array and Struct behaviour."""

    def test_array_sequence_access(self) -> None:
        array = Array((Int(1), String("a"), Bool(True)))

        assert len(array) == 3
        assert array[1] == String("a")
        assert list(array) == [Int(1), String("a"), Bool(True)]

    def test_array_order_matters(self) -> None:
        assert Array((Int(1), Int(2))) != Array((Int(2), Int(1)))

    def test_struct_mapping_access(self) -> None:
        struct = Struct({"a": Int(1)})

        assert len(struct) == 1
        assert "a" in struct
        assert struct["a"] == Int(1)
        assert struct.get("b") is None
        assert struct.get("b", String("x")) == String("x")

    def test_struct_equality_ignores_member_order(self) -> None:
        first = Struct({"a": Int(1), "b": Int(2)})
        second = Struct({"b": Int(2), "a": Int(1)})

        assert first == second

    def test_nested_to_python(self) -> None:
        value = Struct({
            "ids": Array((Int(1), Int(2))),
            "ratio": Double(0.5),
            "meta": Struct({"ok": Bool(False)}),
        })

        assert value.to_python() == {
            "ids": [1, 2],
            "ratio": 0.5,
            "meta": {"ok": False},
        }

    def test_value_types_is_exhaustive(self) -> None:
        assert set(VALUE_TYPES) == {
            Int, Bool, String, Double, DateTime, Base64, Array, Struct
        }


class TestEnvelopes:
    """Test Call and Response envelopes."""

    def test_call_to_python(self) -> None:
        call = Call("examples.getStateName", (Int(41),))

        assert call.to_python() == ("examples.getStateName", [41])

    def test_success_response(self) -> None:
        response = Success((String("South Dakota"),))

        assert response.is_fault is False
        assert response.to_python() == ["South Dakota"]

    def test_fault_response(self) -> None:
        response = Fault(code=4, message="Too many parameters.")

        assert response.is_fault is True
        assert response.to_python() == {
            "faultCode": 4,
            "faultString": "Too many parameters.",
        }
