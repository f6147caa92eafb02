# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the field declaration parser."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pydantic
import pytest

from fielddef.model.declarations import (
    ArrayLength,
    BitSize,
    DummyField,
    FieldDeclaration,
    FixedStringField,
    SimpleField,
    UnrecognizedField,
)
from fielddef.model.types import Angle32Type, Bool32Type, FloatType, IntType
from fielddef.parser.parser import FieldSyntaxError, parse

# ###############
# Test Helpers
# ###############


def _parse_error(line: str) -> FieldSyntaxError:
    """Parse a line that must fail and return the raised error."""
    with pytest.raises(FieldSyntaxError) as exc_info:
        parse(line)
    return exc_info.value


# ###############
# Simple Fields
# ###############


class TestSimpleFields:
    @pytest.mark.parametrize(
        ("token", "signed", "bits"),
        [
            ("s8", True, 8),
            ("s16", True, 16),
            ("s32", True, 32),
            ("u8", False, 8),
            ("u16", False, 16),
            ("u32", False, 32),
        ],
    )
    def test_integer_types(self, token: str, signed: bool, bits: int) -> None:
        result = parse(f"{token} value")
        assert result == SimpleField(type=IntType(signed=signed, bits=bits), name="value")
        assert result.bit_size is None
        assert result.default is None

    @pytest.mark.parametrize("token", ["angle32", "a32"])
    def test_angle_spellings(self, token: str) -> None:
        assert parse(f"{token} heading") == SimpleField(type=Angle32Type(), name="heading")

    @pytest.mark.parametrize(("token", "bits"), [("f32", 32), ("f64", 64)])
    def test_float_types(self, token: str, bits: int) -> None:
        assert parse(f"{token} ratio") == SimpleField(type=FloatType(bits=bits), name="ratio")

    def test_bool_type(self) -> None:
        assert parse("b32 enabled") == SimpleField(type=Bool32Type(), name="enabled")

    def test_bit_size(self) -> None:
        result = parse("u16 count:4")
        assert result == SimpleField(type=IntType(signed=False, bits=16), name="count", bit_size=4)

    def test_bit_size_on_signed_type_is_accepted_lexically(self) -> None:
        result = parse("s32 testingVar:3")
        assert isinstance(result, SimpleField)
        assert result.bit_size == 3

    def test_default_with_exponent(self) -> None:
        result = parse("f32 temp = -3.5E+2")
        assert result == SimpleField(type=FloatType(bits=32), name="temp", default=-350.0)

    def test_negative_default(self) -> None:
        assert parse("u32 testingVar = -3.0").default == -3.0

    def test_bit_size_and_integral_default(self) -> None:
        result = parse("u32 testingVar:3 = 0")
        assert result.bit_size == 3
        assert result.default == 0.0
        assert isinstance(result.default, float)

    @pytest.mark.parametrize("line", ["u8 x=1", "u8 x =1", "u8 x= 1", "u8 x = 1"])
    def test_default_spacing_variants(self, line: str) -> None:
        assert parse(line).default == 1.0

    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ("2", 2.0),
            ("0.25", 0.25),
            ("-7", -7.0),
            ("1E+3", 1000.0),
            ("1.5E-2", 0.015),
        ],
    )
    def test_default_literal_forms(self, literal: str, expected: float) -> None:
        assert parse(f"f64 x = {literal}").default == pytest.approx(expected)

    def test_name_with_digits_and_underscores(self) -> None:
        assert parse("u8 field_2_b").name == "field_2_b"

    def test_unicode_letter_name(self) -> None:
        assert parse("f32 ｇradFactor").name == "ｇradFactor"


# ###############
# Dummy Fields
# ###############


class TestDummyFields:
    def test_array_length(self) -> None:
        assert parse("dummy8 pad[8]") == DummyField(name="pad", refinement=ArrayLength(length=8))

    def test_bit_size(self) -> None:
        assert parse("dummy8 pad:3") == DummyField(name="pad", refinement=BitSize(bits=3))

    def test_no_refinement(self) -> None:
        result = parse("dummy8 pad")
        assert result == DummyField(name="pad")
        assert result.refinement is None

    def test_array_length_with_default(self) -> None:
        result = parse("dummy8 pad[4] = 0")
        assert result == DummyField(name="pad", refinement=ArrayLength(length=4), default=0.0)

    def test_dummy_wins_over_unrecognized(self) -> None:
        assert isinstance(parse("dummy8 pad"), DummyField)


# ###############
# Fixed Strings
# ###############


class TestFixedStringFields:
    def test_narrow(self) -> None:
        assert parse("fixstr label[16]") == FixedStringField(name="label", wide=False, array_length=16)

    def test_wide(self) -> None:
        assert parse("fixstrW label[16]") == FixedStringField(name="label", wide=True, array_length=16)


# ###############
# Unrecognized Fields
# ###############


class TestUnrecognizedFields:
    def test_unknown_type_keeps_remainder_verbatim(self) -> None:
        result = parse("customtype99 foo bar baz")
        assert result == UnrecognizedField(raw_type_token="customtype99", remainder="foo bar baz")

    def test_remainder_is_not_validated(self) -> None:
        result = parse("vec3 pos[3] :: = ?")
        assert result == UnrecognizedField(raw_type_token="vec3", remainder="pos[3] :: = ?")

    def test_empty_remainder(self) -> None:
        assert parse("thing ") == UnrecognizedField(raw_type_token="thing", remainder="")

    @pytest.mark.parametrize("token", ["bool32", "float", "u16x", "int"])
    def test_tokens_outside_type_families(self, token: str) -> None:
        result = parse(f"{token} name")
        assert isinstance(result, UnrecognizedField)
        assert result.raw_type_token == token

    def test_fallback_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="fielddef.parser.parser"):
            parse("customtype99 foo")
        assert "customtype99" in caplog.text


# ###############
# Syntax Errors
# ###############


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "u16",
            "u9 x",
            "dummy8 x[abc]",
            "dummy8 x[4]:8",
            "fixstr label",
            "fixstr label[4] = 1",
            "fixstr label:4",
            "u8 x[4]",
            "u8 x:",
            "u8 x:-1",
            "u8 9x",
            "u8  x",
            " u8 x",
            "u8 x ",
            "u8 x = ",
            "u8 x = +1",
            "u8 x = 1.",
            "u8 x = 1e+2",
            "u8 x = 1E2",
            "u8 x = 1E+",
            "b8 flag",
            "angle16 heading",
            "dummy16 pad",
            "---",
            "foo bar\nbaz",
        ],
    )
    def test_invalid_lines_raise(self, line: str) -> None:
        _parse_error(line)

    def test_empty_line_offset(self) -> None:
        err = _parse_error("")
        assert err.offset == 0
        assert err.text == ""

    def test_missing_name_reports_end_of_type(self) -> None:
        err = _parse_error("u16")
        assert err.offset == 3
        assert "' '" in str(err)

    def test_invalid_width_reports_type_token(self) -> None:
        err = _parse_error("u9 x")
        assert err.offset == 0
        assert "'u9'" in str(err)

    def test_non_numeric_array_length(self) -> None:
        err = _parse_error("dummy8 x[abc]")
        assert err.offset == 9
        assert err.text == "dummy8 x[abc]"
        assert str(err).startswith("Offset 9:")

    def test_array_and_bit_size_are_exclusive(self) -> None:
        err = _parse_error("dummy8 x[4]:8")
        assert err.offset == 11
        assert "':8'" in str(err)

    def test_exponent_without_sign(self) -> None:
        err = _parse_error("f32 x = 1E5")
        assert err.offset == 10

    def test_number_out_of_range(self) -> None:
        err = _parse_error("u32 x:4294967296")
        assert err.offset == 6
        assert "out of range" in str(err)

    @pytest.mark.parametrize(
        ("line", "offset"),
        [
            ("u32 x:" + "1" * 5000, 6),
            ("dummy8 pad[" + "9" * 5000 + "]", 11),
            ("fixstr s[" + "1" * 5000 + "]", 9),
        ],
    )
    def test_very_long_number(self, line: str, offset: int) -> None:
        err = _parse_error(line)
        assert err.offset == offset
        assert "out of range" in str(err)
        assert len(str(err)) < 200

    def test_leading_zeros_do_not_count_toward_range(self) -> None:
        assert parse("u8 x:" + "0" * 5000 + "7").bit_size == 7

    def test_largest_number_is_accepted(self) -> None:
        assert parse("dummy8 pad[4294967295]").refinement == ArrayLength(length=4294967295)

    def test_default_overflow(self) -> None:
        err = _parse_error("f64 x = 1E+999")
        assert "out of range" in str(err)

    def test_offset_is_in_bytes(self) -> None:
        # 'ｇ' is three bytes in UTF-8, so the failing 'x' is at byte 7.
        err = _parse_error("u8 ｇ:x")
        assert err.offset == 7


# ###############
# Result Properties
# ###############


class TestResultProperties:
    def test_declarations_are_immutable(self) -> None:
        result = parse("u8 x")
        with pytest.raises(pydantic.ValidationError):
            result.name = "y"  # type: ignore[misc]

    def test_equal_lines_parse_to_equal_values(self) -> None:
        assert parse("a32 dir") == parse("angle32 dir")

    def test_concurrent_parsing(self) -> None:
        lines = [f"u16 field{i}:{i % 16 + 1}" for i in range(200)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results: list[FieldDeclaration] = list(pool.map(parse, lines))
        assert [r.name for r in results] == [f"field{i}" for i in range(200)]
        assert results[17].bit_size == 2
