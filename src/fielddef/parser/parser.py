# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Prioritized-choice parser for single field declaration lines.

The four productions are tried in a fixed order, each from the start of the
line; the first one that consumes the whole line wins:

1. ``dummy8 <name>[ [<n>] | :<n> ][ = <default>]``
2. ``<scalar> <name>[:<n>][ = <default>]``
3. ``fixstr[W] <name>[<n>]``
4. ``<token> <anything>`` (unrecognized type, kept verbatim)
"""

import logging

from fielddef.model.declarations import (
    ArrayLength,
    BitSize,
    DummyField,
    FieldDeclaration,
    FixedStringField,
    SimpleField,
    UnrecognizedField,
)
from fielddef.model.types import Angle32Type, Bool32Type, FloatType, IntType, ScalarType
from fielddef.parser.scanner import Scanner, ScanError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class FieldSyntaxError(Exception):
    """Raised when a line is not a valid field declaration.

    Attributes:
        text: The offending line.
        offset: UTF-8 byte offset into *text* where parsing failed.
    """

    def __init__(self, message: str, text: str, offset: int) -> None:
        super().__init__(f"Offset {offset}: {message}")
        self.text = text
        self.offset = offset


def parse(line: str) -> FieldDeclaration:
    """Parse one field declaration line.

    Args:
        line: A single declaration without a trailing newline.

    Returns:
        A SimpleField, DummyField, FixedStringField, or UnrecognizedField.

    Raises:
        FieldSyntaxError: If no production matches the entire line. The error
            reported is the one from the production that got furthest.
    """
    return _Parser(line).parse()


# ################
# Implementation
# ################

_DUMMY_KEYWORD = "dummy8"

_SCALAR_TYPES: dict[str, ScalarType] = {
    "s8": IntType(signed=True, bits=8),
    "s16": IntType(signed=True, bits=16),
    "s32": IntType(signed=True, bits=32),
    "u8": IntType(signed=False, bits=8),
    "u16": IntType(signed=False, bits=16),
    "u32": IntType(signed=False, bits=32),
    "angle32": Angle32Type(),
    "a32": Angle32Type(),
    "f32": FloatType(bits=32),
    "f64": FloatType(bits=64),
    "b32": Bool32Type(),
}

# Maps each fixed string keyword to its "wide" flag.
_FIXED_STRING_KEYWORDS: dict[str, bool] = {
    "fixstr": False,
    "fixstrW": True,
}

_TYPE_FAMILY_PREFIXES: tuple[str, ...] = ("angle", "dummy", "s", "u", "f", "a", "b")


def _is_reserved_type_token(token: str) -> bool:
    """Return True if *token* belongs to a built-in type family.

    Reserved tokens never fall back to UnrecognizedField, so a malformed
    ``u9 x`` or ``dummy8 x[abc]`` is a syntax error rather than an unknown type.
    """
    if token in _FIXED_STRING_KEYWORDS:
        return True
    for prefix in _TYPE_FAMILY_PREFIXES:
        width = token[len(prefix) :]
        if token.startswith(prefix) and width.isdigit():
            return True
    return False


def _byte_offset(text: str, position: int) -> int:
    return len(text[:position].encode("utf-8"))


class _Parser:
    """Ordered-choice parser over a single declaration line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._scanner = Scanner(text)

    def parse(self) -> FieldDeclaration:
        """Try each production in priority order and return the first full match."""
        if not self._text:
            raise FieldSyntaxError("Empty field declaration", self._text, 0)

        productions = (
            self._parse_dummy,
            self._parse_simple,
            self._parse_fixed_string,
            self._parse_unrecognized,
        )
        furthest: ScanError | None = None
        for production in productions:
            self._scanner = Scanner(self._text)
            try:
                declaration = production()
                self._scanner.expect_end()
            except ScanError as exc:
                if furthest is None or exc.position >= furthest.position:
                    furthest = exc
            else:
                if isinstance(declaration, UnrecognizedField):
                    logger.debug("Unrecognized field type %r in %r", declaration.raw_type_token, self._text)
                return declaration

        assert furthest is not None
        raise FieldSyntaxError(furthest.message, self._text, _byte_offset(self._text, furthest.position))

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _parse_dummy(self) -> DummyField:
        """Parse: dummy8 <name> [ [<n>] | :<n> ] [= <default>]"""
        s = self._scanner
        token = s.scan_type_token()
        if token != _DUMMY_KEYWORD:
            raise s.error(f"Expected {_DUMMY_KEYWORD!r}, got {token!r}", 0)
        s.scan_space()
        name = s.scan_identifier()
        refinement: ArrayLength | BitSize | None = None
        if s.check("["):
            refinement = ArrayLength(length=self._parse_array_suffix())
        elif s.check(":"):
            refinement = BitSize(bits=self._parse_bit_size_suffix())
        default = self._parse_default_suffix()
        return DummyField(name=name, refinement=refinement, default=default)

    def _parse_simple(self) -> SimpleField:
        """Parse: <scalar> <name> [:<n>] [= <default>]"""
        s = self._scanner
        token = s.scan_type_token()
        scalar = _SCALAR_TYPES.get(token)
        if scalar is None:
            raise s.error(f"Unknown scalar type {token!r}", 0)
        s.scan_space()
        name = s.scan_identifier()
        bit_size = self._parse_bit_size_suffix() if s.check(":") else None
        default = self._parse_default_suffix()
        return SimpleField(type=scalar, name=name, bit_size=bit_size, default=default)

    def _parse_fixed_string(self) -> FixedStringField:
        """Parse: fixstr[W] <name> [<n>]"""
        s = self._scanner
        token = s.scan_type_token()
        if token not in _FIXED_STRING_KEYWORDS:
            raise s.error(f"Expected 'fixstr' or 'fixstrW', got {token!r}", 0)
        s.scan_space()
        name = s.scan_identifier()
        length = self._parse_array_suffix()
        return FixedStringField(name=name, wide=_FIXED_STRING_KEYWORDS[token], array_length=length)

    def _parse_unrecognized(self) -> UnrecognizedField:
        """Parse: <token> <rest of line>"""
        s = self._scanner
        token = s.scan_type_token()
        if _is_reserved_type_token(token):
            raise s.error(f"Unsupported type {token!r}", 0)
        s.scan_space()
        return UnrecognizedField(raw_type_token=token, remainder=s.scan_rest())

    # ------------------------------------------------------------------
    # Suffixes
    # ------------------------------------------------------------------

    def _parse_array_suffix(self) -> int:
        """Parse: [<n>]"""
        self._scanner.expect("[")
        length = self._scanner.scan_number()
        self._scanner.expect("]")
        return length

    def _parse_bit_size_suffix(self) -> int:
        """Parse: :<n>"""
        self._scanner.expect(":")
        return self._scanner.scan_number()

    def _parse_default_suffix(self) -> float | None:
        """Parse an optional default value: [ ]=[ ]<signed float>"""
        s = self._scanner
        if not s.check(" ") and not s.check("="):
            return None
        if s.check(" "):
            s.advance()
        s.expect("=")
        if s.check(" "):
            s.advance()
        return s.scan_signed_float()
