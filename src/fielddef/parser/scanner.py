# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical rules of the field declaration language.

A :class:`Scanner` walks a single declaration line character by character.
Each ``scan_*`` method matches one lexical rule at the cursor, advances past
it and returns its value, or raises :class:`ScanError` without recovering.
"""

import math
import string

from fielddef.model.declarations import U32_MAX

# ###############
# Public Interface
# ###############


class ScanError(Exception):
    """Raised when the text at the cursor does not match the expected rule.

    Attributes:
        message: Description of what was expected.
        position: 0-based character index where matching failed.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class Scanner:
    """Cursor over one declaration line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.pos = 0

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def current(self) -> str:
        """Return the character at the cursor, or '' at end of input."""
        if self.pos < len(self._text):
            return self._text[self.pos]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self._text)

    def advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._text[self.pos]
        self.pos += 1
        return ch

    def check(self, literal: str) -> bool:
        """Return True if *literal* starts at the cursor (without consuming)."""
        return self._text.startswith(literal, self.pos)

    def expect(self, literal: str) -> None:
        """Consume *literal* or raise ScanError."""
        if not self.check(literal):
            raise self.error(f"Expected {literal!r}, got {self._describe_current()}")
        self.pos += len(literal)

    def expect_end(self) -> None:
        """Raise ScanError unless the whole line has been consumed."""
        if not self.at_end():
            raise self.error(f"Unexpected trailing text {self._text[self.pos :]!r}")

    def error(self, message: str, position: int | None = None) -> ScanError:
        return ScanError(message, self.pos if position is None else position)

    # ------------------------------------------------------------------
    # Lexical rules
    # ------------------------------------------------------------------

    def scan_type_token(self) -> str:
        """Scan the leading type keyword: one or more ASCII letters or digits."""
        start = self.pos
        while self.current() and self.current() in _ASCII_ALNUM:
            self.advance()
        if self.pos == start:
            raise self.error(f"Expected a type name, got {self._describe_current()}")
        return self._text[start : self.pos]

    def scan_space(self) -> None:
        """Scan the single space separating the parts of a declaration."""
        self.expect(" ")

    def scan_identifier(self) -> str:
        """Scan a field name: a letter followed by letters, digits, or underscores."""
        start = self.pos
        if not self.current().isalpha():
            raise self.error(f"Expected a field name, got {self._describe_current()}")
        self.advance()
        while self.current() and (self.current().isalpha() or self.current() in _DIGITS or self.current() == "_"):
            self.advance()
        return self._text[start : self.pos]

    def scan_number(self) -> int:
        """Scan an unsigned base-10 integer that fits in 32 bits."""
        start = self.pos
        digits = self._scan_digits("Expected a digit")
        # Checked by length first: int() refuses very long digit strings.
        significant = digits.lstrip("0")
        if len(significant) > _U32_MAX_DIGITS or int(significant or "0") > U32_MAX:
            shown = digits if len(digits) <= 20 else f"{digits[:20]}..."
            raise self.error(f"Number {shown} is out of range", start)
        return int(significant or "0")

    def scan_signed_float(self) -> float:
        """Scan a default value literal.

        The exponent marker is an uppercase ``E`` and must carry an explicit
        sign: ``-3.5E+2`` is valid, ``3.5e2`` and ``3.5E2`` are not.
        """
        start = self.pos
        if self.check("-"):
            self.advance()
        self._scan_digits("Expected a digit in default value")
        if self.check("."):
            self.advance()
            self._scan_digits("Expected a digit after '.'")
        if self.check("E"):
            self.advance()
            if self.current() not in ("+", "-"):
                raise self.error(f"Expected '+' or '-' after 'E', got {self._describe_current()}")
            self.advance()
            self._scan_digits("Expected a digit in exponent")
        value = float(self._text[start : self.pos])
        if not math.isfinite(value):
            raise self.error(f"Default value {self._text[start : self.pos]} is out of range", start)
        return value

    def scan_rest(self) -> str:
        """Scan everything up to the end of the line."""
        start = self.pos
        while self.current() and self.current() not in "\r\n":
            self.advance()
        return self._text[start : self.pos]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _scan_digits(self, message: str) -> str:
        start = self.pos
        while self.current() and self.current() in _DIGITS:
            self.advance()
        if self.pos == start:
            raise self.error(f"{message}, got {self._describe_current()}")
        return self._text[start : self.pos]

    def _describe_current(self) -> str:
        if self.at_end():
            return "end of line"
        return repr(self.current())


# ################
# Implementation
# ################

_DIGITS = frozenset(string.digits)
_U32_MAX_DIGITS = len(str(U32_MAX))
_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
