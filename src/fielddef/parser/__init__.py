# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and parser for field declaration lines."""

from fielddef.parser.parser import FieldSyntaxError, parse

__all__ = [
    "parse",
    "FieldSyntaxError",
]
