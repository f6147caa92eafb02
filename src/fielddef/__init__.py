# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for one-line field declarations of packed binary record layouts."""

from fielddef.parser import FieldSyntaxError, parse
from fielddef.render import render

__all__ = [
    "parse",
    "render",
    "FieldSyntaxError",
]
