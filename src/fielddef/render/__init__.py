# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text rendering of parsed field declarations."""

from fielddef.render.text import render, render_all

__all__ = [
    "render",
    "render_all",
]
