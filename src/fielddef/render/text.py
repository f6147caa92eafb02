# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Canonical text rendering of field declarations.

The rendered line always parses back to an equal declaration. Angles are
written with the long ``angle32`` keyword and defaults in the grammar's
float form (``-350.0``, ``1E-05``).
"""

from fielddef.model.declarations import (
    ArrayLength,
    BitSize,
    DummyField,
    FieldDeclaration,
    FixedStringField,
    Refinement,
    SimpleField,
    UnrecognizedField,
)

# ###############
# Public Interface
# ###############


def render(declaration: FieldDeclaration) -> str:
    """Render *declaration* as a single declaration line (without newline)."""
    if isinstance(declaration, SimpleField):
        line = f"{declaration.type.keyword} {declaration.name}"
        if declaration.bit_size is not None:
            line += f":{declaration.bit_size}"
        return line + _default_suffix(declaration.default)
    if isinstance(declaration, DummyField):
        line = f"dummy8 {declaration.name}"
        if declaration.refinement is not None:
            line += _refinement_suffix(declaration.refinement)
        return line + _default_suffix(declaration.default)
    if isinstance(declaration, FixedStringField):
        keyword = "fixstrW" if declaration.wide else "fixstr"
        return f"{keyword} {declaration.name}[{declaration.array_length}]"
    # UnrecognizedField is the only remaining variant.
    assert isinstance(declaration, UnrecognizedField)
    return f"{declaration.raw_type_token} {declaration.remainder}"


def render_all(declarations: list[FieldDeclaration]) -> str:
    """Render several declarations, one per line, with a trailing newline."""
    return "".join(render(d) + "\n" for d in declarations)


# ################
# Implementation
# ################


def _refinement_suffix(refinement: Refinement) -> str:
    if isinstance(refinement, ArrayLength):
        return f"[{refinement.length}]"
    assert isinstance(refinement, BitSize)
    return f":{refinement.bits}"


def _default_suffix(default: float | None) -> str:
    if default is None:
        return ""
    # repr() gives the shortest round-tripping form with a signed lowercase exponent.
    return f" = {repr(default).replace('e', 'E')}"
