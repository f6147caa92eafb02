# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value model for field declarations (scalar types and declaration variants)."""

from fielddef.model.declarations import (
    U32_MAX,
    ArrayLength,
    BitSize,
    DummyField,
    FieldDeclaration,
    FixedStringField,
    Refinement,
    SimpleField,
    UnrecognizedField,
)
from fielddef.model.types import (
    Angle32Type,
    Bool32Type,
    FloatType,
    IntType,
    ScalarType,
)

__all__ = [
    # Scalar types
    "IntType",
    "Angle32Type",
    "FloatType",
    "Bool32Type",
    "ScalarType",
    # Declarations
    "U32_MAX",
    "ArrayLength",
    "BitSize",
    "Refinement",
    "SimpleField",
    "DummyField",
    "FixedStringField",
    "UnrecognizedField",
    "FieldDeclaration",
]
