# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field declaration variants produced by the declaration parser."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from fielddef.model.types import ScalarType

# ###############
# Public Interface
# ###############

U32_MAX = 2**32 - 1

# A non-negative count that fits an unsigned 32-bit integer.
Count = Annotated[int, _Field(ge=0, le=U32_MAX)]


class ArrayLength(BaseModel):
    """A ``[<n>]`` suffix: the field repeats *length* times."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array_length"] = "array_length"
    length: Count


class BitSize(BaseModel):
    """A ``:<n>`` suffix: the field occupies *bits* bits."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bit_size"] = "bit_size"
    bits: Count


Refinement = Annotated[ArrayLength | BitSize, _Field(discriminator="kind")]


class SimpleField(BaseModel):
    """A named scalar field, optionally bit-packed and with a default value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["simple"] = "simple"
    type: ScalarType
    name: str = _Field(min_length=1)
    bit_size: Count | None = None
    default: float | None = None


class DummyField(BaseModel):
    """A ``dummy8`` padding field, sized by an array length or a bit count."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["dummy"] = "dummy"
    name: str = _Field(min_length=1)
    refinement: Refinement | None = None
    default: float | None = None


class FixedStringField(BaseModel):
    """A fixed-length string; *wide* strings use two bytes per element."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixstr"] = "fixstr"
    name: str = _Field(min_length=1)
    wide: bool = False
    array_length: Count


class UnrecognizedField(BaseModel):
    """A declaration whose type keyword is not known, kept verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecognized"] = "unrecognized"
    raw_type_token: str = _Field(min_length=1)
    remainder: str


# One parsed declaration line.
FieldDeclaration = Annotated[
    SimpleField | DummyField | FixedStringField | UnrecognizedField,
    _Field(discriminator="kind"),
]
