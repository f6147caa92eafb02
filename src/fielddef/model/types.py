# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scalar storage types usable in simple field declarations."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class IntType(BaseModel):
    """A signed or unsigned integer of 8, 16, or 32 bits (``s8`` .. ``u32``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["int"] = "int"
    signed: bool
    bits: Literal[8, 16, 32]

    @property
    def storage_bits(self) -> int:
        return self.bits

    @property
    def supports_bit_size(self) -> bool:
        """Only unsigned integers may be narrowed with a ``:<bits>`` suffix."""
        return not self.signed

    @property
    def keyword(self) -> str:
        return f"{'s' if self.signed else 'u'}{self.bits}"


class Angle32Type(BaseModel):
    """A 32-bit float that holds an angle (``angle32`` or ``a32``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["angle32"] = "angle32"

    @property
    def storage_bits(self) -> int:
        return 32

    @property
    def supports_bit_size(self) -> bool:
        return False

    @property
    def keyword(self) -> str:
        return "angle32"


class FloatType(BaseModel):
    """A single- or double-precision float (``f32`` or ``f64``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["float"] = "float"
    bits: Literal[32, 64]

    @property
    def storage_bits(self) -> int:
        return self.bits

    @property
    def supports_bit_size(self) -> bool:
        return False

    @property
    def keyword(self) -> str:
        return f"f{self.bits}"


class Bool32Type(BaseModel):
    """A boolean stored in 32 bits, zero meaning false (``b32``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bool32"] = "bool32"

    @property
    def storage_bits(self) -> int:
        return 32

    @property
    def supports_bit_size(self) -> bool:
        return False

    @property
    def keyword(self) -> str:
        return "b32"


# A scalar storage type. The `kind` discriminator keeps (de)serialization unambiguous.
ScalarType = Annotated[
    IntType | Angle32Type | FloatType | Bool32Type,
    _Field(discriminator="kind"),
]
