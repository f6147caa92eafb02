# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic checks for parsed field declarations.

The parser only enforces the shape of a line. These checks operate on a
sequence of parsed declarations (one record layout) and flag combinations
that are well-formed text but cannot describe a real field.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from fielddef.model.declarations import (
    ArrayLength,
    BitSize,
    DummyField,
    FieldDeclaration,
    FixedStringField,
    SimpleField,
    UnrecognizedField,
)

# ###############
# Public Interface
# ###############


class Severity(enum.Enum):
    """How serious a :class:`FieldIssue` is."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class FieldIssue:
    """A problem found in one declaration of a record layout.

    Attributes:
        severity: ``ERROR`` if the layout cannot be decoded as declared,
            ``WARNING`` if it is usable but probably not intended.
        field_name: Name of the offending field, or None for declarations
            the parser kept without a name (unrecognized types).
        message: Human-readable description of the problem.
    """

    severity: Severity
    field_name: str | None
    message: str


@dataclass
class ValidationResult:
    """Issues found by :func:`validate`, in check order."""

    issues: list[FieldIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[FieldIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[FieldIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return any(issue.severity == Severity.ERROR for issue in self.issues)


def validate(declarations: list[FieldDeclaration]) -> ValidationResult:
    """Run all semantic checks on the declarations of one record layout.

    Checks performed:

    1. **Unsupported bit size** (error): only unsigned integer types can be
       narrowed with ``:<bits>``.

    2. **Bit size range** (error): a bit size must be at least 1 and no
       wider than the storage of its type (8 bits for ``dummy8``).

    3. **Empty arrays** (error): array lengths of dummy and fixed string
       fields must be at least 1.

    4. **Duplicate names** (error): two non-dummy fields may not share a
       name. Padding fields are commonly all called ``pad`` and are exempt.

    5. **Unrecognized types** (warning): declarations the parser kept
       verbatim because their type keyword is unknown.

    Args:
        declarations: Parsed declarations in layout order.

    Returns:
        A :class:`ValidationResult`; an empty result means the layout is valid.
    """
    issues: list[FieldIssue] = []
    for declaration in declarations:
        issues.extend(_check_sizes(declaration))
    issues.extend(_check_duplicate_names(declarations))
    issues.extend(_check_unrecognized(declarations))
    return ValidationResult(issues=issues)


# ################
# Implementation
# ################

_DUMMY_STORAGE_BITS = 8


def _error(name: str, message: str) -> FieldIssue:
    return FieldIssue(severity=Severity.ERROR, field_name=name, message=message)


def _check_sizes(declaration: FieldDeclaration) -> list[FieldIssue]:
    """Return errors for bit sizes and array lengths that cannot be laid out."""
    errors: list[FieldIssue] = []

    if isinstance(declaration, SimpleField) and declaration.bit_size is not None:
        name, scalar = declaration.name, declaration.type
        if not scalar.supports_bit_size:
            errors.append(
                _error(
                    name,
                    f"Field '{name}' declares a bit size but type '{scalar.keyword}' does not support bit sizes.",
                )
            )
        elif not 1 <= declaration.bit_size <= scalar.storage_bits:
            errors.append(
                _error(
                    name,
                    f"Field '{name}' bit size {declaration.bit_size} is outside "
                    f"1..{scalar.storage_bits} for type '{scalar.keyword}'.",
                )
            )

    elif isinstance(declaration, DummyField):
        name, refinement = declaration.name, declaration.refinement
        if isinstance(refinement, BitSize) and not 1 <= refinement.bits <= _DUMMY_STORAGE_BITS:
            errors.append(
                _error(name, f"Padding field '{name}' bit size {refinement.bits} is outside 1..{_DUMMY_STORAGE_BITS}.")
            )
        if isinstance(refinement, ArrayLength) and refinement.length == 0:
            errors.append(_error(name, f"Padding field '{name}' has an array length of 0."))

    elif isinstance(declaration, FixedStringField) and declaration.array_length == 0:
        errors.append(_error(declaration.name, f"String field '{declaration.name}' has a length of 0."))

    return errors


def _check_duplicate_names(declarations: list[FieldDeclaration]) -> list[FieldIssue]:
    """Return one error per name declared by more than one non-dummy field."""
    errors: list[FieldIssue] = []
    seen: set[str] = set()
    reported: set[str] = set()
    for declaration in declarations:
        if not isinstance(declaration, SimpleField | FixedStringField):
            continue
        name = declaration.name
        if name in seen and name not in reported:
            errors.append(_error(name, f"Field name '{name}' is declared more than once."))
            reported.add(name)
        seen.add(name)
    return errors


def _check_unrecognized(declarations: list[FieldDeclaration]) -> list[FieldIssue]:
    """Return a warning for each declaration with an unknown type keyword."""
    return [
        FieldIssue(
            severity=Severity.WARNING,
            field_name=None,
            message=f"Unrecognized field type '{d.raw_type_token}' in '{d.raw_type_token} {d.remainder}'.",
        )
        for d in declarations
        if isinstance(d, UnrecognizedField)
    ]
