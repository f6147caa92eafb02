# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic checks for parsed field declarations (bit sizes, lengths, names)."""

from fielddef.validation.checks import (
    FieldIssue,
    Severity,
    ValidationResult,
    validate,
)

__all__ = [
    "FieldIssue",
    "Severity",
    "ValidationResult",
    "validate",
]
