# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing of whole blocks of field declarations.

A schema is one declaration per line in record layout order. The loader
parses every line, reports all syntax errors at once, and applies the
configured policy to declarations with an unrecognized type keyword.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fielddef.model.declarations import FieldDeclaration, UnrecognizedField
from fielddef.parser.parser import FieldSyntaxError, parse
from fielddef.schema.config import ParserConfig, UnrecognizedPolicy
from fielddef.validation.checks import validate

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SchemaIssue:
    """A problem attributed to one line of a schema.

    Attributes:
        line_number: 1-based line number, or 0 for issues spanning the whole schema.
        message: Human-readable description of the problem.
    """

    line_number: int
    message: str

    def __str__(self) -> str:
        if self.line_number == 0:
            return self.message
        return f"Line {self.line_number}: {self.message}"


class SchemaError(Exception):
    """Raised when a schema contains invalid declarations.

    Attributes:
        issues: Every problem found, in line order.
    """

    def __init__(self, issues: list[SchemaIssue]) -> None:
        super().__init__("\n".join(str(issue) for issue in issues))
        self.issues = issues


def parse_schema(
    source: str | Iterable[str],
    config: ParserConfig | None = None,
) -> list[FieldDeclaration]:
    """Parse a block of field declarations.

    A text source is split at line feeds only. Line endings are stripped
    from every line and blank lines are skipped.

    Args:
        source: Schema text, or an iterable of individual lines.
        config: Loader settings; defaults to :class:`ParserConfig` defaults.

    Returns:
        The parsed declarations in line order, minus any dropped by the
        ``skip`` policy.

    Raises:
        SchemaError: If any line fails to parse, an unrecognized declaration
            is found under the ``error`` policy, or validation is enabled and
            reports errors.
    """
    if config is None:
        config = ParserConfig()
    if isinstance(source, str):
        # Only "\n" ends a line; str.splitlines() would also split on form feeds and U+2028.
        lines: Iterable[str] = (line.rstrip("\r") for line in source.split("\n"))
    else:
        lines = (line.rstrip("\r\n") for line in source)

    declarations: list[FieldDeclaration] = []
    issues: list[SchemaIssue] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            declaration = parse(line)
        except FieldSyntaxError as exc:
            issues.append(SchemaIssue(line_number, str(exc)))
            continue
        if isinstance(declaration, UnrecognizedField):
            issue = _apply_unrecognized_policy(declaration, line_number, config.unrecognized)
            if issue is not None:
                issues.append(issue)
            if config.unrecognized in (UnrecognizedPolicy.SKIP, UnrecognizedPolicy.ERROR):
                continue
        declarations.append(declaration)

    if issues:
        raise SchemaError(issues)

    if config.validate:
        _run_validation(declarations)
    return declarations


# ################
# Implementation
# ################


def _apply_unrecognized_policy(
    declaration: UnrecognizedField,
    line_number: int,
    policy: UnrecognizedPolicy,
) -> SchemaIssue | None:
    """Log or report an unrecognized declaration according to *policy*."""
    token = declaration.raw_type_token
    if policy == UnrecognizedPolicy.WARN:
        logger.warning("Line %d: unrecognized field type %r", line_number, token)
    elif policy == UnrecognizedPolicy.SKIP:
        logger.debug("Line %d: skipping unrecognized field type %r", line_number, token)
    elif policy == UnrecognizedPolicy.ERROR:
        return SchemaIssue(line_number, f"Unrecognized field type {token!r}")
    return None


def _run_validation(declarations: list[FieldDeclaration]) -> None:
    """Validate the parsed layout and raise on errors.

    Unrecognized declarations are left out: the unrecognized policy has
    already kept, logged, dropped or rejected them.
    """
    result = validate([d for d in declarations if not isinstance(d, UnrecognizedField)])
    if result.has_errors:
        raise SchemaError([SchemaIssue(0, error.message) for error in result.errors])
