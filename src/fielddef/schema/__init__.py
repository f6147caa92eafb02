# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Multi-line schema loading and its configuration."""

from fielddef.schema.config import (
    ConfigError,
    ParserConfig,
    UnrecognizedPolicy,
    load_parser_config,
    parse_parser_config,
)
from fielddef.schema.loader import SchemaError, SchemaIssue, parse_schema

__all__ = [
    "ConfigError",
    "ParserConfig",
    "SchemaError",
    "SchemaIssue",
    "UnrecognizedPolicy",
    "load_parser_config",
    "parse_parser_config",
    "parse_schema",
]
