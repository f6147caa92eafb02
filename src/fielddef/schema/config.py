# Copyright 2026 FieldDef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the schema loader configuration file."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


class UnrecognizedPolicy(enum.Enum):
    """What the schema loader does with declarations of unknown type."""

    IGNORE = "ignore"
    WARN = "warn"
    SKIP = "skip"
    ERROR = "error"


@dataclass
class ParserConfig:
    """Settings for :func:`fielddef.schema.parse_schema`.

    Attributes:
        unrecognized: Policy applied to UnrecognizedField declarations.
        validate: Run the semantic checks on the parsed declarations.
    """

    unrecognized: UnrecognizedPolicy = UnrecognizedPolicy.WARN
    validate: bool = False


def load_parser_config(path: Path) -> ParserConfig:
    """Load and parse a schema loader configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A ParserConfig populated from the file; missing keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_parser_config(text, source_label=str(path))


def parse_parser_config(text: str, source_label: str = "<string>") -> ParserConfig:
    """Parse configuration YAML text into a ParserConfig.

    Args:
        text: Raw YAML content. An empty document yields the defaults.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ConfigError: If the YAML is invalid or a key has an unsupported value.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ParserConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown config key(s): {', '.join(unknown)}")

    config = ParserConfig()
    if "unrecognized" in data:
        config.unrecognized = _parse_policy(data["unrecognized"], source_label)
    if "validate" in data:
        value = data["validate"]
        if not isinstance(value, bool):
            raise ConfigError(f"{source_label}: 'validate' must be true or false")
        config.validate = value
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"unrecognized", "validate"})


def _parse_policy(value: object, source_label: str) -> UnrecognizedPolicy:
    """Map the 'unrecognized' value onto an UnrecognizedPolicy."""
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: 'unrecognized' must be a string")
    try:
        return UnrecognizedPolicy(value)
    except ValueError:
        choices = ", ".join(p.value for p in UnrecognizedPolicy)
        raise ConfigError(f"{source_label}: 'unrecognized' must be one of {choices}, got {value!r}") from None
