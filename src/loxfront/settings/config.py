# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the loxfront driver configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import yaml

from loxfront.compiler.parser import DEFAULT_MAX_DEPTH

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".loxfront.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class DriverConfig:
    """Settings for the command-line driver.

    Attributes:
        prompt: Text shown before each line in interactive mode.
        max_nesting_depth: Maximum nesting of groupings and unary operators.
        allow_trailing_tokens: Accept tokens left over after a complete expression.
        color: Color diagnostics written to the terminal.
    """

    prompt: str = "> "
    max_nesting_depth: int = DEFAULT_MAX_DEPTH
    allow_trailing_tokens: bool = False
    color: bool = True


def load_config(path: Path) -> DriverConfig:
    """Load and parse a loxfront configuration file.

    Args:
        path: Path to the `.loxfront.yaml` file.

    Returns:
        A DriverConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> DriverConfig:
    """Parse config YAML text into a DriverConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return DriverConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    defaults = DriverConfig()
    prompt = _optional(data, "prompt", str, defaults.prompt, source_label)
    depth = _optional(data, "max-nesting-depth", int, defaults.max_nesting_depth, source_label)
    if depth < 1:
        raise ConfigError(f"{source_label}: 'max-nesting-depth' must be a positive integer")
    allow_trailing = _optional(data, "allow-trailing-tokens", bool, defaults.allow_trailing_tokens, source_label)
    color = _optional(data, "color", bool, defaults.color, source_label)

    return DriverConfig(
        prompt=prompt,
        max_nesting_depth=depth,
        allow_trailing_tokens=allow_trailing,
        color=color,
    )


_KNOWN_KEYS = frozenset({"prompt", "max-nesting-depth", "allow-trailing-tokens", "color"})

_TYPE_NAMES: dict[type, str] = {str: "a string", int: "an integer", bool: "a boolean"}


_T = TypeVar("_T")


def _optional(mapping: dict[str, object], key: str, expected: type[_T], default: _T, source_label: str) -> _T:
    """Extract an optional field of type *expected*, raising ConfigError on a type mismatch."""
    if key not in mapping:
        return default
    value = mapping[key]
    # bool is a subclass of int; 'true' is not a valid depth.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(f"{source_label}: '{key}' must be {_TYPE_NAMES[expected]}")
    return value
