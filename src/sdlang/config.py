# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser and writer options, and the YAML file they can be loaded from."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".sdlang.yaml"

DEFAULT_MAX_DEPTH = 128
# Parsing, rendering and comparing a tree each recurse once per nesting level,
# and pydantic's model equality costs several interpreter frames per level.
# Trees up to this depth stay below the default recursion limit.
MAX_DEPTH_LIMIT = 200


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ParserOptions:
    """Options controlling the parser.

    Attributes:
        max_depth: Maximum number of nested children blocks.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}")


@dataclass(frozen=True)
class WriterOptions:
    """Options controlling how documents are rendered back to text.

    Attributes:
        indent: Text prepended once per nesting level inside children blocks.
    """

    indent: str = "    "


@dataclass(frozen=True)
class Config:
    """Options loaded from a configuration file."""

    parser: ParserOptions = field(default_factory=ParserOptions)
    writer: WriterOptions = field(default_factory=WriterOptions)


def load_config(path: Path) -> Config:
    """Load and parse a ``.sdlang.yaml`` configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        A Config populated from the file; missing keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> Config:
    """Parse configuration YAML text into a Config.

    Recognized keys are ``max-nesting-depth`` and ``indent-width``. An empty
    document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid, a key is unknown, or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown config key(s): {', '.join(unknown)}")

    parser = ParserOptions()
    if "max-nesting-depth" in data:
        max_depth = _require_int(data, "max-nesting-depth", source_label, minimum=1)
        try:
            parser = ParserOptions(max_depth=max_depth)
        except ValueError as exc:
            raise ConfigError(f"{source_label}: 'max-nesting-depth': {exc}") from None

    writer = WriterOptions()
    if "indent-width" in data:
        width = _require_int(data, "indent-width", source_label, minimum=0)
        writer = WriterOptions(indent=" " * width)

    return Config(parser=parser, writer=writer)


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"max-nesting-depth", "indent-width"})


def _require_int(mapping: dict[str, object], key: str, source_label: str, minimum: int) -> int:
    """Extract an integer field of at least *minimum*, raising ConfigError otherwise."""
    value = mapping[key]
    # bool is an int subclass; `true` is not a width.
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{source_label}: '{key}' must be an integer")
    if value < minimum:
        raise ConfigError(f"{source_label}: '{key}' must be at least {minimum}")
    return value
