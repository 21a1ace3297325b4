# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

from pathlib import Path

import pytest

from sdlang.config import (
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_LIMIT,
    Config,
    ConfigError,
    ParserOptions,
    WriterOptions,
    load_config,
    parse_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / ".sdlang.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default parser and writer options."""
    config = load_config(_write_config(tmp_path, ""))

    assert config == Config()
    assert config.parser.max_depth == DEFAULT_MAX_DEPTH
    assert config.writer.indent == "    "


def test_max_nesting_depth(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "max-nesting-depth: 32\n"))
    assert config.parser == ParserOptions(max_depth=32)


def test_indent_width(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "indent-width: 2\n"))
    assert config.writer == WriterOptions(indent="  ")


def test_both_keys(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "max-nesting-depth: 10\nindent-width: 0\n"))
    assert config.parser.max_depth == 10
    assert config.writer.indent == ""


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nonexistent.yaml")


def test_invalid_yaml_raises() -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config("max-nesting-depth: [unclosed")


def test_non_mapping_raises() -> None:
    with pytest.raises(ConfigError, match="mapping"):
        parse_config("- a\n- b\n")


def test_unknown_key_raises() -> None:
    with pytest.raises(ConfigError, match="unknown config key"):
        parse_config("max-depth: 3\n")


@pytest.mark.parametrize("value", ["ten", "true", "1.5", "[1]"])
def test_non_integer_value_raises(value: str) -> None:
    with pytest.raises(ConfigError, match="must be an integer"):
        parse_config(f"max-nesting-depth: {value}\n")


def test_depth_below_one_raises() -> None:
    with pytest.raises(ConfigError, match="at least 1"):
        parse_config("max-nesting-depth: 0\n")


def test_depth_above_limit_raises() -> None:
    with pytest.raises(ConfigError, match="max-nesting-depth"):
        parse_config(f"max-nesting-depth: {MAX_DEPTH_LIMIT + 1}\n")


def test_negative_indent_raises() -> None:
    with pytest.raises(ConfigError, match="at least 0"):
        parse_config("indent-width: -1\n")


def test_error_mentions_source_label(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "bogus: 1\n")
    with pytest.raises(ConfigError, match=str(path.name)):
        load_config(path)


# ###############
# Options
# ###############


@pytest.mark.parametrize("depth", [0, -1, MAX_DEPTH_LIMIT + 1])
def test_parser_options_reject_out_of_range_depth(depth: int) -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_depth=depth)
