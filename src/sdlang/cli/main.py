# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the SDLang command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from sdlang.config import CONFIG_FILE_NAME, Config, ConfigError, load_config
from sdlang.model.tree import Document
from sdlang.parser import ParseError, parse_file
from sdlang.writer import stringify

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the SDLang CLI."""
    parser = argparse.ArgumentParser(
        prog="sdlang",
        description="SDLang - parse, check, and format SDLang files",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that files are valid SDLang",
        description="Parse each file and report the first syntax error in it.",
    )
    check_parser.add_argument("files", nargs="+", type=Path, help="Files to check")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        help="Print files in canonical formatting",
        description="Parse a file and print it back in canonical SDLang formatting.",
    )
    format_parser.add_argument("file", type=Path, help="File to format")
    format_parser.add_argument(
        "--write",
        action="store_true",
        help="Rewrite the file in place instead of printing it",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the parsed document as JSON",
        description="Parse a file and print its document tree as JSON.",
    )
    dump_parser.add_argument("file", type=Path, help="File to dump")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    config = _load_config(args.config)
    if config is None:
        return 1
    if args.command == "check":
        return _cmd_check(args, config)
    if args.command == "format":
        return _cmd_format(args, config)
    if args.command == "dump":
        return _cmd_dump(args, config)
    return 0


def _load_config(explicit: Path | None) -> Config | None:
    """Load the configuration file, falling back to defaults when none exists.

    Returns None (after reporting on stderr) if the file is invalid.
    """
    path = explicit if explicit is not None else Path.cwd() / CONFIG_FILE_NAME
    if explicit is None and not path.exists():
        logger.debug("No %s found, using default options", CONFIG_FILE_NAME)
        return Config()
    try:
        config = load_config(path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    logger.debug("Loaded configuration from %s", path)
    return config


def _parse_or_report(path: Path, config: Config) -> Document | None:
    """Parse *path*, printing any error to stderr and returning None on failure."""
    try:
        return parse_file(path, config.parser)
    except OSError as exc:
        print(f"{path}: Error: cannot read file: {exc}", file=sys.stderr)
    except UnicodeDecodeError as exc:
        print(f"{path}: Error: file is not valid UTF-8: {exc}", file=sys.stderr)
    except ParseError as exc:
        print(f"{path}: Error: {exc}", file=sys.stderr)
    return None


def _cmd_check(args: argparse.Namespace, config: Config) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for path in args.files:
        document = _parse_or_report(path, config)
        if document is None:
            has_errors = True
            continue
        print(f"{path}: OK ({len(document.tags)} top-level tag(s))")
    return 1 if has_errors else 0


def _cmd_format(args: argparse.Namespace, config: Config) -> int:
    """Handle the format subcommand."""
    document = _parse_or_report(args.file, config)
    if document is None:
        return 1
    text = stringify(document, config.writer)
    if args.write:
        args.file.write_text(text, encoding="utf-8")
        print(f"Formatted '{args.file}'.")
    else:
        sys.stdout.write(text)
    return 0


def _cmd_dump(args: argparse.Namespace, config: Config) -> int:
    """Handle the dump subcommand."""
    document = _parse_or_report(args.file, config)
    if document is None:
        return 1
    print(document.model_dump_json(indent=2))
    return 0
