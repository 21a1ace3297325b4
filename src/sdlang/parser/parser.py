# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for SDLang text.

Builds a Document from source text. A tag is an optional ``namespace:``
prefixed name (or a leading value for anonymous tags), followed by values,
then ``key=value`` attributes, then an optional ``{...}`` children block.
Tags are separated by ``;`` or by newlines; inside a tag, whitespace and
comments never cross a newline.
"""

from __future__ import annotations

import logging
import string
from pathlib import Path

from sdlang.config import ParserOptions
from sdlang.model.tree import Attribute, Document, Tag
from sdlang.model.values import Value
from sdlang.parser.errors import (
    MaxNestingDepthExceededError,
    MissingTagIdentityError,
    OutOfOrderConstructError,
    TrailingInputError,
    UnclosedChildrenBlockError,
)
from sdlang.parser.literals import scan_value
from sdlang.parser.scanner import Scanner, is_identifier_start

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(source: str, options: ParserOptions | None = None) -> Document:
    """Parse SDLang source text into a Document.

    Args:
        source: The full SDLang text.
        options: Parser options; defaults are used when omitted.

    Returns:
        A Document holding the top-level tags in source order.

    Raises:
        ParseError: If the source is syntactically invalid. The concrete
            subclass identifies the kind of error.
    """
    parser = _Parser(source, options or ParserOptions())
    document = parser.parse_document()
    logger.debug("Parsed %d top-level tag(s) from %d characters", len(document.tags), len(source))
    return document


def parse_file(path: Path, options: ParserOptions | None = None) -> Document:
    """Read a UTF-8 file and parse it into a Document.

    Raises:
        OSError: If the file cannot be read.
        ParseError: If the file contents are syntactically invalid.
    """
    logger.debug("Reading %s", path)
    return parse(path.read_text(encoding="utf-8"), options)


def parse_value(source: str) -> Value:
    """Parse text holding exactly one literal, optionally surrounded by whitespace.

    Raises:
        ParseError: If the text is not a single literal.
    """
    scanner = Scanner(source)
    scanner.skip_any()
    value = scan_value(scanner)
    if value is None:
        raise scanner.unexpected("value")
    _expect_end(scanner)
    return value


def parse_tag(source: str, options: ParserOptions | None = None) -> Tag:
    """Parse text holding exactly one tag (and any children it has).

    Raises:
        ParseError: If the text is not a single tag.
    """
    parser = _Parser(source, options or ParserOptions())
    return parser.parse_single_tag()


def parse_attribute(source: str) -> Attribute:
    """Parse text holding exactly one ``key=value`` attribute.

    Raises:
        ParseError: If the text is not a single attribute.
    """
    parser = _Parser(source, ParserOptions())
    return parser.parse_single_attribute()


# ################
# Implementation
# ################

_STATEMENT_END = (";", "\n", "}")
_NAMESPACE_SEPARATOR = ":"


def _expect_end(scanner: Scanner) -> None:
    scanner.skip_any()
    if not scanner.at_end():
        raise scanner.error(TrailingInputError)


class _Parser:
    """Recursive-descent parser over a character cursor."""

    def __init__(self, source: str, options: ParserOptions) -> None:
        self._scanner = Scanner(source)
        self._max_depth = options.max_depth

    def parse_document(self) -> Document:
        """Parse the entire input as a sequence of tags."""
        tags = self._parse_tags(depth=0, open_brace=None)
        return Document(tags=tuple(tags))

    def parse_single_tag(self) -> Tag:
        scanner = self._scanner
        scanner.skip_any()
        tag = self._parse_tag(depth=0)
        _expect_end(scanner)
        return tag

    def parse_single_attribute(self) -> Attribute:
        scanner = self._scanner
        scanner.skip_any()
        attribute = self._parse_attribute()
        if attribute is None:
            raise scanner.unexpected("attribute")
        _expect_end(scanner)
        return attribute

    # ------------------------------------------------------------------
    # Tag sequences
    # ------------------------------------------------------------------

    def _parse_tags(self, depth: int, open_brace: int | None) -> list[Tag]:
        """Parse tags separated by ';' or newlines.

        At the top level (*open_brace* is None) this runs to end of input. In
        a children block it stops in front of the closing '}'.
        """
        scanner = self._scanner
        tags: list[Tag] = []
        while True:
            self._skip_separators()
            if scanner.at_end():
                if open_brace is not None:
                    raise scanner.error(UnclosedChildrenBlockError, offset=open_brace)
                return tags
            if scanner.current() == "}":
                if open_brace is None:
                    raise scanner.error(TrailingInputError)
                return tags
            tags.append(self._parse_tag(depth))

    def _skip_separators(self) -> None:
        """Skip whitespace, comments, newlines, and empty statements."""
        scanner = self._scanner
        while True:
            scanner.skip_any()
            if scanner.current() != ";":
                return
            scanner.advance()

    # ------------------------------------------------------------------
    # Single tags
    # ------------------------------------------------------------------

    def _parse_tag(self, depth: int) -> Tag:
        """Parse one tag; the cursor is left on its terminating ';', newline, '}' or end of input."""
        scanner = self._scanner
        start = scanner.pos
        namespace: str | None = None
        name: str | None = None
        values: list[Value] = []
        attributes: list[Attribute] = []
        children: tuple[Tag, ...] | None = None

        leading = scan_value(scanner)
        if leading is not None:
            values.append(leading)
        else:
            namespace, name = self._parse_tag_name(start)

        while True:
            separated = scanner.skip_inline()
            if scanner.at_end() or scanner.current() in _STATEMENT_END:
                break
            if scanner.current() == "{":
                children = self._parse_children(depth)
                self._reject_after_children()
                break
            if not separated:
                raise scanner.unexpected("tag")
            item_start = scanner.pos
            attribute = self._parse_attribute()
            if attribute is not None:
                attributes.append(attribute)
                continue
            value = scan_value(scanner)
            if value is None:
                raise scanner.unexpected("tag")
            if attributes:
                raise scanner.error(
                    OutOfOrderConstructError,
                    "Values must come before attributes",
                    offset=item_start,
                )
            values.append(value)

        return Tag(
            namespace=namespace,
            name=name,
            values=tuple(values),
            attributes=tuple(attributes),
            children=children,
        )

    def _parse_tag_name(self, start: int) -> tuple[str | None, str]:
        """Parse: [<namespace>:]<name>"""
        scanner = self._scanner
        ident = scanner.scan_identifier()
        if ident is None:
            raise scanner.unexpected("tag")
        namespace: str | None = None
        name = ident
        if scanner.current() == _NAMESPACE_SEPARATOR:
            scanner.advance()
            namespace = ident
            local_name = scanner.scan_identifier()
            if local_name is None:
                raise scanner.unexpected(f"tag name after namespace {namespace!r}")
            name = local_name
        if scanner.current() == "=":
            # `key=value` in the leading position: an attribute with no tag.
            raise scanner.error(MissingTagIdentityError, offset=start)
        return namespace, name

    def _parse_attribute(self) -> Attribute | None:
        """Parse ``<key>=<value>``; return None without consuming if no key and '=' are here."""
        scanner = self._scanner
        start = scanner.pos
        key = scanner.scan_identifier()
        if key is None:
            return None
        if scanner.current() != "=":
            scanner.pos = start
            return None
        scanner.advance()  # consume =
        value = scan_value(scanner)
        if value is None:
            raise scanner.unexpected(f"value of attribute {key!r}")
        return Attribute(key=key, value=value)

    # ------------------------------------------------------------------
    # Children blocks
    # ------------------------------------------------------------------

    def _parse_children(self, depth: int) -> tuple[Tag, ...]:
        """Parse: { <tags> }"""
        scanner = self._scanner
        open_brace = scanner.pos
        if depth + 1 > self._max_depth:
            raise scanner.error(MaxNestingDepthExceededError, self._max_depth, offset=open_brace)
        scanner.advance()  # consume {
        children = self._parse_tags(depth + 1, open_brace)
        scanner.advance()  # consume }
        return tuple(children)

    def _reject_after_children(self) -> None:
        """Ensure nothing but a statement end follows a children block."""
        scanner = self._scanner
        scanner.skip_inline()
        if scanner.at_end() or scanner.current() in _STATEMENT_END:
            return
        ch = scanner.current()
        if ch == "{" or ch in "\"`[-" or ch in string.digits or is_identifier_start(ch):
            raise scanner.error(
                OutOfOrderConstructError,
                "Nothing may follow the children block of a tag",
            )
        raise scanner.unexpected("tag")
