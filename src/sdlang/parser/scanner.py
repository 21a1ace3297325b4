# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character-level cursor over SDLang source text.

Provides the primitives shared by the literal scanner and the tag parser:
character access, whitespace and comment skipping, identifier recognition,
and conversion of offsets into line/column positions for error reporting.
"""

from __future__ import annotations

import string
from typing import TypeVar

from sdlang.parser.errors import (
    ParseError,
    UnexpectedCharacterError,
    UnterminatedBlockCommentError,
)

# ###############
# Public Interface
# ###############

_E = TypeVar("_E", bound=ParseError)

# Whitespace inside a line; "\n" ends a tag and is handled separately.
INLINE_WHITESPACE = frozenset(" \t\r")


def is_identifier_start(ch: str) -> bool:
    """Return True if *ch* may begin an identifier."""
    return ch in _IDENTIFIER_START


def is_identifier_char(ch: str) -> bool:
    """Return True if *ch* may continue an identifier."""
    return ch in _IDENTIFIER_CHARS


class Scanner:
    """Mutable cursor over a source string.

    The cursor only ever moves forward, except when a caller restores a
    previously saved ``pos`` to undo a failed alternative.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    def peek(self, distance: int = 1) -> str:
        """Return the character *distance* positions ahead, or '' past the end."""
        index = self.pos + distance
        if index < len(self.source):
            return self.source[index]
        return ""

    def startswith(self, text: str) -> bool:
        return self.source.startswith(text, self.pos)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.source))

    # ------------------------------------------------------------------
    # Whitespace and comment skipping
    # ------------------------------------------------------------------

    def skip_inline(self) -> bool:
        """Skip whitespace and comments that do not cross a newline.

        A line comment stops in front of its terminating newline, and a
        backslash directly before a newline joins the two lines. Returns True
        if anything was skipped.
        """
        start = self.pos
        while not self.at_end():
            ch = self.current()
            if ch == "\n":
                break
            if ch in INLINE_WHITESPACE:
                self.advance()
            elif ch == "\\" and self.peek() == "\n":
                self.advance(2)
            elif ch == "\\" and self.peek() == "\r" and self.peek(2) == "\n":
                self.advance(3)
            elif self.startswith("/*"):
                self.skip_block_comment()
            elif self.at_line_comment():
                self.skip_line_comment()
            else:
                break
        return self.pos > start

    def skip_any(self) -> bool:
        """Skip whitespace, newlines, and comments. Returns True if anything was skipped."""
        start = self.pos
        while True:
            self.skip_inline()
            if self.current() != "\n":
                break
            self.advance()
        return self.pos > start

    def at_line_comment(self) -> bool:
        return self.current() == "#" or self.startswith("//") or self.startswith("--")

    def skip_line_comment(self) -> None:
        """Consume a line comment up to, not including, the newline or end of input."""
        end = self.source.find("\n", self.pos)
        self.pos = len(self.source) if end == -1 else end

    def skip_block_comment(self) -> None:
        """Consume from '/*' through the first following '*/'."""
        start = self.pos
        end = self.source.find("*/", start + 2)
        if end == -1:
            raise self.error(UnterminatedBlockCommentError, offset=start)
        self.pos = end + 2

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    def scan_identifier(self) -> str | None:
        """Consume and return an identifier, or return None without consuming."""
        if not is_identifier_start(self.current()):
            return None
        start = self.pos
        self.advance()
        while is_identifier_char(self.current()):
            self.advance()
        return self.source[start : self.pos]

    # ------------------------------------------------------------------
    # Error reporting
    # ------------------------------------------------------------------

    def location(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of *offset*."""
        line = self.source.count("\n", 0, offset) + 1
        column = offset - (self.source.rfind("\n", 0, offset) + 1) + 1
        return line, column

    def error(self, error_cls: type[_E], *args: object, offset: int | None = None) -> _E:
        """Build *error_cls* positioned at *offset* (default: the current position)."""
        if offset is None:
            offset = self.pos
        line, column = self.location(offset)
        return error_cls(*args, offset, line, column)

    def unexpected(self, context: str, offset: int | None = None) -> UnexpectedCharacterError:
        """Build an UnexpectedCharacterError for the character at *offset*."""
        if offset is None:
            offset = self.pos
        char = self.source[offset : offset + 1]
        return self.error(UnexpectedCharacterError, char, context, offset=offset)


# ################
# Implementation
# ################

_IDENTIFIER_START = frozenset(string.ascii_letters + "_")
_IDENTIFIER_CHARS = _IDENTIFIER_START | frozenset(string.digits + ".$-")
