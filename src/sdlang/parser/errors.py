# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while parsing SDLang text.

Parsing is fail-fast: the first irrecoverable mismatch raises one of the
ParseError subclasses below and no partial document is produced.
"""

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Base class for all syntax errors.

    Attributes:
        offset: 0-based character offset of the error in the source text.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column


class UnexpectedCharacterError(ParseError):
    """A character that no rule accepts at this position.

    Attributes:
        context: What the parser was trying to recognize.
    """

    def __init__(self, char: str, context: str, offset: int, line: int, column: int) -> None:
        found = repr(char) if char else "end of input"
        super().__init__(f"Unexpected {found} in {context}", offset, line, column)
        self.context = context


class UnterminatedStringError(ParseError):
    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Unterminated string literal", offset, line, column)


class UnterminatedBlockCommentError(ParseError):
    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Unterminated block comment", offset, line, column)


class UnterminatedBase64Error(ParseError):
    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Unterminated base64 literal", offset, line, column)


class InvalidLiteralSuffixError(ParseError):
    """A numeric literal runs straight into identifier characters (e.g. ``12px``)."""

    def __init__(self, literal_kind: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"Invalid suffix on {literal_kind} literal", offset, line, column)
        self.literal_kind = literal_kind


class InvalidLiteralError(ParseError):
    """A lexically well-formed literal whose value is out of range or undecodable."""

    def __init__(self, literal_kind: str, detail: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"Invalid {literal_kind} literal: {detail}", offset, line, column)
        self.literal_kind = literal_kind


class MissingTagIdentityError(ParseError):
    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Tag has neither a name nor a leading value", offset, line, column)


class OutOfOrderConstructError(ParseError):
    """Values, attributes, and children appeared out of their mandatory order."""

    def __init__(self, detail: str, offset: int, line: int, column: int) -> None:
        super().__init__(detail, offset, line, column)


class UnclosedChildrenBlockError(ParseError):
    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Children block is never closed with '}'", offset, line, column)


class MaxNestingDepthExceededError(ParseError):
    """Children blocks are nested deeper than the configured limit."""

    def __init__(self, limit: int, offset: int, line: int, column: int) -> None:
        super().__init__(f"Children blocks nested deeper than {limit} levels", offset, line, column)
        self.limit = limit


class TrailingInputError(ParseError):
    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Unexpected input after the last tag", offset, line, column)
