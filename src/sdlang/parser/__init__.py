# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and parser for SDLang text."""

from sdlang.parser.errors import (
    InvalidLiteralError,
    InvalidLiteralSuffixError,
    MaxNestingDepthExceededError,
    MissingTagIdentityError,
    OutOfOrderConstructError,
    ParseError,
    TrailingInputError,
    UnclosedChildrenBlockError,
    UnexpectedCharacterError,
    UnterminatedBase64Error,
    UnterminatedBlockCommentError,
    UnterminatedStringError,
)
from sdlang.parser.parser import parse, parse_attribute, parse_file, parse_tag, parse_value

__all__ = [
    "parse",
    "parse_attribute",
    "parse_file",
    "parse_tag",
    "parse_value",
    # Errors
    "ParseError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedBlockCommentError",
    "UnterminatedBase64Error",
    "InvalidLiteralSuffixError",
    "InvalidLiteralError",
    "MissingTagIdentityError",
    "OutOfOrderConstructError",
    "UnclosedChildrenBlockError",
    "MaxNestingDepthExceededError",
    "TrailingInputError",
]
