# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for SDLang, a concise XML-like data language of tags, values, and attributes.

Example::

    >>> from sdlang import parse
    >>> doc = parse('author "Peter Parker" email="peter@example.org" active=true')
    >>> doc.tag("author").attribute("active")
    BooleanValue(kind='boolean', value=True)
"""

from sdlang.config import Config, ConfigError, ParserOptions, WriterOptions, load_config
from sdlang.model import Attribute, Document, Tag, Value
from sdlang.parser import ParseError, parse, parse_attribute, parse_file, parse_tag, parse_value
from sdlang.writer import format_tag, format_value, stringify, write_file

__all__ = [
    "parse",
    "parse_attribute",
    "parse_file",
    "parse_tag",
    "parse_value",
    "ParseError",
    "stringify",
    "format_tag",
    "format_value",
    "write_file",
    "Document",
    "Tag",
    "Attribute",
    "Value",
    "ParserOptions",
    "WriterOptions",
    "Config",
    "ConfigError",
    "load_config",
]
