# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for SDLang documentation."""

project = "sdlang"
author = "SDLang Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
