"""
textfilters - Case conversion filters for Jinja2 templates.

Provides camel_case, kebab_case, lower_case, mixed_case, snake_case,
title_case and upper_case filters, plus the word-splitting and rendering
functions they are built on.
"""

__version__ = "0.1.0"

# Case styles
from textfilters.styles import CaseStyle, get_filter_names

# Conversion
from textfilters.core.words import split_words
from textfilters.core.renderer import render, convert

# Filters
from textfilters.filters import (
    FILTER_NAMES,
    camel_case,
    kebab_case,
    lower_case,
    mixed_case,
    snake_case,
    title_case,
    upper_case,
    make_filter,
    build_registry,
    register_all,
    create_environment,
)

# Errors
from textfilters.errors import TextFilterError, InputTypeError

# Configuration
from textfilters.config import Settings, get_settings

__all__ = [
    # Version
    "__version__",

    # Styles
    "CaseStyle",
    "get_filter_names",

    # Conversion
    "split_words",
    "render",
    "convert",

    # Filters
    "FILTER_NAMES",
    "camel_case",
    "kebab_case",
    "lower_case",
    "mixed_case",
    "snake_case",
    "title_case",
    "upper_case",
    "make_filter",
    "build_registry",
    "register_all",
    "create_environment",

    # Errors
    "TextFilterError",
    "InputTypeError",

    # Config
    "Settings",
    "get_settings",
]
