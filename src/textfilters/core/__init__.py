"""
Core module exports.
"""

from textfilters.core.words import split_words, is_word_boundary, is_identifier
from textfilters.core.renderer import render, convert, capitalize

__all__ = [
    "split_words",
    "is_word_boundary",
    "is_identifier",
    "render",
    "convert",
    "capitalize",
]
