"""
Style rendering - joins a word sequence according to a CaseStyle.
"""

from typing import Any, Callable, Dict, Iterable, Tuple, Union

from loguru import logger

from textfilters.core.words import split_words
from textfilters.errors import InputTypeError
from textfilters.styles import CaseStyle


def capitalize(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


# (first word, remaining words)
WordCasing = Tuple[Callable[[str], str], Callable[[str], str]]

WORD_CASING: Dict[CaseStyle, WordCasing] = {
    CaseStyle.CAMEL: (capitalize, capitalize),
    CaseStyle.KEBAB: (str.lower, str.lower),
    CaseStyle.LOWER: (str.lower, str.lower),
    CaseStyle.MIXED: (str.lower, capitalize),
    CaseStyle.SNAKE: (str.lower, str.lower),
    CaseStyle.TITLE: (capitalize, capitalize),
    CaseStyle.UPPER: (str.upper, str.upper),
}


def render(words: Iterable[str], style: Union[CaseStyle, str]) -> str:
    """
    Join words according to a style.

    The sequence is consumed once. LOWER and UPPER join with a single space
    here; use ``convert`` to re-case an original string verbatim.
    """
    style = CaseStyle.parse(style)
    first_case, rest_case = WORD_CASING[style]

    parts = []
    for word in words:
        if not word:
            continue
        parts.append(first_case(word) if not parts else rest_case(word))

    return style.separator.join(parts)


def convert(value: Any, style: Union[CaseStyle, str]) -> str:
    """
    Convert a string to the given case style.

    Args:
        value: The string to convert.
        style: A CaseStyle, its value (``"snake"``) or filter name (``"snake_case"``).

    Returns:
        The converted string. Empty input gives empty output for every style.

    Raises:
        InputTypeError: If ``value`` is not a string.
        ValueError: If ``style`` does not name a known style.
    """
    style = CaseStyle.parse(style)

    if not isinstance(value, str):
        logger.debug(f"{style.filter_name} rejected value of type {type(value).__name__}")
        raise InputTypeError(style.filter_name, value)

    if style is CaseStyle.LOWER:
        return value.lower()
    if style is CaseStyle.UPPER:
        return value.upper()

    return render(split_words(value), style)
