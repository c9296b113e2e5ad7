"""
Case styles supported by textfilters.

This module defines the output conventions a value can be converted to and
the stable filter names each one is registered under in a template engine.
"""

from enum import Enum
from typing import List, Union


class CaseStyle(str, Enum):
    """
    Output formatting conventions.

    Word-based styles split the input into words and re-join them; LOWER and
    UPPER re-case the original string verbatim.
    """

    CAMEL = "camel"     # SomeText
    KEBAB = "kebab"     # some-text
    LOWER = "lower"     # some text
    MIXED = "mixed"     # someText
    SNAKE = "snake"     # some_text
    TITLE = "title"     # Some Text
    UPPER = "upper"     # SOME TEXT

    @property
    def filter_name(self) -> str:
        """Name the style is registered under, e.g. ``snake_case``."""
        return f"{self.value}_case"

    @property
    def is_word_based(self) -> bool:
        return self not in (CaseStyle.LOWER, CaseStyle.UPPER)

    @property
    def separator(self) -> str:
        return STYLE_SEPARATORS[self]

    @classmethod
    def parse(cls, style: Union["CaseStyle", str]) -> "CaseStyle":
        """
        Resolve a style from a member, its value or its filter name.

        ``"snake"``, ``"SNAKE"`` and ``"snake_case"`` all resolve to
        ``CaseStyle.SNAKE``.
        """
        if isinstance(style, cls):
            return style

        key = str(style).strip().lower()
        if key.endswith("_case"):
            key = key[: -len("_case")]

        for member in cls:
            if member.value == key:
                return member

        raise ValueError(
            f"Unknown case style {style!r}; expected one of: {', '.join(get_filter_names())}"
        )


# Join separator for each style when rendering a word sequence
STYLE_SEPARATORS = {
    CaseStyle.CAMEL: "",
    CaseStyle.KEBAB: "-",
    CaseStyle.LOWER: " ",
    CaseStyle.MIXED: "",
    CaseStyle.SNAKE: "_",
    CaseStyle.TITLE: " ",
    CaseStyle.UPPER: " ",
}


def get_filter_names() -> List[str]:
    """Stable filter names in declaration order."""
    return [style.filter_name for style in CaseStyle]
