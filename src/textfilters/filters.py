"""
Template filters for case conversion.

Each filter takes the piped value plus any arguments the template passes
(``{{ name | snake_case }}``). Arguments are accepted and ignored. A value
that is not a string raises ``InputTypeError``; it is never stringified.

Filters are collected into a registry built on demand and handed to the
engine explicitly:

    env = jinja2.Environment()
    register_all(env)
    env.from_string("{{ title | kebab_case }}").render(title="Some Text")
"""

from typing import Any, Callable, Dict, List, MutableMapping, Union

import jinja2
from loguru import logger

from textfilters.core.renderer import convert
from textfilters.styles import CaseStyle, get_filter_names

Filter = Callable[..., str]

FILTER_NAMES: List[str] = get_filter_names()


def make_filter(style: Union[CaseStyle, str]) -> Filter:
    """Build the filter callable for a style."""
    style = CaseStyle.parse(style)

    def case_filter(value: Any, *args: Any, **kwargs: Any) -> str:
        return convert(value, style)

    case_filter.__name__ = style.filter_name
    case_filter.__qualname__ = style.filter_name
    case_filter.__doc__ = f"Convert text into {style.value} case."
    return case_filter


camel_case = make_filter(CaseStyle.CAMEL)
camel_case.__doc__ = 'Converts text into CamelCase: "some text" -> "SomeText".'

kebab_case = make_filter(CaseStyle.KEBAB)
kebab_case.__doc__ = 'Converts text into kebab-case: "some text" -> "some-text".'

lower_case = make_filter(CaseStyle.LOWER)
lower_case.__doc__ = 'Converts text into lowercase: "soMe Text" -> "some text".'

mixed_case = make_filter(CaseStyle.MIXED)
mixed_case.__doc__ = 'Converts text into mixedCase: "Some text" -> "someText".'

snake_case = make_filter(CaseStyle.SNAKE)
snake_case.__doc__ = 'Converts text into snake_case: "soMe Text" -> "some_text".'

title_case = make_filter(CaseStyle.TITLE)
title_case.__doc__ = 'Converts text into Title Case: "soMe Text" -> "Some Text".'

upper_case = make_filter(CaseStyle.UPPER)
upper_case.__doc__ = 'Converts text into UPPERCASE: "soMe Text" -> "SOME TEXT".'

_FILTERS: Dict[CaseStyle, Filter] = {
    CaseStyle.CAMEL: camel_case,
    CaseStyle.KEBAB: kebab_case,
    CaseStyle.LOWER: lower_case,
    CaseStyle.MIXED: mixed_case,
    CaseStyle.SNAKE: snake_case,
    CaseStyle.TITLE: title_case,
    CaseStyle.UPPER: upper_case,
}


def build_registry(prefix: str = "") -> Dict[str, Filter]:
    """
    Build a fresh mapping of filter name to filter callable.

    Args:
        prefix: Optional string prepended to every name, e.g. ``"text_"``
            registers ``text_snake_case``.
    """
    return {f"{prefix}{style.filter_name}": func for style, func in _FILTERS.items()}


def register_all(
    target: Union[jinja2.Environment, MutableMapping[str, Filter]],
    prefix: str = "",
) -> List[str]:
    """
    Register every filter with a Jinja2 environment or a filter mapping.

    Existing filters with the same names are replaced.

    Returns:
        The registered filter names.
    """
    filters = target.filters if isinstance(target, jinja2.Environment) else target
    registry = build_registry(prefix)
    filters.update(registry)

    logger.debug(f"Registered {len(registry)} text filters: {', '.join(registry)}")
    return list(registry)


def create_environment(prefix: str = "", **env_options: Any) -> jinja2.Environment:
    """Create a Jinja2 environment with all text filters registered."""
    env = jinja2.Environment(**env_options)
    register_all(env, prefix=prefix)
    return env
