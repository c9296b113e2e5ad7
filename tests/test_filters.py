"""
Tests for the template filters and their registration.
"""

import pytest
import jinja2
from markupsafe import Markup

from textfilters import filters
from textfilters.errors import InputTypeError, TextFilterError
from textfilters.filters import (
    FILTER_NAMES,
    build_registry,
    create_environment,
    make_filter,
    register_all,
)
from textfilters.styles import CaseStyle


class TestFilterFunctions:
    """Filters called directly."""

    @pytest.mark.parametrize("name,value,expected", [
        ("camel_case", "some text", "SomeText"),
        ("kebab_case", "some text", "some-text"),
        ("lower_case", "soMe Text", "some text"),
        ("mixed_case", "Some text", "someText"),
        ("snake_case", "soMe Text", "some_text"),
        ("title_case", "soMe Text", "Some Text"),
        ("upper_case", "soMe Text", "SOME TEXT"),
    ])
    def test_examples(self, name, value, expected):
        assert getattr(filters, name)(value) == expected

    def test_arguments_ignored(self):
        assert filters.snake_case("some text", "extra", 1, sep="-") == "some_text"

    def test_filter_names_match_functions(self):
        for name in FILTER_NAMES:
            assert getattr(filters, name).__name__ == name

    @pytest.mark.parametrize("name", FILTER_NAMES)
    @pytest.mark.parametrize("value", [0, 3.14, True, None])
    def test_non_string_rejected(self, name, value):
        with pytest.raises(InputTypeError) as exc_info:
            getattr(filters, name)(value)

        error = exc_info.value
        assert error.filter_name == name
        assert error.arg_name == "value"
        assert error.expected == "String"

    @pytest.mark.parametrize("name", FILTER_NAMES)
    def test_empty_string(self, name):
        assert getattr(filters, name)("") == ""

    def test_make_filter(self):
        shout = make_filter("upper")
        assert shout.__name__ == "upper_case"
        assert shout("quiet") == "QUIET"


class TestRegistry:

    def test_build_registry(self):
        registry = build_registry()

        assert list(registry) == FILTER_NAMES
        assert registry["kebab_case"] is filters.kebab_case

    def test_build_registry_is_fresh(self):
        first = build_registry()
        first.pop("snake_case")

        assert "snake_case" in build_registry()

    def test_prefix(self):
        registry = build_registry(prefix="text_")
        assert "text_snake_case" in registry
        assert "snake_case" not in registry

    def test_register_into_mapping(self):
        target = {"existing": str.strip}
        names = register_all(target)

        assert names == FILTER_NAMES
        assert "existing" in target
        assert target["title_case"]("soMe Text") == "Some Text"

    def test_register_into_environment(self):
        env = jinja2.Environment()
        register_all(env)

        for name in FILTER_NAMES:
            assert name in env.filters
        # Built-in filters are untouched
        assert "upper" in env.filters


class TestTemplates:
    """Filters applied through Jinja2 templates."""

    @pytest.mark.parametrize("source,value,expected", [
        ("{{ i | camel_case }}", "some text", "SomeText"),
        ("{{ i | kebab_case }}", "some text", "some-text"),
        ("{{ i | lower_case }}", "soMe Text", "some text"),
        ("{{ i | mixed_case }}", "Some text", "someText"),
        ("{{ i | snake_case }}", "soMe Text", "some_text"),
        ("{{ i | title_case }}", "soMe Text", "Some Text"),
        ("{{ i | upper_case }}", "soMe Text", "SOME TEXT"),
    ])
    def test_render(self, render_with, source, value, expected):
        assert render_with(source, i=value) == expected

    def test_chained_filters(self, render_with):
        assert render_with("{{ i | snake_case | upper_case }}", i="someText") == "SOME_TEXT"

    def test_filter_arguments_ignored(self, render_with):
        assert render_with("{{ i | kebab_case('x', y=1) }}", i="some text") == "some-text"

    def test_number_fails(self, render_with):
        with pytest.raises(InputTypeError, match="snake_case"):
            render_with("{{ i | snake_case }}", i=5)

    def test_bool_fails(self, render_with):
        with pytest.raises(TextFilterError):
            render_with("{{ i | upper_case }}", i=True)

    def test_literal_number_fails(self, render_with):
        with pytest.raises(InputTypeError):
            render_with("{{ 42 | camel_case }}")

    def test_undefined_is_not_a_string(self, render_with, strict_env):
        with pytest.raises(InputTypeError):
            render_with("{{ missing | snake_case }}")

        template = strict_env.from_string("{{ missing | snake_case }}")
        with pytest.raises(InputTypeError):
            template.render()

    def test_markup_is_a_string(self):
        env = create_environment(autoescape=True)
        result = env.from_string("{{ i | upper_case }}").render(i=Markup("<b>bold</b>"))
        assert result == "<B>BOLD</B>"

    def test_prefixed_environment(self):
        env = create_environment(prefix="tf_")
        assert env.from_string("{{ 'a b' | tf_kebab_case }}").render() == "a-b"


class TestInputTypeError:

    def test_message(self):
        error = InputTypeError("snake_case", 1)
        assert str(error) == (
            "Filter `snake_case` received an incorrect type for arg `value`: "
            "got `1` but expected a String"
        )

    def test_to_dict(self):
        data = InputTypeError("title_case", True).to_dict()

        assert data["filter_name"] == "title_case"
        assert data["got"] == "bool"
        assert data["expected"] == "String"

    def test_hierarchy(self):
        error = InputTypeError("upper_case", None)
        assert isinstance(error, TextFilterError)
        assert isinstance(error, TypeError)
