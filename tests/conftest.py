"""
pytest configuration and fixtures.
"""

import pytest
import jinja2
from pathlib import Path

from textfilters.filters import create_environment


@pytest.fixture
def env():
    """A Jinja2 environment with every text filter registered."""
    return create_environment()


@pytest.fixture
def render_with(env):
    """Render a one-line template string against the filter environment."""
    def _render(source, **context):
        return env.from_string(source).render(**context)
    return _render


@pytest.fixture
def strict_env():
    """An environment that fails on undefined variables."""
    return create_environment(undefined=jinja2.StrictUndefined)


@pytest.fixture
def templates_dir():
    """Path to example templates."""
    return Path(__file__).parent.parent / "examples" / "templates"


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TEXTFILTERS_* variables from the environment."""
    import os
    for key in list(os.environ):
        if key.startswith("TEXTFILTERS_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def restore_settings():
    """Put the global settings instance back after the test."""
    from textfilters import config
    original = config.settings
    yield
    config.settings = original


@pytest.fixture
def restore_logger():
    """Reset loguru to its default stderr sink after the test."""
    import sys
    from loguru import logger
    yield
    logger.remove()
    logger.add(sys.stderr)
