"""
textfilters CLI - Command Line Interface.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
import jinja2
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from textfilters import __version__
from textfilters.config import get_settings
from textfilters.core.renderer import convert as convert_text
from textfilters.errors import TextFilterError
from textfilters.filters import create_environment
from textfilters.log import configure_logging
from textfilters.styles import CaseStyle

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", type=str, default=None, help="Log level (defaults to TEXTFILTERS_LOG_LEVEL)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output (DEBUG logging)")
def main(log_level: Optional[str], verbose: bool):
    """textfilters - Case conversion filters for Jinja2 templates."""
    configure_logging(level="DEBUG" if verbose else log_level)


@main.command()
@click.argument("text", nargs=-1)
@click.option("--style", "-s", type=str, default=None, help="Case style, e.g. snake or snake_case")
@click.option("--all", "show_all", is_flag=True, help="Show the text in every style")
def convert(text: Tuple[str, ...], style: Optional[str], show_all: bool):
    """Convert TEXT (or stdin) to a case style."""
    value = " ".join(text) if text else click.get_text_stream("stdin").read().rstrip("\n")

    if show_all:
        table = Table(title="Case Styles")
        table.add_column("Filter", style="cyan")
        table.add_column("Result", style="green")
        for case_style in CaseStyle:
            table.add_row(case_style.filter_name, escape(convert_text(value, case_style)))
        console.print(table)
        return

    try:
        case_style = CaseStyle.parse(style) if style else get_settings().default_style
    except ValueError as e:
        _fail(e)

    click.echo(convert_text(value, case_style))


@main.command()
@click.argument("template", type=click.Path(dir_okay=False))
@click.option("--context", "-c", "context_file", type=click.Path(dir_okay=False),
              help="YAML or JSON file with template variables")
@click.option("--var", "variables", multiple=True, help="Template variable as KEY=VALUE (repeatable)")
@click.option("--output", "-o", type=click.Path(), help="Write rendered output to a file")
def render(template: str, context_file: Optional[str], variables: Tuple[str, ...], output: Optional[str]):
    """Render a Jinja2 TEMPLATE with all text filters available."""
    settings = get_settings()
    template_path = Path(template)

    try:
        if not template_path.is_file():
            raise FileNotFoundError(f"Template not found: {template_path}")
        context = _load_context(Path(context_file)) if context_file else {}
        context.update(_parse_variables(variables))

        env = create_environment(
            prefix=settings.filter_prefix,
            loader=jinja2.FileSystemLoader(
                str(template_path.parent), encoding=settings.template_encoding
            ),
            autoescape=settings.autoescape,
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
        )
        rendered = env.get_template(template_path.name).render(**context)
    except (TextFilterError, jinja2.TemplateError, yaml.YAMLError, ValueError, OSError) as e:
        _fail(e)

    if output:
        try:
            Path(output).write_text(rendered, encoding=settings.template_encoding)
        except OSError as e:
            _fail(e)
        console.print(f"[green]Rendered {template_path.name} to {escape(output)}[/green]")
    else:
        click.echo(rendered, nl=False)


@main.command()
@click.option("--sample", default="soMe Text", show_default=True, help="Sample text for the example column")
def styles(sample: str):
    """List available case styles and their filter names."""
    table = Table(title="Case Styles")
    table.add_column("Style", style="cyan")
    table.add_column("Filter")
    table.add_column("Word based")
    table.add_column("Example", style="green")

    for case_style in CaseStyle:
        table.add_row(
            case_style.value,
            case_style.filter_name,
            "yes" if case_style.is_word_based else "no",
            escape(convert_text(sample, case_style)),
        )

    console.print(table)


def _load_context(path: Path) -> Dict[str, Any]:
    """Load template variables from a YAML or JSON file."""
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Context file {path} must contain a mapping, got {type(data).__name__}")

    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ValueError(f"Context file {path} has non-string keys: {bad_keys!r}")
    return data


def _parse_variables(variables: Tuple[str, ...]) -> Dict[str, str]:
    parsed = {}
    for item in variables:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid --var {item!r}; expected KEY=VALUE")
        parsed[key.strip()] = value
    return parsed


def _fail(error: Exception):
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


if __name__ == "__main__":
    main()
