"""
Demo script showing the text filters in action.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from textfilters import CaseStyle, InputTypeError, convert, create_environment, split_words

console = Console()


def demo_styles():
    """Convert a few inputs to every style."""
    console.print("\n[bold blue]Demo 1: Case Styles[/bold blue]\n")

    samples = ["soMe Text", "XMLHttpRequest", "user_account-id", "--__  "]

    table = Table(title="Conversions")
    table.add_column("Input", style="cyan")
    for style in CaseStyle:
        table.add_column(style.filter_name)

    for sample in samples:
        table.add_row(repr(sample), *[escape(repr(convert(sample, style))) for style in CaseStyle])

    console.print(table)


def demo_word_splitting():
    """Show how identifiers and prose are split into words."""
    console.print("\n[bold blue]Demo 2: Word Splitting[/bold blue]\n")

    for sample in ["HTTPServer", "version2Update", "v2api", "soMe Text"]:
        console.print(f"  {sample!r:20} -> {escape(str(list(split_words(sample))))}")


def demo_template():
    """Render a template with the filters registered."""
    console.print("\n[bold blue]Demo 3: Jinja2 Template[/bold blue]\n")

    env = create_environment()
    template = env.from_string(
        "class {{ name | camel_case }}:\n"
        "    table = \"{{ name | snake_case }}\"\n"
        "    route = \"/{{ name | kebab_case }}\"\n"
    )
    console.print(Panel(escape(template.render(name="order line item")), title="Rendered"))


def demo_type_error():
    """Filters refuse values that are not strings."""
    console.print("\n[bold red]Demo 4: Non-string Input[/bold red]\n")

    env = create_environment()
    try:
        env.from_string("{{ count | snake_case }}").render(count=3)
    except InputTypeError as e:
        console.print(f"[red]{escape(str(e))}[/red]")


def main():
    console.print("[bold]textfilters demo[/bold]")

    demo_styles()
    demo_word_splitting()
    demo_template()
    demo_type_error()


if __name__ == "__main__":
    main()
