"""
Main CLI application for tag-editor.

Provides a Typer-based command-line interface for reading and editing named
tags in XML files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from xml.dom.minidom import Document

from ..config import EditorConfig, get_config_manager, load_config
from ..converters.xml_bridge import XMLBridge
from ..core.errors import TagEditorError
from ..editor import DocumentEditor

# Initialize Typer app
app = typer.Typer(
    name="tag-editor",
    help="Read and edit named tags in XML documents",
    add_completion=False,
    rich_markup_mode="rich"
)

# Global console for rich output
console = Console()


def _bridge() -> XMLBridge:
    return XMLBridge(indent=load_config().indent)


def _load(file_path: Path) -> Document:
    """Load ``file_path`` or exit with an error message."""
    try:
        return _bridge().load(file_path)
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {escape(str(file_path))}[/red]")
        raise typer.Exit(1)
    except (TagEditorError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _write(document: Document, file_path: Path, output_path: Optional[Path], pretty: bool) -> None:
    """Write the edited document back in place or to ``output_path``."""
    target = output_path or file_path
    _bridge().save(document, target, pretty=pretty or load_config().pretty_print)
    console.print(f"[green]Saved {escape(str(target))}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Read and edit named tags in XML documents.
    """
    level = "DEBUG" if verbose else load_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def get(
    file_path: Path = typer.Argument(..., help="XML file to read"),
    tag_name: str = typer.Argument(..., help="Tag name to look up"),
) -> None:
    """
    Print the value of the first matching tag.

    Exits with status 1 if the tag does not occur in the document.
    """
    document = _load(file_path)
    value = DocumentEditor().get_tag_value(document.documentElement, tag_name)

    if value is None:
        console.print(f"[yellow]Tag <{escape(tag_name)}> not found[/yellow]")
        raise typer.Exit(1)

    typer.echo(value)


@app.command()
def values(
    file_path: Path = typer.Argument(..., help="XML file to read"),
    tag_name: str = typer.Argument(..., help="Tag name to look up"),
) -> None:
    """
    Show the nested value of every matching tag.

    Each match is searched for a tag with the same name inside it; matches
    without one are listed as missing.
    """
    document = _load(file_path)
    results = DocumentEditor().get_tag_values(document.documentElement, tag_name)

    if not results:
        console.print(f"[yellow]Tag <{escape(tag_name)}> not found[/yellow]")
        return

    table = Table(title=f"Values of <{escape(tag_name)}>")
    table.add_column("#", style="cyan")
    table.add_column("Value", style="green")

    for index, value in enumerate(results, start=1):
        table.add_row(str(index), "[dim]missing[/dim]" if value is None else escape(value))

    console.print(table)


@app.command()
def exists(
    file_path: Path = typer.Argument(..., help="XML file to read"),
    tag_name: str = typer.Argument(..., help="Tag name to look up"),
) -> None:
    """
    Check whether a tag occurs below the document root.

    Exits with status 0 if it does and 1 otherwise.
    """
    document = _load(file_path)
    if DocumentEditor().check_tag_exists(document, tag_name):
        console.print(f"[green]Tag <{escape(tag_name)}> exists[/green]")
        return

    console.print(f"[yellow]Tag <{escape(tag_name)}> does not exist[/yellow]")
    raise typer.Exit(1)


@app.command("set")
def set_value(
    file_path: Path = typer.Argument(..., help="XML file to edit"),
    tag_name: str = typer.Argument(..., help="Tag name to update or insert"),
    value: str = typer.Argument(..., help="New text value"),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o", help="Output path (default: overwrite input)"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print the output"),
) -> None:
    """
    Update every matching tag, or add one at the document root.
    """
    document = _load(file_path)
    editor = DocumentEditor()

    try:
        editor.insert_or_update_tag_value(document, tag_name, value)
    except TagEditorError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _write(document, file_path, output_path, pretty)


@app.command()
def insert(
    file_path: Path = typer.Argument(..., help="XML file to edit"),
    tag_name: str = typer.Argument(..., help="Tag name of the new element"),
    value: str = typer.Argument(..., help="Text value of the new element"),
    below: Optional[str] = typer.Option(None, "--below", "-b", help="Insert under the first tag with this name"),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o", help="Output path (default: overwrite input)"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print the output"),
) -> None:
    """
    Insert a new tag at the document root or below another tag.

    When the --below tag does not exist the new tag is not added to the
    document and nothing is written.
    """
    document = _load(file_path)
    editor = DocumentEditor()

    if below is None:
        editor.insert_tag_value(document, tag_name, value)
    else:
        result = editor.insert_new_tag_below(document, below, tag_name, value)
        if not result.attached:
            console.print(
                f"[yellow]Tag <{escape(below)}> not found; <{escape(tag_name)}> was not added to the document[/yellow]"
            )
            raise typer.Exit(1)

    _write(document, file_path, output_path, pretty)


@app.command()
def attr(
    file_path: Path = typer.Argument(..., help="XML file to edit"),
    tag_name: str = typer.Argument(..., help="Tag whose elements get the attribute"),
    name: str = typer.Argument(..., help="Attribute name"),
    value: str = typer.Argument(..., help="Attribute value"),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o", help="Output path (default: overwrite input)"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print the output"),
) -> None:
    """
    Set an attribute on every matching tag.
    """
    document = _load(file_path)
    editor = DocumentEditor()

    elements = editor.find_all(document.documentElement, tag_name)
    if not elements:
        console.print(f"[yellow]Tag <{escape(tag_name)}> not found[/yellow]")
        raise typer.Exit(1)

    for element in elements:
        editor.set_attribute(element, name, value)

    _write(document, file_path, output_path, pretty)


@app.command()
def delete(
    file_path: Path = typer.Argument(..., help="XML file to edit"),
    tag_name: str = typer.Argument(..., help="Tag name to delete"),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o", help="Output path (default: overwrite input)"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print the output"),
) -> None:
    """
    Remove every matching tag from the document.
    """
    document = _load(file_path)
    editor = DocumentEditor()

    count = len(editor.find_all(document.documentElement, tag_name))
    try:
        editor.delete_tag(document, tag_name)
    except TagEditorError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"Deleted {count} <{escape(tag_name)}> tag(s)")
    _write(document, file_path, output_path, pretty)


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    create_default: bool = typer.Option(False, "--create-default", help="Create default config file"),
    set_null_marker: Optional[str] = typer.Option(None, "--set-null-marker", help="Text shown for element children in values"),
    set_log_level: Optional[str] = typer.Option(None, "--set-log-level", help="Default logging level"),
) -> None:
    """
    Manage tag-editor configuration.
    """
    config_manager = get_config_manager()

    if create_default:
        config_manager.create_default_config()
        console.print(f"[green]Created default configuration at {escape(str(config_manager.config_file))}[/green]")
        return

    if show:
        info = config_manager.get_config_info()

        config_display = f"""[bold]tag-editor Configuration[/bold]

[bold cyan]Values:[/bold cyan]
• Null Marker: {escape(repr(info['null_marker']))}

[bold yellow]Output:[/bold yellow]
• Pretty Print: {info['pretty_print']}
• Indent: {escape(repr(info['indent']))}

[bold green]Logging:[/bold green]
• Level: {info['log_level']}

[bold magenta]Files:[/bold magenta]
• Config File: {escape(info['config_file'])}
• Exists: {'Yes' if info['config_exists'] else 'No'}"""

        console.print(Panel(config_display, border_style="green"))
        return

    if set_null_marker is not None or set_log_level is not None:
        current_config = config_manager.load_file_config()
        updates = {}

        if set_null_marker is not None:
            updates['null_marker'] = set_null_marker
        if set_log_level is not None:
            updates['log_level'] = set_log_level

        try:
            new_config = EditorConfig.model_validate({**current_config.model_dump(), **updates})
        except ValueError as e:
            console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
            raise typer.Exit(1)

        config_manager.save_config(new_config)
        console.print("[green]Configuration saved[/green]")
        return

    # Default: show basic info
    console.print("Use [cyan]tag-editor config --show[/cyan] to see full configuration")
    console.print("Use [cyan]tag-editor config --create-default[/cyan] to create a default config file")


if __name__ == "__main__":
    app()
