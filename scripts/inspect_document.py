#!/usr/bin/env python3
"""
Command-line interface for inspecting resume documents.

Loads a starter template (or a YAML document record) into an editor session
and prints what the editor engine sees: the node tree with addresses, and the
toolbar menu a node would offer.

Commands:
    templates - List available starter templates
    types     - List defined node types
    tree      - Print a document's tree with addresses
    options   - Print the toolbar options of one node
"""

from pathlib import Path
from typing import Optional

import typer
from omegaconf import OmegaConf

from vitae.contexts.document import (
    InvalidAddress,
    InvalidRecordError,
    NodeTypeRegistry,
    format_address,
    list_templates,
    parse_address,
)
from vitae.contexts.editing import EditorSession
from vitae.contexts.editing.logger import setup_editing_logger

app = typer.Typer(
    add_completion=False,
    help="Inspect resume documents as the editor engine sees them",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _open_session(source: str, log_dir: Optional[Path]) -> EditorSession:
    """Open a template by name, or a YAML document record by path."""
    if log_dir is not None:
        setup_editing_logger(log_dir, template=source)

    path = Path(source)
    try:
        if path.suffix in (".yaml", ".yml") and path.exists():
            record = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
            return EditorSession.from_record(record)
        return EditorSession.from_template(source)
    except (FileNotFoundError, InvalidRecordError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _describe(node) -> str:
    fields = ", ".join(f"{key}={value!r}" for key, value in node.data.items())
    hidden = " [hidden]" if node.hidden else ""
    return f"{node.type}{hidden}" + (f" ({fields})" if fields else "")


def _echo_options(options, depth: int = 0) -> None:
    for option in options:
        marker = "▸" if not option.is_leaf else "•"
        typer.echo(f"{'  ' * depth}{marker} {option.label}")
        if not option.is_leaf:
            _echo_options(option.submenu, depth + 1)


@app.command("templates")
def templates_command():
    """List available starter templates."""
    for name in list_templates():
        typer.echo(name)


@app.command("types")
def types_command():
    """List defined node types."""
    registry = NodeTypeRegistry()
    for type_name in registry.list_types():
        typer.echo(f"{type_name:<12} {registry.display_name(type_name)}")


@app.command("tree")
def tree_command(
    source: str = typer.Argument(..., help="Template name or path to a YAML document record"),
    show_uuids: bool = typer.Option(False, "--uuids", "-u", help="Show node uuids"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Write a session log here"),
):
    """
    Print a document's tree with each node's address.

    Examples:\n

        $ inspect_document.py tree classic

        $ inspect_document.py tree my_resume.yaml --uuids
    """
    session = _open_session(source, log_dir)

    typer.secho(f"\n{source}: {len(session.tree)} node(s)", fg=typer.colors.BLUE, bold=True)
    for address, node in session.walk():
        indent = "  " * (len(address) - 1)
        uuid = f"  {node.uuid}" if show_uuids else ""
        typer.echo(f"{indent}[{format_address(address)}] {_describe(node)}{uuid}")


@app.command("options")
def options_command(
    source: str = typer.Argument(..., help="Template name or path to a YAML document record"),
    address: str = typer.Argument(..., help="Dotted node address, e.g. 2.0"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Write a session log here"),
):
    """
    Print the toolbar options a node offers.

    Examples:\n

        $ inspect_document.py options classic 2.0
    """
    session = _open_session(source, log_dir)

    try:
        options = session.toolbar_options_for(parse_address(address))
    except InvalidAddress as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    node = session.resolve(parse_address(address))
    typer.secho(f"\n[{address}] {node.type}", fg=typer.colors.BLUE, bold=True)

    if not options:
        typer.echo("(no toolbar options)")
        return

    _echo_options(options)


if __name__ == "__main__":
    app()
