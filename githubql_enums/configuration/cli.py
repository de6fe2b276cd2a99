"""Defines the Command Line Interface (CLI) using Typer."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from githubql_enums.configuration.env import settings
from githubql_enums.registry.exceptions import SnapshotFormatError, UnknownEnumTypeError, UnknownEnumValueError
from githubql_enums.registry.registry import get_registry
from githubql_enums.registry.snapshot import diff_snapshot, export_snapshot, load_snapshot
from githubql_enums.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Inspect and validate GitHub GraphQL enumeration values.")


@typer_app.callback()
def main_callback(
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug logging.")] = settings.DEBUG,
) -> None:
    """Configure logging before any command runs."""
    configure_logging(debug=debug)


@typer_app.command(name="list-types")
def list_types_cli() -> None:
    """List every enumeration type with its number of members."""
    registry = get_registry()
    for enum_type in registry:
        typer.echo(f"{enum_type.__name__} ({len(enum_type)} members)")


@typer_app.command(name="show")
def show_cli(
    type_name: Annotated[str, Argument(help="Enumeration type name, e.g. IssueState.")],
) -> None:
    """Show the members of an enumeration type."""
    try:
        enum_type = get_registry().describe(type_name)
    except UnknownEnumTypeError as e:
        typer.echo(str(e), err=True)
        sys.exit(1)

    typer.echo(f"{enum_type.name}: {enum_type.description}")
    width = max(len(member.name) for member in enum_type.members)
    for member in enum_type.members:
        typer.echo(f'  {member.name.ljust(width)} = "{member.value}"  {member.description}')


@typer_app.command(name="check")
def check_cli(
    type_name: Annotated[str, Argument(help="Enumeration type name, e.g. PullRequestState.")],
    value: Annotated[str, Argument(help="Wire value to validate, e.g. MERGED.")],
) -> None:
    """Validate a wire value against an enumeration type and print its symbolic name."""
    try:
        symbolic_name = get_registry().symbolic_name(type_name, value)
    except (UnknownEnumTypeError, UnknownEnumValueError) as e:
        typer.echo(str(e), err=True)
        sys.exit(1)
    typer.echo(symbolic_name)


@typer_app.command(name="export")
def export_cli(
    output_file: Annotated[Path, Argument(envvar="SNAPSHOT_PATH", help="Path of the YAML snapshot to write.")] = settings.SNAPSHOT_PATH,
) -> None:
    """Export every enumeration type to a YAML snapshot."""
    try:
        snapshot = export_snapshot(get_registry(), output_file)
    except OSError as e:
        typer.echo(f"Failed to write snapshot file {output_file}: {e}", err=True)
        sys.exit(1)
    typer.echo(f"Exported {len(snapshot.enum_types)} enum types to {output_file}")


@typer_app.command(name="diff")
def diff_cli(
    snapshot_file: Annotated[Path, Argument(envvar="SNAPSHOT_PATH", help="Path of a YAML snapshot written by the export command.")] = settings.SNAPSHOT_PATH,
) -> None:
    """Compare a YAML snapshot with the installed enumeration table.

    Exits with status 1 when they differ.
    """
    if not snapshot_file.is_file():
        typer.echo(f"Snapshot file not found: {snapshot_file.absolute()}", err=True)
        sys.exit(1)

    try:
        snapshot = load_snapshot(snapshot_file)
    except SnapshotFormatError as e:
        typer.echo(str(e), err=True)
        sys.exit(1)
    except OSError as e:
        typer.echo(f"Failed to read snapshot file {snapshot_file}: {e}", err=True)
        sys.exit(1)

    diff = diff_snapshot(get_registry(), snapshot)
    if diff.is_empty:
        typer.echo(f"Enum types match snapshot {snapshot_file}")
        return

    for name in diff.added_types:
        typer.echo(f"+ type {name}")
    for name in diff.removed_types:
        typer.echo(f"- type {name}")
    for name, values in diff.added_values.items():
        typer.echo(f"+ {name}: {', '.join(values)}")
    for name, values in diff.removed_values.items():
        typer.echo(f"- {name}: {', '.join(values)}")
    sys.exit(1)


if __name__ == "__main__":
    typer_app()
