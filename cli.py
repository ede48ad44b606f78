#!/usr/bin/env python3
"""
Notes CLI.

Primary entry point for all application operations.
Use --service to select what to run.

Usage:
    python cli.py --help
    python cli.py                                  # Open the terminal UI
    python cli.py --service list
    python cli.py --service search --query groc
    python cli.py --service create --title "Groceries" --content "milk"
    python cli.py --service update --note-id 1 --field content --value "..."
    python cli.py --service delete --note-id 1
    python cli.py --service config
"""

import sys
from pathlib import Path

import click
import structlog

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from notes_app.core.dependencies import get_notes_session
from notes_app.core.exceptions import ApplicationError, NotFoundError
from notes_app.core.logging import get_logger, setup_logging
from notes_app.core.utils import format_timestamp
from notes_app.schemas.note import Note
from notes_app.services.selection import display_order, filtered_sorted


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--service", "-s",
    type=click.Choice(["tui", "list", "search", "show", "create", "update", "delete", "config", "info"]),
    default="tui",
    help="Service or command to run.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--note-id", "-n",
    default=None,
    help="Target note (show, update, delete).",
)
@click.option(
    "--query", "-q",
    default="",
    help="Search term, case-insensitive (search).",
)
@click.option(
    "--title",
    default=None,
    help="Title for the new note (create).",
)
@click.option(
    "--content",
    default=None,
    help="Content for the new note (create).",
)
@click.option(
    "--field",
    type=click.Choice(["title", "content"]),
    default=None,
    help="Field to change (update).",
)
@click.option(
    "--value",
    default=None,
    help="New field value (update).",
)
@click.option(
    "--yes", "-y",
    is_flag=True,
    help="Skip the delete confirmation prompt.",
)
def main(
    service: str,
    verbose: bool,
    debug: bool,
    note_id: str | None,
    query: str,
    title: str | None,
    content: str | None,
    field: str | None,
    value: str | None,
    yes: bool,
) -> None:
    """
    Notes CLI.

    Use --service to select what to run. Without options the terminal
    UI is opened.

    \b
    Examples:
        python cli.py
        python cli.py --service list
        python cli.py --service search --query welcome
        python cli.py --service show --note-id 1
        python cli.py --service create --title "Groceries"
        python cli.py --service update -n 1 --field title --value "Renamed"
        python cli.py --service delete -n 1 --yes
        python cli.py --service config
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    source = "tui" if service == "tui" else "cli"
    setup_logging(level=log_level, format_type="console", enable_console=source == "cli")

    structlog.contextvars.bind_contextvars(source=source)

    logger = get_logger(__name__)

    logger.debug("CLI invoked", extra={"service": service, "log_level": log_level})

    if service == "config":
        show_config(logger)
        return
    if service == "info":
        show_info(logger)
        return
    if service == "tui":
        run_tui(logger)
        return

    try:
        if service == "list":
            list_notes(logger)
        elif service == "search":
            search_notes(logger, query)
        elif service == "show":
            show_note(logger, _require(note_id, "--note-id"))
        elif service == "create":
            create_note(logger, title, content)
        elif service == "update":
            update_note(
                logger,
                _require(note_id, "--note-id"),
                _require(field, "--field"),
                _require(value, "--value"),
            )
        elif service == "delete":
            delete_note(logger, _require(note_id, "--note-id"), yes)
    except ApplicationError as e:
        logger.error("Command failed", extra={"service": service, "code": e.code, "error": e.message})
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)


def _require(value: str | None, option: str) -> str:
    if value is None:
        raise click.UsageError(f"{option} is required for this service.")
    return value


def _echo_note_line(note: Note) -> None:
    click.echo(f"{note.id:<22} {format_timestamp(note.updated)}  {note.display_title}")


def run_tui(logger) -> None:
    """Start the terminal UI."""
    from tui import NotesTUI

    logger.info("Starting terminal UI")
    NotesTUI(get_notes_session()).run()


def list_notes(logger) -> None:
    """List all notes, most recently updated first."""
    session = get_notes_session()
    notes = display_order(session.notes)
    if not notes:
        click.echo("No notes")
        return
    for note in notes:
        _echo_note_line(note)
    logger.debug("Notes listed", extra={"count": len(notes)})


def search_notes(logger, query: str) -> None:
    """List notes whose title or content contains the query."""
    session = get_notes_session()
    notes = filtered_sorted(session.notes, query)
    if not notes:
        click.echo("No notes found")
        return
    for note in notes:
        _echo_note_line(note)
    logger.debug("Notes searched", extra={"query": query, "count": len(notes)})


def show_note(logger, note_id: str) -> None:
    """Print a single note."""
    session = get_notes_session()
    note = session.service.get_note(note_id)
    click.echo(click.style(note.display_title, bold=True))
    click.echo(f"Updated: {format_timestamp(note.updated)}")
    click.echo("-" * 40)
    click.echo(note.content)


def create_note(logger, title: str | None, content: str | None) -> None:
    """Create a note, optionally filling in its fields."""
    session = get_notes_session()
    note_id = session.create()
    if title is not None:
        session.edit("title", title)
    if content is not None:
        session.edit("content", content)
    logger.info("Note created from CLI", extra={"note_id": note_id})
    click.echo(note_id)


def update_note(logger, note_id: str, field: str, value: str) -> None:
    """Replace one field of a note."""
    session = get_notes_session()
    note = session.service.update_field(note_id, field, value)
    if note is None:
        click.echo(click.style(f"Note not found: {note_id}", fg="yellow"))
        return
    click.echo(f"Updated {field} of {note_id}")


def delete_note(logger, note_id: str, yes: bool) -> None:
    """Delete a note after confirmation."""
    session = get_notes_session()
    try:
        session.service.get_note(note_id)
    except NotFoundError:
        click.echo(click.style(f"Note not found: {note_id}", fg="yellow"))
        return

    deleted = session.request_delete(
        note_id,
        confirm=lambda: yes or click.confirm("Delete this note?", default=False),
    )
    if deleted:
        click.echo(f"Deleted {note_id}")
    else:
        click.echo("Cancelled")


def show_config(logger) -> None:
    """Display loaded configuration."""
    click.echo("Application Configuration:\n")

    try:
        from notes_app.core.config import get_app_config

        app_config = get_app_config()

        sections = [
            ("Application Settings", app_config.application),
            ("Storage Settings", app_config.storage),
            ("Logging Settings", app_config.logging),
        ]
        for heading, section in sections:
            click.echo(f"{heading} (from YAML):")
            click.echo("-" * 40)
            for key, value in section.model_dump().items():
                if isinstance(value, dict):
                    click.echo(f"  {key}:")
                    for k, v in value.items():
                        click.echo(f"    {k}: {v}")
                else:
                    click.echo(f"  {key}: {value}")
            click.echo()

        logger.info("Configuration displayed successfully")

    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)


def show_info(logger) -> None:
    """Display application information."""
    from notes_app.core.config import get_app_config, get_database_url

    app_config = get_app_config()
    application = app_config.application

    click.echo(f"{application.name} v{application.version}")
    click.echo(application.description)
    click.echo()
    click.echo(f"  Environment: {application.environment}")
    click.echo(f"  Storage:     {app_config.storage.backend}")
    if app_config.storage.backend == "sqlite":
        click.echo(f"  Database:    {get_database_url()}")
    click.echo(f"  Notes key:   {app_config.storage.key}")
    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
