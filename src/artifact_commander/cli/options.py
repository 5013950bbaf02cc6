"""Shared CLI options and error handling."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer

from artifact_commander.core.errors import QueryValidationError, TransportError

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
ServerOption = typer.Option(None, "--server", "-s", help="Backend base URL (default: $ACOM_BACKEND_URL)")


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn core errors into a message and a non-zero exit code."""
    try:
        yield
    except QueryValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    except TransportError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
