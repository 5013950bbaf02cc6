"""acom dependency <group> <name> <version> - Print dependency snippets."""

from __future__ import annotations

from typing import Optional

import typer

from artifact_commander.cli.options import OutputOption, ServerOption
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.core.catalog import ArtifactCatalogClient
from artifact_commander.output.formatters import output_dependency

_FORMATS = ("all", "maven", "gradle")


def dependency(
    group: str = typer.Argument(help="Artifact group"),
    name: str = typer.Argument(help="Artifact name"),
    version: str = typer.Argument(help="Artifact version"),
    build: str = typer.Option("all", "--format", "-f", help="Snippet to show: all, maven, gradle"),
    output: str = OutputOption,
    server: Optional[str] = ServerOption,
) -> None:
    """Show how to declare one artifact version in Maven and Gradle builds."""
    if build not in _FORMATS:
        typer.echo(f"Unknown format '{build}'. Choose from: {', '.join(_FORMATS)}.", err=True)
        raise typer.Exit(code=2)

    catalog = ArtifactCatalogClient(BackendClient(base_url=server))
    snippet = catalog.resolve_dependency(group, name, version)
    output_dependency(snippet, output, f"{name}:{version}", which=build)
