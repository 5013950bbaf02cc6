"""acom versions <group> <name> - Show every version of one artifact."""

from __future__ import annotations

from typing import Optional

import typer

from artifact_commander.cli.options import OutputOption, ServerOption, handle_errors
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.core.catalog import ArtifactCatalogClient
from artifact_commander.output.formatters import output_versions


def versions(
    group: str = typer.Argument(help="Artifact group, e.g. com.example"),
    name: str = typer.Argument(help="Artifact name"),
    output: str = OutputOption,
    server: Optional[str] = ServerOption,
) -> None:
    """List release and snapshot versions, newest first."""
    catalog = ArtifactCatalogClient(BackendClient(base_url=server))
    with handle_errors():
        history = catalog.expand_versions(group, name)
    output_versions(history, output, group, name)
