"""acom search [query] - Search artifacts, latest version per artifact."""

from __future__ import annotations

from typing import Optional

import typer

from artifact_commander.cli.options import OutputOption, ServerOption, handle_errors
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.core.catalog import ArtifactCatalogClient
from artifact_commander.output.formatters import output_artifacts


def search(
    query: str = typer.Argument("", help="Search terms (3+ characters); omit to list everything"),
    output: str = OutputOption,
    server: Optional[str] = ServerOption,
) -> None:
    """Search the registry and show the latest version of each artifact."""
    catalog = ArtifactCatalogClient(BackendClient(base_url=server))
    with handle_errors():
        view = catalog.search(query)
    output_artifacts(list(view.values()), output, query=query.strip())
