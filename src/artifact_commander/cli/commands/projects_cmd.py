"""acom projects - List source repositories."""

from __future__ import annotations

from typing import Optional

from artifact_commander.cli.options import OutputOption, ServerOption, handle_errors
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.models.repo import Project
from artifact_commander.output.formatters import output_projects


def projects(
    output: str = OutputOption,
    server: Optional[str] = ServerOption,
) -> None:
    """List the repositories available for browsing."""
    backend = BackendClient(base_url=server)
    with handle_errors():
        raw = backend.list_projects()
    output_projects([Project.from_dict(p) for p in raw if isinstance(p, dict)], output)
