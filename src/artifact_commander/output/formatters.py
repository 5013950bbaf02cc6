"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import yaml
from rich.console import Console

from artifact_commander.models.artifact import ArtifactRecord, DependencySnippet
from artifact_commander.models.repo import Project

console = Console()


def _record_to_dict(r: ArtifactRecord) -> dict[str, Any]:
    return {
        "group": r.group,
        "name": r.name,
        "version": r.version,
        "repository": r.repository,
        "classifier": r.classifier.value,
    }


def _dump(data: Any, fmt: str) -> bool:
    """Print machine-readable output; returns False for table mode."""
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
        return True
    if fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
        return True
    return False


def output_artifacts(records: list[ArtifactRecord], fmt: str, query: str = "") -> None:
    if _dump([_record_to_dict(r) for r in records], fmt):
        return
    if not records:
        console.print("[dim]No results found.[/dim]")
        return
    from artifact_commander.output.tables import artifact_list_table
    title = f"Artifacts matching '{query}'" if query else "Artifacts"
    console.print(artifact_list_table(records, title=title))


def output_versions(records: list[ArtifactRecord], fmt: str, group: str, name: str) -> None:
    if _dump([_record_to_dict(r) for r in records], fmt):
        return
    if not records:
        console.print("[dim]No other versions found.[/dim]")
        return
    from artifact_commander.output.tables import version_history_table
    console.print(version_history_table(records, group, name))


def output_dependency(snippet: DependencySnippet, fmt: str, coordinate: str, which: str = "all") -> None:
    data = asdict(snippet)
    if which != "all":
        data = {which: data[which]}
    if _dump(data, fmt):
        return
    from artifact_commander.output.tables import dependency_panels
    console.print(dependency_panels(snippet, coordinate, which=which))


def output_projects(projects: list[Project], fmt: str) -> None:
    if _dump([asdict(p) for p in projects], fmt):
        return
    if not projects:
        console.print("[dim]No repositories found.[/dim]")
        return
    from artifact_commander.output.tables import project_list_table
    console.print(project_list_table(projects))
