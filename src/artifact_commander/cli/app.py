"""Root Typer application, registers the commands."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

app = typer.Typer(
    name="acom",
    help="Artifact Commander - Search the artifact registry and browse source repositories.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and decisions at DEBUG level"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from artifact_commander.cli.commands.search_cmd import search
    from artifact_commander.cli.commands.versions_cmd import versions
    from artifact_commander.cli.commands.dependency_cmd import dependency
    from artifact_commander.cli.commands.projects_cmd import projects
    from artifact_commander.cli.commands.browse_cmd import browse

    app.command(name="search", help="Search artifacts, latest version of each")(search)
    app.command(name="versions", help="Show every version of one artifact")(versions)
    app.command(name="dependency", help="Print build-file dependency snippets")(dependency)
    app.command(name="projects", help="List source repositories")(projects)
    app.command(name="browse", help="Browse a source repository's file tree")(browse)


_register_commands()


def main() -> None:
    app()
