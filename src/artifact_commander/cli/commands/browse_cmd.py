"""acom browse <repository> - Browse a source repository's file tree."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from artifact_commander.cli.options import ServerOption
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.core.repo_browser import RepositoryBrowser
from artifact_commander.models import ViewMode
from artifact_commander.output.tables import browser_panel

console = Console()

_HELP = "[dim]number[/dim] open  [dim]b[/dim] back  [dim]/[/dim] root  [dim]c N[/dim] breadcrumb  [dim]q[/dim] quit"


def browse(
    repository: str = typer.Argument(help="Repository (project) id"),
    name: Optional[str] = typer.Option(None, "--name", help="Title to show instead of the id"),
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Start in this directory"),
    interactive: bool = typer.Option(True, "--interactive/--no-interactive", help="Prompt for navigation"),
    server: Optional[str] = ServerOption,
) -> None:
    """Open a repository, preview its README and navigate its directories."""
    browser = RepositoryBrowser(BackendClient(base_url=server))
    browser.open(repository, title=name or repository)

    if path:
        if browser.view.mode is ViewMode.FILE:
            browser.back()
        browser.breadcrumb_jump(path)

    console.print(browser_panel(browser.view))

    if not interactive:
        failed = bool(browser.view.error)
        browser.close()
        if failed:
            raise typer.Exit(code=1)
        return

    console.print(_HELP)
    while browser.visible:
        try:
            command = Prompt.ask("[bold cyan]>[/bold cyan]", console=console).strip()
        except EOFError:
            browser.close()
            break

        if not _run_command(browser, command):
            continue
        if browser.visible:
            console.print(browser_panel(browser.view))


def _run_command(browser: RepositoryBrowser, command: str) -> bool:
    """Apply one prompt command.  Returns True if the view should be redrawn."""
    view = browser.view
    if command in ("q", "quit", "exit"):
        browser.close()
        return False
    if command in ("b", "back"):
        return browser.back()
    if command == "/":
        return browser.breadcrumb_jump("")
    if command.startswith("c "):
        index = command[2:].strip()
        if not index.isdigit() or int(index) >= len(view.breadcrumb):
            console.print("[yellow]No such breadcrumb.[/yellow]")
            return False
        crumb = view.breadcrumb[int(index)]
        if not crumb.navigable:
            return False
        return browser.breadcrumb_jump(crumb.path)
    if command.isdigit():
        if view.mode is not ViewMode.TREE:
            console.print("[yellow]Go back to the listing first (b).[/yellow]")
            return False
        position = int(command)
        if not 1 <= position <= len(view.listing):
            console.print("[yellow]No such entry.[/yellow]")
            return False
        return browser.activate(view.listing[position - 1])

    console.print(f"[yellow]Unknown command '{command}'.[/yellow] {_HELP}")
    return False
