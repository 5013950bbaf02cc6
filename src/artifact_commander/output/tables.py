"""Rich table and panel builders for each command."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from artifact_commander.core.repo_browser import BrowserView
from artifact_commander.models import ViewMode
from artifact_commander.models.artifact import ArtifactRecord, DependencySnippet
from artifact_commander.models.repo import Crumb, Project
from artifact_commander.output.themes import styled_classifier, styled_node


def artifact_list_table(records: list[ArtifactRecord], title: str = "Artifacts") -> Table:
    table = Table(title=title, expand=True)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Group", style="cyan")
    table.add_column("Latest", style="magenta", no_wrap=True)
    table.add_column("Repository", no_wrap=True)

    for r in records:
        table.add_row(r.name, r.group, r.version, styled_classifier(r.classifier))
    return table


def version_history_table(records: list[ArtifactRecord], group: str, name: str) -> Table:
    table = Table(title=f"Versions: {group}:{name}", expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Version", style="bold magenta", no_wrap=True)
    table.add_column("Repository", no_wrap=True)
    table.add_column("Source", style="dim")

    for i, r in enumerate(records, 1):
        table.add_row(str(i), r.version, styled_classifier(r.classifier), r.repository or "-")
    return table


def dependency_panels(snippet: DependencySnippet, title: str, which: str = "all") -> Group:
    panels = []
    if which in ("all", "maven"):
        panels.append(Panel(
            Syntax(snippet.maven, "xml", theme="monokai", line_numbers=False),
            title="[bold]Maven[/bold]",
            border_style="green",
        ))
    if which in ("all", "gradle"):
        panels.append(Panel(
            Syntax(snippet.gradle, "groovy", theme="monokai", line_numbers=False),
            title="[bold]Gradle[/bold]",
            border_style="blue",
        ))
    return Group(Text(title, style="bold"), *panels)


def project_list_table(projects: list[Project]) -> Table:
    table = Table(title="Repositories", expand=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Description", max_width=50)
    table.add_column("Stars", justify="right", style="yellow")
    table.add_column("Forks", justify="right", style="cyan")
    table.add_column("Last Activity", style="dim", no_wrap=True)

    for p in projects:
        table.add_row(
            p.id,
            p.name,
            p.description or "-",
            str(p.star_count),
            str(p.forks_count),
            p.last_activity_at[:19].replace("T", " "),
        )
    return table


def breadcrumb_text(crumbs: list[Crumb]) -> Text:
    text = Text()
    for i, crumb in enumerate(crumbs):
        if i > 1:
            text.append(" › ", style="dim")
        elif i == 1:
            text.append(" ", style="dim")
        style = "underline cyan" if crumb.navigable else "bold"
        text.append(crumb.label, style=style)
        if crumb.navigable:
            text.append(f"[{i}]", style="dim")
    return text


def browser_panel(view: BrowserView) -> Panel:
    """Draw the current browser pane: listing, file content or error."""
    header = breadcrumb_text(view.breadcrumb)
    if view.error:
        body = Text(view.error, style="red")
    elif view.mode is ViewMode.FILE:
        lexer = Syntax.guess_lexer(view.file_path, code=view.file_content)
        body = Group(
            Text(view.file_path, style="bold"),
            Syntax(view.file_content, lexer, theme="monokai", line_numbers=False, word_wrap=True),
        )
    elif not view.listing:
        body = Text("This directory is empty.", style="dim")
    else:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name")
        for i, node in enumerate(view.listing, 1):
            table.add_row(str(i), styled_node(node.node_type, node.name))
        body = table

    parts = [header, body]
    if view.alert:
        parts.append(Text(view.alert, style="red bold"))
    return Panel(Group(*parts), title=f"[bold]{view.title}[/bold]", border_style="blue")
