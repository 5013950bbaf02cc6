"""Stateful repository browser driven by the navigation state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable

from artifact_commander.config.settings import Settings, settings as default_settings
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.core.errors import TransportError
from artifact_commander.core.navigation import (
    Action,
    Back,
    BreadcrumbJump,
    Close,
    Descend,
    Effect,
    EffectKind,
    Open,
    OpenFile,
    build_breadcrumb,
    find_readme,
    sort_listing,
    transition,
)
from artifact_commander.models import ViewMode
from artifact_commander.models.repo import Crumb, NavigationState, RepoNode

logger = logging.getLogger(__name__)

FILE_ALERT = "Could not load file content."


@dataclass
class BrowserView:
    """Everything needed to draw the browser, detached from its state."""

    visible: bool = False
    mode: ViewMode = ViewMode.TREE
    title: str = ""
    listing: list[RepoNode] = field(default_factory=list)
    file_path: str = ""
    file_content: str = ""
    breadcrumb: list[Crumb] = field(default_factory=list)
    can_go_back: bool = False
    error: str = ""
    alert: str = ""


def parse_nodes(items: Iterable[dict]) -> list[RepoNode]:
    """Convert raw tree entries, skipping nameless ones and unknown types."""
    nodes: list[RepoNode] = []
    for item in items:
        try:
            nodes.append(RepoNode.from_dict(item))
        except (ValueError, AttributeError):
            logger.debug("Skipping malformed tree entry %r", item)
    return nodes


class RepositoryBrowser:
    """Browse one remote repository at a time.

    Owns its :class:`NavigationState`; the only way to change it is through
    the navigation methods below.  A navigation call made while another one
    is still fetching is ignored.
    """

    def __init__(self, backend: BackendClient, config: Settings | None = None):
        self.backend = backend
        self.config = config or default_settings
        self.state = NavigationState()
        self.title = ""
        self.visible = False
        self.error = ""
        self.alert = ""
        self._listing: list[RepoNode] = []
        self._file_path = ""
        self._file_content = ""
        self._busy = False

    # -- navigation ----------------------------------------------------------

    def open(self, repository_id: str, title: str = "") -> bool:
        self.title = title or repository_id
        return self.dispatch(Open(repository_id))

    def descend(self, node: RepoNode) -> bool:
        return self.dispatch(Descend(node))

    def open_file(self, node: RepoNode) -> bool:
        return self.dispatch(OpenFile(node))

    def activate(self, node: RepoNode) -> bool:
        """Descend into a directory or open a file."""
        return self.descend(node) if node.is_directory else self.open_file(node)

    def back(self) -> bool:
        return self.dispatch(Back())

    def breadcrumb_jump(self, path: str) -> bool:
        return self.dispatch(BreadcrumbJump(path))

    def close(self) -> bool:
        return self.dispatch(Close())

    def dispatch(self, action: Action) -> bool:
        """Apply one action.  Returns False if it was ignored."""
        if self._busy:
            logger.debug("Ignoring %r: navigation already in flight", action)
            return False
        new_state, effect = transition(self.state, action)
        if effect.kind is EffectKind.NONE:
            return False
        self._busy = True
        try:
            self._perform(new_state, effect)
        finally:
            self._busy = False
        return True

    # -- effects ---------------------------------------------------------------

    def _perform(self, new_state: NavigationState, effect: Effect) -> None:
        self.alert = ""
        if effect.kind is EffectKind.HIDE:
            self._reset()
            self.state = new_state
            self.visible = False
            self.title = ""
        elif effect.kind is EffectKind.SHOW_LISTING:
            self.state = new_state
            self.error = ""
            self._file_path = ""
            self._file_content = ""
        elif effect.kind is EffectKind.FETCH_LISTING:
            if effect.preview_readme:
                # Opening a repository: start from a clean slate.
                self._reset()
                self.visible = True
            self.state = new_state
            self._fetch_listing(effect)
        elif effect.kind is EffectKind.FETCH_FILE:
            self._fetch_file(effect.path)

    def _fetch_listing(self, effect: Effect) -> None:
        repository_id = self.state.repository_id
        try:
            nodes = parse_nodes(self.backend.list_tree(repository_id, effect.path))
        except TransportError as exc:
            logger.debug("Listing %r in %s failed: %s", effect.path, repository_id, exc)
            self.error = f"Error loading repository: {exc}"
            return

        self.state = replace(self.state, path_stack=effect.commit_stack, view_mode=ViewMode.TREE)
        self._listing = sort_listing(nodes)
        self._file_path = ""
        self._file_content = ""
        self.error = ""

        if not effect.preview_readme:
            return
        readme = find_readme(nodes, self.config.readme_name)
        if readme is None:
            return
        try:
            content = self.backend.raw_file(repository_id, readme.path)
        except TransportError as exc:
            logger.debug("Could not auto-load %s, showing the listing instead: %s", readme.path, exc)
            return
        self._show_file(readme.path, content)

    def _fetch_file(self, path: str) -> None:
        try:
            content = self.backend.raw_file(self.state.repository_id, path)
        except TransportError as exc:
            logger.debug("Opening %s failed: %s", path, exc)
            self.alert = FILE_ALERT
            return
        self._show_file(path, content)

    def _show_file(self, path: str, content: str) -> None:
        self.state = replace(self.state, view_mode=ViewMode.FILE)
        self.error = ""
        self._file_path = path
        self._file_content = content

    def _reset(self) -> None:
        self._listing = []
        self._file_path = ""
        self._file_content = ""
        self.error = ""

    # -- rendering -----------------------------------------------------------

    @property
    def view(self) -> BrowserView:
        in_file = self.state.view_mode is ViewMode.FILE
        return BrowserView(
            visible=self.visible,
            mode=self.state.view_mode,
            title=self.title,
            listing=list(self._listing),
            file_path=self._file_path,
            file_content=self._file_content,
            breadcrumb=build_breadcrumb(self.state.path_stack),
            can_go_back=in_file or not self.state.at_root,
            error=self.error,
            alert=self.alert,
        )
