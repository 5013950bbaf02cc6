"""Tests for the stateful repository browser."""

import pytest
from rich.console import Console

from artifact_commander.core.repo_browser import FILE_ALERT, RepositoryBrowser, parse_nodes
from artifact_commander.models import NodeType, ViewMode
from artifact_commander.models.repo import RepoNode
from artifact_commander.output.tables import browser_panel

from conftest import FakeRepoBackend, tree_entry

SRC = RepoNode("src", "src", NodeType.DIRECTORY)
MAIN = RepoNode("main", "src/main", NodeType.DIRECTORY)
DOCS = RepoNode("docs", "docs", NodeType.DIRECTORY)
BUILD = RepoNode("build.gradle", "build.gradle", NodeType.FILE)


@pytest.fixture
def browser(repo_backend, config):
    return RepositoryBrowser(repo_backend, config=config)


def names(view):
    return [n.name for n in view.listing]


class TestOpen:
    def test_readme_at_root_is_previewed(self, browser, repo_backend):
        browser.open("42", title="demo")
        view = browser.view

        assert view.visible
        assert view.title == "demo"
        assert view.mode is ViewMode.FILE
        assert view.file_path == "README.md"
        assert view.file_content == "# Demo\n"
        assert view.can_go_back
        assert repo_backend.calls == [("tree", ""), ("file", "README.md")]

    def test_without_readme_shows_sorted_listing(self, config):
        backend = FakeRepoBackend(trees={"": [
            tree_entry("b.txt", "blob"),
            tree_entry("A", "tree"),
            tree_entry("a.txt", "blob"),
        ]})
        browser = RepositoryBrowser(backend, config=config)
        browser.open("42")

        view = browser.view
        assert view.mode is ViewMode.TREE
        assert names(view) == ["A", "a.txt", "b.txt"]
        assert not view.can_go_back
        assert backend.calls == [("tree", "")]

    def test_readme_failure_falls_back_to_listing(self, browser, repo_backend):
        repo_backend.failing.add(("file", "README.md"))
        browser.open("42")

        view = browser.view
        assert view.mode is ViewMode.TREE
        assert names(view) == ["docs", "src", "README.md", "build.gradle"]
        assert view.error == ""
        assert repo_backend.calls.count(("file", "README.md")) == 1

    def test_root_listing_failure_shows_inline_error(self, browser, repo_backend):
        repo_backend.failing.add(("tree", ""))
        browser.open("42")

        view = browser.view
        assert view.visible
        assert view.error.startswith("Error loading repository")
        assert browser.state.path_stack == ()

    def test_reopen_resets_navigation(self, browser):
        browser.open("42")
        browser.back()
        browser.descend(SRC)
        browser.open("42")
        assert browser.state.path_stack == ()
        assert browser.view.mode is ViewMode.FILE


class TestNavigation:
    @pytest.fixture(autouse=True)
    def at_root_listing(self, browser):
        browser.open("42")
        browser.back()

    def test_back_from_readme_shows_root_listing_without_fetch(self, browser, repo_backend):
        view = browser.view
        assert view.mode is ViewMode.TREE
        assert names(view) == ["docs", "src", "README.md", "build.gradle"]
        assert repo_backend.calls == [("tree", ""), ("file", "README.md")]

    def test_descend_pushes_path(self, browser):
        browser.descend(SRC)
        browser.descend(MAIN)
        assert browser.state.path_stack == ("src", "src/main")
        assert names(browser.view) == ["App.java"]
        assert [c.label for c in browser.view.breadcrumb] == ["/", "src", "main"]

    def test_readme_preview_does_not_repeat(self, browser, repo_backend):
        browser.descend(SRC)
        browser.breadcrumb_jump("")
        assert browser.view.mode is ViewMode.TREE
        assert repo_backend.calls.count(("file", "README.md")) == 1

    def test_failed_descend_keeps_stack(self, browser, repo_backend):
        repo_backend.failing.add(("tree", "src"))
        browser.descend(SRC)
        assert browser.state.path_stack == ()
        assert browser.view.error

    def test_file_opened_after_failed_descend_is_shown(self, browser, repo_backend):
        repo_backend.failing.add(("tree", "src"))
        browser.descend(SRC)
        assert browser.view.error

        browser.open_file(BUILD)
        view = browser.view
        assert view.mode is ViewMode.FILE
        assert view.error == ""
        assert view.file_content == "plugins { id 'java' }\n"

        console = Console(record=True, width=100)
        console.print(browser_panel(view))
        assert "plugins" in console.export_text()

    def test_back_from_file_clears_listing_error(self, browser, repo_backend):
        repo_backend.failing.add(("tree", "src"))
        browser.descend(SRC)
        browser.open_file(BUILD)
        browser.back()
        view = browser.view
        assert view.mode is ViewMode.TREE
        assert view.error == ""
        assert names(view) == ["docs", "src", "README.md", "build.gradle"]

    def test_back_pops_and_refetches(self, browser, repo_backend):
        browser.descend(SRC)
        browser.descend(MAIN)
        repo_backend.calls.clear()

        browser.back()
        assert browser.state.path_stack == ("src",)
        assert repo_backend.calls == [("tree", "src")]

    def test_back_at_root_is_noop(self, browser, repo_backend):
        repo_backend.calls.clear()
        assert browser.back() is False
        assert repo_backend.calls == []

    def test_open_file_then_back_returns_to_same_directory(self, browser, repo_backend):
        browser.descend(SRC)
        browser.descend(MAIN)
        browser.open_file(RepoNode("App.java", "src/main/App.java", NodeType.FILE))
        assert browser.view.mode is ViewMode.FILE
        assert browser.view.file_content == "class App {}\n"

        repo_backend.calls.clear()
        browser.back()
        view = browser.view
        assert view.mode is ViewMode.TREE
        assert names(view) == ["App.java"]
        assert browser.state.path_stack == ("src", "src/main")
        assert repo_backend.calls == []

    def test_open_file_failure_alerts_and_stays_in_tree(self, browser, repo_backend):
        repo_backend.failing.add(("file", "build.gradle"))
        browser.open_file(BUILD)
        view = browser.view
        assert view.mode is ViewMode.TREE
        assert view.alert == FILE_ALERT
        assert names(view) == ["docs", "src", "README.md", "build.gradle"]

    def test_alert_is_cleared_by_next_action(self, browser, repo_backend):
        repo_backend.failing.add(("file", "build.gradle"))
        browser.open_file(BUILD)
        browser.descend(SRC)
        assert browser.view.alert == ""

    def test_breadcrumb_jump_to_root(self, browser, repo_backend):
        browser.descend(SRC)
        browser.descend(MAIN)
        repo_backend.calls.clear()

        browser.breadcrumb_jump("")
        assert browser.state.path_stack == ()
        assert repo_backend.calls == [("tree", "")]

    def test_breadcrumb_jump_to_ancestor(self, browser):
        browser.descend(SRC)
        browser.descend(MAIN)
        browser.breadcrumb_jump("src")
        assert browser.state.path_stack == ("src",)
        assert names(browser.view) == ["main"]

    def test_empty_directory(self, browser):
        browser.descend(DOCS)
        view = browser.view
        assert view.listing == []
        assert view.error == ""

    def test_activate_dispatches_by_type(self, browser):
        browser.activate(BUILD)
        assert browser.view.file_path == "build.gradle"
        browser.back()
        browser.activate(SRC)
        assert browser.state.path_stack == ("src",)

    def test_close_discards_state(self, browser):
        browser.descend(SRC)
        browser.close()
        view = browser.view
        assert not view.visible
        assert view.listing == []
        assert not browser.state.is_open
        assert browser.back() is False


class TestSingleFlight:
    def test_reentrant_navigation_is_ignored(self, browser, repo_backend):
        browser.open("42")
        browser.back()
        results = []

        def double_click(path):
            if path == "src":
                results.append(browser.descend(DOCS))

        repo_backend.on_tree = double_click
        assert browser.descend(SRC) is True
        assert results == [False]
        assert browser.state.path_stack == ("src",)


class TestParseNodes:
    def test_skips_unknown_types(self):
        nodes = parse_nodes([
            {"name": "a", "path": "a", "type": "tree"},
            {"name": "m", "path": "m", "type": "commit"},
            {"name": "f", "type": "blob"},
        ])
        assert [(n.name, n.path, n.node_type) for n in nodes] == [
            ("a", "a", NodeType.DIRECTORY),
            ("f", "f", NodeType.FILE),
        ]

    def test_skips_entries_without_usable_name(self):
        nodes = parse_nodes([
            {"name": None, "path": "x", "type": "blob"},
            {"name": "", "path": "y", "type": "blob"},
            {"name": "z", "path": 7, "type": "blob"},
            {"path": "w", "type": "tree"},
            {"name": "ok", "path": "ok", "type": "blob"},
        ])
        assert [n.name for n in nodes] == ["ok"]

    def test_nameless_entry_does_not_break_listing(self, config):
        backend = FakeRepoBackend(trees={"": [
            {"name": None, "path": "x", "type": "blob"},
            tree_entry("lib", "tree"),
            tree_entry("a.txt", "blob"),
        ]})
        browser = RepositoryBrowser(backend, config=config)
        browser.open("42")
        view = browser.view
        assert view.error == ""
        assert names(view) == ["lib", "a.txt"]
