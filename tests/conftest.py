"""Shared fixtures: in-memory backends standing in for the REST services."""

from __future__ import annotations

import pytest

from artifact_commander.config.settings import Settings
from artifact_commander.core.errors import TransportError


def tree_entry(name: str, node_type: str, parent: str = "") -> dict:
    path = f"{parent}/{name}" if parent else name
    return {"id": path, "name": name, "path": path, "type": node_type, "mode": "040000"}


class FakeRepoBackend:
    """Serves tree listings and raw files from dicts, recording every call."""

    def __init__(self, trees: dict[str, list[dict]], files: dict[str, str] | None = None):
        self.trees = trees
        self.files = files or {}
        self.failing: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str]] = []
        self.on_tree = None

    def list_tree(self, repository_id: str, path: str = "") -> list[dict]:
        self.calls.append(("tree", path))
        if self.on_tree is not None:
            self.on_tree(path)
        if ("tree", path) in self.failing or path not in self.trees:
            raise TransportError("HTTP error! status: 404", status_code=404)
        return self.trees[path]

    def raw_file(self, repository_id: str, path: str) -> str:
        self.calls.append(("file", path))
        if ("file", path) in self.failing or path not in self.files:
            raise TransportError("HTTP error! status: 404", status_code=404)
        return self.files[path]


@pytest.fixture
def config(tmp_path) -> Settings:
    return Settings(
        backend_url="http://backend.test",
        token="",
        request_timeout=5.0,
        config_file=tmp_path / "missing.yaml",
    )


@pytest.fixture
def repo_backend() -> FakeRepoBackend:
    """A small repository: README at the root, src/main/App.java below."""
    return FakeRepoBackend(
        trees={
            "": [
                tree_entry("README.md", "blob"),
                tree_entry("src", "tree"),
                tree_entry("build.gradle", "blob"),
                tree_entry("docs", "tree"),
            ],
            "src": [tree_entry("main", "tree", "src")],
            "src/main": [tree_entry("App.java", "blob", "src/main")],
            "docs": [],
        },
        files={
            "README.md": "# Demo\n",
            "build.gradle": "plugins { id 'java' }\n",
            "src/main/App.java": "class App {}\n",
        },
    )
