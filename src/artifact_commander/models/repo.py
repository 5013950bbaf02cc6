"""Source repository and navigation models."""

from __future__ import annotations

from dataclasses import dataclass, field

from artifact_commander.models import NodeType, ViewMode


@dataclass(frozen=True)
class RepoNode:
    name: str
    path: str
    node_type: NodeType

    @property
    def is_directory(self) -> bool:
        return self.node_type is NodeType.DIRECTORY

    @classmethod
    def from_dict(cls, d: dict) -> RepoNode:
        name = d.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Tree entry without a name: {d!r}")
        path = d.get("path") or name
        if not isinstance(path, str):
            raise ValueError(f"Tree entry with a non-string path: {d!r}")
        return cls(
            name=name,
            path=path,
            node_type=NodeType.from_str(d.get("type", "")),
        )


@dataclass(frozen=True)
class NavigationState:
    repository_id: str | None = None
    path_stack: tuple[str, ...] = ()
    view_mode: ViewMode = ViewMode.TREE

    @property
    def is_open(self) -> bool:
        return self.repository_id is not None

    @property
    def current_path(self) -> str:
        """Directory currently displayed ("" for the root)."""
        return self.path_stack[-1] if self.path_stack else ""

    @property
    def at_root(self) -> bool:
        return not self.path_stack


@dataclass(frozen=True)
class Crumb:
    label: str
    path: str
    navigable: bool


@dataclass
class Project:
    id: str = ""
    name: str = ""
    description: str = ""
    web_url: str = ""
    last_activity_at: str = ""
    star_count: int = 0
    forks_count: int = 0
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> Project:
        return cls(
            id=str(d.get("id", "")),
            name=d.get("name", "") or "",
            description=d.get("description", "") or "",
            web_url=d.get("web_url", "") or "",
            last_activity_at=d.get("last_activity_at", "") or "",
            star_count=d.get("star_count", 0) or 0,
            forks_count=d.get("forks_count", 0) or 0,
            tags=d.get("tag_list", []) or [],
        )
