"""Data models for Artifact Commander."""

from __future__ import annotations

import enum


class NodeType(enum.Enum):
    DIRECTORY = "tree"
    FILE = "blob"

    @classmethod
    def from_str(cls, s: str) -> NodeType:
        for member in cls:
            if member.value == s:
                return member
        raise ValueError(f"Unknown repository node type: {s!r}")


class ViewMode(enum.Enum):
    TREE = "tree"
    FILE = "file"


class Classifier(enum.Enum):
    RELEASE = "release"
    SNAPSHOT = "snapshot"

    @classmethod
    def from_repository(cls, repository: str) -> Classifier:
        if "snapshot" in repository.lower():
            return cls.SNAPSHOT
        return cls.RELEASE
