"""Artifact registry models."""

from __future__ import annotations

from dataclasses import dataclass

from artifact_commander.models import Classifier

DEPENDENCY_PLACEHOLDER = "Failed to load dependency info."


@dataclass(frozen=True)
class ArtifactRecord:
    group: str
    name: str
    version: str
    repository: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.group, self.name)

    @property
    def classifier(self) -> Classifier:
        return Classifier.from_repository(self.repository)

    @property
    def is_snapshot(self) -> bool:
        return self.classifier is Classifier.SNAPSHOT

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    @classmethod
    def from_dict(cls, d: dict) -> ArtifactRecord | None:
        """Build a record from a search item, or None if it is malformed.

        Items missing any of group, name or version are dropped.
        """
        if not isinstance(d, dict):
            return None
        group = d.get("group")
        name = d.get("name")
        version = d.get("version")
        if not group or not name or not version:
            return None
        return cls(
            group=str(group),
            name=str(name),
            version=str(version),
            repository=str(d.get("repository") or ""),
        )


@dataclass(frozen=True)
class DependencySnippet:
    maven: str
    gradle: str

    @classmethod
    def from_dict(cls, d: dict) -> DependencySnippet:
        maven = d.get("pom", d.get("buildSystemFormatA"))
        gradle = d.get("gradle", d.get("buildSystemFormatB"))
        return cls(
            maven=maven if isinstance(maven, str) else DEPENDENCY_PLACEHOLDER,
            gradle=gradle if isinstance(gradle, str) else DEPENDENCY_PLACEHOLDER,
        )

    @classmethod
    def placeholder(cls) -> DependencySnippet:
        return cls(maven=DEPENDENCY_PLACEHOLDER, gradle=DEPENDENCY_PLACEHOLDER)
