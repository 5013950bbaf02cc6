"""Artifact search, latest-version aggregation and version history."""

from __future__ import annotations

import logging
from typing import Iterable

from artifact_commander.config.settings import Settings, settings as default_settings
from artifact_commander.core.backend_client import BackendClient
from artifact_commander.core.errors import QueryValidationError, TransportError
from artifact_commander.models.artifact import ArtifactRecord, DependencySnippet
from artifact_commander.utils.version_compare import is_newer, version_key

logger = logging.getLogger(__name__)

ArtifactGroupView = dict[tuple[str, str], ArtifactRecord]


def parse_records(items: Iterable[dict]) -> list[ArtifactRecord]:
    """Convert raw search items, dropping any missing group/name/version."""
    records: list[ArtifactRecord] = []
    dropped = 0
    for item in items:
        record = ArtifactRecord.from_dict(item)
        if record is None:
            dropped += 1
            continue
        records.append(record)
    if dropped:
        logger.debug("Dropped %d malformed search item(s)", dropped)
    return records


def aggregate_latest(records: Iterable[ArtifactRecord]) -> ArtifactGroupView:
    """Keep one record per (group, name), the one with the greatest version.

    On equal versions the first record seen wins.
    """
    latest: ArtifactGroupView = {}
    for record in records:
        existing = latest.get(record.key)
        if existing is None or is_newer(existing.version, record.version):
            latest[record.key] = record
    return latest


def sort_versions(records: Iterable[ArtifactRecord]) -> list[ArtifactRecord]:
    """Sort newest first.  The sort is stable, so equal versions keep order."""
    return sorted(records, key=lambda r: version_key(r.version), reverse=True)


class ArtifactCatalogClient:
    """Searches the artifact registry and shapes the results for display."""

    def __init__(self, backend: BackendClient, config: Settings | None = None):
        self.backend = backend
        self.config = config or default_settings

    def validate_query(self, query: str) -> str:
        """Return the stripped query or raise QueryValidationError.

        An empty query is allowed and means "list everything".
        """
        query = query.strip()
        if query and len(query) < self.config.min_query_length:
            raise QueryValidationError(query, self.config.min_query_length)
        return query

    def search(self, query: str) -> ArtifactGroupView:
        query = self.validate_query(query)
        items = self.backend.search_artifacts(query)
        view = aggregate_latest(parse_records(items))
        logger.debug("Search %r: %d item(s) -> %d artifact(s)", query, len(items), len(view))
        return view

    def expand_versions(self, group: str, name: str) -> list[ArtifactRecord]:
        """Fetch and sort every version of one artifact.  Never cached."""
        items = self.backend.search_versions(group, name)
        return sort_versions(parse_records(items))

    def resolve_dependency(self, group: str, name: str, version: str) -> DependencySnippet:
        """Build-file snippets for a coordinate; placeholders on failure."""
        try:
            data = self.backend.dependency_info(group, name, version)
        except TransportError as exc:
            logger.debug("Dependency lookup for %s:%s:%s failed: %s", group, name, version, exc)
            return DependencySnippet.placeholder()
        return DependencySnippet.from_dict(data)
