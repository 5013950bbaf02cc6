"""HTTP wrapper around the artifact registry and repository backends."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from artifact_commander.config.settings import Settings, settings as default_settings
from artifact_commander.core.errors import TransportError

logger = logging.getLogger(__name__)


class BackendClient:
    """Thin wrapper around ``requests`` for the read-only backend endpoints.

    Every failure (connection error, timeout, non-2xx status, bad JSON) is
    raised as :class:`TransportError`.  There is no retry.
    """

    def __init__(self, base_url: str | None = None, config: Settings | None = None):
        self.config = config or default_settings
        self.base_url = (base_url or self.config.backend_url).rstrip("/")
        self._session: requests.Session | None = None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers["Accept"] = "application/json"
            if self.config.token:
                session.headers["PRIVATE-TOKEN"] = self.config.token
            self._session = session
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _url(self, path_template: str, **params: str) -> str:
        quoted = {k: quote(str(v), safe="") for k, v in params.items()}
        return self.base_url + path_template.format(**quoted)

    def _get(self, url: str, params: dict[str, str] | None = None) -> requests.Response:
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.config.request_timeout)
        except requests.Timeout as exc:
            logger.debug("GET %s timed out", url)
            raise TransportError(
                f"Request timed out after {self.config.request_timeout:g}s", url=url,
            ) from exc
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise TransportError(f"Connection error: {exc}", url=url) from exc

        if not 200 <= response.status_code < 300:
            logger.debug("GET %s returned HTTP %s", url, response.status_code)
            raise TransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )
        return response

    def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        response = self._get(url, params=params)
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError("Backend returned a non-JSON body", response.status_code, url) from exc

    # -- artifact registry -------------------------------------------------

    def search_artifacts(self, query: str) -> list[dict]:
        """Keyword search; an empty query lists everything."""
        data = self._get_json(self._url(self.config.search_path), params={"q": query})
        return _items(data)

    def search_versions(self, group: str, name: str) -> list[dict]:
        """Every published version of one artifact, release and snapshot."""
        data = self._get_json(
            self._url(self.config.search_path),
            params={"group": group, "name": name},
        )
        return _items(data)

    def dependency_info(self, group: str, name: str, version: str) -> dict:
        data = self._get_json(
            self._url(self.config.dependency_path),
            params={"g": group, "a": name, "v": version},
        )
        if not isinstance(data, dict):
            raise TransportError("Invalid response from dependency API")
        return data

    # -- source repositories -----------------------------------------------

    def list_projects(self) -> list[dict]:
        data = self._get_json(self._url(self.config.projects_path))
        if not isinstance(data, list):
            raise TransportError("Invalid response from project API")
        return data

    def list_tree(self, repository_id: str, path: str = "") -> list[dict]:
        """Directory listing; ``path`` is omitted for the root."""
        params = {"path": path} if path else None
        data = self._get_json(
            self._url(self.config.tree_path, repository_id=repository_id),
            params=params,
        )
        if not isinstance(data, list):
            raise TransportError("Invalid response from repository API")
        return data

    def raw_file(self, repository_id: str, path: str) -> str:
        response = self._get(
            self._url(self.config.raw_path, repository_id=repository_id),
            params={"path": path},
        )
        return response.text


def _items(data: Any) -> list[dict]:
    if not isinstance(data, dict):
        raise TransportError("Invalid response from search API")
    items = data.get("items") or []
    if not isinstance(items, list):
        raise TransportError("Invalid response from search API")
    return items
