"""Error types raised by the core clients."""

from __future__ import annotations


class CommanderError(Exception):
    """Base class for errors surfaced to the user."""


class QueryValidationError(CommanderError):
    """A search query was rejected before any request was made."""

    def __init__(self, query: str, min_length: int):
        self.query = query
        self.min_length = min_length
        super().__init__(f"Search terms must be at least {min_length} characters.")


class TransportError(CommanderError):
    """Network failure, timeout, non-2xx status or undecodable body."""

    def __init__(self, message: str, status_code: int | None = None, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(message)
