"""Exceptions raised by the Elasticsearch client wrapper."""

from __future__ import annotations

from typing import Any, Optional


class ElasticError(RuntimeError):
    """A failed request: HTTP status >= 300 or a transport failure (status None)."""

    def __init__(self, status: Optional[int], reason: str, body: Any = None) -> None:
        self.status = status
        self.reason = reason
        self.body = body
        if status is None:
            super().__init__(reason)
        else:
            super().__init__(f"elastic: Error {status}: {reason}")

    @property
    def error_type(self) -> Optional[str]:
        """Return ``error.type`` from an Elasticsearch error body, if present."""

        if isinstance(self.body, dict):
            error = self.body.get("error")
            if isinstance(error, dict):
                return error.get("type")
        return None


class IndexNotFoundError(ElasticError):
    """The addressed index does not exist (404 index_not_found_exception)."""


class DecodeError(ValueError):
    """A response body could not be decoded into the requested record type."""


__all__ = ["ElasticError", "IndexNotFoundError", "DecodeError"]
