"""Observer that surfaces server-side deprecation warnings on every response."""

from __future__ import annotations

import enum
from typing import Any, Callable, List, Optional

from .reporting import Recorder

WARNING_HEADER = "Warning"


class DeprecationPolicy(enum.Enum):
    OFF = "off"
    LOG = "log"
    FAIL = "fail"

    @classmethod
    def parse(cls, value: Any) -> "DeprecationPolicy":
        """Accept a policy, its name, or one of off/log/fail/error (error == fail)."""

        if isinstance(value, cls):
            return value
        text = str(value or "off").strip().lower()
        if text == "error":
            return cls.FAIL
        try:
            return cls(text)
        except ValueError:
            raise ValueError(
                f"unknown deprecation mode {value!r}; expected off, log, fail or error"
            ) from None


def warning_values(response: Any) -> List[str]:
    """Every Warning header value in wire order.

    requests folds repeated headers into one comma-joined string, and warning
    texts contain commas themselves, so the raw urllib3 headers are read first.
    """

    raw_headers = getattr(getattr(response, "raw", None), "headers", None)
    getlist = getattr(raw_headers, "getlist", None)
    if callable(getlist):
        return list(getlist(WARNING_HEADER))
    headers = getattr(response, "headers", None) or {}
    value = headers.get(WARNING_HEADER)
    if not value:
        return []
    return list(value) if isinstance(value, (list, tuple)) else [value]


def _request_url(request: Any, response: Any) -> str:
    url = getattr(request, "url", None) or getattr(response, "url", None)
    return str(url or "")


def deprecation_observer(
    reporter: Recorder, policy: DeprecationPolicy
) -> Optional[Callable[[Any, Any], None]]:
    """Return the response observer for ``policy``, or None when it is OFF."""

    policy = DeprecationPolicy.parse(policy)
    if policy is DeprecationPolicy.OFF:
        return None

    emit = reporter.error if policy is DeprecationPolicy.FAIL else reporter.log

    def observe(request: Any, response: Any) -> None:
        for warning in warning_values(response):
            emit(f"[{_request_url(request, response)}] Deprecation warning: {warning}")

    return observe


__all__ = ["WARNING_HEADER", "DeprecationPolicy", "warning_values", "deprecation_observer"]
