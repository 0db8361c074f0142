"""Minimal Elasticsearch client wrapper driven by the test harness."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Optional, Type, Union

import requests

from .decoder import DefaultDecoder
from .errors import ElasticError, IndexNotFoundError
from .records import Record
from .responses import (
    CountResponse,
    CreateIndexResponse,
    DeleteIndexResponse,
    FlushResponse,
    GetResult,
    IndexResponse,
    PingResponse,
)

DEFAULT_URL = "http://127.0.0.1:9200"
DEFAULT_TIMEOUT = 30

ResponseObserver = Callable[[Any, requests.Response], None]
TraceLog = Callable[[str], None]
Body = Union[str, bytes, Dict[str, Any], Any]


def _encode_body(body: Body) -> Optional[Union[str, bytes]]:
    """Strings and bytes go out verbatim; mappings and records become JSON."""

    if body is None or isinstance(body, (str, bytes)):
        return body
    if isinstance(body, Record):
        body = body.to_body()
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def _error_reason(body: Any, fallback: str) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("reason") or error.get("type") or fallback
        if isinstance(error, str):
            return error
    return fallback


class ESClient:
    """Thin wrapper around the Elasticsearch HTTP API used to provision fixtures."""

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        verify_tls: bool = True,
        decoder: Optional[DefaultDecoder] = None,
        trace_log: Optional[TraceLog] = None,
        session: Optional[requests.Session] = None,
        healthcheck: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not base_url or not str(base_url).startswith(("http://", "https://")):
            raise ValueError(f"elastic: invalid URL {base_url!r}")
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.verify = bool(verify_tls)
        self.timeout = timeout
        self.decoder = decoder if decoder is not None else DefaultDecoder()
        self.trace_log = trace_log
        self.response_observer: Optional[ResponseObserver] = None

        if api_key:
            self.session.headers["Authorization"] = f"ApiKey {api_key}"
        elif username and password:
            self.session.auth = (username, password)

        if healthcheck:
            self.ping()

    def _url(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    def _trace(self, line: str) -> None:
        if self.trace_log is not None:
            self.trace_log(line)

    def perform_request(
        self,
        method: str,
        path: str,
        body: Body = None,
        params: Optional[Dict[str, Any]] = None,
        ignore: tuple = (),
    ) -> requests.Response:
        """Send one request; observe the response, then raise on failure statuses."""

        url = self._url(path)
        params = {k: v for k, v in (params or {}).items() if v is not None}
        data = _encode_body(body)
        self._trace(f"[trace] {method} {url} {params or ''}".rstrip())
        if data is not None:
            self._trace(f"[trace] body: {data if isinstance(data, str) else data.decode('utf-8', 'replace')}")
        try:
            response = self.session.request(
                method,
                url,
                params=params or None,
                data=data,
                verify=self.verify,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ElasticError(None, f"elastic: {method} {url} failed: {exc}") from exc

        self._trace(f"[trace] {response.status_code} {method} {url}")
        if self.response_observer is not None:
            self.response_observer(response.request, response)

        if response.status_code >= 300 and response.status_code not in ignore:
            raise self._error_from(response)
        return response

    def _error_from(self, response: requests.Response) -> ElasticError:
        try:
            body = response.json()
        except ValueError:
            body = (response.text or "")[:300]
        reason = _error_reason(body, response.reason or "")
        err_cls = ElasticError
        if response.status_code == 404 and isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("type") == "index_not_found_exception":
                err_cls = IndexNotFoundError
        return err_cls(response.status_code, reason, body)

    def _decode(self, response: requests.Response, target: Type[Any]) -> Any:
        return self.decoder.decode(response.content, target)

    def ping(self) -> PingResponse:
        response = self.perform_request("GET", "/")
        return self._decode(response, PingResponse)

    def index_exists(self, name: str) -> bool:
        response = self.perform_request("HEAD", f"/{name}", ignore=(404,))
        return response.status_code == 200

    def create_index(self, name: str, body: Body = None) -> CreateIndexResponse:
        response = self.perform_request("PUT", f"/{name}", body=body)
        return self._decode(response, CreateIndexResponse)

    def delete_index(self, name: str) -> DeleteIndexResponse:
        response = self.perform_request("DELETE", f"/{name}")
        return self._decode(response, DeleteIndexResponse)

    def index_document(
        self,
        index: str,
        doc_type: str,
        doc_id: Optional[str],
        body: Body,
        routing: Optional[str] = None,
        parent: Optional[str] = None,
    ) -> IndexResponse:
        """Index one document; with no id, Elasticsearch assigns one (POST)."""

        params = {"routing": routing, "parent": parent}
        if doc_id is None:
            response = self.perform_request("POST", f"/{index}/{doc_type}", body=body, params=params)
        else:
            response = self.perform_request(
                "PUT", f"/{index}/{doc_type}/{doc_id}", body=body, params=params
            )
        return self._decode(response, IndexResponse)

    def get_document(
        self,
        index: str,
        doc_type: str,
        doc_id: str,
        routing: Optional[str] = None,
        parent: Optional[str] = None,
    ) -> GetResult:
        """Fetch one document; a missing document decodes with ``found=False``."""

        params = {"routing": routing, "parent": parent}
        response = self.perform_request(
            "GET", f"/{index}/{doc_type}/{doc_id}", params=params, ignore=(404,)
        )
        if response.status_code == 404:
            error = self._error_from(response)
            if isinstance(error, IndexNotFoundError):
                raise error
        return self._decode(response, GetResult)

    def decode_source(self, result: GetResult, record: Type[Any]) -> Any:
        """Decode a GetResult's ``_source`` into ``record`` with the client's decoder."""

        if result.source is None:
            return None
        return self.decoder.decode(json.dumps(result.source), record)

    def count(self, index: str, doc_type: Optional[str] = None) -> CountResponse:
        path = f"/{index}/{doc_type}/_count" if doc_type else f"/{index}/_count"
        response = self.perform_request("GET", path)
        return self._decode(response, CountResponse)

    def flush(self, index: str) -> FlushResponse:
        response = self.perform_request("POST", f"/{index}/_flush")
        return self._decode(response, FlushResponse)


__all__ = ["ESClient", "DEFAULT_URL", "DEFAULT_TIMEOUT", "ResponseObserver", "TraceLog"]
