"""Typed response records for the endpoints the harness drives."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .records import Record


class ShardsInfo(Record):
    total: int = 0
    successful: int = 0
    failed: int = 0
    skipped: Optional[int] = None
    failures: Optional[List[Dict[str, Any]]] = None


class PingResponse(Record):
    name: Optional[str] = None
    cluster_name: Optional[str] = None
    cluster_uuid: Optional[str] = None
    version: Optional[Dict[str, Any]] = None
    tagline: Optional[str] = None


class CreateIndexResponse(Record):
    acknowledged: bool = False
    shards_acknowledged: bool = False
    index: Optional[str] = None


class DeleteIndexResponse(Record):
    acknowledged: bool = False


class IndexResponse(Record):
    index: Optional[str] = Field(default=None, alias="_index")
    type: Optional[str] = Field(default=None, alias="_type")
    id: Optional[str] = Field(default=None, alias="_id")
    version: Optional[int] = Field(default=None, alias="_version")
    result: Optional[str] = None
    shards: Optional[ShardsInfo] = Field(default=None, alias="_shards")
    seq_no: Optional[int] = Field(default=None, alias="_seq_no")
    primary_term: Optional[int] = Field(default=None, alias="_primary_term")
    status: Optional[int] = None
    forced_refresh: Optional[bool] = None
    created: Optional[bool] = None


class GetResult(Record):
    index: Optional[str] = Field(default=None, alias="_index")
    type: Optional[str] = Field(default=None, alias="_type")
    id: Optional[str] = Field(default=None, alias="_id")
    uid: Optional[str] = Field(default=None, alias="_uid")
    routing: Optional[str] = Field(default=None, alias="_routing")
    parent: Optional[str] = Field(default=None, alias="_parent")
    version: Optional[int] = Field(default=None, alias="_version")
    seq_no: Optional[int] = Field(default=None, alias="_seq_no")
    primary_term: Optional[int] = Field(default=None, alias="_primary_term")
    source: Optional[Dict[str, Any]] = Field(default=None, alias="_source")
    found: bool = False
    stored_fields: Optional[Dict[str, Any]] = Field(default=None, alias="fields")
    error: Optional[Dict[str, Any]] = None


class FlushResponse(Record):
    shards: Optional[ShardsInfo] = Field(default=None, alias="_shards")


class CountResponse(Record):
    count: int = 0
    shards: Optional[ShardsInfo] = Field(default=None, alias="_shards")
    terminated_early: Optional[bool] = None


__all__ = [
    "ShardsInfo",
    "PingResponse",
    "CreateIndexResponse",
    "DeleteIndexResponse",
    "IndexResponse",
    "GetResult",
    "FlushResponse",
    "CountResponse",
]
