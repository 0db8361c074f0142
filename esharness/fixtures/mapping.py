"""Fixture index names and the fixed mapping sent when creating them."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

TEST_INDEX_NAME = "elastic-test"
TEST_INDEX_NAME2 = "elastic-test2"
FIXTURE_INDICES = (TEST_INDEX_NAME, TEST_INDEX_NAME2)

MAPPING_PATH = Path(__file__).with_name("mapping.json")

DOC_TYPES = ("tweet", "comment", "order", "doctype", "queries", "tweet-nosource")


class MappingError(ValueError):
    """The mapping document does not have the expected shape."""


def check_mapping_shape(doc: Any) -> Dict[str, Any]:
    """Minimal structural check: integer shard/replica counts and object-valued mappings."""

    if not isinstance(doc, dict):
        raise MappingError("mapping must be a JSON object")
    settings = doc.get("settings")
    if not isinstance(settings, dict):
        raise MappingError("mapping is missing a 'settings' object")
    for key in ("number_of_shards", "number_of_replicas"):
        value = settings.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise MappingError(f"settings.{key} must be a non-negative integer, got {value!r}")
    mappings = doc.get("mappings")
    if not isinstance(mappings, dict) or not mappings:
        raise MappingError("mapping is missing a non-empty 'mappings' object")
    for doc_type, body in mappings.items():
        if not isinstance(body, dict):
            raise MappingError(f"mappings.{doc_type} must be an object")
    return doc


def _read_mapping(path: Path) -> str:
    text = path.read_text(encoding="utf-8")
    try:
        doc = json.loads(text)
    except ValueError as exc:
        raise MappingError(f"{path.name} is not valid JSON: {exc}") from exc
    check_mapping_shape(doc)
    return text


@lru_cache(maxsize=None)
def _cached_mapping(path: str) -> str:
    return _read_mapping(Path(path))


def load_mapping(path: Optional[Path] = None) -> str:
    """Return the validated mapping text; each file is read and checked once."""

    return _cached_mapping(str(path or MAPPING_PATH))


def mapping_document(path: Optional[Path] = None) -> Dict[str, Any]:
    """Parsed copy of the mapping, for assertions that inspect the schema."""

    return json.loads(load_mapping(path))


TEST_MAPPING = load_mapping()


__all__ = [
    "TEST_INDEX_NAME",
    "TEST_INDEX_NAME2",
    "FIXTURE_INDICES",
    "MAPPING_PATH",
    "DOC_TYPES",
    "MappingError",
    "check_mapping_shape",
    "load_mapping",
    "mapping_document",
    "TEST_MAPPING",
]
