"""
Canonical JSON Serialization

Deterministic JSON for holiday lists and quota results:
- Sorted keys
- No whitespace
- Dates as ISO 8601, Decimals as strings, enums by value
- UTF-8 encoding

Identical inputs to the engine give byte-identical output here, which is
what the CLI prints and what the idempotence tests compare.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


def _default_serializer(obj: Any) -> Any:
    """
    Custom JSON serializer for non-standard types.

    Objects with a to_dict() method serialize through it; other
    dataclasses fall back to asdict().
    """
    if hasattr(obj, "to_dict") and callable(obj.to_dict):
        return obj.to_dict()
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


def canonical_json_bytes(obj: Any) -> bytes:
    """Serialize object to canonical JSON as UTF-8 bytes."""
    return canonical_json(obj).encode("utf-8")


def content_hash(obj: Any) -> str:
    """Hex SHA-256 of the canonical JSON representation."""
    return hashlib.sha256(canonical_json_bytes(obj)).hexdigest()
