"""
Object utilities for JSON serialization of contract messages.

Contract messages are plain dictionaries; these helpers give them a stable
JSON form for logging and the base64 encoding the LCD query endpoint
expects.
"""

import base64
import json
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from typing import Any


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string with sorted keys.

    Handles dataclasses by converting them to dictionaries first.
    Falls back to str() for non-serializable objects.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent, sort_keys=True)


def to_b64_json(obj: Any) -> str:
    """Return the URL-safe base64 encoding of the compact JSON form of obj."""
    compact = json.dumps(obj, default=_default_serializer, separators=(",", ":"))
    return base64.urlsafe_b64encode(compact.encode("utf-8")).decode("ascii")


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Decimals become strings so that amounts never pass through a float.
    """
    if isinstance(obj, Decimal):
        return str(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
