"""
Record document conversion.

Records are schemaless spreadsheet rows, so they stay plain dicts; this module
only makes BSON values JSON-safe.
"""
from datetime import datetime
from typing import Any

from bson import ObjectId


def serialize_value(value: Any) -> Any:
    """Recursively convert ObjectId and datetime values to strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def serialize_record(doc: dict) -> dict:
    """Convert a raw MongoDB document into a JSON-safe record."""
    return serialize_value(doc)
