"""
Helpers for database documents.
"""
from app.models.record import serialize_record, serialize_value

__all__ = ["serialize_record", "serialize_value"]
