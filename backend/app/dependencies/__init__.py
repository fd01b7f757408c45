"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.pagination import RecordQuery, get_record_query, get_record_id
from app.dependencies.store import get_record_service

__all__ = [
    "RecordQuery",
    "get_record_query",
    "get_record_id",
    "get_record_service",
]
