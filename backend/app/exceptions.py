"""
Application exception hierarchy.

Raised by the record service and the request validation helpers, caught by
the handlers registered in ``app.main`` and rendered as the uniform
``{"success": false, "error": message}`` envelope.

    RecordStoreError (base)     -> 500
    ├── StoreConnectionError    -> 500 (fatal during startup)
    ├── RecordNotFoundError     -> 404
    └── InvalidArgumentError    -> 400
"""
from typing import Any, Optional


class RecordStoreError(Exception):
    """Base exception for all record store errors."""

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        # Logged server-side, never returned to the client
        self.context = context or {}
        super().__init__(self.message)


class StoreConnectionError(RecordStoreError):
    """The document database could not be reached."""

    def __init__(
        self,
        message: str = "Database is unreachable",
        context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RecordNotFoundError(RecordStoreError):
    """No record in the collection matches the requested identifier."""

    status_code = 404

    def __init__(
        self,
        collection_name: Optional[str] = None,
        record_id: Optional[str] = None,
    ):
        ctx: dict[str, Any] = {}
        if collection_name:
            ctx["collection"] = collection_name
        if record_id:
            ctx["record_id"] = record_id
        super().__init__(message="Record not found", context=ctx)


class InvalidArgumentError(RecordStoreError):
    """Client input could not be interpreted (bad identifier, bad page number)."""

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid argument",
        field: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field
