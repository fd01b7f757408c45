"""
Record service dependency.

The service is constructed once in the application lifespan and stored on
``app.state``; routes receive it through ``Depends(get_record_service)``.
"""
from fastapi import Request

from app.exceptions import StoreConnectionError
from app.services.record_service import RecordService


async def get_record_service(request: Request) -> RecordService:
    """Dependency to get the RecordService bound to this application."""
    service = getattr(request.app.state, "record_service", None)
    if service is None:
        raise StoreConnectionError("Database connection is not initialized")
    return service
