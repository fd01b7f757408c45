"""
Request and response schemas for API endpoints.
"""
from app.schemas.record import (
    CollectionListResponse,
    ErrorResponse,
    RecordPageResponse,
    RecordResponse,
    RecordUpdate,
    RecordUpdateResponse,
)
from app.schemas.server import (
    HealthResponse,
    MemoryUsage,
    NetworkAddress,
    ServerInfo,
    ServerInfoResponse,
)

__all__ = [
    # Records
    "CollectionListResponse",
    "ErrorResponse",
    "RecordPageResponse",
    "RecordResponse",
    "RecordUpdate",
    "RecordUpdateResponse",
    # Server
    "HealthResponse",
    "MemoryUsage",
    "NetworkAddress",
    "ServerInfo",
    "ServerInfoResponse",
]
