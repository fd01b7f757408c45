"""
Service layer for business logic.
"""
from app.services.record_service import RecordService
from app.services.server_info import collect_server_info, get_network_addresses

__all__ = [
    "RecordService",
    "collect_server_info",
    "get_network_addresses",
]
