"""
Server info router, used by the UI's "show access info" panel.
"""
from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.schemas.server import ServerInfo, ServerInfoResponse
from app.services.server_info import collect_server_info

router = APIRouter(prefix="/api", tags=["Server"])


@router.get(
    "/server-info",
    response_model=ServerInfoResponse,
    summary="Get server access info",
)
async def get_server_info(settings: Settings = Depends(get_settings)):
    """Hostname, non-loopback IPv4 addresses, port, uptime and memory usage."""
    info = collect_server_info(settings.port)
    return ServerInfoResponse(server_info=ServerInfo(**info))
