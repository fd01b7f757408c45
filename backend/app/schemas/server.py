"""
Server info and health schemas.
"""
from pydantic import BaseModel, Field


class NetworkAddress(BaseModel):
    interface: str
    address: str


class MemoryUsage(BaseModel):
    rss: int = Field(..., description="Resident set size in bytes")
    vms: int = Field(..., description="Virtual memory size in bytes")


class ServerInfo(BaseModel):
    """Descriptive information about the host running the API."""
    hostname: str
    platform: str
    addresses: list[NetworkAddress] = []
    port: int
    uptime: float = Field(..., description="Host uptime in seconds")
    memory_usage: MemoryUsage = Field(..., alias="memoryUsage")
    python_version: str = Field(..., alias="pythonVersion")

    class Config:
        populate_by_name = True


class ServerInfoResponse(BaseModel):
    success: bool = True
    server_info: ServerInfo = Field(..., alias="serverInfo")

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    status: str = "healthy"
    uptime: float = Field(..., description="Process uptime in seconds")
