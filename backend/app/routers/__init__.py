"""
API Routers module.
"""
from app.routers import collections, health, server_info

__all__ = ["collections", "health", "server_info"]
