"""
Database module - MongoDB connection and records database definitions.
"""
from app.database.connections import create_mongo_client, open_database, ping
from app.database.databases import records_db

__all__ = [
    "create_mongo_client",
    "open_database",
    "ping",
    "records_db",
]
