"""
MongoDB connection management.

The client is created explicitly and handed to whoever needs it; nothing in
this module holds a process-wide connection.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import Settings
from app.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Build a MongoDB client from settings (does not connect yet)."""
    kwargs = {"serverSelectionTimeoutMS": settings.mongo_timeout_ms}
    if settings.mongo_tls:
        kwargs["tls"] = True
    return AsyncIOMotorClient(settings.mongodb_uri, **kwargs)


async def ping(client: AsyncIOMotorClient) -> None:
    """Round-trip to the server, raising StoreConnectionError when unreachable."""
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        raise StoreConnectionError(
            f"Database is unreachable: {e}",
            context={"error_type": type(e).__name__},
        ) from e


@asynccontextmanager
async def open_database(settings: Settings) -> AsyncIterator[AsyncIOMotorDatabase]:
    """
    Acquire the configured database for the lifetime of the block.

    Connects and pings on enter, closes the client on exit.
    """
    client = create_mongo_client(settings)
    try:
        await ping(client)
        logger.info(f"Connected to MongoDB database '{settings.db_name}'")
        yield client[settings.db_name]
    finally:
        logger.info("Closing MongoDB connection...")
        client.close()
        logger.info("MongoDB connection closed")
