"""
Record service: the only component that talks to the document database.

Provides:
- Collection discovery
- Filtered, paginated record retrieval
- Single record lookup
- Sparse field updates that keep the additionalInfo shadow copy in sync
"""
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure, InvalidName

from app.database.databases.records_db import Fields, shadow_path
from app.exceptions import (
    InvalidArgumentError,
    RecordNotFoundError,
    StoreConnectionError,
)
from app.models.record import serialize_record

logger = logging.getLogger(__name__)


def parse_object_id(record_id: str) -> ObjectId:
    """Parse a record identifier, raising InvalidArgumentError if malformed."""
    if not isinstance(record_id, str) or not ObjectId.is_valid(record_id):
        raise InvalidArgumentError(
            f"Invalid record id '{record_id}'",
            field="id",
        )
    return ObjectId(record_id)


def build_update_document(field_values: dict[str, Any]) -> dict[str, Any]:
    """
    Build the ``$set`` payload for a sparse update.

    Only editable fields with a truthy value are applied; each one is written
    both at the top level and under its additionalInfo shadow key.
    """
    updates: dict[str, Any] = {}
    for field in Fields.EDITABLE:
        value = field_values.get(field)
        if not value:
            continue
        updates[field] = value
        updates[shadow_path(field)] = value
    return updates


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate driver connectivity errors into StoreConnectionError."""
    try:
        yield
    except ConnectionFailure as e:
        logger.error(f"Database unreachable during {operation}: {e}")
        raise StoreConnectionError(
            f"Database is unreachable: {e}",
            context={"operation": operation},
        ) from e


class RecordService:
    """Gateway over the records database."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the records database."""
        self.db = db

    def _collection(self, collection_name: str) -> AsyncIOMotorCollection:
        try:
            return self.db[collection_name]
        except InvalidName as e:
            raise InvalidArgumentError(
                f"Invalid collection name '{collection_name}'",
                field="collectionName",
            ) from e

    async def list_collections(self) -> list[str]:
        """Names of all collections in the database, unfiltered."""
        with _store_errors("list_collections"):
            return await self.db.list_collection_names()

    async def find_page(
        self,
        collection_name: str,
        query: Optional[dict[str, Any]],
        skip: int,
        limit: int,
    ) -> tuple[list[dict], int]:
        """
        Fetch one page of records matching ``query``.

        Args:
            collection_name: Collection to read from
            query: MongoDB filter, None or empty to match every record
            skip: Number of matching records to skip
            limit: Maximum number of records to return

        Returns:
            (records, total matching count)
        """
        collection = self._collection(collection_name)
        query = query or {}

        with _store_errors("find_page"):
            total = await collection.count_documents(query)
            cursor = collection.find(query).skip(skip).limit(limit)
            docs = await cursor.to_list(length=limit)

        return [serialize_record(doc) for doc in docs], total

    async def find_by_id(self, collection_name: str, record_id: str) -> dict:
        """Get a single record, raising RecordNotFoundError if absent."""
        oid = parse_object_id(record_id)
        collection = self._collection(collection_name)

        with _store_errors("find_by_id"):
            doc = await collection.find_one({"_id": oid})

        if not doc:
            raise RecordNotFoundError(collection_name, record_id)
        return serialize_record(doc)

    async def update_fields(
        self,
        collection_name: str,
        record_id: str,
        field_values: dict[str, Any],
    ) -> int:
        """
        Apply a sparse update to one record.

        Empty or missing values are skipped. All applied fields and their
        shadow copies go out in a single ``update_one``.

        Returns:
            Number of modified documents (0 or 1)
        """
        oid = parse_object_id(record_id)
        collection = self._collection(collection_name)
        updates = build_update_document(field_values)

        with _store_errors("update_fields"):
            if not updates:
                # Nothing to write, but the record must still exist
                if await collection.find_one({"_id": oid}, {"_id": 1}) is None:
                    raise RecordNotFoundError(collection_name, record_id)
                return 0

            result = await collection.update_one({"_id": oid}, {"$set": updates})

        if result.matched_count == 0:
            raise RecordNotFoundError(collection_name, record_id)

        applied = [field for field in Fields.EDITABLE if field in updates]
        logger.info(
            f"Updated record {record_id} in '{collection_name}': "
            f"fields={applied} modified={result.modified_count}"
        )
        return result.modified_count
