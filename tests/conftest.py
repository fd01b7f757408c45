"""
Global test fixtures for RecordKeeper.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A seeded spreadsheet collection
- Record factories
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend and repository root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "backend"))
sys.path.insert(0, str(ROOT))


# =============================================================================
# Record Factories
# =============================================================================

def make_record(index: int, **overrides) -> dict:
    """
    Build a record shaped like a spreadsheet import row.

    Top-level fields and their additionalInfo columns hold the same values.
    """
    record = {
        "name": f"Person {index}",
        "fatherName": f"Father {index}",
        "address": f"{index} Main Road, Ward {index % 3}",
        "phoneNumber": f"98765{index:05d}",
        "email": f"person{index}@example.com",
    }
    record.update(overrides)
    record["additionalInfo"] = {
        "S.NO": index,
        "NAME": record["name"],
        "FATHER/HUSBAND NAME": record["fatherName"],
        "ADDRESS": record["address"],
        "MOBILE NO": record["phoneNumber"],
        "EMAIL": record["email"],
    }
    return record


@pytest.fixture
def sample_records() -> list[dict]:
    """15 records; exactly one of them lives on 'Lotus Lane'."""
    records = [make_record(i) for i in range(1, 16)]
    records[6] = make_record(7, address="12 Lotus Lane, Old Town")
    return records


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_records_db(mock_async_mongo_client):
    """Provide mock records database."""
    yield mock_async_mongo_client["excel_data"]


@pytest_asyncio.fixture
async def seeded_db(mock_records_db, sample_records):
    """Records database with a 15-record 'Sheet1' and a 2-record 'Sheet2'."""
    await mock_records_db["Sheet1"].insert_many([dict(r) for r in sample_records])
    await mock_records_db["Sheet2"].insert_many([make_record(100), make_record(101)])
    yield mock_records_db


@pytest_asyncio.fixture
async def sheet1_ids(seeded_db) -> list[str]:
    """String ids of the Sheet1 records, in insertion order."""
    docs = await seeded_db["Sheet1"].find({}).to_list(length=None)
    return [str(doc["_id"]) for doc in docs]


@pytest.fixture
def record_service(seeded_db):
    """RecordService over the seeded mock database."""
    from app.services.record_service import RecordService
    return RecordService(seeded_db)
