"""
Request validation for record listing and lookup.

Query and path values are checked here, before any store call, and rejected
with InvalidArgumentError (400) when they cannot be interpreted.
"""
import re
from typing import Any, Optional

from fastapi import Depends, Path, Query
from pydantic import BaseModel

from app.config import Settings, get_settings
from app.database.databases.records_db import Fields
from app.exceptions import InvalidArgumentError
from app.services.record_service import parse_object_id


class RecordQuery(BaseModel):
    """Validated pagination and search parameters."""
    page: int = 1
    limit: int = 20
    search: Optional[str] = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def to_filter(self) -> dict[str, Any]:
        return build_search_filter(self.search)


def build_search_filter(search: Optional[str]) -> dict[str, Any]:
    """
    Case-insensitive substring match OR-ed across the searchable fields.

    The term is matched literally; a missing or blank term matches everything.
    """
    term = (search or "").strip()
    if not term:
        return {}
    pattern = re.escape(term)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in Fields.SEARCHABLE
        ]
    }


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit), 0 for an empty result."""
    return (total + limit - 1) // limit


def parse_positive_int(
    value: Optional[str],
    name: str,
    default: int,
    maximum: Optional[int] = None,
) -> int:
    """Parse a 1-based integer query value, falling back to ``default`` when absent."""
    if value is None or value.strip() == "":
        return default
    try:
        number = int(value)
    except ValueError:
        raise InvalidArgumentError(
            f"'{name}' must be an integer, got '{value}'", field=name
        )
    if number < 1:
        raise InvalidArgumentError(f"'{name}' must be at least 1", field=name)
    if maximum is not None and number > maximum:
        raise InvalidArgumentError(f"'{name}' must be at most {maximum}", field=name)
    return number


async def get_record_query(
    page: Optional[str] = Query(None, description="Page number (1-based)"),
    limit: Optional[str] = Query(None, description="Records per page"),
    search: Optional[str] = Query(None, description="Substring searched in name, fatherName, address, phoneNumber, email"),
    settings: Settings = Depends(get_settings),
) -> RecordQuery:
    """Dependency: validated pagination/search parameters."""
    return RecordQuery(
        page=parse_positive_int(page, "page", 1),
        limit=parse_positive_int(
            limit, "limit", settings.default_page_size, settings.max_page_size
        ),
        search=search.strip() if search else None,
    )


async def get_record_id(record_id: str = Path(..., description="Record ObjectId")) -> str:
    """Dependency: a record identifier that parses as an ObjectId."""
    parse_object_id(record_id)
    return record_id
