"""
Collections router: browse, search and edit spreadsheet records.

Endpoints for:
- Listing collections
- Paginated record listing with free-text search
- Single record lookup
- Partial record update
"""
from typing import Optional

from fastapi import APIRouter, Depends

from app.dependencies.pagination import (
    RecordQuery,
    get_record_id,
    get_record_query,
    total_pages,
)
from app.dependencies.store import get_record_service
from app.schemas.record import (
    CollectionListResponse,
    ErrorResponse,
    RecordPageResponse,
    RecordResponse,
    RecordUpdate,
    RecordUpdateResponse,
)
from app.services.record_service import RecordService

router = APIRouter(
    prefix="/api/collections",
    tags=["Collections"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid argument"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)


@router.get(
    "",
    response_model=CollectionListResponse,
    summary="List collections",
)
async def list_collections(
    record_service: RecordService = Depends(get_record_service),
):
    """List every collection (imported sheet) in the records database."""
    collections = await record_service.list_collections()
    return CollectionListResponse(collections=collections)


@router.get(
    "/{collection_name}",
    response_model=RecordPageResponse,
    summary="List records",
)
async def list_records(
    collection_name: str,
    query: RecordQuery = Depends(get_record_query),
    record_service: RecordService = Depends(get_record_service),
):
    """
    List records of a collection, one page at a time.

    - **page**: 1-based page number (default 1)
    - **limit**: records per page (default 20)
    - **search**: case-insensitive substring matched against name,
      fatherName, address, phoneNumber and email
    """
    records, total = await record_service.find_page(
        collection_name,
        query.to_filter(),
        skip=query.skip,
        limit=query.limit,
    )

    return RecordPageResponse(
        total=total,
        page=query.page,
        limit=query.limit,
        total_pages=total_pages(total, query.limit),
        data=records,
    )


@router.get(
    "/{collection_name}/{record_id}",
    response_model=RecordResponse,
    summary="Get a record",
    responses={404: {"model": ErrorResponse, "description": "Record not found"}},
)
async def get_record(
    collection_name: str,
    record_id: str = Depends(get_record_id),
    record_service: RecordService = Depends(get_record_service),
):
    """Get a single record by its ObjectId."""
    record = await record_service.find_by_id(collection_name, record_id)
    return RecordResponse(data=record)


@router.put(
    "/{collection_name}/{record_id}",
    response_model=RecordUpdateResponse,
    summary="Update a record",
    responses={404: {"model": ErrorResponse, "description": "Record not found"}},
)
async def update_record(
    collection_name: str,
    record_id: str = Depends(get_record_id),
    record_service: RecordService = Depends(get_record_service),
    body: Optional[RecordUpdate] = None,
):
    """
    Update any subset of name, fatherName, address, phoneNumber and email.

    Empty values leave the stored field unchanged. Each applied field is
    mirrored into the record's additionalInfo columns in the same write.
    A missing body is treated as an empty update.
    """
    if body is None:
        body = RecordUpdate()
    modified_count = await record_service.update_fields(
        collection_name, record_id, body.field_values()
    )
    return RecordUpdateResponse(modified_count=modified_count)
