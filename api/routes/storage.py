"""Storage bin routes"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
import logging

from domain.models import FoodItem
from domain.schemas.storage_schemas import (
    FoodItemCreate,
    FoodItemResponse,
    StorageEntryResponse,
    SearchResultResponse,
    StorageInfoResponse,
    StorageListResponse,
)
from domain.storage import StorageEntry
from services.storage_service import StorageService
from api.dependencies import get_storage_service
from api.responses import ErrorResponse

router = APIRouter(
    prefix="/storage",
    tags=["Storage"],
    responses={404: {"model": ErrorResponse}},
)
logger = logging.getLogger("foodbin.api.storage")


def _item_response(item: FoodItem) -> FoodItemResponse:
    return FoodItemResponse.model_validate(item.model_dump())


def _entry_response(entry: StorageEntry) -> StorageEntryResponse:
    return StorageEntryResponse(index=entry.index, item=_item_response(entry.item))


@router.post(
    "/items",
    response_model=FoodItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def add_item(
    payload: FoodItemCreate, service: StorageService = Depends(get_storage_service)
):
    """
    Place a food item in the bin.

    The best-before date defaults to the latest accepted date when omitted.
    Returns 409 when the bin is full. The body is validated first, so a bad
    name or weight is a 422 even on a full bin.
    """
    item = service.add_item(payload)
    return _item_response(item)


@router.delete("/items/next", response_model=FoodItemResponse)
def remove_item(service: StorageService = Depends(get_storage_service)):
    """Take out the next item (top of the stack or front of the queue)"""
    return _item_response(service.remove_item())


@router.get("/items/next", response_model=FoodItemResponse)
def peek_item(service: StorageService = Depends(get_storage_service)):
    """Show the next item without taking it out"""
    return _item_response(service.peek_item())


@router.get("/items", response_model=StorageListResponse)
def list_items(service: StorageService = Depends(get_storage_service)):
    """All items in the order they would come out"""
    return StorageListResponse(
        mode=service.mode,
        entries=[_entry_response(e) for e in service.list_items()],
    )


@router.get("/display", response_class=PlainTextResponse)
def display(service: StorageService = Depends(get_storage_service)):
    """Human-readable listing of the bin"""
    return service.display()


@router.get("/search", response_model=SearchResultResponse)
def search(
    name: str = Query(..., min_length=1, description="Food name, any case"),
    service: StorageService = Depends(get_storage_service),
):
    """
    Find how many removals away the first item with this name is.

    Examples:
    - GET /storage/search?name=pizza -> {"distance": 0, "where": "top"}
    - GET /storage/search?name=FRIES -> {"distance": 2, "where": "2 from front"}
    """
    result = service.search(name)
    return SearchResultResponse(**result._asdict())


@router.get("/info", response_model=StorageInfoResponse)
def info(service: StorageService = Depends(get_storage_service)):
    """Size, capacity, next item name and full/empty flags"""
    return StorageInfoResponse(**service.info()._asdict())
