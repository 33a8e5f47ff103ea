"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.storage_schemas import (
    FoodItemCreate,
    FoodItemResponse,
    StorageEntryResponse,
    SearchResultResponse,
    StorageInfoResponse,
    StorageListResponse,
)

__all__ = [
    "FoodItemCreate",
    "FoodItemResponse",
    "StorageEntryResponse",
    "SearchResultResponse",
    "StorageInfoResponse",
    "StorageListResponse",
]
