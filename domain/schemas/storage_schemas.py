from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date, datetime

from domain.enums import FoodName, StorageMode


class FoodItemCreate(BaseModel):
    """Schema for placing a new item in the bin"""

    name: str = Field(..., min_length=1, description="One of the accepted food names")
    weight: int = Field(..., ge=1, description="Weight in grams")
    best_before: Optional[date] = Field(
        None,
        description="Best-before date; defaults to the latest accepted date when omitted",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not FoodName.is_valid(v):
            raise ValueError(f"Invalid food name. Allowed: {FoodName.display_names()}.")
        return v


class FoodItemResponse(BaseModel):
    """Schema for a stored item"""

    name: str
    weight: int
    best_before: date
    placed_time: datetime

    model_config = {"from_attributes": True}


class StorageEntryResponse(BaseModel):
    """An item with the slot it occupies"""

    index: int
    item: FoodItemResponse

    model_config = {"from_attributes": True}


class SearchResultResponse(BaseModel):
    """Where a searched item sits relative to the removal end"""

    name: str
    distance: int = Field(..., ge=0, description="Removals needed before this item comes out")
    where: str = Field(..., description="e.g. 'top', '2 from top', 'front'")

    model_config = {"from_attributes": True}


class StorageInfoResponse(BaseModel):
    """Size, capacity and next item of the bin"""

    mode: StorageMode
    size: int
    capacity: int
    top_name: Optional[str] = None
    is_full: bool
    is_empty: bool

    model_config = {"from_attributes": True}


class StorageListResponse(BaseModel):
    """All items in removal order"""

    mode: StorageMode
    entries: List[StorageEntryResponse]
