"""
Food item stored in the bin.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class FoodItem(BaseModel):
    """Immutable record of one stored item.

    ``placed_time`` is captured once when the item is constructed and never
    recomputed. Items carry no identity beyond their fields; two items with
    the same name are told apart only by their position in the bin.
    """

    name: str = Field(..., min_length=1, description="Food name as entered")
    weight: int = Field(..., gt=0, description="Weight in grams")
    best_before: date
    placed_time: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(frozen=True)

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        if name is None:
            return False
        return self.name.casefold() == name.casefold()

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.weight}g) - BestBefore: {self.best_before.isoformat()}"
            f" - Placed: {self.placed_time.isoformat()}"
        )
