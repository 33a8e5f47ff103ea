"""
Domain enums for FoodBin application.
Contains all enumeration types used across the domain models.
"""

import enum


class StorageMode(str, enum.Enum):
    """Exit order of the storage bin"""

    LIFO = "lifo"  # front door only
    FIFO = "fifo"  # front door in, opposite door out


class FoodName(str, enum.Enum):
    """Foods the bin accepts"""

    BURGER = "burger"
    PIZZA = "pizza"
    FRIES = "fries"
    SANDWICH = "sandwich"
    HOTDOG = "hotdog"

    @classmethod
    def is_valid(cls, name) -> bool:
        """Case-insensitive vocabulary check."""
        if not isinstance(name, str):
            return False
        return name.strip().lower() in {m.value for m in cls}

    @classmethod
    def display_names(cls) -> str:
        return ", ".join(m.value.capitalize() for m in cls)
