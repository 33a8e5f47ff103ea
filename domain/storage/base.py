"""
Bounded storage contract shared by the stack and queue bins.
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional
import logging

from domain.enums import StorageMode
from domain.models.food_item import FoodItem

logger = logging.getLogger("foodbin.storage")

EMPTY_MESSAGE = "Storage is empty."


class StorageEntry(NamedTuple):
    """An item together with the physical slot it occupies."""

    index: int
    item: FoodItem


class Storage(ABC):
    """
    Fixed-capacity container of FoodItem.

    Failures are reported through return values and never raised:
    ``add`` returns False when full, ``remove``/``peek`` return None when
    empty, ``search`` returns -1 on a miss. A failed call changes nothing.
    """

    mode: StorageMode
    end_name: str
    header: str

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._data: List[Optional[FoodItem]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @abstractmethod
    def add(self, item: FoodItem) -> bool:
        """Place ``item``; False (no side effect) if full or item is not a FoodItem."""

    @abstractmethod
    def remove(self) -> Optional[FoodItem]:
        """Take out the next item, or None if empty."""

    @abstractmethod
    def peek(self) -> Optional[FoodItem]:
        """The item ``remove`` would return next, or None if empty."""

    @abstractmethod
    def entries(self) -> List[StorageEntry]:
        """Current items in removal order, tagged with their slot index."""

    @abstractmethod
    def search(self, name: str) -> int:
        """Removal distance of the first item named ``name`` (any case), or -1."""

    @abstractmethod
    def is_full(self) -> bool: ...

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def size(self) -> int: ...

    def top_name(self) -> Optional[str]:
        item = self.peek()
        return None if item is None else item.name

    def display(self) -> str:
        """Human-readable listing in removal order."""
        if self.is_empty():
            return EMPTY_MESSAGE
        lines = [self.header]
        lines.extend(f"  [{entry.index}] {entry.item}" for entry in self.entries())
        return "\n".join(lines)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, capacity={self._capacity})"

    @staticmethod
    def _accepts(item) -> bool:
        return isinstance(item, FoodItem)
