"""
Front-door-only bin: the last item placed is the first taken out.
"""

from typing import List, Optional

from domain.enums import StorageMode
from domain.models.food_item import FoodItem
from domain.storage.base import Storage, StorageEntry, logger


class StackStorage(Storage):
    """Array-backed LIFO stack.

    ``_top`` is the index of the top item, -1 when empty.
    """

    mode = StorageMode.LIFO
    end_name = "top"
    header = "Storage (LIFO) top -> bottom:"

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._top: int = -1

    def add(self, item: FoodItem) -> bool:
        if not self._accepts(item) or self.is_full():
            return False
        self._top += 1
        self._data[self._top] = item
        logger.debug("Pushed %s into slot %d", item.name, self._top)
        return True

    def remove(self) -> Optional[FoodItem]:
        if self.is_empty():
            return None
        removed = self._data[self._top]
        self._data[self._top] = None
        logger.debug("Popped %s from slot %d", removed.name, self._top)
        self._top -= 1
        return removed

    def peek(self) -> Optional[FoodItem]:
        if self.is_empty():
            return None
        return self._data[self._top]

    def entries(self) -> List[StorageEntry]:
        return [StorageEntry(i, self._data[i]) for i in range(self._top, -1, -1)]

    def search(self, name: str) -> int:
        # distance from the top, 0 = top
        for i in range(self._top, -1, -1):
            item = self._data[i]
            if item is not None and item.matches(name):
                return self._top - i
        return -1

    def is_full(self) -> bool:
        return self._top + 1 == self._capacity

    def is_empty(self) -> bool:
        return self._top == -1

    def size(self) -> int:
        return self._top + 1
