"""
Two-door bin: items go in at the front door and leave by the opposite door,
so the first item placed is the first taken out.
"""

from typing import List, Optional

from domain.enums import StorageMode
from domain.models.food_item import FoodItem
from domain.storage.base import Storage, StorageEntry, logger


class QueueStorage(Storage):
    """A fixed circular-buffer FIFO queue.

    ``_front`` is the slot of the next item out, ``_rear`` the slot of the
    last item in (-1 before the first add) and ``_count`` the number of
    items. Both indices wrap modulo capacity; nothing is ever shifted.
    """

    mode = StorageMode.FIFO
    end_name = "front"
    header = "Storage (FIFO) front -> rear:"

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._front: int = 0
        self._rear: int = -1
        self._count: int = 0

    def add(self, item: FoodItem) -> bool:
        if not self._accepts(item) or self.is_full():
            return False
        self._rear = (self._rear + 1) % self._capacity
        self._data[self._rear] = item
        self._count += 1
        logger.debug("Enqueued %s into slot %d", item.name, self._rear)
        return True

    def remove(self) -> Optional[FoodItem]:
        if self.is_empty():
            return None
        removed = self._data[self._front]
        self._data[self._front] = None
        logger.debug("Dequeued %s from slot %d", removed.name, self._front)
        self._front = (self._front + 1) % self._capacity
        self._count -= 1
        if self._count == 0:
            self._front = 0
            self._rear = -1
        return removed

    def peek(self) -> Optional[FoodItem]:
        if self.is_empty():
            return None
        return self._data[self._front]

    def _slots(self):
        """Physical slot indices from front to rear."""
        idx = self._front
        for _ in range(self._count):
            yield idx
            idx = (idx + 1) % self._capacity

    def entries(self) -> List[StorageEntry]:
        return [StorageEntry(idx, self._data[idx]) for idx in self._slots()]

    def search(self, name: str) -> int:
        for distance, idx in enumerate(self._slots()):
            item = self._data[idx]
            if item is not None and item.matches(name):
                return distance
        return -1

    def is_full(self) -> bool:
        return self._count == self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def size(self) -> int:
        return self._count
