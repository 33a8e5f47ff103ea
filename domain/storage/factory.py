"""
Selects the bin implementation once at startup.
"""

from domain.enums import StorageMode
from domain.storage.base import Storage
from domain.storage.queue_storage import QueueStorage
from domain.storage.stack_storage import StackStorage


class StorageFactory:
    @staticmethod
    def create(use_opposite_door: bool, capacity: int) -> Storage:
        """Queue when the opposite door is used for removal, stack otherwise."""
        if use_opposite_door:
            return QueueStorage(capacity)
        return StackStorage(capacity)

    @staticmethod
    def for_mode(mode: StorageMode, capacity: int) -> Storage:
        return StorageFactory.create(StorageMode(mode) == StorageMode.FIFO, capacity)
