"""
Storage bin package - bounded stack and circular queue behind one contract.
"""

from domain.storage.base import Storage, StorageEntry, EMPTY_MESSAGE
from domain.storage.stack_storage import StackStorage
from domain.storage.queue_storage import QueueStorage
from domain.storage.factory import StorageFactory

__all__ = [
    "Storage",
    "StorageEntry",
    "EMPTY_MESSAGE",
    "StackStorage",
    "QueueStorage",
    "StorageFactory",
]
