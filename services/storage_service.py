from typing import List, NamedTuple, Optional
from datetime import date, timedelta
import threading

from app.config import settings
from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from core.base.base_service import BaseService
from domain.enums import StorageMode
from domain.models import FoodItem
from domain.schemas.storage_schemas import FoodItemCreate
from domain.storage import Storage, StorageEntry, StorageFactory


class SearchResult(NamedTuple):
    name: str
    distance: int
    where: str


class StorageInfo(NamedTuple):
    mode: StorageMode
    size: int
    capacity: int
    top_name: Optional[str]
    is_full: bool
    is_empty: bool


class StorageService(BaseService[Storage]):
    """
    Drives the single storage bin of the process.

    The bin reports full/empty/not-found through return values; this layer
    turns them into ConflictError / NotFoundError for the API, and performs
    the input checks the bin itself does not (food vocabulary, best-before
    window).

    Routes run in a threadpool, so every call into the bin is made while
    holding ``_lock``; the bin itself is not thread-safe.
    """

    def __init__(self, storage: Storage, best_before_max_days: Optional[int] = None):
        super().__init__("foodbin.service.storage")
        self.storage = storage
        self._lock = threading.Lock()
        self.best_before_max_days = (
            settings.best_before_max_days
            if best_before_max_days is None
            else best_before_max_days
        )

    @classmethod
    def from_settings(cls) -> "StorageService":
        storage = StorageFactory.create(settings.use_opposite_door, settings.storage_capacity)
        service = cls(storage)
        service.log_info(
            "Storage bin created",
            mode=storage.mode.value,
            capacity=storage.capacity,
        )
        return service

    @property
    def mode(self) -> StorageMode:
        return self.storage.mode

    def resolve_best_before(self, best_before: Optional[date], today: Optional[date] = None) -> date:
        """
        Default a missing best-before date and check it lies in the accepted window.

        Args:
            best_before: Date supplied by the caller, or None
            today: Reference date (defaults to date.today())

        Returns:
            date: today + max days when missing, otherwise ``best_before``

        Raises:
            ServiceValidationError: If the date is before today or past the window
        """
        today = today or date.today()
        latest = today + timedelta(days=self.best_before_max_days)
        if best_before is None:
            return latest
        if best_before < today or best_before > latest:
            raise ServiceValidationError(
                f"Best-before must be within {self.best_before_max_days} days "
                "from today and not before today.",
                details={
                    "best_before": best_before.isoformat(),
                    "earliest": today.isoformat(),
                    "latest": latest.isoformat(),
                },
                code="BEST_BEFORE_OUT_OF_RANGE",
            )
        return best_before

    def add_item(self, payload: FoodItemCreate, today: Optional[date] = None) -> FoodItem:
        """
        Place a new item in the bin.

        Raises:
            ConflictError: If the bin is full
            ServiceValidationError: If the best-before date is out of range
        """
        with self._lock:
            if self.storage.is_full():
                self.log_warning("Add refused, storage full", name=payload.name)
                raise ConflictError(
                    f"Cannot add: storage is full (capacity = {self.storage.capacity})",
                    code="STORAGE_FULL",
                )

            best_before = self.resolve_best_before(payload.best_before, today)
            item = FoodItem(name=payload.name, weight=payload.weight, best_before=best_before)
            if not self.storage.add(item):
                raise ConflictError(
                    "Failed to add item (storage full or error).", code="STORAGE_FULL"
                )
            size = self.storage.size()

        self.log_info("Added item", name=item.name, weight=item.weight, size=size)
        return item

    def remove_item(self) -> FoodItem:
        with self._lock:
            removed = self.storage.remove()
            size = self.storage.size()
        if removed is None:
            raise NotFoundError("Storage is empty. Nothing to remove.", code="STORAGE_EMPTY")
        self.log_info("Removed item", name=removed.name, size=size)
        return removed

    def peek_item(self) -> FoodItem:
        with self._lock:
            item = self.storage.peek()
        if item is None:
            raise NotFoundError("Storage is empty.", code="STORAGE_EMPTY")
        return item

    def list_items(self) -> List[StorageEntry]:
        with self._lock:
            return self.storage.entries()

    def display(self) -> str:
        with self._lock:
            return self.storage.display()

    def describe_distance(self, distance: int) -> str:
        end = self.storage.end_name
        return end if distance == 0 else f"{distance} from {end}"

    def search(self, name: str) -> SearchResult:
        with self._lock:
            distance = self.storage.search(name.strip())
        if distance == -1:
            self.log_debug("Search miss", name=name)
            raise NotFoundError("Item not found.", details={"name": name}, code="ITEM_NOT_FOUND")
        return SearchResult(name=name.strip(), distance=distance, where=self.describe_distance(distance))

    def info(self) -> StorageInfo:
        with self._lock:
            return StorageInfo(
                mode=self.storage.mode,
                size=self.storage.size(),
                capacity=self.storage.capacity,
                top_name=self.storage.top_name(),
                is_full=self.storage.is_full(),
                is_empty=self.storage.is_empty(),
            )
