"""
Tests for concurrent access to the shared bin.

Tests verify that:
- Concurrent removals hand out every item exactly once
- Concurrent adds never push the bin past capacity
- The bin stays consistent (size matches what can still be removed)
- Concurrent first requests share a single bin
"""

import sys
import threading
from datetime import date

import pytest

import api.dependencies as dependencies
from app.exceptions import ConflictError, NotFoundError
from domain.schemas.storage_schemas import FoodItemCreate
from domain.storage import QueueStorage, StackStorage
from services.storage_service import StorageService

NAMES = ["Pizza", "Fries", "Burger", "Hotdog"]
RUNS = 200


@pytest.fixture(autouse=True)
def fast_switching():
    """Switch threads as often as possible to surface interleavings."""
    previous = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    yield
    sys.setswitchinterval(previous)


def _run_threads(target, count):
    barrier = threading.Barrier(count)

    def worker():
        barrier.wait()
        target()

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()


def _filled_service(storage_cls):
    service = StorageService(storage_cls(len(NAMES)), best_before_max_days=14)
    for name in NAMES:
        service.add_item(FoodItemCreate(name=name, weight=100), today=date.today())
    return service


@pytest.mark.parametrize("storage_cls", [StackStorage, QueueStorage], ids=["stack", "queue"])
def test_concurrent_removes_hand_out_each_item_once(storage_cls):
    """Four threads removing from a four-item bin get all four items, no errors."""
    for _ in range(RUNS):
        service = _filled_service(storage_cls)
        removed, errors = [], []

        def take():
            try:
                removed.append(service.remove_item().name)
            except Exception as exc:
                errors.append(type(exc).__name__)

        _run_threads(take, len(NAMES))

        assert errors == []
        assert sorted(removed) == sorted(NAMES)
        assert service.storage.size() == 0
        assert service.storage.is_empty()
        with pytest.raises(NotFoundError):
            service.remove_item()


@pytest.mark.parametrize("storage_cls", [StackStorage, QueueStorage], ids=["stack", "queue"])
def test_concurrent_adds_respect_capacity(storage_cls):
    """Six threads adding to a four-slot bin: four succeed, two get ConflictError."""
    for _ in range(RUNS // 4):
        service = StorageService(storage_cls(4), best_before_max_days=14)
        added, refused, errors = [], [], []

        def put():
            try:
                added.append(service.add_item(FoodItemCreate(name="Pizza", weight=300)))
            except ConflictError:
                refused.append(1)
            except Exception as exc:
                errors.append(type(exc).__name__)

        _run_threads(put, 6)

        assert errors == []
        assert (len(added), len(refused)) == (4, 2)
        assert service.storage.is_full()
        assert len(service.list_items()) == 4


def test_concurrent_first_requests_share_one_bin():
    dependencies.reset_storage_service()
    seen = []

    try:
        _run_threads(lambda: seen.append(dependencies.get_storage_service()), 8)
        assert len({id(s) for s in seen}) == 1
    finally:
        dependencies.reset_storage_service()
