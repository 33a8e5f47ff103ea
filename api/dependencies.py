"""
API dependencies for dependency injection
"""

from typing import Optional
import threading

from services.storage_service import StorageService

_storage_service: Optional[StorageService] = None
_storage_service_lock = threading.Lock()


def get_storage_service() -> StorageService:
    """
    Storage service dependency for FastAPI routes.

    The bin is created on first use from settings and then shared for the
    lifetime of the process. Creation is guarded so concurrent first
    requests still end up with a single bin.

    Usage:
        @router.get("/example")
        def example(service: StorageService = Depends(get_storage_service)):
            # Use service here
            pass
    """
    global _storage_service
    with _storage_service_lock:
        if _storage_service is None:
            _storage_service = StorageService.from_settings()
        return _storage_service


def reset_storage_service() -> None:
    """Drop the shared bin; the next request creates a fresh one."""
    global _storage_service
    with _storage_service_lock:
        _storage_service = None
