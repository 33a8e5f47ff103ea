"""
Services package - Business logic layer.
"""

from services.storage_service import StorageService, SearchResult, StorageInfo

__all__ = ["StorageService", "SearchResult", "StorageInfo"]
