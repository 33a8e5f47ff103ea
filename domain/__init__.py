"""
Domain layer - Business entities, storage bins, schemas, and enums.
"""

from domain import enums, models, schemas, storage

__all__ = ["enums", "models", "schemas", "storage"]
