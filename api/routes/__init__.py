"""API routes package"""

from . import storage, health

__all__ = ["storage", "health"]
