"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    FoodBinError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "settings",
    "FoodBinError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
]
