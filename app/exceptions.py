from typing import Any, Mapping, Optional


class FoodBinError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, storage state)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Storage error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(FoodBinError):
    """Raised when input data is invalid (unknown food name, best-before out of range)."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(FoodBinError):
    """Raised when the bin is empty or a searched item is not in it."""

    http_status = 404
    default_message = "Not found"


class ConflictError(FoodBinError):
    """Raised when an item cannot be placed because the bin is full."""

    http_status = 409
    default_message = "Conflict"
