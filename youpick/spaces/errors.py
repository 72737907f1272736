"""Error taxonomy for space operations.

Each error carries a stable machine-readable ``code`` so the request layer
can render a message without seeing storage internals.
"""

from enum import StrEnum


class SpaceError(Exception):
    """Base class for every error raised by the space core."""

    code = "space_error"
    default_message = "Space operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationReason(StrEnum):
    """Why an item was rejected."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    UNSAFE_CONTENT = "unsafe_content"
    NOT_STRING = "not_string"


_REASON_MESSAGES: dict[ValidationReason, str] = {
    ValidationReason.EMPTY: "Item cannot be empty",
    ValidationReason.TOO_LONG: "Item cannot exceed 500 characters",
    ValidationReason.UNSAFE_CONTENT: "Invalid characters in item",
    ValidationReason.NOT_STRING: "Item must be a string",
}


class ItemValidationError(SpaceError):
    code = "validation_error"

    def __init__(self, reason: ValidationReason, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or _REASON_MESSAGES[reason])


class DuplicateItemError(SpaceError):
    code = "duplicate_item"
    default_message = "Item already exists"


class CapacityExceededError(SpaceError):
    code = "capacity_exceeded"
    default_message = "Maximum number of items (1000) reached"


class InvalidIndexError(SpaceError):
    code = "invalid_index"
    default_message = "Invalid index: must be a non-negative integer"


class ItemNotFoundError(SpaceError):
    code = "not_found"
    default_message = "Item not found at specified index"


class PickMismatchError(SpaceError):
    code = "mismatch"
    default_message = "Item does not match the specified index"


class StorageError(SpaceError):
    """Backend failure. Retryable by the caller; the core never retries it."""

    code = "storage_error"
    default_message = "Storage backend unavailable"
