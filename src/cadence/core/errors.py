"""Errors raised when an event request is rejected."""


class ValidationError(ValueError):
    """Base class for caller-facing scheduling rejections."""


class InvalidDateError(ValidationError):
    """Day of month does not exist for the given month and year."""


class InvalidTimeRangeError(ValidationError):
    """Event end time does not come after its start time."""


class OverlapError(ValidationError):
    """Event would share time with an existing occurrence on the same day."""

    def __init__(self, message: str, conflicts: list | None = None):
        super().__init__(message)
        self.conflicts = conflicts or []


class StorageError(Exception):
    """Event storage could not be read or written."""
