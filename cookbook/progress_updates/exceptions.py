"""
Progress update domain exceptions.

Raised by the progress update services; the router decides which HTTP
status each one maps to.
"""


class ProgressUpdateError(Exception):
    """Base class for progress update failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidProgressUpdateError(ProgressUpdateError):
    """Input for a new progress update failed validation."""


class ProgressUpdateStoreError(ProgressUpdateError):
    """The progress update could not be written to the database."""
