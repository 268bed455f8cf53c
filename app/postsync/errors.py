"""Error types raised by the fetch/store pipeline."""
from typing import Optional


class PostSyncError(Exception):
    """Base class for pipeline failures that end an invocation."""


class FetchError(PostSyncError):
    """The posts API could not be read or returned an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(PostSyncError):
    """Required configuration is missing."""


class WriteError(PostSyncError):
    """
    Saving to the document store failed.

    record_id is the id of the post whose write failed, or None when the
    store client could not be created at all.
    """

    def __init__(self, message: str, record_id: Optional[int] = None):
        super().__init__(message)
        self.record_id = record_id
