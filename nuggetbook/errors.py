# nuggetbook/errors.py
from typing import Optional


class NuggetbookError(Exception):
    """Base class for all errors raised by nuggetbook"""
    pass


class DataAccessError(NuggetbookError):
    """The data store rejected a query. The message is the store's own."""
    pass


class MetadataLookupError(NuggetbookError):
    """The book metadata API returned a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(NuggetbookError):
    """Unknown share token or missing (or not owned) entity"""
    pass


class DuplicateError(NuggetbookError):
    """An identical record already exists for this user"""
    pass


class AuthRequiredError(NuggetbookError):
    """The operation needs an authenticated identity.

    Args:
        message: Human readable reason
        return_to: Path the caller should resume at after signing in
    """

    def __init__(self, message: str = "Must be logged in", return_to: Optional[str] = None):
        super().__init__(message)
        self.return_to = return_to
