"""
Exception types raised by the service layer.

API handlers translate these into HTTP responses; scripts translate
them into exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..services.cleanup_service import CleanupResult


class UserDirectoryError(Exception):
    """Base class for all errors raised by this package."""


class UserLookupError(UserDirectoryError):
    """Raised when a user cannot be resolved by the backing store."""

    def __init__(self, user_id: str, reason: str) -> None:
        super().__init__(f"lookup of user {user_id!r} failed: {reason}")
        self.user_id = user_id
        self.reason = reason


class CleanupError(UserDirectoryError):
    """Raised when temporary file cleanup cannot proceed.

    ``result`` holds whatever was removed before the failure, or
    ``None`` when the directory could not be listed at all.
    """

    def __init__(self, message: str, result: Optional[CleanupResult] = None) -> None:
        super().__init__(message)
        self.result = result
