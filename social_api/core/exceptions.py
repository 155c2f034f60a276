"""Error kinds raised by the data-access layer.

Every error subclasses ``RuntimeError`` and carries a stable text ``code``
that the HTTP layer maps to a status (see ``api.http_utils``).
"""

from __future__ import annotations

from typing import Any


class DataAccessError(RuntimeError):
    """Base error for user/video data access."""

    code = "data_access_error"

    def __init__(
        self,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code or self.code
        self.details = details or {}
        super().__init__(self.code)


class DuplicateRelationError(DataAccessError):
    """Relation already exists (e.g. follow again)."""

    code = "follow_again"


class NotFoundError(DataAccessError):
    """Referenced user, video or relation endpoint is absent."""

    code = "not_found"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"


class VideoNotFoundError(NotFoundError):
    code = "video_not_found"


class InfrastructureError(DataAccessError):
    """Mongo operation failed for a reason other than a missing document."""

    code = "mongo_error"

    @classmethod
    def wrap(cls, operation: str, error: Exception) -> "InfrastructureError":
        """Build ``mongo_<operation>_error: <driver message>``."""
        exc = cls(f"mongo_{operation}_error",
                  details={"operation": operation, "err": str(error)})
        exc.args = (f"mongo_{operation}_error: {error}",)
        return exc
