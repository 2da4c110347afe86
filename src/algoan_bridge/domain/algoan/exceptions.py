"""Algoan domain exceptions."""

from typing import Any

from algoan_bridge.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    UpstreamError,
)


class AlgoanApiError(UpstreamError):
    """Raised when a call to the Algoan REST API fails."""

    def __init__(
        self,
        message: str = "Algoan API call failed",
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if url:
            details["url"] = url
        super().__init__(
            message=message,
            code=ErrorCode.ALGOAN_API_FAILURE,
            details=details or None,
        )
        self.status_code = status_code


class BanksUserNotFoundError(EntityNotFoundError):
    """Raised when Algoan has no Banks User with the requested id."""

    def __init__(self, banks_user_id: str) -> None:
        super().__init__(
            message=f"Banks User {banks_user_id} not found",
            code=ErrorCode.BANKS_USER_NOT_FOUND,
            details={"banks_user_id": banks_user_id},
        )
