"""Bridge domain exceptions."""

from typing import Any

from algoan_bridge.domain.shared.exceptions import ErrorCode, UpstreamError


class BridgeApiError(UpstreamError):
    """Raised when a call to the Bridge API fails."""

    def __init__(
        self,
        message: str = "Bridge API call failed",
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
            code=ErrorCode.BRIDGE_API_FAILURE,
            details=details or None,
        )
        self.status_code = status_code
