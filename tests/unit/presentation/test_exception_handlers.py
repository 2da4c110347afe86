"""Unit tests for the domain exception to HTTP status mapping."""

import pytest

from algoan_bridge.domain.algoan.exceptions import AlgoanApiError, BanksUserNotFoundError
from algoan_bridge.domain.bridge.exceptions import BridgeApiError
from algoan_bridge.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)
from algoan_bridge.presentation.api.exception_handlers import (
    ERROR_CODE_TO_STATUS,
    _get_status_for_exception,
)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ValidationError("bad"), 400),
        (UnauthorizedError("nope"), 401),
        (BanksUserNotFoundError("bu-1"), 404),
        (UpstreamError("down"), 502),
        (BridgeApiError("down", status_code=500), 502),
        (AlgoanApiError("down", status_code=503), 502),
        (DomainException("unknown"), 500),
    ],
)
def test_status_for_exception(exc, expected):
    assert _get_status_for_exception(exc) == expected


def test_every_error_code_has_a_status():
    assert set(ERROR_CODE_TO_STATUS) == set(ErrorCode)
