"""API request and response schemas."""

from algoan_bridge.presentation.api.schemas.hooks import (
    EventRequest,
    SubscriptionRequest,
)

__all__ = [
    "EventRequest",
    "SubscriptionRequest",
]
