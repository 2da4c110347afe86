"""Request schemas for the webhook endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from algoan_bridge.domain.algoan.value_objects import Event, EventSubscription


class SubscriptionRequest(BaseModel):
    """Subscription block of an Algoan event."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    event_name: str = Field(..., alias="eventName", min_length=1)
    target: str | None = None
    status: str | None = None


class EventRequest(BaseModel):
    """Body Algoan POSTs to the webhook endpoint."""

    subscription: SubscriptionRequest
    payload: dict[str, Any]
    id: str | None = None
    index: int | None = None
    time: int | None = None

    def to_event(self) -> Event:
        return Event(
            subscription=EventSubscription(
                id=self.subscription.id,
                event_name=self.subscription.event_name,
                target=self.subscription.target,
                status=self.subscription.status,
            ),
            payload=self.payload,
            id=self.id,
            index=self.index,
            time=self.time,
        )
