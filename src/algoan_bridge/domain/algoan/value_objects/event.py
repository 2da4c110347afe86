"""Webhook event value objects."""

from enum import Enum
from typing import Any

from algoan_bridge.domain.shared.camel_model import CamelModel


class EventName(str, Enum):
    """Algoan webhook events the connector acts on or subscribes to."""

    BANKREADER_LINK_REQUIRED = "bankreader_link_required"
    BANKREADER_REQUIRED = "bankreader_required"
    BANKREADER_CONFIGURATION_REQUIRED = "bankreader_configuration_required"


class EventSubscription(CamelModel):
    """Subscription reference carried by an inbound event."""

    id: str
    # Raw name: Algoan may deliver events the connector does not handle
    event_name: str
    target: str | None = None
    status: str | None = None


class Event(CamelModel):
    """Inbound webhook event.

    ``payload`` is kept as received; the signature is computed over it.
    """

    subscription: EventSubscription
    payload: dict[str, Any]
    id: str | None = None
    index: int | None = None
    time: int | None = None


class BankreaderLinkRequiredPayload(CamelModel):
    """Payload of a ``bankreader_link_required`` event."""

    banks_user_id: str


class BankreaderRequiredPayload(CamelModel):
    """Payload of a ``bankreader_required`` event."""

    banks_user_id: str
    temporary_code: str | None = None
