"""Validate an inbound Algoan webhook and route it to its handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import pydantic

from algoan_bridge.domain.algoan.value_objects import (
    BankreaderLinkRequiredPayload,
    BankreaderRequiredPayload,
    EventName,
)
from algoan_bridge.domain.shared.exceptions import UnauthorizedError, ValidationError

if TYPE_CHECKING:
    from algoan_bridge.application.commands.bankreader_link_required_command import (
        BankreaderLinkRequiredCommand,
    )
    from algoan_bridge.application.commands.bankreader_required_command import (
        BankreaderRequiredCommand,
    )
    from algoan_bridge.domain.algoan.ports import ServiceAccountRegistry
    from algoan_bridge.domain.algoan.value_objects import Event

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=pydantic.BaseModel)


class HandleWebhookCommand:
    """
    Entry point for Algoan webhooks.

    The event must come through a subscription of a known service account
    and carry a valid signature; otherwise UnauthorizedError is raised and
    no handler runs. Events the connector does not handle are ignored.
    """

    def __init__(
        self,
        registry: ServiceAccountRegistry,
        link_required_command: BankreaderLinkRequiredCommand,
        bankreader_required_command: BankreaderRequiredCommand,
    ):
        self._registry = registry
        self._link_required = link_required_command
        self._bankreader_required = bankreader_required_command

    async def execute(self, event: Event, signature: str | None) -> None:
        subscription_id = event.subscription.id
        service_account = self._registry.get_by_subscription_id(subscription_id)
        if service_account is None:
            msg = f"No service account found for subscription {subscription_id}"
            raise UnauthorizedError(msg, details={"subscription_id": subscription_id})

        logger.debug(
            "Found service account %s for subscription %s",
            service_account.id,
            subscription_id,
        )

        subscription = service_account.find_subscription(subscription_id)
        if subscription is None or not subscription.validate_signature(
            signature,
            event.payload,
        ):
            msg = "Invalid X-Hub-Signature: you cannot call this API"
            raise UnauthorizedError(msg, details={"subscription_id": subscription_id})

        event_name = event.subscription.event_name
        if event_name == EventName.BANKREADER_LINK_REQUIRED.value:
            await self._link_required.execute(
                service_account,
                _parse_payload(BankreaderLinkRequiredPayload, event.payload),
            )
        elif event_name == EventName.BANKREADER_REQUIRED.value:
            result = await self._bankreader_required.execute(
                service_account,
                _parse_payload(BankreaderRequiredPayload, event.payload),
            )
            logger.info(
                "Synchronized Banks User %s: %d accounts, %d transactions",
                result.banks_user_id,
                result.accounts_created,
                result.total_transactions_created,
            )
        else:
            logger.debug("Ignoring event %s", event_name)


def _parse_payload(model: type[PayloadT], payload: dict) -> PayloadT:
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        msg = f"Invalid {model.__name__}: {e.error_count()} validation error(s)"
        raise ValidationError(msg, details={"errors": e.errors()}) from e
