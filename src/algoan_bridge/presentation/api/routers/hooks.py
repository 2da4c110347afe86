"""Webhook router: the endpoint Algoan delivers events to."""

import logging
from typing import Annotated

from fastapi import APIRouter, Header, Response, status

from algoan_bridge.presentation.api.dependencies import WebhookCommand
from algoan_bridge.presentation.api.schemas import EventRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Receive an Algoan webhook",
    responses={
        204: {"description": "Event handled (or ignored)"},
        401: {"description": "Unknown subscription or invalid signature"},
        502: {"description": "Algoan or Bridge call failed"},
    },
)
async def handle_webhook(
    event: EventRequest,
    command: WebhookCommand,
    x_hub_signature: Annotated[str | None, Header()] = None,
) -> Response:
    """
    Handle an event sent by Algoan.

    The event is processed before the response is sent. A failure is
    reported to Algoan, which re-delivers the event per its own policy.
    """
    logger.debug(
        "Received %s event on subscription %s",
        event.subscription.event_name,
        event.subscription.id,
    )
    await command.execute(event.to_event(), x_hub_signature)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
