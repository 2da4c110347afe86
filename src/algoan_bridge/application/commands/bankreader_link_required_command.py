"""Generate the Bridge connection URL of a Banks User."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from algoan_bridge.domain.algoan.value_objects import BanksUserUpdate
from algoan_bridge.domain.bridge.value_objects import ClientConfig

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.entities import ServiceAccount
    from algoan_bridge.domain.algoan.ports import BanksUserGateway
    from algoan_bridge.domain.algoan.value_objects import (
        BankreaderLinkRequiredPayload,
    )
    from algoan_bridge.domain.bridge.ports import AggregatorPort

logger = logging.getLogger(__name__)


class BankreaderLinkRequiredCommand:
    """Handle ``bankreader_link_required``: publish a redirect URL to Algoan."""

    def __init__(
        self,
        banks_user_gateway: BanksUserGateway,
        aggregator: AggregatorPort,
    ):
        self._gateway = banks_user_gateway
        self._aggregator = aggregator

    async def execute(
        self,
        service_account: ServiceAccount,
        payload: BankreaderLinkRequiredPayload,
    ) -> str:
        banks_user = await self._gateway.get_banks_user(
            service_account,
            payload.banks_user_id,
        )
        logger.debug(
            "Found Banks User %s for service account %s",
            banks_user.id,
            service_account.id,
        )

        redirect_url = await self._aggregator.generate_redirect_url(
            banks_user,
            ClientConfig.from_raw(service_account.config),
        )

        await self._gateway.update_banks_user(
            service_account,
            banks_user.id,
            BanksUserUpdate(redirect_url=redirect_url),
        )
        logger.debug("Added redirect url %s to Banks User %s", redirect_url, banks_user.id)

        return redirect_url
