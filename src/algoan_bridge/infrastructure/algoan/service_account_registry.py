"""In-memory registry of the service accounts loaded from Algoan."""

from __future__ import annotations

import logging

from algoan_bridge.domain.algoan.entities import ServiceAccount, Subscription
from algoan_bridge.domain.algoan.ports import ServiceAccountRegistry
from algoan_bridge.infrastructure.algoan.rest_client import (
    AlgoanRestClient,
    ClientCredentials,
)

logger = logging.getLogger(__name__)


class AlgoanServiceAccountRegistry(ServiceAccountRegistry):
    """
    Loads service accounts once at startup and serves lookups from memory.

    ``initialize`` also registers the webhook subscriptions the connector
    needs on every service account that does not have them yet.
    """

    def __init__(
        self,
        rest_client: AlgoanRestClient,
        webhook_secret: str | None = None,
    ):
        self._rest_client = rest_client
        self._webhook_secret = webhook_secret or None
        self._service_accounts: list[ServiceAccount] = []

    @property
    def service_accounts(self) -> list[ServiceAccount]:
        return list(self._service_accounts)

    async def initialize(
        self,
        event_names: list[str],
        target: str,
    ) -> list[ServiceAccount]:
        """
        Load service accounts and make sure each one is subscribed.

        Parameters
        ----------
        event_names
            Events the connector handles
        target
            Public URL of the webhook endpoint

        Returns
        -------
        The loaded service accounts
        """
        raw_accounts = await self._rest_client.request("GET", "/v1/service-accounts")
        service_accounts: list[ServiceAccount] = []

        for raw in raw_accounts or []:
            service_account = ServiceAccount.from_api(raw)
            if not service_account.client_secret:
                logger.warning(
                    "Skipping service account %s: no client secret",
                    service_account.id,
                )
                continue
            await self._load_subscriptions(service_account, event_names, target)
            service_accounts.append(service_account)

        self._service_accounts = service_accounts
        logger.info("Loaded %d service accounts", len(service_accounts))
        return self.service_accounts

    async def _load_subscriptions(
        self,
        service_account: ServiceAccount,
        event_names: list[str],
        target: str,
    ) -> None:
        credentials = ClientCredentials(
            service_account.client_id,
            service_account.client_secret or "",
        )
        raw_subscriptions = await self._rest_client.request(
            "GET",
            "/v1/subscriptions",
            credentials=credentials,
        )
        for raw in raw_subscriptions or []:
            service_account.add_subscription(
                Subscription.from_api(raw, default_secret=self._webhook_secret),
            )

        missing = [
            event_name
            for event_name in event_names
            if not service_account.has_subscription_for(event_name, target)
        ]
        if not missing:
            return

        created = await self._rest_client.request(
            "POST",
            "/v1/subscriptions",
            credentials=credentials,
            json=[
                {
                    "eventName": event_name,
                    "target": target,
                    "secret": self._webhook_secret,
                }
                for event_name in missing
            ],
        )
        for raw in created or []:
            service_account.add_subscription(
                Subscription.from_api(raw, default_secret=self._webhook_secret),
            )
        logger.info(
            "Created subscriptions %s for service account %s",
            ", ".join(missing),
            service_account.id,
        )

    def get_by_subscription_id(self, subscription_id: str) -> ServiceAccount | None:
        return next(
            (
                service_account
                for service_account in self._service_accounts
                if service_account.find_subscription(subscription_id) is not None
            ),
            None,
        )
