"""FastAPI dependency injection for the connector API.

Provides dependencies for:
- Shared HTTP clients (Algoan, Bridge)
- The service account registry
- Webhook commands
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from algoan_bridge.application.commands import (
    BankreaderLinkRequiredCommand,
    BankreaderRequiredCommand,
    HandleWebhookCommand,
)
from algoan_bridge.domain.algoan.ports import BanksUserGateway, ServiceAccountRegistry
from algoan_bridge.domain.bridge.ports import AggregatorPort
from algoan_bridge.infrastructure.algoan import (
    AlgoanBanksUserGateway,
    AlgoanRestClient,
    AlgoanServiceAccountRegistry,
)
from algoan_bridge.infrastructure.bridge import BridgeAdapter
from algoan_bridge_config.settings import get_settings


@lru_cache()
def get_algoan_client() -> AlgoanRestClient:
    """Shared Algoan REST client (one connection pool per process)."""
    return AlgoanRestClient.from_settings(get_settings())


@lru_cache()
def get_bridge_adapter() -> BridgeAdapter:
    """Shared Bridge adapter (one connection pool per process)."""
    return BridgeAdapter.from_settings(get_settings())


@lru_cache()
def get_service_account_registry() -> AlgoanServiceAccountRegistry:
    """Registry populated during application startup."""
    settings = get_settings()
    return AlgoanServiceAccountRegistry(
        get_algoan_client(),
        webhook_secret=settings.algoan_webhook_secret.get_secret_value(),
    )


def get_registry() -> ServiceAccountRegistry:
    return get_service_account_registry()


def get_banks_user_gateway() -> BanksUserGateway:
    return AlgoanBanksUserGateway(get_algoan_client())


def get_aggregator() -> AggregatorPort:
    return get_bridge_adapter()


def get_handle_webhook_command(
    registry: Annotated[ServiceAccountRegistry, Depends(get_registry)],
    gateway: Annotated[BanksUserGateway, Depends(get_banks_user_gateway)],
    aggregator: Annotated[AggregatorPort, Depends(get_aggregator)],
) -> HandleWebhookCommand:
    return HandleWebhookCommand(
        registry=registry,
        link_required_command=BankreaderLinkRequiredCommand(gateway, aggregator),
        bankreader_required_command=BankreaderRequiredCommand(gateway, aggregator),
    )


WebhookCommand = Annotated[HandleWebhookCommand, Depends(get_handle_webhook_command)]
