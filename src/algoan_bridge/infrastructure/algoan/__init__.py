"""Algoan infrastructure."""

from algoan_bridge.infrastructure.algoan.banks_user_gateway import (
    AlgoanBanksUserGateway,
)
from algoan_bridge.infrastructure.algoan.rest_client import (
    AlgoanRestClient,
    ClientCredentials,
)
from algoan_bridge.infrastructure.algoan.service_account_registry import (
    AlgoanServiceAccountRegistry,
)

__all__ = [
    "AlgoanBanksUserGateway",
    "AlgoanRestClient",
    "AlgoanServiceAccountRegistry",
    "ClientCredentials",
]
