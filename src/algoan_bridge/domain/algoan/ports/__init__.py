"""Port interfaces for the canonical system.

Implementations (adapters) are provided in the infrastructure layer.
"""

from algoan_bridge.domain.algoan.ports.banks_user_gateway import BanksUserGateway
from algoan_bridge.domain.algoan.ports.service_account_registry import (
    ServiceAccountRegistry,
)

__all__ = [
    "BanksUserGateway",
    "ServiceAccountRegistry",
]
