"""Entities for the Algoan domain."""

from algoan_bridge.domain.algoan.entities.service_account import ServiceAccount
from algoan_bridge.domain.algoan.entities.subscription import Subscription

__all__ = [
    "ServiceAccount",
    "Subscription",
]
