"""Service account registry port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.entities import ServiceAccount


class ServiceAccountRegistry(ABC):
    """Read-only lookup of the service accounts known to the connector."""

    @abstractmethod
    def get_by_subscription_id(self, subscription_id: str) -> ServiceAccount | None:
        """
        Find the service account owning a subscription.

        Parameters
        ----------
        subscription_id
            Id of the subscription an event was delivered through

        Returns
        -------
        The owning service account, or None if no service account owns it
        """
