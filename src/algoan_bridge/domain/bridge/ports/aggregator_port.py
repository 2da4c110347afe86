"""Aggregator port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.value_objects import BanksUser
    from algoan_bridge.domain.bridge.value_objects import (
        AuthenticationResponse,
        BridgeAccount,
        BridgeTransaction,
        BridgeUserDeletion,
        ClientConfig,
    )


class AggregatorPort(ABC):
    """
    Interface to the banking-data aggregator.

    ``client_config`` selects the aggregator application credentials of
    the service account; None falls back to the connector defaults.
    All methods raise BridgeApiError when the aggregator call fails.
    """

    @abstractmethod
    async def generate_redirect_url(
        self,
        banks_user: BanksUser,
        client_config: ClientConfig | None = None,
    ) -> str:
        """
        Register the Banks User with the aggregator and build the URL the
        end user is redirected to in order to connect their bank.
        """

    @abstractmethod
    async def get_access_token(
        self,
        banks_user: BanksUser,
        client_config: ClientConfig | None = None,
    ) -> AuthenticationResponse:
        """Exchange the Banks User's aggregator credentials for a token."""

    @abstractmethod
    async def get_accounts(
        self,
        access_token: str,
        client_config: ClientConfig | None = None,
    ) -> list[BridgeAccount]:
        """Fetch every account of the authenticated user."""

    @abstractmethod
    async def get_transactions(
        self,
        access_token: str,
        client_config: ClientConfig | None = None,
    ) -> list[BridgeTransaction]:
        """Fetch every transaction of the authenticated user, all accounts."""

    @abstractmethod
    async def delete_user(
        self,
        deletion: BridgeUserDeletion,
        client_config: ClientConfig | None = None,
    ) -> None:
        """Delete the user and all of their data from the aggregator."""

    @abstractmethod
    async def get_resource_name(
        self,
        access_token: str,
        resource_uri: str,
        client_config: ClientConfig | None = None,
    ) -> str | None:
        """
        Resolve a resource reference (bank, category) to its display name.

        Parameters
        ----------
        access_token
            Token of the authenticated user
        resource_uri
            Path of the resource, e.g. ``/v2/banks/408``

        Returns
        -------
        The resource name, or None if the resource has none
        """
