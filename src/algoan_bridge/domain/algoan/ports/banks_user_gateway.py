"""Banks User gateway port (canonical system)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.entities import ServiceAccount
    from algoan_bridge.domain.algoan.value_objects import (
        BanksUser,
        BanksUserAccount,
        BanksUserUpdate,
        PostBanksUserAccount,
        PostBanksUserTransaction,
    )


class BanksUserGateway(ABC):
    """
    Interface to the Banks User resources held by Algoan.

    Every call is scoped to the service account the webhook was received
    for. Banks User state lives on Algoan only: updates are sent, never
    applied to a local copy.
    """

    @abstractmethod
    async def get_banks_user(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
    ) -> BanksUser:
        """
        Fetch a Banks User.

        Raises
        ------
        BanksUserNotFoundError
            If Algoan has no Banks User with this id
        AlgoanApiError
            If the call fails
        """

    @abstractmethod
    async def update_banks_user(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        update: BanksUserUpdate,
    ) -> None:
        """
        Send a partial update (status and/or redirect URL).

        Raises
        ------
        AlgoanApiError
            If the call fails
        """

    @abstractmethod
    async def create_accounts(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        accounts: list[PostBanksUserAccount],
    ) -> list[BanksUserAccount]:
        """
        Create accounts for a Banks User.

        Returns
        -------
        Created accounts, in the order of ``accounts``, each carrying its
        Algoan id and the provider reference it was built from

        Raises
        ------
        AlgoanApiError
            If any creation fails
        """

    @abstractmethod
    async def create_transactions(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        account_id: str,
        transactions: list[PostBanksUserTransaction],
    ) -> None:
        """
        Create a batch of transactions on one Algoan account.

        Raises
        ------
        AlgoanApiError
            If the call fails
        """
