"""Algoan implementation of the BanksUserGateway."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from algoan_bridge.domain.algoan.exceptions import AlgoanApiError, BanksUserNotFoundError
from algoan_bridge.domain.algoan.ports import BanksUserGateway
from algoan_bridge.domain.algoan.value_objects import BanksUser, BanksUserAccount
from algoan_bridge.infrastructure.algoan.rest_client import (
    AlgoanRestClient,
    ClientCredentials,
)

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.entities import ServiceAccount
    from algoan_bridge.domain.algoan.value_objects import (
        BanksUserUpdate,
        PostBanksUserAccount,
        PostBanksUserTransaction,
    )


class AlgoanBanksUserGateway(BanksUserGateway):
    """Banks User resources under ``/v1/banks-users``."""

    def __init__(self, rest_client: AlgoanRestClient):
        self._rest_client = rest_client

    async def get_banks_user(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
    ) -> BanksUser:
        try:
            body = await self._rest_client.request(
                "GET",
                f"/v1/banks-users/{banks_user_id}",
                credentials=_credentials(service_account),
            )
        except AlgoanApiError as e:
            if e.status_code == httpx.codes.NOT_FOUND:
                raise BanksUserNotFoundError(banks_user_id) from e
            raise
        return BanksUser.model_validate(body)

    async def update_banks_user(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        update: BanksUserUpdate,
    ) -> None:
        await self._rest_client.request(
            "PATCH",
            f"/v1/banks-users/{banks_user_id}",
            credentials=_credentials(service_account),
            json=update.to_payload(),
        )

    async def create_accounts(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        accounts: list[PostBanksUserAccount],
    ) -> list[BanksUserAccount]:
        created: list[BanksUserAccount] = []
        for account in accounts:
            body = await self._rest_client.request(
                "POST",
                f"/v1/banks-users/{banks_user_id}/accounts",
                credentials=_credentials(service_account),
                json=account.to_payload(),
            )
            created.append(BanksUserAccount.model_validate(body))
        return created

    async def create_transactions(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        account_id: str,
        transactions: list[PostBanksUserTransaction],
    ) -> None:
        await self._rest_client.request(
            "POST",
            f"/v1/banks-users/{banks_user_id}/accounts/{account_id}/transactions",
            credentials=_credentials(service_account),
            json=[transaction.to_payload() for transaction in transactions],
        )


def _credentials(service_account: ServiceAccount) -> ClientCredentials:
    return ClientCredentials(
        service_account.client_id,
        service_account.client_secret or "",
    )
