"""Synchronize a Banks User's Bridge accounts and transactions to Algoan."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from algoan_bridge.application.dtos import SyncResult
from algoan_bridge.application.mappers import (
    map_bridge_accounts,
    map_bridge_transactions,
)
from algoan_bridge.domain.algoan.value_objects import (
    BanksUserStatus,
    BanksUserUpdate,
)
from algoan_bridge.domain.bridge.value_objects import (
    BridgeTransaction,
    BridgeUserDeletion,
    ClientConfig,
)
from algoan_bridge.domain.shared.time import utc_now

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.entities import ServiceAccount
    from algoan_bridge.domain.algoan.ports import BanksUserGateway
    from algoan_bridge.domain.algoan.value_objects import (
        BankreaderRequiredPayload,
        BanksUserAccount,
    )
    from algoan_bridge.domain.bridge.ports import AggregatorPort

logger = logging.getLogger(__name__)


class BankreaderRequiredCommand:
    """
    Handle ``bankreader_required``: run the full synchronization.

    Steps run strictly one after another and any failure aborts the run.
    Status updates already sent to Algoan are not rolled back; the Banks
    User keeps the last status that was reported.
    """

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
        payload: BankreaderRequiredPayload,
    ) -> SyncResult:
        client_config = ClientConfig.from_raw(service_account.config)
        banks_user = await self._gateway.get_banks_user(
            service_account,
            payload.banks_user_id,
        )

        await self._report_status(
            service_account,
            banks_user.id,
            BanksUserStatus.SYNCHRONIZING,
        )

        authentication = await self._aggregator.get_access_token(
            banks_user,
            client_config,
        )
        access_token = authentication.access_token
        bridge_user_id = authentication.user.uuid

        # Accounts
        bridge_accounts = await self._aggregator.get_accounts(
            access_token,
            client_config,
        )
        logger.debug(
            "Retrieved %d Bridge accounts for Banks User %s",
            len(bridge_accounts),
            banks_user.id,
        )
        algoan_accounts = await map_bridge_accounts(
            bridge_accounts,
            access_token,
            self._aggregator,
            client_config,
        )
        created_accounts = await self._gateway.create_accounts(
            service_account,
            banks_user.id,
            algoan_accounts,
        )
        logger.debug(
            "Created %d Algoan accounts for Banks User %s",
            len(created_accounts),
            banks_user.id,
        )

        await self._report_status(
            service_account,
            banks_user.id,
            BanksUserStatus.ACCOUNTS_SYNCHRONIZED,
        )

        # Transactions
        bridge_transactions = await self._aggregator.get_transactions(
            access_token,
            client_config,
        )
        transactions_created: dict[str, int] = {}
        for account in created_accounts:
            account_transactions = transactions_for_account(
                bridge_transactions,
                account,
            )
            algoan_transactions = await map_bridge_transactions(
                account_transactions,
                access_token,
                self._aggregator,
                client_config,
            )
            await self._gateway.create_transactions(
                service_account,
                banks_user.id,
                account.id,
                algoan_transactions,
            )
            transactions_created[account.id] = len(algoan_transactions)
            logger.debug(
                "Created %d transactions on account %s of Banks User %s",
                len(algoan_transactions),
                account.id,
                banks_user.id,
            )

        await self._report_status(
            service_account,
            banks_user.id,
            BanksUserStatus.FINISHED,
        )

        # Bridge must not keep the data once Algoan has it
        await self._aggregator.delete_user(
            BridgeUserDeletion(
                bridge_user_id=bridge_user_id,
                banks_user=banks_user,
                access_token=access_token,
            ),
            client_config,
        )

        return SyncResult(
            banks_user_id=banks_user.id,
            bridge_user_id=bridge_user_id,
            synced_at=utc_now(),
            accounts_created=len(created_accounts),
            transactions_fetched=len(bridge_transactions),
            transactions_created=transactions_created,
        )

    async def _report_status(
        self,
        service_account: ServiceAccount,
        banks_user_id: str,
        status: BanksUserStatus,
    ) -> None:
        await self._gateway.update_banks_user(
            service_account,
            banks_user_id,
            BanksUserUpdate(status=status),
        )
        logger.debug("Banks User %s is now %s", banks_user_id, status.value)


def transactions_for_account(
    transactions: list[BridgeTransaction],
    account: BanksUserAccount,
) -> list[BridgeTransaction]:
    """Keep the transactions of one account, in fetch order."""
    if account.reference is None:
        return []
    return [
        transaction
        for transaction in transactions
        if str(transaction.account.id) == account.reference
    ]
