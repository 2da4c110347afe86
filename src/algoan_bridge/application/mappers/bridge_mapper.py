"""Translate Bridge accounts and transactions into Algoan records.

Each record needs one aggregator lookup (bank name for accounts, category
name for transactions). Lookups for a batch run concurrently; the result
keeps the input order and the first failing lookup fails the whole batch.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping
from zoneinfo import ZoneInfo

from algoan_bridge.domain.algoan.value_objects import (
    AccountStatus,
    AccountType,
    BanksUserTransactionType,
    LoanDetails,
    LoanType,
    PostBanksUserAccount,
    PostBanksUserTransaction,
    UsageType,
)
from algoan_bridge.domain.bridge.value_objects import (
    BridgeAccount,
    BridgeAccountStatus,
    BridgeAccountType,
    BridgeLoanDetails,
    BridgeTransaction,
)
from algoan_bridge.domain.shared.time import utc_now

if TYPE_CHECKING:
    from algoan_bridge.domain.bridge.ports import AggregatorPort
    from algoan_bridge.domain.bridge.value_objects import ClientConfig

# Bridge reports naive timestamps in Paris wall time
REFERENCE_TIMEZONE = ZoneInfo("Europe/Paris")

ACCOUNT_TYPE_MAPPING: Mapping[str, AccountType] = MappingProxyType(
    {
        BridgeAccountType.CHECKING.value: AccountType.CHECKINGS,
        BridgeAccountType.SAVINGS.value: AccountType.SAVINGS,
        BridgeAccountType.SECURITIES.value: AccountType.SAVINGS,
        BridgeAccountType.CARD.value: AccountType.CREDIT_CARD,
        BridgeAccountType.LOAN.value: AccountType.LOAN,
        BridgeAccountType.SHARE_SAVINGS_PLAN.value: AccountType.SAVINGS,
        BridgeAccountType.LIFE_INSURANCE.value: AccountType.SAVINGS,
    },
)

ACCOUNT_STATUS_MAPPING: Mapping[int, AccountStatus] = MappingProxyType(
    {
        BridgeAccountStatus.OK.value: AccountStatus.ACTIVE,
    },
)

DEFAULT_ACCOUNT_STATUS = AccountStatus.ERROR


async def map_bridge_accounts(
    accounts: list[BridgeAccount],
    access_token: str,
    aggregator: AggregatorPort,
    client_config: ClientConfig | None = None,
) -> list[PostBanksUserAccount]:
    """
    Convert Bridge accounts to Algoan accounts.

    Parameters
    ----------
    accounts
        Accounts fetched from Bridge
    access_token
        Bridge token of the user, used to resolve bank names
    aggregator
        Aggregator used for the bank name lookups
    client_config
        Bridge credentials of the service account

    Returns
    -------
    One Algoan account per input account, in input order
    """
    return list(
        await asyncio.gather(
            *(
                _map_bridge_account(account, access_token, aggregator, client_config)
                for account in accounts
            ),
        ),
    )


async def _map_bridge_account(
    account: BridgeAccount,
    access_token: str,
    aggregator: AggregatorPort,
    client_config: ClientConfig | None,
) -> PostBanksUserAccount:
    status = map_account_status(account.status)
    return PostBanksUserAccount(
        balance_date=map_date(account.updated_at),
        balance=account.balance,
        bank=await _resolve_name(
            aggregator,
            access_token,
            account.bank.resource_uri,
            client_config,
        ),
        type=map_account_type(account.type),
        bic=None,
        iban=account.iban,
        currency=account.currency_code,
        name=account.name,
        reference=str(account.id),
        status=status,
        usage=map_usage_type(account.is_pro),
        loan_details=_map_loan_details(account.loan_details),
        # Mirrors the account status; kept as-is pending product clarification
        savings_details=status.value,
    )


def _map_loan_details(loan: BridgeLoanDetails | None) -> LoanDetails | None:
    if loan is None:
        return None
    return LoanDetails(
        amount=loan.borrowed_capital,
        start_date=map_date(loan.opening_date),
        end_date=map_date(loan.maturity_date),
        payment=loan.next_payment_amount,
        interest_rate=loan.interest_rate,
        remaining_capital=loan.remaining_capital,
        # Bridge does not distinguish loan sub-types
        type=LoanType.OTHER,
    )


async def map_bridge_transactions(
    transactions: list[BridgeTransaction],
    access_token: str,
    aggregator: AggregatorPort,
    client_config: ClientConfig | None = None,
) -> list[PostBanksUserTransaction]:
    """
    Convert Bridge transactions to Algoan transactions.

    Category names are resolved concurrently; output order matches input
    order whatever order the lookups complete in.
    """
    return list(
        await asyncio.gather(
            *(
                _map_bridge_transaction(
                    transaction,
                    access_token,
                    aggregator,
                    client_config,
                )
                for transaction in transactions
            ),
        ),
    )


async def _map_bridge_transaction(
    transaction: BridgeTransaction,
    access_token: str,
    aggregator: AggregatorPort,
    client_config: ClientConfig | None,
) -> PostBanksUserTransaction:
    return PostBanksUserTransaction(
        amount=transaction.amount,
        simplified_description=transaction.description,
        description=transaction.raw_description,
        banks_user_card_id=None,
        reference=str(transaction.id),
        user_description=transaction.description,
        category=await _resolve_name(
            aggregator,
            access_token,
            transaction.category.resource_uri,
            client_config,
        ),
        type=BanksUserTransactionType.UNKNOWN,
        date=map_date(transaction.date),
    )


async def _resolve_name(
    aggregator: AggregatorPort,
    access_token: str,
    resource_uri: str | None,
    client_config: ClientConfig | None,
) -> str | None:
    if not resource_uri:
        return None
    return await aggregator.get_resource_name(access_token, resource_uri, client_config)


def map_date(iso_date: str | None) -> datetime:
    """
    Normalize a Bridge timestamp to a UTC instant.

    Timestamps without an offset are read as Paris wall time; timestamps
    with an offset keep their instant. A missing date yields the current
    instant.
    """
    if not iso_date:
        return utc_now()
    parsed = datetime.fromisoformat(iso_date.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=REFERENCE_TIMEZONE)
    return parsed.astimezone(timezone.utc)


def map_account_type(account_type: str | None) -> AccountType | None:
    """Return the Algoan account type, None when Bridge's has no equivalent."""
    if account_type is None:
        return None
    return ACCOUNT_TYPE_MAPPING.get(account_type)


def map_account_status(account_status: int | None) -> AccountStatus:
    """Return the Algoan account status, ERROR for any status but OK."""
    if account_status is None:
        return DEFAULT_ACCOUNT_STATUS
    return ACCOUNT_STATUS_MAPPING.get(account_status, DEFAULT_ACCOUNT_STATUS)


def map_usage_type(is_pro: bool) -> UsageType:
    return UsageType.PROFESSIONAL if is_pro else UsageType.PERSONAL
