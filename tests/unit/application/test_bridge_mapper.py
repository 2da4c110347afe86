"""Unit tests for the Bridge to Algoan mapper."""

import asyncio
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from algoan_bridge.application.mappers import (
    ACCOUNT_TYPE_MAPPING,
    map_account_status,
    map_account_type,
    map_bridge_accounts,
    map_bridge_transactions,
    map_date,
    map_usage_type,
)
from algoan_bridge.domain.algoan.value_objects import (
    AccountStatus,
    AccountType,
    BanksUserTransactionType,
    LoanType,
    UsageType,
)
from algoan_bridge.domain.bridge.exceptions import BridgeApiError
from algoan_bridge.domain.bridge.value_objects import (
    BridgeAccountStatus,
    BridgeAccountType,
)
from tests.shared.fixtures.factories import BridgeFactory

ACCESS_TOKEN = BridgeFactory.ACCESS_TOKEN


class FakeAggregator:
    """Resolves resource names, optionally with per-URI delays or failures."""

    def __init__(self, names=None, delays=None, failing=()):
        self.names = names or {}
        self.delays = delays or {}
        self.failing = set(failing)
        self.lookups: list[str] = []

    async def get_resource_name(self, access_token, resource_uri, client_config=None):
        assert access_token == ACCESS_TOKEN
        self.lookups.append(resource_uri)
        await asyncio.sleep(self.delays.get(resource_uri, 0))
        if resource_uri in self.failing:
            raise BridgeApiError(f"lookup of {resource_uri} failed", status_code=500)
        return self.names.get(resource_uri)


class TestMapDate:
    def test_naive_timestamp_is_paris_wall_time_in_summer(self):
        assert map_date("2019-04-06T12:00:00") == datetime(
            2019, 4, 6, 10, 0, tzinfo=timezone.utc,
        )

    def test_naive_timestamp_is_paris_wall_time_in_winter(self):
        assert map_date("2019-01-15T10:00:00") == datetime(
            2019, 1, 15, 9, 0, tzinfo=timezone.utc,
        )

    def test_date_only_is_paris_midnight(self):
        assert map_date("2019-04-06") == datetime(
            2019, 4, 5, 22, 0, tzinfo=timezone.utc,
        )

    def test_offset_keeps_instant(self):
        assert map_date("2019-04-06T09:19:14Z") == datetime(
            2019, 4, 6, 9, 19, 14, tzinfo=timezone.utc,
        )
        assert map_date("2019-04-06T09:19:14+05:00") == datetime(
            2019, 4, 6, 4, 19, 14, tzinfo=timezone.utc,
        )

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_date_is_now(self, value):
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        with patch(
            "algoan_bridge.application.mappers.bridge_mapper.utc_now",
            return_value=now,
        ):
            assert map_date(value) == now

    def test_result_is_utc(self):
        assert map_date("2019-04-06T12:00:00").tzinfo == timezone.utc


class TestMapAccountFields:
    @pytest.mark.parametrize(
        ("bridge_type", "expected"),
        [
            ("checking", AccountType.CHECKINGS),
            ("savings", AccountType.SAVINGS),
            ("brokerage", AccountType.SAVINGS),
            ("card", AccountType.CREDIT_CARD),
            ("loan", AccountType.LOAN),
            ("shared_saving_plan", AccountType.SAVINGS),
            ("life_insurance", AccountType.SAVINGS),
        ],
    )
    def test_account_type(self, bridge_type, expected):
        assert map_account_type(bridge_type) == expected

    @pytest.mark.parametrize("bridge_type", ["pending", "special", "unknown", "new"])
    def test_unmapped_account_type_is_none(self, bridge_type):
        assert map_account_type(bridge_type) is None

    def test_account_type_mapping_is_total_over_outputs(self):
        for bridge_type in BridgeAccountType:
            mapped = map_account_type(bridge_type.value)
            assert mapped is None or isinstance(mapped, AccountType)

    def test_account_type_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            ACCOUNT_TYPE_MAPPING["pending"] = AccountType.CHECKINGS  # type: ignore[index]

    def test_ok_status_is_active(self):
        assert map_account_status(0) == AccountStatus.ACTIVE

    @pytest.mark.parametrize(
        "status",
        [s.value for s in BridgeAccountStatus if s != BridgeAccountStatus.OK]
        + [None, 999, -1],
    )
    def test_any_other_status_is_error(self, status):
        assert map_account_status(status) == AccountStatus.ERROR

    def test_usage_type(self):
        assert map_usage_type(True) == UsageType.PROFESSIONAL
        assert map_usage_type(False) == UsageType.PERSONAL


class TestMapBridgeAccounts:
    """Tests for map_bridge_accounts."""

    @pytest.mark.asyncio
    async def test_maps_account_fields(self):
        aggregator = FakeAggregator(names={"/v2/banks/408": "Crédit Agricole"})
        account = BridgeFactory.account(
            account_id=2341501,
            updated_at="2019-04-06T09:19:14Z",
            is_pro=True,
        )

        [mapped] = await map_bridge_accounts([account], ACCESS_TOKEN, aggregator)

        assert mapped.reference == "2341501"
        assert mapped.bank == "Crédit Agricole"
        assert mapped.balance == 1222.66
        assert mapped.balance_date == datetime(2019, 4, 6, 9, 19, 14, tzinfo=timezone.utc)
        assert mapped.type == AccountType.CHECKINGS
        assert mapped.status == AccountStatus.ACTIVE
        assert mapped.usage == UsageType.PROFESSIONAL
        assert mapped.iban == "FR2420020202260600024M02606"
        assert mapped.currency == "EUR"
        assert mapped.name == "Compte Courant"
        assert mapped.connection_source == "BRIDGE"
        assert mapped.bic is None
        assert mapped.loan_details is None
        assert mapped.savings_details == AccountStatus.ACTIVE.value

    @pytest.mark.asyncio
    async def test_maps_loan_details(self):
        aggregator = FakeAggregator()
        account = BridgeFactory.account(
            type="loan",
            loan_details={
                "next_payment_date": "2019-05-01",
                "next_payment_amount": 650.0,
                "maturity_date": "2039-01-01",
                "opening_date": "2019-01-01",
                "interest_rate": 1.35,
                "borrowed_capital": 150000.0,
                "remaining_capital": 147000.0,
            },
        )

        [mapped] = await map_bridge_accounts([account], ACCESS_TOKEN, aggregator)

        assert mapped.type == AccountType.LOAN
        assert mapped.loan_details is not None
        assert mapped.loan_details.amount == 150000.0
        assert mapped.loan_details.payment == 650.0
        assert mapped.loan_details.interest_rate == 1.35
        assert mapped.loan_details.remaining_capital == 147000.0
        assert mapped.loan_details.type == LoanType.OTHER
        assert mapped.loan_details.start_date == datetime(
            2018, 12, 31, 23, 0, tzinfo=timezone.utc,
        )

    @pytest.mark.asyncio
    async def test_preserves_input_order_when_lookups_finish_out_of_order(self):
        accounts = [
            BridgeFactory.account(
                account_id=i,
                bank={"id": i, "resource_uri": f"/v2/banks/{i}"},
            )
            for i in range(1, 6)
        ]
        aggregator = FakeAggregator(
            names={f"/v2/banks/{i}": f"Bank {i}" for i in range(1, 6)},
            # First account resolves last
            delays={f"/v2/banks/{i}": (6 - i) * 0.01 for i in range(1, 6)},
        )

        mapped = await map_bridge_accounts(accounts, ACCESS_TOKEN, aggregator)

        assert [m.reference for m in mapped] == ["1", "2", "3", "4", "5"]
        assert [m.bank for m in mapped] == [f"Bank {i}" for i in range(1, 6)]

    @pytest.mark.asyncio
    async def test_skips_lookup_without_resource_uri(self):
        aggregator = FakeAggregator()
        account = BridgeFactory.account(bank={"id": 408, "resource_uri": None})

        [mapped] = await map_bridge_accounts([account], ACCESS_TOKEN, aggregator)

        assert mapped.bank is None
        assert aggregator.lookups == []

    @pytest.mark.asyncio
    async def test_one_failing_lookup_fails_the_batch(self):
        accounts = [
            BridgeFactory.account(
                account_id=i,
                bank={"id": i, "resource_uri": f"/v2/banks/{i}"},
            )
            for i in range(1, 4)
        ]
        aggregator = FakeAggregator(failing={"/v2/banks/2"})

        with pytest.raises(BridgeApiError):
            await map_bridge_accounts(accounts, ACCESS_TOKEN, aggregator)

    @pytest.mark.asyncio
    async def test_empty_input(self):
        assert await map_bridge_accounts([], ACCESS_TOKEN, FakeAggregator()) == []


class TestMapBridgeTransactions:
    """Tests for map_bridge_transactions."""

    @pytest.mark.asyncio
    async def test_maps_transaction_fields(self):
        aggregator = FakeAggregator(names={"/v2/categories/1": "Abonnements"})
        transaction = BridgeFactory.transaction(transaction_id=23000000001)

        [mapped] = await map_bridge_transactions(
            [transaction],
            ACCESS_TOKEN,
            aggregator,
        )

        assert mapped.reference == "23000000001"
        assert mapped.amount == -9.99
        assert mapped.simplified_description == "Prelevement Spotify"
        assert mapped.user_description == "Prelevement Spotify"
        assert mapped.description == "PRLV SEPA SPOTIFY"
        assert mapped.category == "Abonnements"
        assert mapped.type == BanksUserTransactionType.UNKNOWN
        assert mapped.banks_user_card_id is None
        assert mapped.date == datetime(2019, 4, 5, 22, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_preserves_input_order_when_lookups_finish_out_of_order(self):
        transactions = [
            BridgeFactory.transaction(
                transaction_id=i,
                category={"id": i, "resource_uri": f"/v2/categories/{i}"},
            )
            for i in range(1, 8)
        ]
        aggregator = FakeAggregator(
            names={f"/v2/categories/{i}": f"Category {i}" for i in range(1, 8)},
            delays={f"/v2/categories/{i}": (i % 3) * 0.01 for i in range(1, 8)},
        )

        mapped = await map_bridge_transactions(transactions, ACCESS_TOKEN, aggregator)

        assert [m.reference for m in mapped] == [str(i) for i in range(1, 8)]
        assert [m.category for m in mapped] == [f"Category {i}" for i in range(1, 8)]

    @pytest.mark.asyncio
    async def test_one_failing_lookup_fails_the_batch(self):
        transactions = [
            BridgeFactory.transaction(
                transaction_id=i,
                category={"id": i, "resource_uri": f"/v2/categories/{i}"},
            )
            for i in range(1, 4)
        ]
        aggregator = FakeAggregator(failing={"/v2/categories/3"})

        with pytest.raises(BridgeApiError):
            await map_bridge_transactions(transactions, ACCESS_TOKEN, aggregator)
