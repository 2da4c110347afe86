"""Tests for AlgoanBanksUserGateway."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from algoan_bridge.domain.algoan.exceptions import AlgoanApiError, BanksUserNotFoundError
from algoan_bridge.domain.algoan.value_objects import (
    AccountStatus,
    AccountType,
    BanksUserStatus,
    BanksUserUpdate,
    PostBanksUserAccount,
    PostBanksUserTransaction,
    UsageType,
)
from algoan_bridge.infrastructure.algoan import AlgoanBanksUserGateway, AlgoanRestClient
from tests.shared.fixtures.factories import AlgoanFactory

BANKS_USER_ID = AlgoanFactory.BANKS_USER_ID
BASE = f"/v1/banks-users/{BANKS_USER_ID}"


class FakeAlgoan:
    def __init__(self, routes):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth/token":
            return httpx.Response(200, json={"access_token": "t", "expires_in": 3600})
        self.requests.append(request)
        route = self.routes[(request.method, request.url.path)]
        return route(request) if callable(route) else route


def _gateway(fake: FakeAlgoan) -> AlgoanBanksUserGateway:
    return AlgoanBanksUserGateway(
        AlgoanRestClient(
            base_url="https://algoan.test",
            client_id="connector-id",
            client_secret="connector-secret",
            transport=httpx.MockTransport(fake),
        ),
    )


def _account(reference: str) -> PostBanksUserAccount:
    return PostBanksUserAccount(
        balance_date=datetime(2019, 4, 6, tzinfo=timezone.utc),
        balance=10.0,
        type=AccountType.CHECKINGS,
        reference=reference,
        status=AccountStatus.ACTIVE,
        usage=UsageType.PERSONAL,
    )


class TestAlgoanBanksUserGateway:
    @pytest.mark.asyncio
    async def test_get_banks_user(self):
        fake = FakeAlgoan(
            {
                ("GET", BASE): httpx.Response(
                    200,
                    json={"id": BANKS_USER_ID, "status": "NEW"},
                ),
            },
        )

        banks_user = await _gateway(fake).get_banks_user(
            AlgoanFactory.service_account(),
            BANKS_USER_ID,
        )

        assert banks_user.id == BANKS_USER_ID
        assert banks_user.status == BanksUserStatus.NEW

    @pytest.mark.asyncio
    async def test_missing_banks_user_raises_not_found(self):
        fake = FakeAlgoan({("GET", BASE): httpx.Response(404)})

        with pytest.raises(BanksUserNotFoundError):
            await _gateway(fake).get_banks_user(
                AlgoanFactory.service_account(),
                BANKS_USER_ID,
            )

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        fake = FakeAlgoan({("GET", BASE): httpx.Response(503)})

        with pytest.raises(AlgoanApiError) as exc_info:
            await _gateway(fake).get_banks_user(
                AlgoanFactory.service_account(),
                BANKS_USER_ID,
            )

        assert not isinstance(exc_info.value, BanksUserNotFoundError)

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self):
        fake = FakeAlgoan({("PATCH", BASE): httpx.Response(200, json={})})

        await _gateway(fake).update_banks_user(
            AlgoanFactory.service_account(),
            BANKS_USER_ID,
            BanksUserUpdate(status=BanksUserStatus.SYNCHRONIZING),
        )

        assert json.loads(fake.requests[0].content) == {"status": "SYNCHRONIZING"}

    @pytest.mark.asyncio
    async def test_create_accounts_one_call_each_in_order(self):
        def create(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(
                201,
                json={"id": f"algoan-{body['reference']}", **body},
            )

        fake = FakeAlgoan({("POST", f"{BASE}/accounts"): create})

        created = await _gateway(fake).create_accounts(
            AlgoanFactory.service_account(),
            BANKS_USER_ID,
            [_account("1"), _account("2")],
        )

        assert [a.id for a in created] == ["algoan-1", "algoan-2"]
        assert [a.reference for a in created] == ["1", "2"]
        assert [json.loads(r.content)["reference"] for r in fake.requests] == ["1", "2"]
        assert json.loads(fake.requests[0].content)["connectionSource"] == "BRIDGE"

    @pytest.mark.asyncio
    async def test_create_transactions_posts_a_batch(self):
        fake = FakeAlgoan(
            {
                ("POST", f"{BASE}/accounts/algoan-1/transactions"): httpx.Response(
                    201,
                    json=[],
                ),
            },
        )
        transactions = [
            PostBanksUserTransaction(
                amount=-1.5,
                reference=str(i),
                date=datetime(2019, 4, 6, tzinfo=timezone.utc),
            )
            for i in range(3)
        ]

        await _gateway(fake).create_transactions(
            AlgoanFactory.service_account(),
            BANKS_USER_ID,
            "algoan-1",
            transactions,
        )

        [request] = fake.requests
        body = json.loads(request.content)
        assert [t["reference"] for t in body] == ["0", "1", "2"]
        assert body[0]["type"] == "UNKNOWN"
