"""Bridge adapter - Anti-Corruption Layer for the Bridge REST API.

This adapter implements the AggregatorPort on top of httpx. It translates
Bridge JSON resources into domain value objects and Bridge/transport
failures into BridgeApiError.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import TYPE_CHECKING, Any

import httpx

from algoan_bridge.domain.bridge.exceptions import BridgeApiError
from algoan_bridge.domain.bridge.ports import AggregatorPort
from algoan_bridge.domain.bridge.value_objects import (
    AuthenticationResponse,
    BridgeAccount,
    BridgeTransaction,
    BridgeUserDeletion,
    ClientConfig,
)
from algoan_bridge_config.settings import Settings, get_settings

if TYPE_CHECKING:
    from algoan_bridge.domain.algoan.value_objects import BanksUser

logger = logging.getLogger(__name__)


class BridgeAdapter(AggregatorPort):
    """
    Bridge Adapter - Anti-Corruption Layer.

    Responsibilities:
    1. Implement AggregatorPort interface
    2. Register Banks Users as Bridge users with derived credentials
    3. Follow Bridge pagination for accounts and transactions
    4. Convert HTTP failures to BridgeApiError
    """

    TRANSACTIONS_PAGE_LIMIT = 500

    def __init__(  # noqa: PLR0913
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        password_salt: str,
        bridge_version: str = "2019-02-18",
        email_domain: str = "algoan-bridge.com",
        country: str = "fr",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._default_config = ClientConfig(
            client_id=client_id,
            client_secret=client_secret,
            bridge_version=bridge_version,
        )
        self._password_salt = password_salt
        self._email_domain = email_domain
        self._country = country
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BridgeAdapter:
        settings = settings or get_settings()
        return cls(
            base_url=settings.bridge_base_url,
            client_id=settings.bridge_client_id,
            client_secret=settings.bridge_client_secret.get_secret_value(),
            password_salt=settings.bridge_user_password_salt.get_secret_value(),
            bridge_version=settings.bridge_version,
            email_domain=settings.bridge_user_email_domain,
            country=settings.bridge_country,
            timeout=settings.http_timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def user_credentials(self, banks_user: BanksUser) -> tuple[str, str]:
        """
        Derive the Bridge login of a Banks User.

        The password is an HMAC of the Banks User id so it never has to be
        stored: the same value is recomputed whenever a token is needed.
        """
        email = f"{banks_user.id}@{self._email_domain}"
        password = hmac.new(
            self._password_salt.encode("utf-8"),
            banks_user.id.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return email, password

    async def generate_redirect_url(
        self,
        banks_user: BanksUser,
        client_config: ClientConfig | None = None,
    ) -> str:
        email, password = self.user_credentials(banks_user)

        # 409: the Banks User already has a Bridge user
        await self._request(
            "POST",
            "/v2/users",
            client_config=client_config,
            json={"email": email, "password": password},
            allowed_statuses=(httpx.codes.CONFLICT,),
        )
        authentication = await self._authenticate(email, password, client_config)

        response = await self._request(
            "GET",
            "/v2/connect/items/add/url",
            client_config=client_config,
            access_token=authentication.access_token,
            params={"country": self._country, "prefill_email": email},
        )
        return response.json()["redirect_url"]

    async def get_access_token(
        self,
        banks_user: BanksUser,
        client_config: ClientConfig | None = None,
    ) -> AuthenticationResponse:
        email, password = self.user_credentials(banks_user)
        return await self._authenticate(email, password, client_config)

    async def delete_user(
        self,
        deletion: BridgeUserDeletion,
        client_config: ClientConfig | None = None,
    ) -> None:
        _, password = self.user_credentials(deletion.banks_user)
        await self._request(
            "DELETE",
            f"/v2/users/{deletion.bridge_user_id}",
            client_config=client_config,
            access_token=deletion.access_token,
            json={"password": password},
        )
        logger.debug(
            "Deleted Bridge user %s of Banks User %s",
            deletion.bridge_user_id,
            deletion.banks_user.id,
        )

    async def _authenticate(
        self,
        email: str,
        password: str,
        client_config: ClientConfig | None,
    ) -> AuthenticationResponse:
        response = await self._request(
            "POST",
            "/v2/authenticate",
            client_config=client_config,
            json={"email": email, "password": password},
        )
        return AuthenticationResponse.model_validate(response.json())

    # -------------------------------------------------------------------------
    # Accounts, transactions and resources
    # -------------------------------------------------------------------------

    async def get_accounts(
        self,
        access_token: str,
        client_config: ClientConfig | None = None,
    ) -> list[BridgeAccount]:
        resources = await self._get_all_pages(
            "/v2/accounts",
            access_token,
            client_config,
        )
        return [BridgeAccount.model_validate(resource) for resource in resources]

    async def get_transactions(
        self,
        access_token: str,
        client_config: ClientConfig | None = None,
    ) -> list[BridgeTransaction]:
        resources = await self._get_all_pages(
            "/v2/transactions",
            access_token,
            client_config,
            params={"limit": self.TRANSACTIONS_PAGE_LIMIT},
        )
        return [BridgeTransaction.model_validate(resource) for resource in resources]

    async def get_resource_name(
        self,
        access_token: str,
        resource_uri: str,
        client_config: ClientConfig | None = None,
    ) -> str | None:
        response = await self._request(
            "GET",
            resource_uri,
            client_config=client_config,
            access_token=access_token,
        )
        return response.json().get("name")

    async def _get_all_pages(
        self,
        path: str,
        access_token: str,
        client_config: ClientConfig | None,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Collect ``resources`` across pages, following ``next_uri``."""
        resources: list[dict[str, Any]] = []
        next_uri: str | None = path
        while next_uri:
            response = await self._request(
                "GET",
                next_uri,
                client_config=client_config,
                access_token=access_token,
                # next_uri already carries the query string
                params=params if next_uri == path else None,
            )
            body = response.json()
            resources.extend(body.get("resources", []))
            next_uri = (body.get("pagination") or {}).get("next_uri")
        return resources

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------

    def _headers(
        self,
        client_config: ClientConfig | None,
        access_token: str | None = None,
    ) -> dict[str, str]:
        config = client_config or self._default_config
        headers = {
            "Client-Id": config.client_id,
            "Client-Secret": config.client_secret,
            "Bridge-Version": config.bridge_version
            or self._default_config.bridge_version
            or "",
        }
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _request(  # noqa: PLR0913
        self,
        method: str,
        url: str,
        *,
        client_config: ClientConfig | None,
        access_token: str | None = None,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        allowed_statuses: tuple[int, ...] = (),
    ) -> httpx.Response:
        client = await self._get_client()
        try:
            response = await client.request(
                method,
                url,
                headers=self._headers(client_config, access_token),
                json=json,
                params=params,
            )
        except httpx.HTTPError as e:
            logger.warning("Bridge request %s %s failed: %s", method, url, e)
            msg = f"Bridge request {method} {url} failed: {e}"
            raise BridgeApiError(msg, url=url) from e

        if response.status_code in allowed_statuses or response.is_success:
            return response

        logger.warning(
            "Bridge returned error %d on %s %s: %s",
            response.status_code,
            method,
            url,
            response.text[:200] if response.text else "no body",
        )
        raise BridgeApiError(
            f"Bridge returned {response.status_code} on {method} {url}",
            status_code=response.status_code,
            url=url,
        )
