"""HTTP client for the Algoan REST API."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from algoan_bridge.domain.algoan.exceptions import AlgoanApiError
from algoan_bridge_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Renew tokens slightly before Algoan expires them
TOKEN_EXPIRY_MARGIN_SECONDS = 30


@dataclass(frozen=True)
class ClientCredentials:
    """OAuth2 client credentials of the connector or a service account."""

    client_id: str
    client_secret: str


@dataclass
class _CachedToken:
    access_token: str
    expires_at: float

    def is_valid(self) -> bool:
        return time.monotonic() < self.expires_at


class AlgoanRestClient:
    """
    httpx wrapper that authenticates every call with OAuth2 client credentials.

    Calls run with the connector credentials unless service account
    credentials are given. Tokens are cached per client id until shortly
    before they expire.
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._credentials = ClientCredentials(client_id, client_secret)
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._tokens: dict[str, _CachedToken] = {}

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> AlgoanRestClient:
        settings = settings or get_settings()
        return cls(
            base_url=settings.algoan_base_url,
            client_id=settings.algoan_client_id,
            client_secret=settings.algoan_client_secret.get_secret_value(),
            timeout=settings.http_timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        credentials: ClientCredentials | None = None,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send an authenticated request and return the decoded JSON body.

        Returns
        -------
        Decoded body, or None for empty responses

        Raises
        ------
        AlgoanApiError
            On transport failures and non-2xx responses
        """
        token = await self._get_token(credentials or self._credentials)
        response = await self._send(
            method,
            path,
            headers={"Authorization": f"Bearer {token}"},
            json=json,
            params=params,
        )
        if not response.content:
            return None
        return response.json()

    async def _get_token(self, credentials: ClientCredentials) -> str:
        cached = self._tokens.get(credentials.client_id)
        if cached is not None and cached.is_valid():
            return cached.access_token

        response = await self._send(
            "POST",
            "/v1/oauth/token",
            data={
                "grant_type": "client_credentials",
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
            },
        )
        body = response.json()
        expires_in = float(body.get("expires_in", 0))
        self._tokens[credentials.client_id] = _CachedToken(
            access_token=body["access_token"],
            expires_at=time.monotonic() + expires_in - TOKEN_EXPIRY_MARGIN_SECONDS,
        )
        return body["access_token"]

    async def _send(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        client = await self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("Algoan request %s %s failed: %s", method, path, e)
            msg = f"Algoan request {method} {path} failed: {e}"
            raise AlgoanApiError(msg, url=path) from e

        if response.is_error:
            logger.warning(
                "Algoan returned error %d on %s %s: %s",
                response.status_code,
                method,
                path,
                response.text[:200] if response.text else "no body",
            )
            raise AlgoanApiError(
                f"Algoan returned {response.status_code} on {method} {path}",
                status_code=response.status_code,
                url=path,
            )
        return response
