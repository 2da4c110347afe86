"""Service account entity."""

from __future__ import annotations

from typing import Any

from algoan_bridge.domain.algoan.entities.subscription import Subscription


class ServiceAccount:
    """
    Tenant-level credentials and configuration on Algoan.

    A service account owns the webhook subscriptions it receives events
    through and carries the provider configuration (Bridge client
    credentials) in its ``config``.
    """

    def __init__(
        self,
        service_account_id: str,
        client_id: str,
        client_secret: str | None = None,
        config: dict[str, Any] | None = None,
        subscriptions: list[Subscription] | None = None,
    ):
        self._id = service_account_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._config = config
        self._subscriptions = list(subscriptions or [])

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ServiceAccount:
        return cls(
            service_account_id=data["id"],
            client_id=data["clientId"],
            client_secret=data.get("clientSecret"),
            config=data.get("config"),
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def client_secret(self) -> str | None:
        return self._client_secret

    @property
    def config(self) -> dict[str, Any] | None:
        return self._config

    @property
    def subscriptions(self) -> list[Subscription]:
        return list(self._subscriptions)

    def add_subscription(self, subscription: Subscription) -> None:
        self._subscriptions.append(subscription)

    def find_subscription(self, subscription_id: str) -> Subscription | None:
        return next(
            (sub for sub in self._subscriptions if sub.id == subscription_id),
            None,
        )

    def has_subscription_for(self, event_name: str, target: str | None = None) -> bool:
        return any(
            sub.event_name == event_name and (target is None or sub.target == target)
            for sub in self._subscriptions
        )

    def __repr__(self) -> str:
        return (
            f"ServiceAccount(id={self._id!r}, client_id={self._client_id!r}, "
            f"subscriptions={len(self._subscriptions)})"
        )
