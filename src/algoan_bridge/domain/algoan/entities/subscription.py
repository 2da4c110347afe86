"""Subscription entity: a webhook channel registered on Algoan."""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any

SIGNATURE_PREFIX = "sha256="


class Subscription:
    """
    A webhook subscription owned by a service account.

    Holds the secret shared with Algoan; every event delivered through the
    subscription is signed with it (``X-Hub-Signature`` header).
    """

    def __init__(
        self,
        subscription_id: str,
        event_name: str,
        target: str | None = None,
        status: str | None = None,
        secret: str | None = None,
    ):
        self._id = subscription_id
        self._event_name = event_name
        self._target = target
        self._status = status
        self._secret = secret

    @classmethod
    def from_api(
        cls,
        data: dict[str, Any],
        default_secret: str | None = None,
    ) -> Subscription:
        return cls(
            subscription_id=data["id"],
            event_name=data["eventName"],
            target=data.get("target"),
            status=data.get("status"),
            secret=data.get("secret") or default_secret,
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def event_name(self) -> str:
        return self._event_name

    @property
    def target(self) -> str | None:
        return self._target

    @property
    def status(self) -> str | None:
        return self._status

    def validate_signature(
        self,
        signature: str | None,
        payload: dict[str, Any],
    ) -> bool:
        """
        Check that ``signature`` was produced by Algoan for ``payload``.

        The expected value is ``sha256=`` followed by the hex HMAC-SHA256
        of the compact JSON encoding of the payload, keyed by the
        subscription secret.

        Parameters
        ----------
        signature
            Raw ``X-Hub-Signature`` header value
        payload
            Event payload exactly as received

        Returns
        -------
        True if the signature matches, False otherwise
        """
        if not self._secret or not signature:
            return False
        if not signature.startswith(SIGNATURE_PREFIX):
            return False

        return hmac.compare_digest(
            self.sign(payload),
            signature[len(SIGNATURE_PREFIX) :],
        )

    def sign(self, payload: dict[str, Any]) -> str:
        if not self._secret:
            msg = f"Subscription {self._id} has no secret"
            raise ValueError(msg)
        body = json.dumps(
            _as_signed_json(payload),
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return hmac.new(
            self._secret.encode("utf-8"),
            body.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    def __repr__(self) -> str:
        return f"Subscription(id={self._id!r}, event_name={self._event_name!r})"


def _as_signed_json(value: Any) -> Any:
    """Write whole floats as integers, the way Algoan's JSON encoder does."""
    if isinstance(value, dict):
        return {key: _as_signed_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_as_signed_json(item) for item in value]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
