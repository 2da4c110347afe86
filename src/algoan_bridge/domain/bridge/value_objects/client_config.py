"""Bridge client configuration value object."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ClientConfig(BaseModel):
    """
    Bridge application credentials of one service account.

    Stored by Algoan in the service account ``config`` (camelCase keys).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    client_id: str
    client_secret: str
    bridge_version: str | None = None

    @classmethod
    def from_raw(cls, config: dict[str, Any] | None) -> ClientConfig | None:
        """Build from a service account config, None if it has no credentials."""
        if not config or "clientId" not in config or "clientSecret" not in config:
            return None
        return cls.model_validate(config)
