"""Bridge authentication value objects."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from algoan_bridge.domain.algoan.value_objects import BanksUser


class BridgeUser(BaseModel):
    """Bridge user the Banks User is registered as."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    uuid: str
    email: str | None = None
    resource_uri: str | None = None


class AuthenticationResponse(BaseModel):
    """Response of ``POST /v2/authenticate``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str
    expires_at: str | None = None
    user: BridgeUser


@dataclass(frozen=True)
class BridgeUserDeletion:
    """Everything needed to delete a Banks User's data from Bridge."""

    bridge_user_id: str
    banks_user: BanksUser
    access_token: str
