"""Banks User value objects."""

from enum import Enum

from algoan_bridge.domain.shared.camel_model import CamelModel


class BanksUserStatus(str, Enum):
    """Lifecycle status of a Banks User on Algoan."""

    NEW = "NEW"
    SYNCHRONIZING = "SYNCHRONIZING"
    ACCOUNTS_SYNCHRONIZED = "ACCOUNTS_SYNCHRONIZED"
    FINISHED = "FINISHED"
    ERROR = "ERROR"


class BanksUser(CamelModel):
    """
    Snapshot of a Banks User as returned by Algoan.

    The snapshot is read once per webhook and never mutated locally;
    changes go through BanksUserGateway.update_banks_user.
    """

    id: str
    status: BanksUserStatus | None = None
    redirect_url: str | None = None
    callback_url: str | None = None
    plug_in: dict | None = None

    def __str__(self) -> str:
        return f"BanksUser({self.id}, status={self.status})"


class BanksUserUpdate(CamelModel):
    """Partial update sent to Algoan; unset fields are left untouched."""

    status: BanksUserStatus | None = None
    redirect_url: str | None = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
