"""Bridge transaction value object."""

from pydantic import BaseModel, ConfigDict

from algoan_bridge.domain.bridge.value_objects.bridge_account import BridgeResourceRef


class BridgeTransaction(BaseModel):
    """Transaction record as returned by ``GET /v2/transactions``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    description: str | None = None
    raw_description: str | None = None
    amount: float
    date: str | None = None
    updated_at: str | None = None
    currency_code: str | None = None
    is_deleted: bool = False
    is_future: bool = False
    category: BridgeResourceRef
    account: BridgeResourceRef
