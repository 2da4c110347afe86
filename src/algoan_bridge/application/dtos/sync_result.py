"""DTO for the Banks User synchronization result."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SyncResult:
    """Summary of one completed Banks User synchronization."""

    banks_user_id: str
    bridge_user_id: str
    synced_at: datetime
    accounts_created: int
    transactions_fetched: int
    # Algoan account id -> number of transactions submitted to it
    transactions_created: dict[str, int] = field(default_factory=dict)

    @property
    def total_transactions_created(self) -> int:
        return sum(self.transactions_created.values())
