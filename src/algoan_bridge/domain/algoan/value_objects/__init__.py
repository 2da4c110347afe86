"""Value objects for the Algoan domain."""

from algoan_bridge.domain.algoan.value_objects.account import (
    CONNECTION_SOURCE,
    AccountStatus,
    AccountType,
    BanksUserAccount,
    LoanDetails,
    LoanType,
    PostBanksUserAccount,
    UsageType,
)
from algoan_bridge.domain.algoan.value_objects.banks_user import (
    BanksUser,
    BanksUserStatus,
    BanksUserUpdate,
)
from algoan_bridge.domain.algoan.value_objects.event import (
    BankreaderLinkRequiredPayload,
    BankreaderRequiredPayload,
    Event,
    EventName,
    EventSubscription,
)
from algoan_bridge.domain.algoan.value_objects.transaction import (
    BanksUserTransactionType,
    PostBanksUserTransaction,
)

__all__ = [
    "CONNECTION_SOURCE",
    "AccountStatus",
    "AccountType",
    "BankreaderLinkRequiredPayload",
    "BankreaderRequiredPayload",
    "BanksUser",
    "BanksUserAccount",
    "BanksUserStatus",
    "BanksUserTransactionType",
    "BanksUserUpdate",
    "Event",
    "EventName",
    "EventSubscription",
    "LoanDetails",
    "LoanType",
    "PostBanksUserAccount",
    "PostBanksUserTransaction",
    "UsageType",
]
