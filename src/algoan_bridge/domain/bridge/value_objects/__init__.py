"""Value objects for the Bridge domain."""

from algoan_bridge.domain.bridge.value_objects.authentication import (
    AuthenticationResponse,
    BridgeUser,
    BridgeUserDeletion,
)
from algoan_bridge.domain.bridge.value_objects.bridge_account import (
    BridgeAccount,
    BridgeAccountStatus,
    BridgeAccountType,
    BridgeLoanDetails,
    BridgeResourceRef,
)
from algoan_bridge.domain.bridge.value_objects.bridge_transaction import (
    BridgeTransaction,
)
from algoan_bridge.domain.bridge.value_objects.client_config import ClientConfig

__all__ = [
    "AuthenticationResponse",
    "BridgeAccount",
    "BridgeAccountStatus",
    "BridgeAccountType",
    "BridgeLoanDetails",
    "BridgeResourceRef",
    "BridgeTransaction",
    "BridgeUser",
    "BridgeUserDeletion",
    "ClientConfig",
]
