"""Bridge infrastructure."""

from algoan_bridge.infrastructure.bridge.bridge_adapter import BridgeAdapter

__all__ = [
    "BridgeAdapter",
]
