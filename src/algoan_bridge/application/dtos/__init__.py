"""Data transfer objects returned by application commands."""

from algoan_bridge.application.dtos.sync_result import SyncResult

__all__ = [
    "SyncResult",
]
