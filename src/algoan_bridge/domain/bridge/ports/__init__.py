"""Port interfaces for the banking-data aggregator."""

from algoan_bridge.domain.bridge.ports.aggregator_port import AggregatorPort

__all__ = [
    "AggregatorPort",
]
