"""Mappers from provider records to Algoan records."""

from algoan_bridge.application.mappers.bridge_mapper import (
    ACCOUNT_STATUS_MAPPING,
    ACCOUNT_TYPE_MAPPING,
    DEFAULT_ACCOUNT_STATUS,
    REFERENCE_TIMEZONE,
    map_account_status,
    map_account_type,
    map_bridge_accounts,
    map_bridge_transactions,
    map_date,
    map_usage_type,
)

__all__ = [
    "ACCOUNT_STATUS_MAPPING",
    "ACCOUNT_TYPE_MAPPING",
    "DEFAULT_ACCOUNT_STATUS",
    "REFERENCE_TIMEZONE",
    "map_account_status",
    "map_account_type",
    "map_bridge_accounts",
    "map_bridge_transactions",
    "map_date",
    "map_usage_type",
]
