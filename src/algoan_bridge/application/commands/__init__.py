"""Command layer - webhook handlers that act on Algoan and Bridge.

- HandleWebhookCommand: signature check and routing by event name
- BankreaderLinkRequiredCommand: publish the Bridge connection URL
- BankreaderRequiredCommand: synchronize accounts and transactions
"""

from algoan_bridge.application.commands.bankreader_link_required_command import (
    BankreaderLinkRequiredCommand,
)
from algoan_bridge.application.commands.bankreader_required_command import (
    BankreaderRequiredCommand,
    transactions_for_account,
)
from algoan_bridge.application.commands.handle_webhook_command import (
    HandleWebhookCommand,
)

__all__ = [
    "BankreaderLinkRequiredCommand",
    "BankreaderRequiredCommand",
    "HandleWebhookCommand",
    "transactions_for_account",
]
