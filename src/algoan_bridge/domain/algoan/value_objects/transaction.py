"""Banks User transaction value objects."""

from datetime import datetime
from enum import Enum

from algoan_bridge.domain.shared.camel_model import CamelModel


class BanksUserTransactionType(str, Enum):
    """Canonical transaction type."""

    ATM = "ATM"
    BANK_FEE = "BANK_FEE"
    CASH = "CASH"
    CHECK = "CHECK"
    CREDIT = "CREDIT"
    CREDIT_CARD_PAYMENT = "CREDIT_CARD_PAYMENT"
    DEBIT = "DEBIT"
    DEPOSIT = "DEPOSIT"
    DIRECT_DEBIT = "DIRECT_DEBIT"
    ELECTRONIC_PAYMENT = "ELECTRONIC_PAYMENT"
    INTEREST = "INTEREST"
    STANDING_ORDER = "STANDING_ORDER"
    TRANSFER = "TRANSFER"
    UNKNOWN = "UNKNOWN"


class PostBanksUserTransaction(CamelModel):
    """Transaction record submitted to Algoan for one account."""

    amount: float
    simplified_description: str | None = None
    description: str | None = None
    # Card ids are not exposed by the provider yet
    banks_user_card_id: str | None = None
    reference: str
    user_description: str | None = None
    category: str | None = None
    type: BanksUserTransactionType = BanksUserTransactionType.UNKNOWN
    date: datetime
