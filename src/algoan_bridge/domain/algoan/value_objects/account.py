"""Banks User account value objects."""

from datetime import datetime
from enum import Enum

from pydantic import field_serializer

from algoan_bridge.domain.shared.camel_model import CamelModel
from algoan_bridge.domain.shared.time import to_epoch_millis

CONNECTION_SOURCE = "BRIDGE"


class AccountType(str, Enum):
    """Canonical account type."""

    CHECKINGS = "CHECKINGS"
    SAVINGS = "SAVINGS"
    LOAN = "LOAN"
    CREDIT_CARD = "CREDIT_CARD"


class AccountStatus(str, Enum):
    """Canonical account status."""

    MANUAL = "MANUAL"
    ACTIVE = "ACTIVE"
    ERROR = "ERROR"
    NOT_FOUND = "NOT_FOUND"
    CLOSED = "CLOSED"


class UsageType(str, Enum):
    """Whether an account is held privately or by a business."""

    PERSONAL = "PERSONAL"
    PROFESSIONAL = "PROFESSIONAL"


class LoanType(str, Enum):
    """Canonical loan category."""

    AUTO = "AUTO"
    CONSUMER = "CONSUMER"
    HOME = "HOME"
    STUDENT = "STUDENT"
    OTHER = "OTHER"


class LoanDetails(CamelModel):
    """Loan information attached to a LOAN account."""

    amount: float | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    payment: float | None = None
    interest_rate: float | None = None
    remaining_capital: float | None = None
    type: LoanType = LoanType.OTHER

    @field_serializer("start_date", "end_date")
    def serialize_dates(self, value: datetime | None) -> int | None:
        # Algoan expects loan dates as epoch milliseconds
        return to_epoch_millis(value) if value is not None else None


class PostBanksUserAccount(CamelModel):
    """Account record submitted to Algoan for creation."""

    balance_date: datetime
    balance: float | None = None
    bank: str | None = None
    connection_source: str = CONNECTION_SOURCE
    # None when the provider type has no canonical equivalent
    type: AccountType | None = None
    bic: str | None = None
    iban: str | None = None
    currency: str | None = None
    name: str | None = None
    reference: str
    status: AccountStatus
    usage: UsageType
    loan_details: LoanDetails | None = None
    savings_details: str | None = None


class BanksUserAccount(CamelModel):
    """Account record as created on Algoan.

    ``reference`` holds the provider account id the record was built from.
    """

    id: str
    reference: str | None = None
    type: AccountType | None = None
    name: str | None = None
    iban: str | None = None
    currency: str | None = None
    balance: float | None = None
    status: AccountStatus | None = None
    usage: UsageType | None = None
    connection_source: str | None = None
