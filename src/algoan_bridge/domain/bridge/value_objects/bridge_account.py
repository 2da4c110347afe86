"""Bridge account value objects."""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict


class BridgeAccountType(str, Enum):
    """Account types reported by Bridge."""

    CHECKING = "checking"
    SAVINGS = "savings"
    SECURITIES = "brokerage"
    CARD = "card"
    LOAN = "loan"
    SHARE_SAVINGS_PLAN = "shared_saving_plan"
    PENDING = "pending"
    LIFE_INSURANCE = "life_insurance"
    SPECIAL = "special"
    UNKNOWN = "unknown"


class BridgeAccountStatus(IntEnum):
    """Refresh status codes reported by Bridge for an account."""

    OK = 0
    JUST_ADDED = -2
    UPDATING = -3
    WRONG_CREDENTIALS = 402
    ACTION_NEEDED = 429
    PASSWORD_EXPIRED = 430
    COULD_NOT_REFRESH = 1010


class BridgeResourceRef(BaseModel):
    """Link to another Bridge resource (bank, item, category, account)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    resource_uri: str | None = None


class BridgeLoanDetails(BaseModel):
    """Loan block of a Bridge loan account."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    next_payment_date: str | None = None
    next_payment_amount: float | None = None
    maturity_date: str | None = None
    opening_date: str | None = None
    interest_rate: float | None = None
    type: str | None = None
    borrowed_capital: float | None = None
    repaid_capital: float | None = None
    remaining_capital: float | None = None


class BridgeAccount(BaseModel):
    """
    Account record as returned by ``GET /v2/accounts``.

    ``type`` and ``status`` are kept raw so that values Bridge adds later
    still validate; translation happens in the mapper.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str | None = None
    balance: float | None = None
    status: int | None = None
    status_code_info: str | None = None
    status_code_description: str | None = None
    updated_at: str | None = None
    type: str | None = None
    currency_code: str | None = None
    iban: str | None = None
    is_pro: bool = False
    bank: BridgeResourceRef
    item: BridgeResourceRef | None = None
    loan_details: BridgeLoanDetails | None = None
