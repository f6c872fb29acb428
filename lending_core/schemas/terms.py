# This project was developed with assistance from AI tools.
"""Deal terms schemas.

``LoanTerms`` is the immutable snapshot produced upstream by the rules
engine. ``DealInput`` wraps it with the jurisdiction, program and
collateral context the disclosure and compliance services need.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from . import Fee


class Covenant(BaseModel):
    """Ongoing covenant attached to the loan."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    threshold: float | None = None
    frequency: Literal["annual", "quarterly", "monthly"] = "annual"


class Condition(BaseModel):
    """Closing or funding condition attached to the loan."""

    model_config = ConfigDict(frozen=True)

    category: Literal["prior_to_closing", "prior_to_funding", "post_closing"] = (
        "prior_to_closing"
    )
    description: str
    priority: Literal["required", "recommended"] = "required"


class LoanTerms(BaseModel):
    """Approved loan terms. Rates are decimals (0.075 == 7.5%)."""

    model_config = ConfigDict(frozen=True)

    approved_amount: float
    interest_rate: float
    base_rate_type: str = "fixed"
    base_rate_value: float = 0.0
    spread: float = 0.0
    term_months: int
    amortization_months: int
    monthly_payment: float
    interest_only: bool = False
    prepayment_penalty: bool = False
    personal_guaranty: bool = False
    requires_appraisal: bool = False
    late_fee_percent: float = 0.05
    late_fee_grace_days: int = 15
    ltv: float | None = None
    fees: list[Fee] = Field(default_factory=list)
    covenants: list[Covenant] = Field(default_factory=list)
    conditions: list[Condition] = Field(default_factory=list)


class DealInput(BaseModel):
    """Everything the disclosure and compliance services read about a deal."""

    model_config = ConfigDict(frozen=True)

    terms: LoanTerms
    program_id: str
    state_abbr: str | None = Field(
        default=None,
        description="Two-letter state code of the borrower / collateral jurisdiction.",
    )
    collateral_types: list[str] = Field(default_factory=list)
    property_address: str | None = None
    borrower_name: str = ""
    generated_at: date = Field(default_factory=date.today)
    first_payment_date: date | None = Field(
        default=None,
        description="Defaults to the first day of the month after generated_at.",
    )
