# This project was developed with assistance from AI tools.
"""Loan program configuration schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class StructuringRules(BaseModel):
    """Deterministic structuring limits. ``max_term == 0`` means revolving / interest-only."""

    max_ltv: float
    min_dscr: float = 0.0
    max_dti: float = 0.0
    base_rate: Literal["prime", "sofr", "treasury"] = "prime"
    spread_range: tuple[float, float] = (0.0, 0.0)
    max_term: int
    max_amortization: int = 0
    max_loan_amount: float | None = None
    min_loan_amount: float = 0.0
    prepayment_penalty: bool = False
    requires_appraisal: bool = False
    requires_personal_guaranty: bool = False
    collateral_types: list[str] = Field(default_factory=list)
    interest_only: bool = False


class ProgramFee(BaseModel):
    """Standard fee charged by a program."""

    name: str
    type: Literal["percent", "flat"]
    value: float
    description: str = ""


class LoanProgram(BaseModel):
    """A loan program: structuring rules plus the compliance checks it requires."""

    id: str
    name: str
    description: str = ""
    category: Literal["commercial", "residential", "specialty"] = "commercial"
    structuring_rules: StructuringRules
    compliance_checks: list[str] = Field(default_factory=list)
    late_fee_percent: float = 0.05
    late_fee_grace_days: int = 15
    standard_fees: list[ProgramFee] = Field(default_factory=list)
