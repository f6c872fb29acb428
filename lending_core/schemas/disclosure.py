# This project was developed with assistance from AI tools.
"""Loan Estimate and amortization schedule schemas.

Values are unrounded; formatting belongs to the document-assembly layer.
"""

from datetime import date

from pydantic import BaseModel

from . import FeeBucket


class FiveYearComparison(BaseModel):
    """'In 5 Years' comparison figures."""

    months: int
    total_paid: float
    principal_paid: float


class LoanEstimate(BaseModel):
    """Numeric disclosures for the Loan Estimate document."""

    # Loan terms / projected payments
    loan_amount: float
    interest_rate: float
    monthly_principal_and_interest: float
    estimated_escrow: float = 0.0
    estimated_mortgage_insurance: float = 0.0
    estimated_total_monthly_payment: float
    has_balloon: bool
    balloon_amount: float

    # Prepaids
    per_diem_interest: float
    days_to_first_payment: int
    prepaid_interest: float

    # Closing cost details
    origination_charges: FeeBucket
    services_not_shopped: FeeBucket
    services_shopped: FeeBucket
    total_loan_costs: float
    total_fees: float
    recording_fees: float
    total_closing_costs: float
    cash_to_close: float

    # Comparisons
    total_of_payments: float
    finance_charge: float
    amount_financed: float
    total_interest: float
    apr: float
    tip: float
    in_five_years: FiveYearComparison


class AmortizationRow(BaseModel):
    """One payment on the schedule. Balloon rows have ``is_balloon`` set."""

    number: int
    payment_date: date
    payment: float
    principal: float
    interest: float
    balance: float
    is_balloon: bool = False


class AmortizationSchedule(BaseModel):
    """Full payment schedule with totals."""

    rows: list[AmortizationRow]
    total_interest: float
    total_principal: float
    total_of_payments: float
    balloon_amount: float
    first_payment_date: date
    maturity_date: date
