# This project was developed with assistance from AI tools.
"""Disclosure math routes consumed by the document-assembly layer."""

from fastapi import APIRouter

from ..schemas.disclosure import AmortizationSchedule, LoanEstimate
from ..schemas.terms import DealInput
from ..services.disclosure import build_amortization_schedule, build_loan_estimate

router = APIRouter()


@router.post("/loan-estimate", response_model=LoanEstimate)
async def loan_estimate(deal: DealInput) -> LoanEstimate:
    """Compute the numeric fields of a Loan Estimate.

    Payment, per-diem, prepaid interest, fee buckets, finance charge,
    amount financed, APR, TIP, and the five-year comparison.
    """
    return build_loan_estimate(deal)


@router.post("/amortization-schedule", response_model=AmortizationSchedule)
async def amortization_schedule(deal: DealInput) -> AmortizationSchedule:
    return build_amortization_schedule(deal)
