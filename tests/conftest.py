# This project was developed with assistance from AI tools.
"""Shared fixtures: API client and deal factories."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from lending_core.main import app
from lending_core.schemas import Fee
from lending_core.schemas.terms import DealInput, LoanTerms


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_terms():
    """Factory fixture: LoanTerms with a fully amortizing 10-year default."""

    def _make(**overrides) -> LoanTerms:
        fields = {
            "approved_amount": 500_000.0,
            "interest_rate": 0.075,
            "term_months": 120,
            "amortization_months": 120,
            "monthly_payment": 5935.09,
            "ltv": 0.65,
        }
        fields.update(overrides)
        return LoanTerms(**fields)

    return _make


@pytest.fixture
def make_deal(make_terms):
    """Factory fixture: DealInput; ``terms`` kwargs go to make_terms."""

    def _make(program_id: str = "commercial_cre", terms: dict | None = None, **overrides) -> DealInput:
        fields = {
            "terms": make_terms(**(terms or {})),
            "program_id": program_id,
            "state_abbr": "TX",
            "collateral_types": ["commercial_real_estate"],
            "generated_at": date(2025, 3, 15),
        }
        fields.update(overrides)
        return DealInput(**fields)

    return _make


@pytest.fixture
def sample_fees() -> list[Fee]:
    return [
        Fee(name="Origination Fee", amount=5000),
        Fee(name="Appraisal Fee", amount=4500),
        Fee(name="Legal Fees", amount=5000),
        Fee(name="Underwriting Fee", amount=1000),
        Fee(name="Credit Report", amount=50),
        Fee(name="Title Insurance", amount=1200),
    ]
