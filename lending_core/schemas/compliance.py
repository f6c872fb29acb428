# This project was developed with assistance from AI tools.
"""Compliance check request/response schemas."""

import enum

from pydantic import BaseModel, ConfigDict, Field

from .terms import DealInput


class Severity(str, enum.Enum):
    """How a compliance result affects the deal.

    CRITICAL gates enforceability, WARNING flags manual review,
    INFO confirms a compliant or non-applicable status.
    """

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class ComplianceCheckItem(BaseModel):
    """Single compliance check result as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    passed: bool
    regulation: str
    description: str
    severity: Severity


class ComplianceCheckRequest(BaseModel):
    """Input for POST /api/compliance/check."""

    deal: DealInput
    program_id: str | None = Field(
        default=None,
        description="Program to evaluate against. Defaults to deal.program_id.",
    )
    apor_rate: float | None = Field(
        default=None,
        ge=0,
        description="Current Average Prime Offer Rate (decimal) for the HPML check.",
    )


class ComplianceSummaryResponse(BaseModel):
    """Evaluator output plus roll-up flags."""

    program_id: str
    overall_severity: Severity
    can_proceed: bool
    critical_failures: int
    warnings: int
    checks: list[ComplianceCheckItem]


class StateUsuryRuleResponse(BaseModel):
    """Usury table row for one jurisdiction."""

    model_config = ConfigDict(from_attributes=True)

    abbreviation: str
    name: str
    rate: float
    statute: str
    has_cap: bool
    commercial_exempt_above: float | None = None
    commercial_ceiling: float | None = None
    criminal_usury_cap: float | None = None
    criminal_usury_exemption_threshold: float | None = None
    commercial_disclosure_statute: str | None = None
