# This project was developed with assistance from AI tools.
"""Compliance evaluation routes.

Thin wrappers: all rule logic lives in ``services.compliance``.
"""

from fastapi import APIRouter, HTTPException, status

from ..schemas.compliance import (
    ComplianceCheckItem,
    ComplianceCheckRequest,
    ComplianceSummaryResponse,
    StateUsuryRuleResponse,
)
from ..services.compliance import run_program_compliance_checks, summarize_results
from ..services.compliance.state_rules import get_commercial_disclosure_statute, get_state_rule

router = APIRouter()


@router.post("/check", response_model=ComplianceSummaryResponse)
async def check_compliance(req: ComplianceCheckRequest) -> ComplianceSummaryResponse:
    """Run the program's configured checks plus LTV and term limits.

    An unknown program is not an HTTP error: it comes back as a single
    critical "Program Validation" failure with ``can_proceed`` false.
    """
    program_id = req.program_id or req.deal.program_id
    results = run_program_compliance_checks(program_id, req.deal, apor_rate=req.apor_rate)
    summary = summarize_results(results)
    return ComplianceSummaryResponse(
        program_id=program_id,
        overall_severity=summary["overall_severity"],
        can_proceed=summary["can_proceed"],
        critical_failures=summary["critical_failures"],
        warnings=summary["warnings"],
        checks=[ComplianceCheckItem.model_validate(r) for r in summary["checks"]],
    )


@router.get("/states/{state_abbr}", response_model=StateUsuryRuleResponse)
async def read_state_rule(state_abbr: str) -> StateUsuryRuleResponse:
    rule = get_state_rule(state_abbr)
    if rule is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"State {state_abbr!r} not found in usury table",
        )
    return StateUsuryRuleResponse(
        abbreviation=rule.abbreviation,
        name=rule.name,
        rate=rule.rate,
        statute=rule.statute,
        has_cap=rule.has_cap,
        commercial_exempt_above=rule.commercial_exempt_above,
        commercial_ceiling=rule.commercial_ceiling,
        criminal_usury_cap=rule.criminal_usury_cap,
        criminal_usury_exemption_threshold=rule.criminal_usury_exemption_threshold,
        commercial_disclosure_statute=get_commercial_disclosure_statute(rule.abbreviation),
    )
