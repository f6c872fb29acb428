# This project was developed with assistance from AI tools.
"""Compliance check functions for usury, SBA, HPML, ATR, and BSA/AML rules.

Pure functions -- no I/O, fully testable with plain values.
Each check takes a DealInput and returns a ComplianceCheckResult with
check name, pass flag, regulation citation, description, and severity.
Programs list the checks they need by label; ``CHECK_REGISTRY`` maps
those labels to the functions below.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

from ...core.config import settings
from ...schemas.compliance import Severity
from ...schemas.programs import LoanProgram
from ...schemas.terms import DealInput
from ..programs import LOAN_PROGRAMS
from .state_rules import evaluate_usury, get_commercial_disclosure_statute, get_state_rule

logger = logging.getLogger(__name__)

# Severity ordering for worst-of comparison (higher = worse).
_SEVERITY_ORDER = {
    Severity.INFO: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
}

SBA_7A_MAX_AMOUNT = 5_000_000
SBA_504_MAX_AMOUNT = 5_500_000

FIXED_ASSET_KEYWORDS = ("real_estate", "real estate", "heavy_equipment", "heavy equipment")
REAL_PROPERTY_KEYWORDS = ("real_estate", "real estate")
DIGITAL_ASSET_KEYWORDS = ("digital", "crypto", "bitcoin", "btc", "eth", "stablecoin", "usdc", "usdt")
STABLECOIN_KEYWORDS = ("stablecoin", "usdc", "usdt", "pyusd")

NOT_IMPLEMENTED_DESCRIPTION = "Not implemented — manual review required"


@dataclass
class ComplianceCheckResult:
    """Result of a single compliance check."""

    name: str
    passed: bool
    regulation: str
    description: str
    severity: Severity


def _worst_severity(*severities: Severity) -> Severity:
    """Return the most severe value, INFO when nothing is given."""
    return max(severities, key=lambda s: _SEVERITY_ORDER[s], default=Severity.INFO)


def _pct(rate: float, places: int = 3) -> str:
    return f"{rate * 100:.{places}f}%"


def _money(amount: float) -> str:
    return f"${amount:,.0f}"


def _matches_any(values: list[str], keywords: tuple[str, ...]) -> bool:
    return any(keyword in value.lower() for value in values for keyword in keywords)


def _resolve_program(
    program_id: str, programs: Mapping[str, LoanProgram] | None
) -> LoanProgram | None:
    return (LOAN_PROGRAMS if programs is None else programs).get(program_id)


# ---------------------------------------------------------------------------
# Usury
# ---------------------------------------------------------------------------


def _usury_result(state_abbr: str | None, rate: float, principal: float) -> ComplianceCheckResult:
    name = "Usury Compliance"
    state = state_abbr.strip().upper() if state_abbr else None
    rule = get_state_rule(state)

    if rule is None:
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation="State usury statutes",
            description=(
                f'State "{state}" not found in usury table. Manual review recommended.'
                if state
                else "No state specified on deal. Usury check cannot be performed — manual review required."
            ),
            severity=Severity.WARNING,
        )

    result = evaluate_usury(rule, rate, principal)

    if result.basis == "ceiling":
        if result.violates:
            description = (
                f"Interest rate of {_pct(rate)} EXCEEDS the {state} commercial ceiling of "
                f"{_pct(result.limit, 1)} for loans of {_money(rule.commercial_exempt_above)} or more "
                f"per {rule.statute}. Loan may be unenforceable or subject to penalties."
            )
        else:
            description = (
                f"Commercial loan of {_money(principal)} is at or above the {state} threshold of "
                f"{_money(rule.commercial_exempt_above)}; interest rate of {_pct(rate)} is within "
                f"the elevated commercial ceiling of {_pct(result.limit, 1)} per {rule.statute}."
            )
        return ComplianceCheckResult(
            name=name,
            passed=not result.violates,
            regulation=rule.statute,
            description=description,
            severity=Severity.CRITICAL if result.violates else Severity.INFO,
        )

    if result.basis == "criminal":
        if result.violates:
            description = (
                f"Interest rate of {_pct(rate)} EXCEEDS the {state} criminal usury cap of "
                f"{_pct(result.limit, 1)} per {rule.statute}. Criminal usury applies even where "
                "the civil cap does not."
            )
        else:
            exempt_at = rule.criminal_usury_exemption_threshold
            description = (
                f"Interest rate of {_pct(rate)} is within the {state} criminal usury cap of "
                f"{_pct(result.limit, 1)} per {rule.statute}. The civil cap does not apply, but the "
                "criminal cap still binds"
                + (f" for loans below {_money(exempt_at)}." if exempt_at is not None else ".")
            )
        return ComplianceCheckResult(
            name=name,
            passed=not result.violates,
            regulation=rule.statute,
            description=description,
            severity=Severity.CRITICAL if result.violates else Severity.WARNING,
        )

    if result.basis == "exempt":
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation=rule.statute,
            description=(
                f"Commercial loan of {_money(principal)} exceeds {state} exemption threshold of "
                f"{_money(rule.commercial_exempt_above)} — exempt from general usury cap per {rule.statute}."
            ),
            severity=Severity.INFO,
        )

    if result.basis == "no_cap":
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation=rule.statute,
            description=f"{rule.name} has no usury cap on agreed-upon commercial rates per {rule.statute}.",
            severity=Severity.INFO,
        )

    return ComplianceCheckResult(
        name=name,
        passed=not result.violates,
        regulation=rule.statute,
        description=(
            f"Interest rate of {_pct(rate)} EXCEEDS {state} usury limit of {_pct(result.limit, 1)} "
            f"per {rule.statute}. Loan may be unenforceable or subject to penalties."
            if result.violates
            else f"Interest rate of {_pct(rate)} is within {state} maximum of {_pct(result.limit, 1)} "
            f"per {rule.statute}."
        ),
        severity=Severity.CRITICAL if result.violates else Severity.INFO,
    )


def check_usury(deal: DealInput) -> ComplianceCheckResult:
    """Compare the note rate against the state's usury rule.

    A missing or unknown state cannot be evaluated and is flagged for
    manual review rather than failed.
    """
    return _usury_result(deal.state_abbr, deal.terms.interest_rate, deal.terms.approved_amount)


def check_state_usury(state_abbr: str | None, interest_rate: float, amount: float) -> ComplianceCheckResult:
    """Run the usury check for a bare state/rate/amount triple."""
    return _usury_result(state_abbr, interest_rate, amount)


# ---------------------------------------------------------------------------
# SBA checks
# ---------------------------------------------------------------------------


def check_sba_size_standard(deal: DealInput) -> ComplianceCheckResult:
    """Enforce the SBA statutory loan limit for 7(a) and 504."""
    amount = deal.terms.approved_amount

    if deal.program_id == "sba_7a":
        passed = amount <= SBA_7A_MAX_AMOUNT
        return ComplianceCheckResult(
            name="SBA Size Standard — 7(a) Loan Limit",
            passed=passed,
            regulation="13 CFR §120.151; SBA SOP 50 10 8",
            description=(
                f"Loan amount of {_money(amount)} is within the SBA 7(a) maximum of "
                f"{_money(SBA_7A_MAX_AMOUNT)} per 13 CFR §120.151."
                if passed
                else f"Loan amount of {_money(amount)} EXCEEDS the SBA 7(a) maximum of "
                f"{_money(SBA_7A_MAX_AMOUNT)} per 13 CFR §120.151."
            ),
            severity=Severity.INFO if passed else Severity.CRITICAL,
        )

    if deal.program_id == "sba_504":
        # Manufacturing/energy cap
        passed = amount <= SBA_504_MAX_AMOUNT
        return ComplianceCheckResult(
            name="SBA Size Standard — 504 Loan Limit",
            passed=passed,
            regulation="13 CFR §120.931; SBA SOP 50 10 8",
            description=(
                f"Loan amount of {_money(amount)} is within the SBA 504 maximum of "
                f"{_money(SBA_504_MAX_AMOUNT)} (manufacturing/energy cap) per 13 CFR §120.931."
                if passed
                else f"Loan amount of {_money(amount)} EXCEEDS the SBA 504 maximum of "
                f"{_money(SBA_504_MAX_AMOUNT)} per 13 CFR §120.931."
            ),
            severity=Severity.INFO if passed else Severity.CRITICAL,
        )

    return ComplianceCheckResult(
        name="SBA Size Standard",
        passed=True,
        regulation="13 CFR §120",
        description="SBA size standard check not applicable to this program.",
        severity=Severity.INFO,
    )


def check_sba_credit_elsewhere(deal: DealInput) -> ComplianceCheckResult:
    """Lender certification; cannot be decided from deal data."""
    return ComplianceCheckResult(
        name="SBA Credit Elsewhere Test",
        passed=True,
        regulation="13 CFR §120.101; SBA SOP 50 10 8",
        description=(
            "The lender must certify that the borrower cannot obtain credit on reasonable terms "
            "from non-Federal sources without SBA assistance per 13 CFR §120.101. "
            "Document the credit elsewhere determination in the loan file."
        ),
        severity=Severity.WARNING,
    )


def check_sba_use_of_proceeds(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="SBA Use of Proceeds",
        passed=True,
        regulation="13 CFR §120.120; SBA SOP 50 10 8",
        description=(
            "Loan proceeds must be used for eligible business purposes per 13 CFR §120.120. "
            "Prohibited uses include floor plan financing, speculation, lending activities, "
            "investments not fully secured, or payments to associates. "
            "Verify against the borrower's stated loan purpose."
        ),
        severity=Severity.WARNING,
    )


def check_sba_504_eligibility(deal: DealInput) -> ComplianceCheckResult:
    """Require fixed-asset collateral and note the net worth / income tests."""
    notes: list[str] = []
    passed = _matches_any(deal.collateral_types, FIXED_ASSET_KEYWORDS)
    if not passed:
        notes.append(
            "SBA 504 requires fixed-asset collateral (real estate or heavy equipment). "
            "Current collateral types do not include eligible fixed assets."
        )

    # Qualitative; cannot be verified from deal data
    notes.append(
        "Borrower must have tangible net worth not exceeding $20M and average net income not "
        "exceeding $6.5M for the two years preceding the application per 13 CFR §121.301(b). "
        "Verify from financial statements."
    )

    return ComplianceCheckResult(
        name="SBA 504 Eligibility",
        passed=passed,
        regulation="13 CFR §120.100-120.111; 13 CFR §121.301",
        description=" ".join(notes),
        severity=Severity.WARNING if passed else Severity.CRITICAL,
    )


def check_job_creation(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="SBA 504 Job Creation/Retention",
        passed=True,
        regulation="13 CFR §120.861-120.862",
        description=(
            "SBA 504 loans must create or retain one job per $90,000 of CDC debenture funding "
            "(or $140,000 for small manufacturers and energy public policy projects) per "
            "13 CFR §120.861. Job creation goals must be documented and reported annually. "
            "Verify projected job creation meets the required ratio."
        ),
        severity=Severity.WARNING,
    )


# ---------------------------------------------------------------------------
# Screening and collateral checks
# ---------------------------------------------------------------------------


def check_ofac_screening(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="OFAC Screening",
        passed=True,
        regulation="31 CFR Part 501; Executive Order 13224; OFAC SDN List",
        description=(
            "All parties (borrower, guarantor, principals) must be screened against the OFAC "
            "Specially Designated Nationals (SDN) list and other sanctions lists per 31 CFR Part 501. "
            "Complete and document screening prior to closing."
        ),
        severity=Severity.WARNING,
    )


def check_flood_zone(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="Flood Zone Determination",
        passed=True,
        regulation="42 USC §4012a; Flood Disaster Protection Act of 1973",
        description=(
            "If the collateral includes improved real property, a Standard Flood Hazard "
            "Determination Form (SFHDF) is required per 42 USC §4012a. If the property is in a "
            "Special Flood Hazard Area (SFHA), flood insurance must be obtained and maintained."
        ),
        severity=Severity.INFO,
    )


def check_environmental_phase1(deal: DealInput) -> ComplianceCheckResult:
    """Recommend a Phase I ESA when real property secures the loan."""
    has_real_property = bool(deal.property_address) or _matches_any(
        deal.collateral_types, REAL_PROPERTY_KEYWORDS
    )
    return ComplianceCheckResult(
        name="Environmental — Phase I ESA",
        passed=True,
        regulation="CERCLA 42 USC §9601 et seq.; ASTM E1527-21",
        description=(
            "A Phase I Environmental Site Assessment (ESA) compliant with ASTM E1527-21 is "
            "recommended prior to closing for all loans secured by real property. The Phase I "
            "establishes the innocent landowner defense under CERCLA 42 USC §9607(b)(3). "
            "Ensure it is completed and reviewed before funding."
            if has_real_property
            else "No real property collateral identified. Phase I ESA is not required for this transaction."
        ),
        severity=Severity.WARNING if has_real_property else Severity.INFO,
    )


def check_bsa_aml(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="BSA/AML Compliance",
        passed=True,
        regulation="31 USC §5311-5336; FinCEN CDD Rule (31 CFR §1010.230); FinCEN FIN-2019-G001",
        description=(
            "Bank Secrecy Act / Anti-Money Laundering due diligence is required: "
            "(1) Customer Identification Program per 31 CFR §1020.220, "
            "(2) Customer Due Diligence including beneficial ownership per 31 CFR §1010.230, "
            "(3) Suspicious Activity Reporting review per 31 USC §5318(g), "
            "(4) for digital asset collateral, blockchain transaction history review per FIN-2019-G001."
        ),
        severity=Severity.WARNING,
    )


def check_source_of_funds(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="Source of Funds Verification",
        passed=True,
        regulation="31 CFR §1010.230; FinCEN FIN-2019-G001; FATF Recommendation 10",
        description=(
            "The source of digital asset collateral must be verified through blockchain analytics, "
            "acquisition records, and screening against sanctioned wallet addresses before the "
            "collateral is accepted."
        ),
        severity=Severity.WARNING,
    )


def check_ucc_lien_search(deal: DealInput) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="UCC Lien Search",
        passed=True,
        regulation="UCC §9-322; UCC §9-501",
        description=(
            "A UCC lien search must be conducted in the debtor's state of organization (UCC §9-307) "
            "and wherever collateral is located. Priority follows order of filing per UCC §9-322(a)(1). "
            "Address any prior liens and file the UCC-1 financing statement at or before closing."
        ),
        severity=Severity.WARNING,
    )


def check_genius_act(deal: DealInput) -> ComplianceCheckResult:
    """Flag stablecoin collateral under the federal stablecoin framework."""
    name = "GENIUS Act — Stablecoin Collateral"
    regulation = "GENIUS Act (Pub. L. 119-27, 2025)"

    if _matches_any(deal.collateral_types, STABLECOIN_KEYWORDS):
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation=regulation,
            description=(
                "Stablecoin collateral must be a permitted payment stablecoin issued by a licensed "
                "issuer. Verify issuer status and the most recent monthly reserve attestation "
                "before accepting the collateral."
            ),
            severity=Severity.WARNING,
        )

    if _matches_any(deal.collateral_types, DIGITAL_ASSET_KEYWORDS):
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation=regulation,
            description=(
                "Digital asset collateral does not include payment stablecoins. The GENIUS Act "
                "framework is not applicable to non-stablecoin assets."
            ),
            severity=Severity.INFO,
        )

    return ComplianceCheckResult(
        name=name,
        passed=True,
        regulation=regulation,
        description="No digital asset collateral identified. GENIUS Act review not required.",
        severity=Severity.INFO,
    )


def check_commercial_financing_disclosure(deal: DealInput) -> ComplianceCheckResult:
    """Flag states that require TILA-style commercial financing disclosures."""
    name = "Commercial Financing Disclosure"
    statute = get_commercial_disclosure_statute(deal.state_abbr)

    if statute is None:
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation="State commercial financing disclosure laws",
            description=(
                f"{deal.state_abbr.strip().upper()} has no commercial financing disclosure statute on file."
                if deal.state_abbr
                else "No state specified on deal. Confirm whether a commercial financing disclosure is required."
            ),
            severity=Severity.INFO,
        )

    return ComplianceCheckResult(
        name=name,
        passed=True,
        regulation=statute,
        description=(
            f"{deal.state_abbr.strip().upper()} requires a commercial financing disclosure "
            f"(APR/estimated APR, total cost, payment terms) per {statute}. "
            "Deliver the disclosure and obtain the borrower's signature before closing."
        ),
        severity=Severity.WARNING,
    )


# ---------------------------------------------------------------------------
# Residential (HPML / ATR)
# ---------------------------------------------------------------------------


def check_hpml(deal: DealInput, *, apor_rate: float | None = None) -> ComplianceCheckResult:
    """Advisory HPML test against APOR + the first-lien spread.

    Without a current APOR the configured conservative estimate is used,
    so a high rate is a warning, never a failure.
    """
    rate = deal.terms.interest_rate
    apor = settings.HPML_APOR_ESTIMATE if apor_rate is None else apor_rate
    threshold = apor + settings.HPML_FIRST_LIEN_SPREAD
    likely_hpml = rate > threshold

    if likely_hpml:
        description = (
            f"Interest rate of {_pct(rate)} exceeds the HPML threshold of {_pct(threshold)} "
            f"(APOR {_pct(apor)} + {_pct(settings.HPML_FIRST_LIEN_SPREAD, 1)}) under 12 CFR §1026.35. "
            "HPML requirements apply: escrow account per §1026.35(b), enhanced appraisal per "
            "§1026.35(c), and balloon payment restrictions."
        )
    else:
        description = (
            f"Interest rate of {_pct(rate)} is at or below the HPML threshold of {_pct(threshold)} "
            f"(APOR {_pct(apor)} + {_pct(settings.HPML_FIRST_LIEN_SPREAD, 1)}) under 12 CFR §1026.35."
        )
    if apor_rate is None:
        description += " Verify against the current APOR table published weekly by the FFIEC."

    return ComplianceCheckResult(
        name="Higher-Priced Mortgage Loan (HPML) Check",
        passed=True,
        regulation="12 CFR §1026.35; Dodd-Frank Act §1411",
        description=description,
        severity=Severity.WARNING if likely_hpml else Severity.INFO,
    )


def check_atr(
    deal: DealInput, *, programs: Mapping[str, LoanProgram] | None = None
) -> ComplianceCheckResult:
    """Ability-to-Repay: program LTV limit plus non-QM documentation notes."""
    name = "Ability to Repay (ATR)"
    program = _resolve_program(deal.program_id, programs)

    if program is None:
        return ComplianceCheckResult(
            name=name,
            passed=True,
            regulation="12 CFR §1026.43; Dodd-Frank Act §1411",
            description="Program not found. ATR check could not determine program thresholds.",
            severity=Severity.WARNING,
        )

    is_non_qm = deal.program_id in ("dscr", "bank_statement")
    notes: list[str] = []
    passed = True

    max_ltv = program.structuring_rules.max_ltv
    ltv = deal.terms.ltv
    if ltv is not None and max_ltv > 0 and ltv > max_ltv:
        notes.append(f"LTV of {_pct(ltv, 1)} exceeds program maximum of {_pct(max_ltv, 1)}.")
        passed = False

    if is_non_qm:
        documentation = (
            "property cash flow analysis (DSCR-based qualification)"
            if deal.program_id == "dscr"
            else "bank statement deposit analysis (12-24 months of deposits)"
        )
        notes.append(
            f"This is a non-QM loan — ATR compliance must be documented through {documentation} "
            "per 12 CFR §1026.43(c)."
        )

    if not passed:
        severity = Severity.CRITICAL
    elif is_non_qm:
        severity = Severity.WARNING
    else:
        severity = Severity.INFO

    return ComplianceCheckResult(
        name=name,
        passed=passed,
        regulation="12 CFR §1026.43; Dodd-Frank Act §1411; CFPB ATR/QM Rule",
        description=" ".join(notes)
        or "ATR requirements satisfied. Borrower's ability to repay is documented per 12 CFR §1026.43.",
        severity=severity,
    )


# ---------------------------------------------------------------------------
# Program structuring limits (always run)
# ---------------------------------------------------------------------------


def check_ltv_limit(
    deal: DealInput, *, programs: Mapping[str, LoanProgram] | None = None
) -> ComplianceCheckResult:
    program = _resolve_program(deal.program_id, programs)
    if program is None:
        return ComplianceCheckResult(
            name="LTV Limit",
            passed=True,
            regulation="Program structuring rules",
            description="Program not found. LTV limit check skipped.",
            severity=Severity.WARNING,
        )

    max_ltv = program.structuring_rules.max_ltv
    ltv = deal.terms.ltv
    if ltv is None:
        return ComplianceCheckResult(
            name="LTV Limit",
            passed=True,
            regulation=f"{program.name} program guidelines",
            description="No LTV value available on deal terms. LTV limit check not performed.",
            severity=Severity.INFO,
        )

    passed = ltv <= max_ltv
    return ComplianceCheckResult(
        name="LTV Limit",
        passed=passed,
        regulation=f"{program.name} program guidelines (max LTV {_pct(max_ltv, 0)})",
        description=(
            f"LTV of {_pct(ltv, 1)} is within the {program.name} maximum of {_pct(max_ltv, 0)}."
            if passed
            else f"LTV of {_pct(ltv, 1)} EXCEEDS the {program.name} maximum of {_pct(max_ltv, 0)}. "
            "Loan does not meet program guidelines."
        ),
        severity=Severity.INFO if passed else Severity.CRITICAL,
    )


def check_term_limit(
    deal: DealInput, *, programs: Mapping[str, LoanProgram] | None = None
) -> ComplianceCheckResult:
    program = _resolve_program(deal.program_id, programs)
    if program is None:
        return ComplianceCheckResult(
            name="Term Limit",
            passed=True,
            regulation="Program structuring rules",
            description="Program not found. Term limit check skipped.",
            severity=Severity.WARNING,
        )

    max_term = program.structuring_rules.max_term
    term = deal.terms.term_months
    if max_term == 0:
        return ComplianceCheckResult(
            name="Term Limit",
            passed=True,
            regulation=f"{program.name} program guidelines",
            description=f"{program.name} is a revolving/interest-only facility. No fixed term limit applies.",
            severity=Severity.INFO,
        )

    passed = term <= max_term
    return ComplianceCheckResult(
        name="Term Limit",
        passed=passed,
        regulation=f"{program.name} program guidelines (max term {max_term} months)",
        description=(
            f"Loan term of {term} months is within the {program.name} maximum of {max_term} months."
            if passed
            else f"Loan term of {term} months EXCEEDS the {program.name} maximum of {max_term} months."
        ),
        severity=Severity.INFO if passed else Severity.CRITICAL,
    )


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

CheckFn = Callable[[DealInput], ComplianceCheckResult]

CHECK_REGISTRY: dict[str, CheckFn] = {
    "usury_check": check_usury,
    "sba_size_standard": check_sba_size_standard,
    "sba_credit_elsewhere": check_sba_credit_elsewhere,
    "sba_use_of_proceeds": check_sba_use_of_proceeds,
    "sba_504_eligibility": check_sba_504_eligibility,
    "job_creation": check_job_creation,
    "ofac_screening": check_ofac_screening,
    "flood_zone": check_flood_zone,
    "hpml_check": check_hpml,
    "atr_check": check_atr,
    "environmental_phase1": check_environmental_phase1,
    "bsa_aml": check_bsa_aml,
    "source_of_funds": check_source_of_funds,
    "ucc_lien_search": check_ucc_lien_search,
    "genius_act": check_genius_act,
    "commercial_financing_disclosure": check_commercial_financing_disclosure,
}


def _bound_registry(
    programs: Mapping[str, LoanProgram] | None, apor_rate: float | None
) -> dict[str, CheckFn]:
    """Registry with the caller's program catalog and APOR bound in."""
    registry = dict(CHECK_REGISTRY)
    registry["hpml_check"] = partial(check_hpml, apor_rate=apor_rate)
    registry["atr_check"] = partial(check_atr, programs=programs)
    return registry


def run_program_compliance_checks(
    program_id: str,
    deal: DealInput,
    *,
    programs: Mapping[str, LoanProgram] | None = None,
    apor_rate: float | None = None,
) -> list[ComplianceCheckResult]:
    """Run every check the program configures, then the LTV and term limits.

    Args:
        program_id: Program to evaluate against; overrides ``deal.program_id``.
        deal: Deal terms snapshot.
        programs: Program catalog; defaults to the built-in registry.
        apor_rate: Current APOR for the HPML check; defaults to the configured estimate.

    Returns:
        Results in configured order followed by LTV Limit and Term Limit.
        An unknown program yields a single critical Program Validation failure.
    """
    program = _resolve_program(program_id, programs)
    if program is None:
        logger.warning("Compliance run requested for unknown program %r", program_id)
        return [
            ComplianceCheckResult(
                name="Program Validation",
                passed=False,
                regulation="Internal",
                description=f'Loan program "{program_id}" not found.',
                severity=Severity.CRITICAL,
            )
        ]

    if deal.program_id != program_id:
        deal = deal.model_copy(update={"program_id": program_id})

    registry = _bound_registry(programs, apor_rate)
    results: list[ComplianceCheckResult] = []
    for label in program.compliance_checks:
        check = registry.get(label)
        if check is None:
            logger.warning("No compliance check registered for %r (program %s)", label, program_id)
            results.append(
                ComplianceCheckResult(
                    name=label,
                    passed=True,
                    regulation="Unknown",
                    description=NOT_IMPLEMENTED_DESCRIPTION,
                    severity=Severity.WARNING,
                )
            )
            continue
        results.append(check(deal))

    results.append(check_ltv_limit(deal, programs=programs))
    results.append(check_term_limit(deal, programs=programs))

    failed = sum(1 for r in results if not r.passed)
    logger.info(
        "Compliance run for program %s: %d checks, %d failed",
        program_id,
        len(results),
        failed,
    )
    return results


def summarize_results(results: list[ComplianceCheckResult]) -> dict:
    """Combine individual check results into an overall compliance summary.

    Returns:
        Dict with overall_severity, can_proceed, critical_failures,
        warnings and the checks list. can_proceed is True unless a
        critical check failed.
    """
    critical_failures = sum(1 for r in results if not r.passed and r.severity == Severity.CRITICAL)
    warnings = sum(1 for r in results if r.severity == Severity.WARNING)

    return {
        "overall_severity": _worst_severity(*(r.severity for r in results)),
        "can_proceed": critical_failures == 0,
        "critical_failures": critical_failures,
        "warnings": warnings,
        "checks": results,
    }
