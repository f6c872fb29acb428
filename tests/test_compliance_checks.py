# This project was developed with assistance from AI tools.
"""Unit tests for compliance check pure functions.

No I/O, no mocking -- pure function tests for each registered check,
the program dispatcher, and the summary roll-up.
"""

import pytest

from lending_core.schemas.compliance import Severity
from lending_core.schemas.programs import LoanProgram, StructuringRules
from lending_core.services.compliance.checks import (
    CHECK_REGISTRY,
    NOT_IMPLEMENTED_DESCRIPTION,
    ComplianceCheckResult,
    check_atr,
    check_bsa_aml,
    check_commercial_financing_disclosure,
    check_environmental_phase1,
    check_flood_zone,
    check_genius_act,
    check_hpml,
    check_job_creation,
    check_ltv_limit,
    check_ofac_screening,
    check_sba_504_eligibility,
    check_sba_credit_elsewhere,
    check_sba_size_standard,
    check_sba_use_of_proceeds,
    check_source_of_funds,
    check_state_usury,
    check_term_limit,
    check_ucc_lien_search,
    check_usury,
    run_program_compliance_checks,
    summarize_results,
)
from lending_core.services.programs import PROGRAMS


def _custom_program(checks: list[str], max_term: int = 60) -> dict[str, LoanProgram]:
    program = LoanProgram(
        id="custom",
        name="Custom",
        structuring_rules=StructuringRules(max_ltv=0.5, max_term=max_term),
        compliance_checks=checks,
    )
    return {"custom": program}


# ---------------------------------------------------------------------------
# Usury
# ---------------------------------------------------------------------------


class TestCheckUsury:
    """Usury check over the state table."""

    def test_below_exemption_over_cap_fails(self, make_deal):
        deal = make_deal(state_abbr="CA", terms={"approved_amount": 250_000, "interest_rate": 0.12})
        result = check_usury(deal)
        assert result.passed is False
        assert result.severity == Severity.CRITICAL
        assert "EXCEEDS" in result.description

    def test_above_exemption_passes_exempt(self, make_deal):
        deal = make_deal(state_abbr="CA", terms={"approved_amount": 350_000, "interest_rate": 0.12})
        result = check_usury(deal)
        assert result.passed is True
        assert result.severity == Severity.INFO
        assert "exempt" in result.description

    def test_criminal_cap_pass_is_warning(self, make_deal):
        deal = make_deal(state_abbr="NY", terms={"approved_amount": 1_000_000, "interest_rate": 0.20})
        result = check_usury(deal)
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "criminal" in result.description

    def test_criminal_cap_fail(self, make_deal):
        deal = make_deal(state_abbr="NY", terms={"approved_amount": 1_000_000, "interest_rate": 0.26})
        result = check_usury(deal)
        assert result.passed is False
        assert result.severity == Severity.CRITICAL

    def test_elevated_ceiling(self, make_deal):
        within = make_deal(state_abbr="TX", terms={"approved_amount": 400_000, "interest_rate": 0.25})
        over = make_deal(state_abbr="TX", terms={"approved_amount": 400_000, "interest_rate": 0.30})
        assert check_usury(within).passed is True
        assert check_usury(within).severity == Severity.INFO
        assert check_usury(over).passed is False
        assert check_usury(over).severity == Severity.CRITICAL

    def test_unknown_state_is_warning(self, make_deal):
        result = check_usury(make_deal(state_abbr="ZZ"))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "not found in usury table" in result.description

    def test_missing_state_is_warning(self, make_deal):
        result = check_usury(make_deal(state_abbr=None))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "No state specified" in result.description

    def test_lowercase_state(self, make_deal):
        deal = make_deal(state_abbr="ca", terms={"approved_amount": 250_000, "interest_rate": 0.12})
        assert check_usury(deal).passed is False

    def test_check_state_usury_helper(self):
        assert check_state_usury("CA", 0.12, 250_000).passed is False
        assert check_state_usury("CA", 0.12, 350_000).passed is True
        assert check_state_usury(None, 0.12, 350_000).severity == Severity.WARNING

    def test_check_state_usury_matches_deal_check(self, make_deal):
        deal = make_deal(state_abbr=" ny ", terms={"approved_amount": 1_000_000, "interest_rate": 0.20})
        assert check_state_usury(" ny ", 0.20, 1_000_000) == check_usury(deal)


# ---------------------------------------------------------------------------
# SBA checks
# ---------------------------------------------------------------------------


class TestSbaChecks:
    """SBA size, eligibility and advisory checks."""

    def test_7a_at_limit_passes(self, make_deal):
        result = check_sba_size_standard(make_deal("sba_7a", terms={"approved_amount": 5_000_000}))
        assert result.passed is True
        assert "7(a)" in result.name

    def test_7a_over_limit_fails(self, make_deal):
        result = check_sba_size_standard(make_deal("sba_7a", terms={"approved_amount": 5_000_001}))
        assert result.passed is False
        assert result.severity == Severity.CRITICAL

    def test_504_limit(self, make_deal):
        assert check_sba_size_standard(make_deal("sba_504", terms={"approved_amount": 5_500_000})).passed
        assert not check_sba_size_standard(make_deal("sba_504", terms={"approved_amount": 5_600_000})).passed

    def test_size_standard_not_applicable(self, make_deal):
        result = check_sba_size_standard(make_deal("dscr", terms={"approved_amount": 9_000_000}))
        assert result.passed is True
        assert result.severity == Severity.INFO
        assert "not applicable" in result.description

    def test_504_eligibility_fixed_asset(self, make_deal):
        result = check_sba_504_eligibility(make_deal("sba_504", collateral_types=["Real Estate"]))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "$20M" in result.description
        assert "$6.5M" in result.description

    def test_504_eligibility_heavy_equipment(self, make_deal):
        assert check_sba_504_eligibility(make_deal("sba_504", collateral_types=["heavy_equipment"])).passed

    def test_504_eligibility_no_fixed_asset(self, make_deal):
        result = check_sba_504_eligibility(make_deal("sba_504", collateral_types=["inventory"]))
        assert result.passed is False
        assert result.severity == Severity.CRITICAL
        assert "$20M" in result.description

    def test_job_creation_ratios(self, make_deal):
        result = check_job_creation(make_deal("sba_504"))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "$90,000" in result.description
        assert "$140,000" in result.description


# ---------------------------------------------------------------------------
# Advisory checks
# ---------------------------------------------------------------------------


class TestAdvisoryChecks:
    """Checks that always pass and only flag manual work."""

    @pytest.mark.parametrize(
        "check",
        [
            check_sba_credit_elsewhere,
            check_sba_use_of_proceeds,
            check_ofac_screening,
            check_bsa_aml,
            check_source_of_funds,
            check_ucc_lien_search,
        ],
    )
    def test_warning_advisories(self, make_deal, check):
        result = check(make_deal())
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert result.regulation

    def test_flood_zone_is_info(self, make_deal):
        result = check_flood_zone(make_deal())
        assert result.passed is True
        assert result.severity == Severity.INFO

    def test_environmental_with_real_estate_collateral(self, make_deal):
        result = check_environmental_phase1(make_deal(collateral_types=["commercial_real_estate"]))
        assert result.severity == Severity.WARNING
        assert "ASTM E1527-21" in result.description

    def test_environmental_with_property_address(self, make_deal):
        deal = make_deal(collateral_types=["equipment"], property_address="1 Main St, Austin, TX")
        assert check_environmental_phase1(deal).severity == Severity.WARNING

    def test_environmental_not_required(self, make_deal):
        result = check_environmental_phase1(make_deal(collateral_types=["equipment"]))
        assert result.passed is True
        assert result.severity == Severity.INFO
        assert "not required" in result.description


class TestGeniusAct:
    """Stablecoin collateral framework."""

    def test_stablecoin_collateral_warns(self, make_deal):
        result = check_genius_act(make_deal("crypto_collateral", collateral_types=["USDC stablecoin"]))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "reserve" in result.description

    def test_non_stablecoin_digital_assets(self, make_deal):
        result = check_genius_act(make_deal("crypto_collateral", collateral_types=["digital_assets"]))
        assert result.severity == Severity.INFO
        assert "non-stablecoin" in result.description

    def test_no_digital_collateral(self, make_deal):
        result = check_genius_act(make_deal(collateral_types=["equipment"]))
        assert result.severity == Severity.INFO
        assert "No digital asset collateral" in result.description


class TestCommercialFinancingDisclosure:
    """State commercial financing disclosure statutes."""

    def test_covered_state(self, make_deal):
        result = check_commercial_financing_disclosure(make_deal(state_abbr="CA"))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "SB 1235" in result.regulation

    def test_uncovered_state(self, make_deal):
        result = check_commercial_financing_disclosure(make_deal(state_abbr="OH"))
        assert result.passed is True
        assert result.severity == Severity.INFO

    def test_padded_uncovered_state(self, make_deal):
        result = check_commercial_financing_disclosure(make_deal(state_abbr=" oh "))
        assert result.description.startswith("OH has no")

    def test_padded_covered_state(self, make_deal):
        result = check_commercial_financing_disclosure(make_deal(state_abbr=" ca "))
        assert result.severity == Severity.WARNING
        assert result.description.startswith("CA requires")

    def test_missing_state(self, make_deal):
        result = check_commercial_financing_disclosure(make_deal(state_abbr=None))
        assert result.severity == Severity.INFO
        assert "No state specified" in result.description


# ---------------------------------------------------------------------------
# HPML / ATR
# ---------------------------------------------------------------------------


class TestCheckHpml:
    """Advisory HPML threshold."""

    def test_default_threshold_flags_high_rate(self, make_deal):
        result = check_hpml(make_deal("dscr", terms={"interest_rate": 0.09}))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "8.500%" in result.description

    def test_default_threshold_below(self, make_deal):
        result = check_hpml(make_deal("dscr", terms={"interest_rate": 0.08}))
        assert result.passed is True
        assert result.severity == Severity.INFO

    def test_injected_apor(self, make_deal):
        result = check_hpml(make_deal("dscr", terms={"interest_rate": 0.09}), apor_rate=0.08)
        assert result.severity == Severity.INFO
        assert "9.500%" in result.description


class TestCheckAtr:
    """Ability-to-Repay."""

    def test_unknown_program(self, make_deal):
        result = check_atr(make_deal("not_a_program"))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "Program not found" in result.description

    def test_ltv_over_program_max_fails(self, make_deal):
        result = check_atr(make_deal("dscr", terms={"ltv": 0.85}))
        assert result.passed is False
        assert result.severity == Severity.CRITICAL

    def test_dscr_alternative_documentation(self, make_deal):
        result = check_atr(make_deal("dscr", terms={"ltv": 0.70}))
        assert result.passed is True
        assert result.severity == Severity.WARNING
        assert "property cash flow" in result.description

    def test_bank_statement_alternative_documentation(self, make_deal):
        result = check_atr(make_deal("bank_statement", terms={"ltv": 0.70}))
        assert result.severity == Severity.WARNING
        assert "bank statement" in result.description

    def test_qm_program_info(self, make_deal):
        result = check_atr(make_deal("commercial_cre", terms={"ltv": 0.70}))
        assert result.passed is True
        assert result.severity == Severity.INFO

    def test_custom_program_catalog(self, make_deal):
        result = check_atr(make_deal("custom", terms={"ltv": 0.60}), programs=_custom_program([]))
        assert result.passed is False


# ---------------------------------------------------------------------------
# Structuring limits
# ---------------------------------------------------------------------------


class TestStructuringLimits:
    """LTV and term limits against program rules."""

    def test_ltv_within(self, make_deal):
        result = check_ltv_limit(make_deal("commercial_cre", terms={"ltv": 0.75}))
        assert result.passed is True
        assert result.severity == Severity.INFO

    def test_ltv_exceeds(self, make_deal):
        result = check_ltv_limit(make_deal("commercial_cre", terms={"ltv": 0.76}))
        assert result.passed is False
        assert result.severity == Severity.CRITICAL

    def test_ltv_missing(self, make_deal):
        result = check_ltv_limit(make_deal("commercial_cre", terms={"ltv": None}))
        assert result.passed is True
        assert result.severity == Severity.INFO
        assert "No LTV value" in result.description

    def test_term_within(self, make_deal):
        assert check_term_limit(make_deal("commercial_cre", terms={"term_months": 120})).passed is True

    def test_term_exceeds(self, make_deal):
        result = check_term_limit(make_deal("commercial_cre", terms={"term_months": 121}))
        assert result.passed is False
        assert result.severity == Severity.CRITICAL

    def test_line_of_credit_term_beyond_annual_renewal_fails(self, make_deal):
        result = check_term_limit(make_deal("line_of_credit", terms={"term_months": 24}))
        assert result.passed is False
        assert result.severity == Severity.CRITICAL
        assert "maximum of 12 months" in result.description

    def test_zero_max_term_is_revolving(self, make_deal):
        result = check_term_limit(
            make_deal("custom", terms={"term_months": 600}), programs=_custom_program([], max_term=0)
        )
        assert result.passed is True
        assert result.severity == Severity.INFO
        assert "revolving" in result.description

    def test_unknown_program_warns(self, make_deal):
        assert check_ltv_limit(make_deal("nope")).severity == Severity.WARNING
        assert check_term_limit(make_deal("nope")).severity == Severity.WARNING


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class TestRunProgramComplianceChecks:
    """Program-driven dispatch."""

    def test_registry_labels(self):
        assert len(CHECK_REGISTRY) == 16
        assert "genius_act" in CHECK_REGISTRY
        assert "commercial_financing_disclosure" in CHECK_REGISTRY

    def test_every_builtin_label_is_registered(self):
        for program in PROGRAMS:
            for label in program.compliance_checks:
                assert label in CHECK_REGISTRY, f"{program.id}: {label}"

    def test_unknown_program_single_critical(self, make_deal):
        results = run_program_compliance_checks("nope", make_deal())
        assert len(results) == 1
        assert results[0].name == "Program Validation"
        assert results[0].passed is False
        assert results[0].severity == Severity.CRITICAL

    def test_configured_checks_then_limits(self, make_deal):
        deal = make_deal("sba_7a", terms={"ltv": 0.80, "term_months": 120})
        results = run_program_compliance_checks("sba_7a", deal)
        assert len(results) == 6 + 2
        assert results[0].name == "SBA Size Standard — 7(a) Loan Limit"
        assert [r.name for r in results[-2:]] == ["LTV Limit", "Term Limit"]

    def test_empty_check_list_still_runs_limits(self, make_deal):
        results = run_program_compliance_checks(
            "custom", make_deal("custom"), programs=_custom_program([])
        )
        assert [r.name for r in results] == ["LTV Limit", "Term Limit"]

    def test_unknown_label_is_warning_pass(self, make_deal):
        results = run_program_compliance_checks(
            "custom", make_deal("custom"), programs=_custom_program(["ofac_screening", "moon_phase"])
        )
        assert len(results) == 4
        unknown = results[1]
        assert unknown.name == "moon_phase"
        assert unknown.passed is True
        assert unknown.severity == Severity.WARNING
        assert unknown.description == NOT_IMPLEMENTED_DESCRIPTION

    def test_program_id_overrides_deal(self, make_deal):
        deal = make_deal("commercial_cre", terms={"approved_amount": 6_000_000})
        results = run_program_compliance_checks("sba_7a", deal)
        size = results[0]
        assert size.name == "SBA Size Standard — 7(a) Loan Limit"
        assert size.passed is False

    def test_apor_is_passed_through(self, make_deal):
        deal = make_deal("dscr", terms={"interest_rate": 0.09, "ltv": 0.7, "term_months": 360})
        default = next(r for r in run_program_compliance_checks("dscr", deal) if "HPML" in r.name)
        injected = next(
            r for r in run_program_compliance_checks("dscr", deal, apor_rate=0.08) if "HPML" in r.name
        )
        assert default.severity == Severity.WARNING
        assert injected.severity == Severity.INFO

    def test_results_are_fresh_per_run(self, make_deal):
        deal = make_deal()
        first = run_program_compliance_checks("commercial_cre", deal)
        second = run_program_compliance_checks("commercial_cre", deal)
        assert first == second
        assert all(a is not b for a, b in zip(first, second, strict=True))


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def _result(passed: bool, severity: Severity) -> ComplianceCheckResult:
    return ComplianceCheckResult(
        name="x", passed=passed, regulation="r", description="d", severity=severity
    )


class TestSummarizeResults:
    """Roll-up flags."""

    def test_all_info(self):
        summary = summarize_results([_result(True, Severity.INFO)])
        assert summary["overall_severity"] == Severity.INFO
        assert summary["can_proceed"] is True

    def test_warning_does_not_block(self):
        summary = summarize_results([_result(True, Severity.INFO), _result(True, Severity.WARNING)])
        assert summary["overall_severity"] == Severity.WARNING
        assert summary["can_proceed"] is True
        assert summary["warnings"] == 1

    def test_critical_failure_blocks(self):
        summary = summarize_results([_result(False, Severity.CRITICAL), _result(True, Severity.WARNING)])
        assert summary["overall_severity"] == Severity.CRITICAL
        assert summary["can_proceed"] is False
        assert summary["critical_failures"] == 1

    def test_empty(self):
        summary = summarize_results([])
        assert summary["overall_severity"] == Severity.INFO
        assert summary["can_proceed"] is True
        assert summary["checks"] == []
