# This project was developed with assistance from AI tools.
"""Tests for the built-in loan program catalog."""

from lending_core.services.programs import LOAN_PROGRAMS, PROGRAMS, get_program

EXPECTED_IDS = [
    "sba_7a",
    "sba_504",
    "commercial_cre",
    "dscr",
    "bank_statement",
    "conventional_business",
    "line_of_credit",
    "equipment_financing",
    "bridge",
    "crypto_collateral",
]


def test_catalog_ids_in_order():
    assert [p.id for p in PROGRAMS] == EXPECTED_IDS


def test_lookup_map_matches_list():
    assert set(LOAN_PROGRAMS) == set(EXPECTED_IDS)
    for program in PROGRAMS:
        assert LOAN_PROGRAMS[program.id] is program


def test_get_program():
    assert get_program("sba_7a").name == "SBA 7(a)"
    assert get_program("nope") is None


def test_every_program_runs_usury_and_ofac():
    for program in PROGRAMS:
        assert "usury_check" in program.compliance_checks
        assert "ofac_screening" in program.compliance_checks


def test_line_of_credit_renews_annually():
    assert get_program("line_of_credit").structuring_rules.max_term == 12
    assert get_program("bridge").structuring_rules.max_term == 36


def test_structuring_limits():
    assert get_program("sba_7a").structuring_rules.max_loan_amount == 5_000_000
    assert get_program("sba_504").structuring_rules.max_loan_amount == 5_500_000
    assert get_program("commercial_cre").structuring_rules.max_ltv == 0.75
    assert get_program("crypto_collateral").structuring_rules.collateral_types == ["digital_assets"]


def test_late_fees():
    assert get_program("bridge").late_fee_percent == 0.06
    assert get_program("bridge").late_fee_grace_days == 5
    assert get_program("sba_7a").late_fee_grace_days == 15
    assert get_program("commercial_cre").late_fee_grace_days == 10


def test_spread_ranges_are_ordered():
    for program in PROGRAMS:
        low, high = program.structuring_rules.spread_range
        assert low <= high
