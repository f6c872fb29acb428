# This project was developed with assistance from AI tools.
"""Compliance rule evaluator: state usury tables and program check dispatch."""

from .checks import (
    CHECK_REGISTRY,
    ComplianceCheckResult,
    check_ltv_limit,
    check_state_usury,
    check_term_limit,
    run_program_compliance_checks,
    summarize_results,
)
from .state_rules import STATE_USURY_LIMITS, StateUsuryRule, evaluate_usury, get_state_rule

__all__ = [
    "CHECK_REGISTRY",
    "STATE_USURY_LIMITS",
    "ComplianceCheckResult",
    "StateUsuryRule",
    "check_ltv_limit",
    "check_state_usury",
    "check_term_limit",
    "evaluate_usury",
    "get_state_rule",
    "run_program_compliance_checks",
    "summarize_results",
]
