# This project was developed with assistance from AI tools.
"""Loan program catalog.

Centralizes the program registry so that the compliance evaluator and the
API routes import from the service layer rather than one importing from
the other. Structuring numbers are owned here; the compliance checks only
validate deal terms against them.
"""

from ..schemas.programs import LoanProgram, ProgramFee, StructuringRules

PROGRAMS: list[LoanProgram] = [
    LoanProgram(
        id="sba_7a",
        name="SBA 7(a)",
        description="Small business loan up to $5M with SBA guaranty. "
        "Standard program for most small businesses.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.85,
            min_dscr=1.15,
            max_dti=0.50,
            base_rate="prime",
            spread_range=(0.0, 0.03),
            max_term=300,
            max_amortization=300,
            max_loan_amount=5_000_000,
            min_loan_amount=25_000,
            prepayment_penalty=True,
            requires_appraisal=True,
            requires_personal_guaranty=True,
            collateral_types=["real_estate", "equipment", "inventory", "accounts_receivable"],
        ),
        compliance_checks=[
            "sba_size_standard",
            "sba_credit_elsewhere",
            "sba_use_of_proceeds",
            "ofac_screening",
            "usury_check",
            "flood_zone",
        ],
        standard_fees=[
            ProgramFee(
                name="SBA Guaranty Fee",
                type="percent",
                value=0.03,
                description="3.0% of guaranteed portion (default tier; tiered by loan size per SBA SOP)",
            ),
            ProgramFee(name="Packaging Fee", type="flat", value=2500, description="SBA loan packaging"),
            ProgramFee(name="Closing Fee", type="percent", value=0.005, description="0.5% of loan amount"),
        ],
    ),
    LoanProgram(
        id="sba_504",
        name="SBA 504",
        description="Fixed-asset financing through CDC structure. "
        "Up to $5.5M for real estate and equipment.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.90,
            min_dscr=1.15,
            max_dti=0.50,
            base_rate="treasury",
            spread_range=(0.005, 0.015),
            max_term=300,
            max_amortization=300,
            max_loan_amount=5_500_000,
            min_loan_amount=100_000,
            prepayment_penalty=True,
            requires_appraisal=True,
            requires_personal_guaranty=True,
            collateral_types=["real_estate", "heavy_equipment"],
        ),
        compliance_checks=[
            "sba_size_standard",
            "sba_504_eligibility",
            "job_creation",
            "ofac_screening",
            "usury_check",
            "flood_zone",
        ],
        standard_fees=[
            ProgramFee(name="CDC Processing Fee", type="percent", value=0.015, description="1.5% of CDC portion"),
            ProgramFee(name="SBA Guaranty Fee", type="percent", value=0.005, description="0.5% guarantee fee"),
            ProgramFee(name="Closing Fee", type="percent", value=0.005, description="0.5% of loan amount"),
        ],
    ),
    LoanProgram(
        id="commercial_cre",
        name="Commercial Real Estate",
        description="Term loan for commercial property acquisition or refinance. "
        "Income property focused.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.75,
            min_dscr=1.25,
            max_dti=0.45,
            base_rate="sofr",
            spread_range=(0.02, 0.04),
            max_term=120,
            max_amortization=360,
            min_loan_amount=250_000,
            prepayment_penalty=True,
            requires_appraisal=True,
            requires_personal_guaranty=True,
            collateral_types=["commercial_real_estate"],
        ),
        compliance_checks=["ofac_screening", "usury_check", "flood_zone", "environmental_phase1"],
        late_fee_grace_days=10,
        standard_fees=[
            ProgramFee(name="Origination Fee", type="percent", value=0.01, description="1% of loan amount"),
            ProgramFee(name="Appraisal Fee", type="flat", value=4500, description="Commercial appraisal"),
            ProgramFee(name="Environmental Phase I", type="flat", value=3000, description="Phase I ESA"),
            ProgramFee(name="Legal Fees", type="flat", value=5000, description="Lender's counsel"),
        ],
    ),
    LoanProgram(
        id="dscr",
        name="DSCR Loan",
        description="Investment property loan qualified by property cash flow, "
        "not personal income. 1-4 unit residential.",
        category="residential",
        structuring_rules=StructuringRules(
            max_ltv=0.80,
            min_dscr=1.00,
            max_dti=1.0,
            base_rate="sofr",
            spread_range=(0.03, 0.06),
            max_term=360,
            max_amortization=360,
            max_loan_amount=3_000_000,
            min_loan_amount=75_000,
            requires_appraisal=True,
            collateral_types=["residential_1_4"],
            interest_only=True,
        ),
        compliance_checks=["ofac_screening", "usury_check", "flood_zone", "hpml_check", "atr_check"],
        standard_fees=[
            ProgramFee(name="Origination Fee", type="percent", value=0.015, description="1.5% of loan amount"),
            ProgramFee(name="Appraisal Fee", type="flat", value=600, description="Residential appraisal"),
            ProgramFee(name="Processing Fee", type="flat", value=1500, description="Loan processing"),
        ],
    ),
    LoanProgram(
        id="bank_statement",
        name="Bank Statement Loan",
        description="Self-employed borrower program. "
        "Uses 12-24 months of bank deposits instead of tax returns.",
        category="residential",
        structuring_rules=StructuringRules(
            max_ltv=0.80,
            min_dscr=1.0,
            max_dti=0.50,
            base_rate="sofr",
            spread_range=(0.035, 0.06),
            max_term=360,
            max_amortization=360,
            max_loan_amount=3_000_000,
            min_loan_amount=100_000,
            requires_appraisal=True,
            collateral_types=["residential_1_4", "residential_condo"],
            interest_only=True,
        ),
        compliance_checks=["ofac_screening", "usury_check", "flood_zone", "atr_check", "hpml_check"],
        standard_fees=[
            ProgramFee(name="Origination Fee", type="percent", value=0.02, description="2% of loan amount"),
            ProgramFee(name="Appraisal Fee", type="flat", value=600, description="Residential appraisal"),
            ProgramFee(name="Processing Fee", type="flat", value=1500, description="Loan processing"),
            ProgramFee(name="Underwriting Fee", type="flat", value=1000, description="Underwriting review"),
        ],
    ),
    LoanProgram(
        id="conventional_business",
        name="Conventional Business Term",
        description="Standard unsecured or partially secured business term loan.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.70,
            min_dscr=1.25,
            max_dti=0.45,
            base_rate="prime",
            spread_range=(0.01, 0.035),
            max_term=84,
            max_amortization=84,
            min_loan_amount=50_000,
            requires_personal_guaranty=True,
            collateral_types=["equipment", "inventory", "accounts_receivable", "blanket_lien"],
        ),
        compliance_checks=[
            "ofac_screening",
            "usury_check",
            "flood_zone",
            "commercial_financing_disclosure",
        ],
        late_fee_grace_days=10,
        standard_fees=[
            ProgramFee(name="Origination Fee", type="percent", value=0.01, description="1% of loan amount"),
            ProgramFee(name="Documentation Fee", type="flat", value=500, description="Document preparation"),
        ],
    ),
    LoanProgram(
        id="line_of_credit",
        name="Business Line of Credit",
        description="Revolving credit facility for working capital needs.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.60,
            min_dscr=1.20,
            max_dti=0.45,
            base_rate="prime",
            spread_range=(0.005, 0.025),
            max_term=12,  # Annual renewal
            max_amortization=0,
            min_loan_amount=25_000,
            requires_personal_guaranty=True,
            collateral_types=["accounts_receivable", "inventory", "blanket_lien"],
            interest_only=True,
        ),
        compliance_checks=["ofac_screening", "usury_check", "commercial_financing_disclosure"],
        late_fee_grace_days=10,
        standard_fees=[
            ProgramFee(name="Commitment Fee", type="percent", value=0.0025, description="0.25% on unused portion"),
            ProgramFee(name="Annual Renewal Fee", type="flat", value=500, description="Annual line renewal"),
        ],
    ),
    LoanProgram(
        id="equipment_financing",
        name="Equipment Financing",
        description="Asset-based loan for equipment purchase. "
        "Equipment serves as primary collateral.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.85,
            min_dscr=1.15,
            max_dti=0.50,
            base_rate="prime",
            spread_range=(0.02, 0.045),
            max_term=84,
            max_amortization=84,
            min_loan_amount=10_000,
            prepayment_penalty=True,
            requires_appraisal=True,
            requires_personal_guaranty=True,
            collateral_types=["equipment"],
        ),
        compliance_checks=[
            "ofac_screening",
            "usury_check",
            "ucc_lien_search",
            "commercial_financing_disclosure",
        ],
        late_fee_grace_days=10,
        standard_fees=[
            ProgramFee(name="Documentation Fee", type="flat", value=500, description="Document preparation"),
            ProgramFee(name="UCC Filing Fee", type="flat", value=150, description="UCC-1 filing"),
        ],
    ),
    LoanProgram(
        id="bridge",
        name="Bridge Loan",
        description="Short-term financing for acquisition, renovation, or repositioning. "
        "Higher rate, faster closing.",
        category="commercial",
        structuring_rules=StructuringRules(
            max_ltv=0.70,
            min_dscr=1.0,
            max_dti=0.50,
            base_rate="prime",
            spread_range=(0.04, 0.08),
            max_term=36,
            max_amortization=0,
            min_loan_amount=100_000,
            requires_appraisal=True,
            requires_personal_guaranty=True,
            collateral_types=["real_estate", "commercial_real_estate"],
            interest_only=True,
        ),
        compliance_checks=["ofac_screening", "usury_check", "flood_zone"],
        late_fee_percent=0.06,
        late_fee_grace_days=5,
        standard_fees=[
            ProgramFee(name="Origination Fee", type="percent", value=0.02, description="2% of loan amount"),
            ProgramFee(name="Exit Fee", type="percent", value=0.01, description="1% at payoff"),
            ProgramFee(
                name="Appraisal Fee", type="flat", value=4500, description="As-is and as-stabilized appraisal"
            ),
        ],
    ),
    LoanProgram(
        id="crypto_collateral",
        name="Crypto-Collateralized Loan",
        description="Loan secured by digital assets (BTC, ETH, stablecoins). "
        "70% max LTV with real-time margin monitoring.",
        category="specialty",
        structuring_rules=StructuringRules(
            max_ltv=0.70,
            min_dscr=0,
            max_dti=0.50,
            base_rate="sofr",
            spread_range=(0.04, 0.08),
            max_term=60,
            max_amortization=60,
            max_loan_amount=10_000_000,
            min_loan_amount=50_000,
            collateral_types=["digital_assets"],
            interest_only=True,
        ),
        compliance_checks=["ofac_screening", "usury_check", "bsa_aml", "source_of_funds", "genius_act"],
        late_fee_grace_days=10,
        standard_fees=[
            ProgramFee(name="Origination Fee", type="percent", value=0.015, description="1.5% of loan amount"),
            ProgramFee(
                name="Custody Fee", type="percent", value=0.005, description="0.5% annual custody fee on collateral"
            ),
        ],
    ),
]

LOAN_PROGRAMS: dict[str, LoanProgram] = {program.id: program for program in PROGRAMS}


def get_program(program_id: str) -> LoanProgram | None:
    """Return the registered program, or None for an unknown id."""
    return LOAN_PROGRAMS.get(program_id)
