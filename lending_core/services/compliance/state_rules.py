# This project was developed with assistance from AI tools.
"""State usury and commercial-financing disclosure tables.

Rates are decimals. ``NO_CAP`` (999) marks states with no statutory cap
on freely negotiated commercial rates. Every U.S. state plus DC appears
exactly once.
"""

from dataclasses import dataclass

NO_CAP = 999.0


@dataclass(frozen=True)
class StateUsuryRule:
    """Usury limits for one jurisdiction.

    Above ``commercial_exempt_above`` the general cap is lifted, unless the
    state raises it to ``commercial_ceiling`` instead. A
    ``criminal_usury_cap`` keeps binding after the civil exemption until
    principal reaches ``criminal_usury_exemption_threshold`` (if any).
    """

    abbreviation: str
    name: str
    rate: float
    statute: str
    commercial_exempt_above: float | None = None
    commercial_ceiling: float | None = None
    criminal_usury_cap: float | None = None
    criminal_usury_exemption_threshold: float | None = None

    @property
    def has_cap(self) -> bool:
        return self.rate < NO_CAP


def _rule(abbreviation: str, name: str, rate: float, statute: str, **limits) -> StateUsuryRule:
    return StateUsuryRule(abbreviation, name, rate, statute, **limits)


_RULES = [
    _rule("AL", "Alabama", 0.08, "Ala. Code §8-8-5 (contractual max)", commercial_exempt_above=2_000),
    _rule("AK", "Alaska", 0.105, "Alaska Stat. §45.45.010", commercial_exempt_above=25_000),
    _rule(
        "AZ", "Arizona", NO_CAP,
        "Ariz. Rev. Stat. §44-1201 (no usury cap for agreed-upon rates; 10% default)",
    ),
    _rule("AR", "Arkansas", 0.17, "Ark. Const. Amend. 89 §3"),
    _rule(
        "CA", "California", 0.10,
        "Cal. Const. Art. XV §1 ($300K exemption applies to real-property-secured loans only)",
        commercial_exempt_above=300_000,
    ),
    _rule(
        "CO", "Colorado", 0.12, "Colo. Rev. Stat. §5-12-103; criminal usury §18-15-104",
        commercial_exempt_above=75_000, criminal_usury_cap=0.45,
    ),
    _rule("CT", "Connecticut", 0.12, "Conn. Gen. Stat. §37-4"),
    _rule(
        "DE", "Delaware", 0.105, "Del. Code tit. 6, §2301 (5% over Fed discount rate)",
        commercial_exempt_above=100_000,
    ),
    _rule("DC", "District of Columbia", 0.24, "D.C. Code §28-3301"),
    _rule(
        "FL", "Florida", 0.18, "Fla. Stat. §687.02; §687.071 (25% above $500K)",
        commercial_exempt_above=500_000, commercial_ceiling=0.25,
    ),
    _rule(
        "GA", "Georgia", NO_CAP,
        "Ga. Code §7-4-2 (no civil cap for loans >$3K by written agreement); §7-4-18 criminal usury",
        commercial_exempt_above=3_000, criminal_usury_cap=0.60,
    ),
    _rule("HI", "Hawaii", 0.12, "Haw. Rev. Stat. §478-4", commercial_exempt_above=750_000),
    _rule("ID", "Idaho", 0.12, "Idaho Code §28-22-104"),
    _rule("IL", "Illinois", 0.09, "815 ILCS 205/4", commercial_exempt_above=5_000),
    _rule("IN", "Indiana", 0.21, "Ind. Code §24-4.6-1-102"),
    _rule(
        "IA", "Iowa", NO_CAP,
        "Iowa Code §535.2 (5% is default rate only; no cap for written commercial agreements)",
        commercial_exempt_above=25_000,
    ),
    _rule("KS", "Kansas", 0.15, "Kan. Stat. §16-207", commercial_exempt_above=25_000),
    _rule(
        "KY", "Kentucky", 0.19,
        "Ky. Rev. Stat. §360.010 (max 19% or 4% above Fed discount rate)",
        commercial_exempt_above=15_000,
    ),
    _rule("LA", "Louisiana", 0.12, "La. Rev. Stat. §9:3500"),
    _rule(
        "ME", "Maine", NO_CAP,
        "Me. Rev. Stat. tit. 9-A, §2-201 (6% is judgment rate only; UCCC governs lending)",
        commercial_exempt_above=250_000,
    ),
    _rule("MD", "Maryland", 0.08, "Md. Code, Com. Law §12-103", commercial_exempt_above=275_000),
    _rule("MA", "Massachusetts", 0.20, "Mass. Gen. Laws ch. 271, §49"),
    _rule(
        "MI", "Michigan", 0.07, "Mich. Comp. Laws §438.31; criminal usury §438.41",
        commercial_exempt_above=250_000, criminal_usury_cap=0.25,
    ),
    _rule("MN", "Minnesota", 0.08, "Minn. Stat. §334.01", commercial_exempt_above=100_000),
    _rule("MS", "Mississippi", 0.10, "Miss. Code §75-17-1", commercial_exempt_above=250_000),
    _rule(
        "MO", "Missouri", 0.10,
        "Mo. Rev. Stat. §408.030 (floor; actual cap may be higher per market rate formula)",
        commercial_exempt_above=5_000,
    ),
    _rule("MT", "Montana", 0.15, "Mont. Code §31-1-107"),
    _rule("NE", "Nebraska", 0.16, "Neb. Rev. Stat. §45-101.03"),
    _rule(
        "NV", "Nevada", NO_CAP,
        "Nev. Rev. Stat. §99.050 (no usury limit for written commercial contracts)",
    ),
    _rule(
        "NH", "New Hampshire", NO_CAP,
        "N.H. Rev. Stat. §336:1 (no usury cap for agreed-upon rates; 10% default)",
    ),
    _rule(
        "NJ", "New Jersey", 0.16,
        "N.J. Stat. §31:1-1 (16% for written agreements); criminal usury §2C:21-19",
        commercial_exempt_above=50_000, criminal_usury_cap=0.30,
    ),
    _rule("NM", "New Mexico", 0.15, "N.M. Stat. §56-8-3"),
    _rule(
        "NY", "New York", 0.16,
        "N.Y. Gen. Oblig. Law §5-501; Banking Law §14-a; Penal Law §190.40",
        commercial_exempt_above=250_000,
        criminal_usury_cap=0.25,
        criminal_usury_exemption_threshold=2_500_000,
    ),
    _rule("NC", "North Carolina", 0.08, "N.C. Gen. Stat. §24-1.1", commercial_exempt_above=25_000),
    _rule("ND", "North Dakota", 0.06, "N.D. Cent. Code §47-14-09"),
    _rule(
        "OH", "Ohio", 0.08, "Ohio Rev. Code §1343.01; criminal usury §2905.21",
        commercial_exempt_above=100_000, criminal_usury_cap=0.25,
    ),
    _rule(
        "OK", "Oklahoma", NO_CAP,
        "Okla. Stat. tit. 15, §266 (freedom of contract; 6% default when no rate agreed)",
    ),
    _rule("OR", "Oregon", 0.12, "Or. Rev. Stat. §82.010", commercial_exempt_above=50_000),
    _rule("PA", "Pennsylvania", 0.06, "41 Pa. Stat. §201", commercial_exempt_above=50_000),
    _rule("RI", "Rhode Island", 0.21, "R.I. Gen. Laws §6-26-2"),
    _rule("SC", "South Carolina", 0.0875, "S.C. Code §34-31-20", commercial_exempt_above=50_000),
    _rule(
        "SD", "South Dakota", NO_CAP,
        "S.D. Codified Laws §54-3-4 (no usury limit for written contracts)",
    ),
    _rule(
        "TN", "Tennessee", 0.24,
        "Tenn. Code §47-14-103 (max 24% or 4% above avg prime rate)",
        commercial_exempt_above=250_000,
    ),
    _rule(
        "TX", "Texas", 0.18,
        "Tex. Fin. Code §303.009 (18% weekly ceiling floor; 28% for commercial loans over $250K)",
        commercial_exempt_above=250_000, commercial_ceiling=0.28,
    ),
    _rule(
        "UT", "Utah", NO_CAP,
        "Utah Code §15-1-1 (no usury cap for agreed-upon rates; 10% default)",
    ),
    _rule("VT", "Vermont", 0.12, "Vt. Stat. tit. 9, §41a"),
    _rule("VA", "Virginia", 0.12, "Va. Code §6.2-303", commercial_exempt_above=150_000),
    _rule(
        "WA", "Washington", 0.12,
        "Wash. Rev. Code §19.52.020 (or 4% above 26-week T-bill, whichever is greater)",
        commercial_exempt_above=100_000,
    ),
    _rule("WV", "West Virginia", 0.08, "W.Va. Code §47-6-5", commercial_exempt_above=100_000),
    _rule("WI", "Wisconsin", 0.12, "Wis. Stat. §138.04", commercial_exempt_above=150_000),
    _rule("WY", "Wyoming", 0.07, "Wyo. Stat. §40-14-306", commercial_exempt_above=25_000),
]

STATE_USURY_LIMITS: dict[str, StateUsuryRule] = {rule.abbreviation: rule for rule in _RULES}

# States with TILA-style disclosure statutes for commercial financing.
COMMERCIAL_FINANCING_DISCLOSURE_STATUTES: dict[str, str] = {
    "CA": "Cal. Fin. Code §22800 et seq. (SB 1235)",
    "CT": "Conn. Gen. Stat. §36a-861 et seq.",
    "FL": "Fla. Stat. §559.961 et seq. (Florida Commercial Financing Disclosure Law)",
    "GA": "Ga. Code §10-1-393.18",
    "KS": "Kansas Commercial Financing Disclosure Act (SB 345, 2024)",
    "LA": "Louisiana Commercial Financing Disclosure Law (Act 2024)",
    "MO": "Mo. Rev. Stat. §427.300",
    "NY": "N.Y. Fin. Serv. Law §801 et seq.; 23 NYCRR Part 600",
    "TX": "Tex. Fin. Code ch. 398",
    "UT": "Utah Code §7-27-101 et seq.",
    "VA": "Va. Code §6.2-2228 et seq.",
}


def get_state_rule(state_abbr: str | None) -> StateUsuryRule | None:
    """Look up a state by two-letter code (case-insensitive)."""
    if not state_abbr:
        return None
    return STATE_USURY_LIMITS.get(state_abbr.strip().upper())


def get_commercial_disclosure_statute(state_abbr: str | None) -> str | None:
    """Statute requiring commercial financing disclosures in the state, if any."""
    if not state_abbr:
        return None
    return COMMERCIAL_FINANCING_DISCLOSURE_STATUTES.get(state_abbr.strip().upper())


@dataclass(frozen=True)
class UsuryDetermination:
    """Outcome of applying a state's usury rule to a rate and amount.

    ``limit`` is the cap actually compared against, or None when the loan
    is exempt or the state has no cap.
    """

    violates: bool
    limit: float | None
    basis: str  # "ceiling", "criminal", "exempt", "general", "no_cap"


def evaluate_usury(rule: StateUsuryRule, annual_rate: float, principal: float) -> UsuryDetermination:
    """Walk the state's usury decision tree for a commercial loan.

    1. At or above the commercial threshold an elevated ceiling, if the
       state has one, replaces the exemption.
    2. Otherwise a criminal cap still binds below its own exemption
       threshold.
    3. Otherwise the loan is exempt.
    4. Below the threshold the general cap applies; no-cap states still
       honor a criminal cap.
    """
    if rule.commercial_exempt_above is not None and principal >= rule.commercial_exempt_above:
        if rule.commercial_ceiling is not None:
            return UsuryDetermination(
                violates=annual_rate > rule.commercial_ceiling,
                limit=rule.commercial_ceiling,
                basis="ceiling",
            )
        if _criminal_cap_applies(rule, principal):
            return UsuryDetermination(
                violates=annual_rate > rule.criminal_usury_cap,
                limit=rule.criminal_usury_cap,
                basis="criminal",
            )
        return UsuryDetermination(violates=False, limit=None, basis="exempt")

    if not rule.has_cap:
        if _criminal_cap_applies(rule, principal):
            return UsuryDetermination(
                violates=annual_rate > rule.criminal_usury_cap,
                limit=rule.criminal_usury_cap,
                basis="criminal",
            )
        return UsuryDetermination(violates=False, limit=None, basis="no_cap")

    return UsuryDetermination(
        violates=annual_rate > rule.rate,
        limit=rule.rate,
        basis="general",
    )


def _criminal_cap_applies(rule: StateUsuryRule, principal: float) -> bool:
    if rule.criminal_usury_cap is None:
        return False
    threshold = rule.criminal_usury_exemption_threshold
    return threshold is None or principal < threshold
