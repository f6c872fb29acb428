# This project was developed with assistance from AI tools.
"""Loan disclosure math and regulatory compliance checks."""

__version__ = "0.1.0"
