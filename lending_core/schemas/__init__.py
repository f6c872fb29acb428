# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel, Field


class Fee(BaseModel):
    """A single fee line on the deal terms."""

    name: str
    amount: float
    description: str = ""


class FeeBucket(BaseModel):
    """A group of fees with its subtotal."""

    fees: list[Fee] = Field(default_factory=list)
    subtotal: float = 0.0
