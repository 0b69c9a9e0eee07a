"""Data contracts for the projection endpoint."""

from typing import List

from pydantic import BaseModel

from yieldcalc.core.compound_interest import ProjectionPoint


class CompoundInterestResponse(BaseModel):
    """Projected daily series plus the figures for its last day."""

    points: List[ProjectionPoint]
    finalBalance: float
    interestEarned: float
