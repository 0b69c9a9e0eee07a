"""Compound-interest projections: daily compounding and two-tier SOFIPO deposits."""

__version__ = "0.1.0"

from yieldcalc.core.compound_interest import (
    CompoundInterestInput,
    ProjectionPoint,
    daily_growth_factor,
    iter_compound_interest,
    project_compound_interest,
)
from yieldcalc.core.sofipo_interest import (
    SofipoCompoundInput,
    SofipoCompoundOutput,
    calculate_sofipo_compound_interest,
    compound_end_amount,
    round_money,
)
from yieldcalc.errors import InvalidArgumentError, InvalidArgumentReason

__all__ = [
    "CompoundInterestInput",
    "InvalidArgumentError",
    "InvalidArgumentReason",
    "ProjectionPoint",
    "SofipoCompoundInput",
    "SofipoCompoundOutput",
    "calculate_sofipo_compound_interest",
    "compound_end_amount",
    "daily_growth_factor",
    "iter_compound_interest",
    "project_compound_interest",
    "round_money",
]
