"""Day-by-day compounding projection for a nominal annual rate."""

from __future__ import annotations

from typing import Iterator, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from yieldcalc.errors import InvalidArgumentError, InvalidArgumentReason

DEFAULT_DAY_COUNT_BASIS = 360

DayCountBasis = Literal[360]


class CompoundInterestInput(BaseModel):
    """Inputs for a daily projection.

    ``annualRate`` is a decimal (0.15 for 15%). ``principal`` and
    ``dayCountBasis`` fall back to 0 and 360 when omitted.
    """

    principal: Optional[float] = None
    annualRate: float
    days: int
    dayCountBasis: Optional[DayCountBasis] = None


class ProjectionPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int
    balance: float
    interestEarned: float


def daily_growth_factor(
    annual_rate: float, day_count_basis: DayCountBasis = DEFAULT_DAY_COUNT_BASIS
) -> float:
    """Per-day multiplier that compounds to ``1 + annual_rate`` over one basis year."""
    return (1 + annual_rate) ** (1 / day_count_basis)


def iter_compound_interest(request: CompoundInterestInput) -> Iterator[ProjectionPoint]:
    """
    Validate ``request`` and return an iterator over days 0..days (inclusive).

    Validation happens on the call, not on the first ``next()``. The balance
    is carried forward by one multiplication per day, so day N is the product
    of N factors rather than a closed-form power.
    """
    principal = request.principal if request.principal is not None else 0.0
    day_count_basis = (
        request.dayCountBasis if request.dayCountBasis is not None else DEFAULT_DAY_COUNT_BASIS
    )

    if request.days < 0:
        raise InvalidArgumentError(InvalidArgumentReason.NEGATIVE_DAYS)
    if principal < 0:
        raise InvalidArgumentError(InvalidArgumentReason.NEGATIVE_PRINCIPAL)

    factor = daily_growth_factor(request.annualRate, day_count_basis)
    return _walk_balances(principal, factor, request.days)


def _walk_balances(principal: float, factor: float, days: int) -> Iterator[ProjectionPoint]:
    balance = principal
    for day in range(days + 1):
        if day > 0:
            balance *= factor
        yield ProjectionPoint(day=day, balance=balance, interestEarned=balance - principal)


def project_compound_interest(request: CompoundInterestInput) -> List[ProjectionPoint]:
    """Build the full day-indexed balance series for ``request``."""
    return list(iter_compound_interest(request))
