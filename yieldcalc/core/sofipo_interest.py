"""Two-tier (block A / block B) daily compounding used by SOFIPO deposit products.

Funds up to ``limitBlockA`` earn ``rateA``; anything above it earns ``rateB``.
Both blocks compound daily on a 365-day year and every monetary output is
rounded to cents.
"""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict

from yieldcalc.errors import InvalidArgumentError, InvalidArgumentReason

logger = logging.getLogger(__name__)

SOFIPO_DAYS_PER_YEAR = 365
MONEY_EPSILON = 1e-9


class SofipoCompoundInput(BaseModel):
    """Rates are annual percentages (16 means 16%)."""

    totalInvestment: float
    limitBlockA: float
    rateA: float
    rateB: float
    days: int


class SofipoCompoundOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    principalA: float
    principalB: float
    gainA: float
    gainB: float
    gainTotal: float
    endA: float
    endB: float
    endTotal: float


def round_money(value: float) -> float:
    """Round half-up to cents after nudging by ``MONEY_EPSILON``.

    ``round()`` is half-even, so values like 0.125 would go to 0.12.
    NaN and infinities pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor((value + MONEY_EPSILON) * 100 + 0.5) / 100


def _daily_log_growth(per_day_rate: float) -> float:
    # math.log1p raises outside its domain; keep the IEEE results instead
    if math.isnan(per_day_rate) or per_day_rate < -1:
        return math.nan
    if per_day_rate == -1:
        return -math.inf
    return math.log1p(per_day_rate)


def _exp(exponent: float) -> float:
    try:
        return math.exp(exponent)
    except OverflowError:
        return math.inf


def compound_end_amount(principal: float, annual_rate_percent: float, days: int) -> float:
    """
    Ending amount for ``principal`` compounded daily for ``days`` days.

    A = P(1 + r/n)^(n*t) with n = 365 and t = days / n, so the exponent is
    just ``days``. Evaluated as exp(days * log1p(r/n)) to keep precision when
    r/n is tiny. Overflow yields ``inf`` and a rate at or below -100% per day
    yields ``nan`` (or 0 when the daily rate is exactly -100%).
    """
    rate = annual_rate_percent / 100

    if days < 0:
        raise InvalidArgumentError(InvalidArgumentReason.NEGATIVE_DAYS)
    if principal < 0:
        raise InvalidArgumentError(InvalidArgumentReason.NEGATIVE_PRINCIPAL)

    return principal * _exp(days * _daily_log_growth(rate / SOFIPO_DAYS_PER_YEAR))


def _finite_or_zero(name: str, value: float) -> float:
    if math.isfinite(value):
        return value
    logger.debug("Non-finite %s=%r treated as 0", name, value)
    return 0.0


def calculate_sofipo_compound_interest(request: SofipoCompoundInput) -> SofipoCompoundOutput:
    total_investment = _finite_or_zero("totalInvestment", request.totalInvestment)
    limit_block_a = _finite_or_zero("limitBlockA", request.limitBlockA)

    # A negative total leaves principal_a negative; compound_end_amount rejects it.
    principal_a = min(total_investment, limit_block_a)
    principal_b = max(0.0, total_investment - limit_block_a)

    end_a = compound_end_amount(principal_a, request.rateA, request.days)
    end_b = compound_end_amount(principal_b, request.rateB, request.days)

    gain_a = end_a - principal_a
    gain_b = end_b - principal_b

    end_total = end_a + end_b
    gain_total = gain_a + gain_b

    return SofipoCompoundOutput(
        principalA=round_money(principal_a),
        principalB=round_money(principal_b),
        gainA=round_money(gain_a),
        gainB=round_money(gain_b),
        gainTotal=round_money(gain_total),
        endA=round_money(end_a),
        endB=round_money(end_b),
        endTotal=round_money(end_total),
    )
