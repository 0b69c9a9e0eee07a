"""Argument errors raised by the calculators."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class InvalidArgumentReason(str, Enum):
    NEGATIVE_DAYS = "negative_days"
    NEGATIVE_PRINCIPAL = "negative_principal"
    DAYS_LIMIT = "days_limit"


_DEFAULT_MESSAGES = {
    InvalidArgumentReason.NEGATIVE_DAYS: "days must be >= 0",
    InvalidArgumentReason.NEGATIVE_PRINCIPAL: "principal must be >= 0",
    InvalidArgumentReason.DAYS_LIMIT: "days exceeds the configured limit",
}


class InvalidArgumentError(ValueError):
    """Raised when a calculator receives an input outside its domain.

    Callers match on ``reason`` or on the message text, e.g.
    ``"days must be >= 0"``.
    """

    def __init__(self, reason: InvalidArgumentReason, message: Optional[str] = None):
        super().__init__(message or _DEFAULT_MESSAGES[reason])
        self.reason = reason
