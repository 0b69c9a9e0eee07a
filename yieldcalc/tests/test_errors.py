from __future__ import annotations

import pytest

from yieldcalc.errors import InvalidArgumentError, InvalidArgumentReason


@pytest.mark.parametrize(
    "reason, message",
    [
        (InvalidArgumentReason.NEGATIVE_DAYS, "days must be >= 0"),
        (InvalidArgumentReason.NEGATIVE_PRINCIPAL, "principal must be >= 0"),
        (InvalidArgumentReason.DAYS_LIMIT, "days exceeds the configured limit"),
    ],
)
def test_every_reason_has_a_default_message(reason, message):
    err = InvalidArgumentError(reason)

    assert str(err) == message
    assert err.reason is reason
    assert isinstance(err, ValueError)


def test_explicit_message_overrides_default():
    err = InvalidArgumentError(InvalidArgumentReason.DAYS_LIMIT, "days must be <= 30")

    assert str(err) == "days must be <= 30"
