"""Savings shown on the checkout banner.

By the time the banner renders, the total already has the discount
taken off. With a discount of p%, the shown total is (100 - p)% of the
original, so the amount saved is ``total * p / (100 - p)``.
"""

from __future__ import annotations

from decimal import Decimal

from vipdiscount.domain.model.value_objects import Money, Percentage


def savings_from_discounted_total(
    total: Money | None,
    percentage: Percentage,
) -> Money:
    """Amount saved, rounded half-up to cents. No total means no savings."""
    if total is None:
        return Money.of("0.00")
    remaining = Decimal("100") - percentage.value
    saved = total.amount * percentage.value / remaining
    return Money(saved, total.currency).rounded()
