"""Discount context and the operations the rule hands back to the host.

Operations are frozen: they are built fresh for every evaluation and
owned by whoever receives them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vipdiscount.domain.model.value_objects import Percentage


class DiscountClass(Enum):
    PRODUCT = "PRODUCT"
    ORDER = "ORDER"
    SHIPPING = "SHIPPING"


class OrderDiscountSelectionStrategy(Enum):
    """How the host picks among order discount candidates."""

    FIRST = "FIRST"
    MAXIMUM = "MAXIMUM"


@dataclass(frozen=True)
class DiscountContext:
    """Discount classes the host is asking about in this pass.

    Raw class names are kept as strings so that classes this code does
    not know about pass through without breaking evaluation.
    """

    discount_classes: frozenset[str] = field(default_factory=frozenset)

    def includes(self, discount_class: DiscountClass) -> bool:
        return discount_class.value in self.discount_classes

    @staticmethod
    def of(*classes: DiscountClass | str) -> DiscountContext:
        return DiscountContext(
            frozenset(c.value if isinstance(c, DiscountClass) else c for c in classes)
        )


@dataclass(frozen=True)
class OrderSubtotalTarget:
    """Apply to the order subtotal, minus the listed cart lines."""

    excluded_cart_line_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class PercentageValue:
    percentage: Percentage


@dataclass(frozen=True)
class OrderDiscountCandidate:
    message: str
    targets: tuple[OrderSubtotalTarget, ...]
    value: PercentageValue


@dataclass(frozen=True)
class OrderDiscountsAdd:
    """The "add order discount" operation."""

    candidates: tuple[OrderDiscountCandidate, ...]
    selection_strategy: OrderDiscountSelectionStrategy


# Only one operation variant exists today.
DiscountOperation = OrderDiscountsAdd


@dataclass(frozen=True)
class EvaluationResult:
    operations: tuple[DiscountOperation, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.operations
