"""VIP order discount rule.

Tagged customers get a fixed percentage off the order subtotal. The
rule answers only when the host is evaluating order-level discounts,
so it never competes with product or shipping discount rules.
"""

from __future__ import annotations

from decimal import Decimal

from vipdiscount.domain.exceptions import InvalidCartError, MissingTranslationError
from vipdiscount.domain.model.cart import CartSnapshot
from vipdiscount.domain.model.discount import (
    DiscountClass,
    DiscountContext,
    EvaluationResult,
    OrderDiscountCandidate,
    OrderDiscountSelectionStrategy,
    OrderDiscountsAdd,
    OrderSubtotalTarget,
    PercentageValue,
)
from vipdiscount.domain.model.locale import LocaleTable
from vipdiscount.domain.model.value_objects import Percentage

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DISCOUNT_PERCENTAGE = Percentage(Decimal("15"))
SELECTION_STRATEGY = OrderDiscountSelectionStrategy.FIRST
REQUIRED_MESSAGES = ("discountMessage", "errorNoCartLines")


class VipDiscountRule:
    """Stateless decision engine.

    Holds only immutable configuration, so a single instance may be
    shared across threads.
    """

    def __init__(
        self,
        locale: LocaleTable,
        percentage: Percentage = DISCOUNT_PERCENTAGE,
    ) -> None:
        missing = [key for key in REQUIRED_MESSAGES if key not in locale]
        if missing:
            raise MissingTranslationError(
                f"Locale '{locale.name}' is missing required messages: {', '.join(missing)}"
            )
        self._locale = locale
        self._percentage = percentage

    @property
    def percentage(self) -> Percentage:
        return self._percentage

    def message(self) -> str:
        return f"{self._percentage}% {self._locale.translate('discountMessage')}"

    def evaluate(self, cart: CartSnapshot, context: DiscountContext) -> EvaluationResult:
        """Decide whether the cart earns the VIP discount.

        Raises InvalidCartError for a cart with no lines. A cart that
        simply does not qualify yields an empty result.
        """
        if cart.is_empty:
            raise InvalidCartError(self._locale.translate("errorNoCartLines"))

        if not cart.has_qualifying_tag or not context.includes(DiscountClass.ORDER):
            return EvaluationResult()

        candidate = OrderDiscountCandidate(
            message=self.message(),
            targets=(OrderSubtotalTarget(excluded_cart_line_ids=()),),
            value=PercentageValue(percentage=self._percentage),
        )
        return EvaluationResult(
            operations=(
                OrderDiscountsAdd(
                    candidates=(candidate,),
                    selection_strategy=SELECTION_STRATEGY,
                ),
            )
        )
