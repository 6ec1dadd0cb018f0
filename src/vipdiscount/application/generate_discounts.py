"""Application service: Generate Discounts use case.

Takes the host's raw input, runs the VIP rule, and returns the raw
output. Errors propagate untouched; the caller decides what an invalid
cart means for the checkout.
"""

from __future__ import annotations

import logging
from typing import Any

from vipdiscount.application.schema import parse_input, serialize_result
from vipdiscount.domain.service.vip_discount_rule import VipDiscountRule

logger = logging.getLogger(__name__)


class GenerateDiscountsHandler:

    def __init__(self, rule: VipDiscountRule) -> None:
        self._rule = rule

    def handle(self, payload: Any) -> dict[str, Any]:
        cart, context = parse_input(payload)
        result = self._rule.evaluate(cart, context)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Evaluated cart with %d line(s), subtotal %s, classes %s: %d operation(s)",
                len(cart.lines),
                cart.subtotal,
                sorted(context.discount_classes),
                len(result.operations),
            )
        return serialize_result(result)
