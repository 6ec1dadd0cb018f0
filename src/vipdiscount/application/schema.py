"""Host-facing input and output shapes.

The host speaks JSON with camelCase keys. This module is the single
place that knows those shapes: it checks the input, builds domain
objects from it, and turns an EvaluationResult back into the exact
structure the host expects.

Input::

    {
      "cart": {
        "lines": [{"id": str, "cost": {"subtotalAmount": {"amount": number}}}],
        "buyerIdentity": {"customer": {"hasAnyTag": bool}}      # optional
      },
      "discount": {"discountClasses": [str, ...]}                # optional
    }

Output::

    {"operations": [{"orderDiscountsAdd": {
        "candidates": [{"message": str,
                        "targets": [{"orderSubtotal": {"excludedCartLineIds": []}}],
                        "value": {"percentage": {"value": number}}}],
        "selectionStrategy": "FIRST"}}]}
"""

from __future__ import annotations

from typing import Any

from vipdiscount.domain.exceptions import SchemaValidationError, ValidationError
from vipdiscount.domain.model.cart import (
    BuyerIdentity,
    CartLine,
    CartSnapshot,
    CustomerSnapshot,
)
from vipdiscount.domain.model.discount import (
    DiscountContext,
    EvaluationResult,
    OrderDiscountCandidate,
    OrderDiscountsAdd,
)
from vipdiscount.domain.model.value_objects import Money


# --- Input ------------------------------------------------------------------


def parse_input(payload: Any) -> tuple[CartSnapshot, DiscountContext]:
    """Validate a host payload and build the rule's inputs from it."""
    root = _expect_object(payload, "$")
    cart = _parse_cart(_expect_object(root.get("cart"), "cart"))
    context = _parse_discount(root.get("discount"))
    return cart, context


def _parse_cart(raw: dict[str, Any]) -> CartSnapshot:
    raw_lines = raw.get("lines")
    if not isinstance(raw_lines, list):
        raise SchemaValidationError("cart.lines", "expected a list")

    lines = tuple(
        _parse_line(item, f"cart.lines[{index}]")
        for index, item in enumerate(raw_lines)
    )
    return CartSnapshot(
        lines=lines,
        buyer_identity=_parse_buyer_identity(raw.get("buyerIdentity")),
    )


def _parse_line(raw: Any, path: str) -> CartLine:
    line = _expect_object(raw, path)

    line_id = line.get("id")
    if not isinstance(line_id, str):
        raise SchemaValidationError(f"{path}.id", "expected a string")

    cost = _expect_object(line.get("cost"), f"{path}.cost")
    subtotal = _expect_object(
        cost.get("subtotalAmount"), f"{path}.cost.subtotalAmount"
    )
    amount_path = f"{path}.cost.subtotalAmount.amount"
    amount = subtotal.get("amount")
    if isinstance(amount, bool) or not isinstance(amount, (int, float, str)):
        raise SchemaValidationError(amount_path, "expected a number")
    try:
        money = Money.of(amount)
    except ValidationError as exc:
        raise SchemaValidationError(amount_path, str(exc)) from exc

    return CartLine(id=line_id, cost=money)


def _parse_buyer_identity(raw: Any) -> BuyerIdentity | None:
    if raw is None:
        return None
    identity = _expect_object(raw, "cart.buyerIdentity")

    raw_customer = identity.get("customer")
    if raw_customer is None:
        return BuyerIdentity(customer=None)
    customer = _expect_object(raw_customer, "cart.buyerIdentity.customer")

    has_any_tag = customer.get("hasAnyTag")
    if has_any_tag is not None and not isinstance(has_any_tag, bool):
        raise SchemaValidationError(
            "cart.buyerIdentity.customer.hasAnyTag", "expected a boolean"
        )
    return BuyerIdentity(customer=CustomerSnapshot(has_any_tag=has_any_tag))


def _parse_discount(raw: Any) -> DiscountContext:
    # A missing discount block or class list means no class is active.
    if raw is None:
        return DiscountContext()
    discount = _expect_object(raw, "discount")

    classes = discount.get("discountClasses")
    if classes is None:
        return DiscountContext()
    if not isinstance(classes, list):
        raise SchemaValidationError("discount.discountClasses", "expected a list")
    for index, value in enumerate(classes):
        if not isinstance(value, str):
            raise SchemaValidationError(
                f"discount.discountClasses[{index}]", "expected a string"
            )
    return DiscountContext(frozenset(classes))


def _expect_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaValidationError(path, "expected an object")
    return value


# --- Output -----------------------------------------------------------------


def serialize_result(result: EvaluationResult) -> dict[str, Any]:
    return {"operations": [_serialize_operation(op) for op in result.operations]}


def _serialize_operation(operation: OrderDiscountsAdd) -> dict[str, Any]:
    return {
        "orderDiscountsAdd": {
            "candidates": [_serialize_candidate(c) for c in operation.candidates],
            "selectionStrategy": operation.selection_strategy.value,
        }
    }


def _serialize_candidate(candidate: OrderDiscountCandidate) -> dict[str, Any]:
    return {
        "message": candidate.message,
        "targets": [
            {
                "orderSubtotal": {
                    "excludedCartLineIds": list(target.excluded_cart_line_ids),
                }
            }
            for target in candidate.targets
        ],
        "value": {
            "percentage": {"value": candidate.value.percentage.as_number()},
        },
    }
