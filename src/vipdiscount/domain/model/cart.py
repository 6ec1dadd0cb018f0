"""Cart snapshot handed to the discount rule by the host.

The snapshot is read-only: the rule never changes the cart, it only
decides whether a discount applies to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vipdiscount.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """One line item. Identifiers are opaque and may repeat."""

    id: str
    cost: Money


@dataclass(frozen=True)
class CustomerSnapshot:
    """What the host tells us about the buyer.

    ``has_any_tag`` is the host's answer to "does the customer carry one
    of the qualifying tags"; ``None`` means the host did not say.
    """

    has_any_tag: bool | None = None


@dataclass(frozen=True)
class BuyerIdentity:
    customer: CustomerSnapshot | None = None


@dataclass(frozen=True)
class CartSnapshot:
    lines: tuple[CartLine, ...] = field(default_factory=tuple)
    buyer_identity: BuyerIdentity | None = None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def has_qualifying_tag(self) -> bool:
        """True only on affirmative evidence of the qualifying tag.

        Every missing link (no buyer identity, no customer, no flag)
        reads as ``False``.
        """
        if self.buyer_identity is None:
            return False
        customer = self.buyer_identity.customer
        if customer is None:
            return False
        return customer.has_any_tag is True

    @property
    def subtotal(self) -> Money:
        result = Money.of("0.00")
        for line in self.lines:
            result = result + line.cost
        return result
