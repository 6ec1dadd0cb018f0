"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VipStatusDTO:
    """Output: whether a customer currently carries the VIP tag."""

    customer_id: str
    is_vip: bool

    def to_json(self) -> dict[str, object]:
        return {"customerId": self.customer_id, "isVIP": self.is_vip}


@dataclass(frozen=True)
class BannerDTO:
    """Output: checkout banner copy, one paragraph per line."""

    heading: str
    lines: list[str]
    tone: str
    saving_amount: str  # formatted, e.g. "15.00"
