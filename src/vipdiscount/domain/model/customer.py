"""Customer record as stored by the commerce platform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

VIP_TAG = "VIP"


@dataclass(frozen=True)
class Customer:

    id: str
    tags: tuple[str, ...] = ()

    def has_any_tag(self, tags: Iterable[str]) -> bool:
        """Exact, case-sensitive tag match."""
        return any(tag in self.tags for tag in tags)
