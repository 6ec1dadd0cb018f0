"""Abstract repository for Customer records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, platform API,
in-memory) live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from vipdiscount.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by ID, or None if not found.

        Raises CustomerLookupError when the store itself is unusable.
        """
