"""JSON-file-backed implementation of CustomerRepository.

The file holds a list of ``{"id": ..., "tags": [...]}`` records, the
same fields the storefront query reads from the commerce platform.
The store is read-only; a missing file means no customers.
"""

from __future__ import annotations

import json
from pathlib import Path

from vipdiscount.domain.exceptions import CustomerLookupError
from vipdiscount.domain.model.customer import Customer
from vipdiscount.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._load().get(customer_id)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Customer]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            raise CustomerLookupError(
                f"Could not read customers from {self._file_path}: {exc}"
            ) from exc

        try:
            return {
                str(item["id"]): Customer(
                    id=str(item["id"]),
                    tags=tuple(str(tag) for tag in item.get("tags") or []),
                )
                for item in raw
            }
        except (KeyError, TypeError, AttributeError) as exc:
            raise CustomerLookupError(
                f"Malformed customer record in {self._file_path}: {exc}"
            ) from exc
