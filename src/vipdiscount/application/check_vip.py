"""Application service: Check VIP use case (query)."""

from __future__ import annotations

import logging
from typing import Iterable

from vipdiscount.application.dto import VipStatusDTO
from vipdiscount.domain.exceptions import ValidationError
from vipdiscount.domain.model.customer import VIP_TAG
from vipdiscount.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class CheckVipHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        qualifying_tags: Iterable[str] = (VIP_TAG,),
    ) -> None:
        self._customer_repo = customer_repo
        self._qualifying_tags = tuple(qualifying_tags)

    def handle(self, customer_id: str | None) -> VipStatusDTO:
        """Answer whether *customer_id* carries a qualifying tag.

        An unknown customer is simply not a VIP.
        """
        if customer_id is None or not customer_id.strip():
            raise ValidationError("customerId is required")
        customer_id = customer_id.strip()

        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            logger.debug("Customer %s not found; treating as non-VIP", customer_id)
            return VipStatusDTO(customer_id=customer_id, is_vip=False)

        return VipStatusDTO(
            customer_id=customer_id,
            is_vip=customer.has_any_tag(self._qualifying_tags),
        )
