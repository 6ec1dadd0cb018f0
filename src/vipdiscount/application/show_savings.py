"""Application service: Show Savings use case.

Builds the checkout banner copy for a VIP order. Merchant-configured
heading and description win over the locale defaults.
"""

from __future__ import annotations

from vipdiscount.application.dto import BannerDTO
from vipdiscount.domain.exceptions import ValidationError
from vipdiscount.domain.model.locale import LocaleTable
from vipdiscount.domain.model.value_objects import Money, Percentage
from vipdiscount.domain.service.savings import savings_from_discounted_total
from vipdiscount.domain.service.vip_discount_rule import DISCOUNT_PERCENTAGE

LINE_BREAK = "<br />"
DEFAULT_TONE = "success"
TONES = ("auto", "info", "success", "warning", "critical")


class ShowSavingsHandler:

    def __init__(
        self,
        locale: LocaleTable,
        percentage: Percentage = DISCOUNT_PERCENTAGE,
    ) -> None:
        self._locale = locale
        self._percentage = percentage

    def handle(
        self,
        total: Money | None,
        heading: str | None = None,
        description: str | None = None,
        tone: str = DEFAULT_TONE,
    ) -> BannerDTO:
        if tone not in TONES:
            raise ValidationError(
                f"Banner tone must be one of {', '.join(TONES)}; got '{tone}'"
            )
        saving_amount = f"{savings_from_discounted_total(total, self._percentage).amount:.2f}"

        if heading is None:
            heading = self._locale.translate("defaultHeading")
        if description is None:
            description = self._locale.translate(
                "defaultDescription",
                savingAmount=saving_amount,
                percentageAmount=self._percentage,
            )

        return BannerDTO(
            heading=heading,
            lines=[line.strip() for line in description.split(LINE_BREAK)],
            tone=tone,
            saving_amount=saving_amount,
        )
