"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from vipdiscount.domain.exceptions import ValidationError
from vipdiscount.domain.model.value_objects import Money, Percentage


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_short_repr(self):
        assert Money.of(19.99).amount == Decimal("19.99")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_of_rejects_booleans(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(True)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("Infinity")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_rounded_half_up(self):
        assert Money.of("2.345").rounded() == Money.of("2.35")
        assert Money.of("2.344").rounded() == Money.of("2.34")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"


# ── Percentage ───────────────────────────────────────────────────────────────


class TestPercentage:

    def test_integral_value_is_an_int(self):
        p = Percentage.of(15)
        assert p.as_number() == 15
        assert isinstance(p.as_number(), int)

    def test_fractional_value_is_a_float(self):
        assert Percentage.of("12.5").as_number() == 12.5

    def test_str(self):
        assert str(Percentage.of("15.0")) == "15"

    @pytest.mark.parametrize("value", ["0", "100", "-5", "150"])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage.of(value)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            Percentage(Decimal("NaN"))

    def test_must_be_decimal(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Percentage(15)  # type: ignore[arg-type]
