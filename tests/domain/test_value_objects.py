"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import MAX_STORED_INTEGER, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(250)
        assert m.cents == 250
        assert m.currency == "TWD"

    def test_of_factory_from_string(self):
        assert Money.of("4.99") == Money(499)

    def test_of_factory_from_int(self):
        assert Money.of(60) == Money(6000)

    def test_of_rounds_half_up(self):
        assert Money.of("0.005") == Money(1)

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    @pytest.mark.parametrize("raw", ["1e30", "1e20", "Infinity", "NaN"])
    def test_of_rejects_unstorable_amounts(self, raw):
        with pytest.raises(ValidationError):
            Money.of(raw)

    def test_cents_capped_at_storage_limit(self):
        assert Money(MAX_STORED_INTEGER).cents == MAX_STORED_INTEGER
        with pytest.raises(ValidationError, match="too large"):
            Money(MAX_STORED_INTEGER + 1)

    def test_overflowing_product_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            Money(MAX_STORED_INTEGER) * 2

    def test_float_cents_rejected(self):
        with pytest.raises(ValidationError, match="integer number of cents"):
            Money(2.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_addition(self):
        assert Money(500) + Money(499) == Money(999)

    def test_multiplication_by_int(self):
        assert Money(250) * 2 == Money(500)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(250) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(10, "TWD") + Money(5, "USD")

    def test_amount(self):
        assert Money(999).amount == Decimal("9.99")

    def test_str_formatting(self):
        assert str(Money(6000)) == "NT$60.00"
        assert str(Money(123450)) == "NT$1,234.50"

    def test_comparison_operators(self):
        assert Money(5) < Money(10)
        assert Money(10) > Money(5)
        assert Money(10) >= Money(10)
        assert Money(10) <= Money(10)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_str(self):
        assert str(Quantity(7)) == "7"


class TestQuantityCoerce:

    @pytest.mark.parametrize("raw", [0, -3, "-1", "0"])
    def test_below_one_clamps_to_one(self, raw):
        assert Quantity.coerce(raw) == Quantity(1)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_defaults_to_one(self, raw):
        assert Quantity.coerce(raw) == Quantity(1)

    def test_numeric_string(self):
        assert Quantity.coerce(" 3 ") == Quantity(3)

    def test_fraction_truncated(self):
        assert Quantity.coerce(2.7) == Quantity(2)

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity.coerce("lots")

    def test_huge_quantity_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            Quantity.coerce("1e30")
