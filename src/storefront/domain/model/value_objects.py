"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

# Largest value a signed 64-bit database INTEGER column can hold.
MAX_STORED_INTEGER = 2**63 - 1


@dataclass(frozen=True)
class Money:
    """Monetary amount held in integer minor units (cents).

    Prices and totals never go through floats, so a sum of line items
    always equals the stored subtotal exactly.
    """

    cents: int
    currency: str = "TWD"

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money amount must be an integer number of cents, "
                f"got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents}"
            )
        if self.cents > MAX_STORED_INTEGER:
            raise ValidationError("Money amount is too large")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.cents + other.cents, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents < other.cents

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents <= other.cents

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents > other.cents

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents >= other.cents

    # --- Display --------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """Major-unit amount, e.g. ``Decimal("2.50")`` for 250 cents."""
        return (Decimal(self.cents) / 100).quantize(Decimal("0.01"))

    def __str__(self) -> str:
        return f"NT${self.amount:,.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build Money from a major-unit amount ("2.50" -> 250 cents)."""
        try:
            value = Decimal(str(amount).strip())
            if not value.is_finite():
                raise ValidationError(f"Invalid money amount: {amount!r}")
            cents = (value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(int(cents))

    @staticmethod
    def zero() -> Money:
        return Money(0)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a line never holds zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")
        if self.value > MAX_STORED_INTEGER:
            raise ValidationError("Quantity is too large")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def coerce(raw: object) -> Quantity:
        """Read a cart quantity leniently.

        Missing or blank values count as 1, fractional values are
        truncated, and anything below 1 is clamped up to 1.
        """
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return Quantity(1)
        try:
            number = int(Decimal(str(raw).strip()))
        except (InvalidOperation, ValueError, OverflowError) as exc:
            raise ValidationError(f"Invalid quantity: {raw!r}") from exc
        return Quantity(max(1, number))
