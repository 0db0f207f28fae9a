"""Value Objects shared across the domain.

Immutable, compared by value, and validated on construction so an
invalid price or quantity can never circulate.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bookstore.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Backed by Decimal so that ``45.99 * 2`` is exactly ``91.98``.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic -----------------------------------------------------------

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive number of copies requested in a purchase."""

    value: int

    def __post_init__(self) -> None:
        self.require_int(self.value)
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    @staticmethod
    def require_int(value: object) -> None:
        """Reject anything that is not a plain int (bools included)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(value).__name__}"
            )
