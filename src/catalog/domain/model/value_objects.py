"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from catalog.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ProductName:
    """A non-empty product name, stripped of surrounding whitespace."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"Product name must be text, got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise InvalidArgumentError("Product name is required")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: str | None) -> ProductName:
        if raw is None:
            raise InvalidArgumentError("Product name is required")
        return ProductName(raw)


@dataclass(frozen=True)
class Price:
    """A finite, non-negative price.

    Stored as a float because the index maps ``price`` as ``float``.
    """

    amount: float

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise InvalidArgumentError(
                f"Price must be a number, got {type(self.amount).__name__}"
            )
        if not math.isfinite(self.amount):
            raise InvalidArgumentError(f"Price must be finite, got {self.amount}")
        if self.amount < 0:
            raise InvalidArgumentError(
                f"Price cannot be negative, got {self.amount}"
            )
        object.__setattr__(self, "amount", float(self.amount))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: str | float | int | None) -> Price:
        """Coerce user input (CLI text, JSON numbers) to a Price."""
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            raise InvalidArgumentError("Product price is required")
        if isinstance(raw, str):
            try:
                return Price(float(raw))
            except ValueError as exc:
                raise InvalidArgumentError(f"Invalid price: {raw!r}") from exc
        return Price(raw)
