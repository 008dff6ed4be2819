"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from hr.domain.exceptions import ValidationError

Amount = Union[Decimal, int, float, str]


def to_amount(value: Amount) -> Decimal:
    """Coerce a numeric salary value to a finite Decimal.

    Goes through ``str()`` so floats keep their printed value instead of
    their binary expansion (``0.1`` becomes ``Decimal("0.1")``).  NaN and
    infinities are rejected.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid salary amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid salary amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid salary amount: {value!r} is not finite")
    return amount


@dataclass(frozen=True)
class SalaryBand:
    """Inclusive salary range ``[minimum, maximum]``.

    Negative amounts are allowed as bounds and as candidates; they are
    just ordinary numbers to the range check.
    """

    minimum: Decimal
    maximum: Decimal

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "minimum", to_amount(self.minimum))
        object.__setattr__(self, "maximum", to_amount(self.maximum))
        if self.minimum > self.maximum:
            raise ValidationError(
                f"Salary band minimum {self.minimum} exceeds maximum {self.maximum}"
            )

    def contains(self, salary: Amount) -> bool:
        """Inclusive range check; anything that is not a finite amount is outside."""
        try:
            amount = to_amount(salary)
        except ValidationError:
            return False
        return self.minimum <= amount <= self.maximum

    def __str__(self) -> str:
        return f"[{self.minimum}, {self.maximum}]"
