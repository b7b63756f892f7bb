from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

# Use where optimal type is `int`, but other types are also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        ValueError: If $value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot call `as_decimal` because $value ({value}) is bool")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Cannot call `as_decimal` because $value ('{value}') is not a number") from e

    # Raise: NaN and infinities have no monetary meaning
    if not result.is_finite():
        raise ValueError(f"Cannot call `as_decimal` because $value ({value}) is not finite")

    return result


def as_minor_units(value: IntLike) -> int:
    """Converts an integral scalar into an exact `int` amount of minor units.

    Strings like "288" or "-5" are accepted; anything with a non-zero fraction is rejected
    because minor units are indivisible.

    Args:
        value: Input value as `IntLike`.

    Returns:
        Value converted to `int`.

    Raises:
        ValueError: If $value is not integral.
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot call `as_minor_units` because $value ({value}) is bool")

    if isinstance(value, int):
        return value

    decimal_value = as_decimal(value)
    if decimal_value != decimal_value.to_integral_value():
        raise ValueError(f"Cannot call `as_minor_units` because $value ({value}) is not integral")

    return int(decimal_value)


def decimal_ratio(value: DecimalLike) -> tuple[int, int]:
    """Returns $value as an exact `(numerator, denominator)` pair with positive denominator."""
    return as_decimal(value).as_integer_ratio()
