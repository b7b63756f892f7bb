from __future__ import annotations

from enum import Enum


class RoundingMode(Enum):
    """Policy used to round a non-integral result to a whole number of minor units."""

    HALF_UP = "HALF_UP"  # Ties away from zero
    HALF_DOWN = "HALF_DOWN"  # Ties towards zero
    HALF_EVEN = "HALF_EVEN"  # Ties to the even neighbour (banker's rounding)
    HALF_ODD = "HALF_ODD"  # Ties to the odd neighbour
    HALF_POSITIVE_INFINITY = "HALF_POSITIVE_INFINITY"  # Ties towards +inf
    HALF_NEGATIVE_INFINITY = "HALF_NEGATIVE_INFINITY"  # Ties towards -inf
    UP = "UP"  # Away from zero
    DOWN = "DOWN"  # Towards zero
    CEILING = "CEILING"  # Towards +inf
    FLOOR = "FLOOR"  # Towards -inf

    @classmethod
    def from_str(cls, name: str) -> RoundingMode:
        """Get rounding mode by its name (case-insensitive).

        Raises:
            ValueError: If $name is not a known rounding mode.
        """
        key = name.strip().upper()
        if key not in cls.__members__:
            raise ValueError(f"Rounding mode '{name}' is not known. Available modes: {list(cls.__members__.keys())}")
        return cls[key]


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP


def round_fraction(numerator: int, denominator: int, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> int:
    """Round `numerator / denominator` to an integer using $rounding_mode.

    Works on exact integers only, so there is no intermediate precision loss for any size of
    operands.

    Args:
        numerator: Dividend.
        denominator: Divisor; must not be zero.
        rounding_mode: How to round a non-integral quotient.

    Returns:
        int: Rounded quotient.

    Raises:
        ZeroDivisionError: If $denominator is zero.
    """
    if denominator == 0:
        raise ZeroDivisionError("Cannot call `round_fraction` because $denominator is 0")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    # Exact quotient lies in [floor, floor + 1)
    floor, remainder = divmod(numerator, denominator)
    if remainder == 0:
        return floor

    ceiling = floor + 1
    is_negative = floor < 0

    if rounding_mode is RoundingMode.FLOOR:
        return floor
    if rounding_mode is RoundingMode.CEILING:
        return ceiling
    if rounding_mode is RoundingMode.DOWN:
        return ceiling if is_negative else floor
    if rounding_mode is RoundingMode.UP:
        return floor if is_negative else ceiling

    twice_remainder = 2 * remainder
    if twice_remainder < denominator:
        return floor
    if twice_remainder > denominator:
        return ceiling

    # Exactly half way between floor and ceiling
    if rounding_mode is RoundingMode.HALF_UP:
        return floor if is_negative else ceiling
    if rounding_mode is RoundingMode.HALF_DOWN:
        return ceiling if is_negative else floor
    if rounding_mode is RoundingMode.HALF_EVEN:
        return floor if floor % 2 == 0 else ceiling
    if rounding_mode is RoundingMode.HALF_ODD:
        return floor if floor % 2 != 0 else ceiling
    if rounding_mode is RoundingMode.HALF_POSITIVE_INFINITY:
        return ceiling
    if rounding_mode is RoundingMode.HALF_NEGATIVE_INFINITY:
        return floor

    raise TypeError(f"$rounding_mode must be a RoundingMode instance, but provided value is: {rounding_mode}")
