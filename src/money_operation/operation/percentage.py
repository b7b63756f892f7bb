from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from money_operation.domain.monetary.money import Money
from money_operation.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode
from money_operation.errors import CurrencyMismatchError, DivisionUndefinedError, InvalidArgumentError
from money_operation.utils.numeric_tools import DecimalLike, as_decimal


def _as_percentage(percentage: DecimalLike) -> Decimal:
    try:
        return as_decimal(percentage)
    except ValueError as e:
        raise InvalidArgumentError(f"Cannot apply percentage because $percentage ('{percentage}') is not a number") from e


def _percentage_part(subject: Money, percentage: Decimal, rounding_mode: RoundingMode) -> Money:
    """Return `subject * percentage / 100`, multiplying first and dividing second, each rounded."""
    return subject.multiply(percentage, rounding_mode).divide(100, rounding_mode)


def percentage_increase(subject: Money, percentage: DecimalLike, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Money:
    """Return $subject increased by $percentage percent.

    Args:
        subject: Base value.
        percentage: Exact decimal like "20" or "1.99".
        rounding_mode: Applied to the multiplication and then to the division by 100.

    Raises:
        InvalidArgumentError: If $percentage is not a number.
    """
    return subject.add(_percentage_part(subject, _as_percentage(percentage), rounding_mode))


def percentage_decrease(subject: Money, percentage: DecimalLike, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Money:
    """Return $subject decreased by $percentage percent.

    The sign of $percentage is ignored, so both "20" and "-20" decrease by 20%.

    Raises:
        InvalidArgumentError: If $percentage is not a number.
    """
    if isinstance(percentage, str):
        factor = _as_percentage(percentage.strip().lstrip("-"))
    else:
        factor = abs(_as_percentage(percentage))

    return subject.subtract(_percentage_part(subject, factor, rounding_mode))


def percentage_difference(subject: Money, other: Money) -> float:
    """Return how many percent $other differs from $subject, as a float.

    The value is computed in floating point on the two amounts and is therefore approximate.
    Use it for reporting, never for booking.

    Raises:
        CurrencyMismatchError: If the currencies differ.
        DivisionUndefinedError: If $subject is zero.
    """
    # Raise: amounts of different currencies are not comparable
    if not subject.is_same_currency(other):
        raise CurrencyMismatchError(subject.currency, other.currency)

    # Raise: relative change from zero is undefined
    if subject.is_zero():
        raise DivisionUndefinedError(f"Cannot call `percentage_difference` because $subject ({subject}) is zero")

    a = float(subject.amount)
    b = float(other.amount)

    return (b - a) / a * 100.0


def format_percentage(value: float, decimals: int = 2) -> str:
    """Render a float percentage with $decimals fraction digits, halves away from zero.

    Examples:
        >>> format_percentage(18.81188118811881)  # "18.81"
        >>> format_percentage(20.0)  # "20.00"
    """
    return str(Decimal(repr(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))
