from __future__ import annotations

from collections.abc import Iterable

from money_operation.domain.monetary.money import Money
from money_operation.errors import EmptyInputError


def join(parts: Iterable[Money]) -> Money:
    """Sum $parts with one left-to-right fold seeded with the first part.

    Args:
        parts: Non-empty ordered values of one currency.

    Returns:
        Money: Exact sum.

    Raises:
        EmptyInputError: If $parts is empty.
        CurrencyMismatchError: If $parts mix currencies.
    """
    parts = list(parts)

    # Raise: a sum of nothing has no currency
    if not parts:
        raise EmptyInputError("Cannot call `join` because $parts is empty")

    money = parts[0]
    for part in parts[1:]:
        money = money.add(part)

    return money


def average(parts: Iterable[Money]) -> Money:
    """Arithmetic mean of $parts: `join(parts)` divided by the count with the default rounding mode.

    Raises:
        EmptyInputError: If $parts is empty.
    """
    parts = list(parts)
    return join(parts).divide(len(parts))


def assert_split(subject: Money, parts: Iterable[Money]) -> bool:
    """Check that $parts add up to $subject exactly (same amount and currency).

    Raises:
        EmptyInputError: If $parts is empty.
    """
    return join(parts).equals(subject)
