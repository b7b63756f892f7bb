from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from money_operation.config import get_settings
from money_operation.domain.monetary.currency import Currency
from money_operation.domain.monetary.currency_registry import ISO_CURRENCIES, CurrencyRegistry
from money_operation.domain.monetary.money import Money
from money_operation.domain.monetary.rounding import RoundingMode
from money_operation.formatting import intl
from money_operation.operation import aggregate
from money_operation.operation import percentage as percentages
from money_operation.operation import split as splitting
from money_operation.utils.numeric_tools import DecimalLike, IntLike


def _rounding_mode_or_default(rounding_mode: RoundingMode | None) -> RoundingMode:
    return get_settings().default_rounding_mode if rounding_mode is None else rounding_mode


class Operation:
    """Immutable context holding one Money value that percentage, split and format operations act on.

    Every method returns new values; the held Money is never replaced.

    Examples:
        >>> Operation.of_values(1000, "EUR").split(3)  # [334 EUR, 333 EUR, 333 EUR]
        >>> Operation.of_values(100, "EUR").percentage_increase("20")  # 120 EUR
        >>> Operation.join([Money(25, EUR), Money(75, EUR)])  # 100 EUR
    """

    __slots__ = ("_money",)

    def __init__(self, money: Money):
        # Raise: the context wraps exactly one Money
        if not isinstance(money, Money):
            raise TypeError(f"Cannot call `Operation.__init__` because $money is not Money (got type '{type(money).__name__}')")
        self._money = money

    @classmethod
    def of(cls, money: Money) -> Operation:
        return cls(money)

    @classmethod
    def of_values(cls, amount: IntLike, currency: Currency | str) -> Operation:
        """Create the context from raw data: amount in minor units and a Currency or currency code."""
        resolved = currency if isinstance(currency, Currency) else ISO_CURRENCIES.get(currency)
        return cls(Money(amount, resolved))

    @property
    def money(self) -> Money:
        """Get the wrapped Money."""
        return self._money

    # region Percentage

    def percentage_increase(self, percentage: DecimalLike, rounding_mode: RoundingMode | None = None) -> Money:
        return percentages.percentage_increase(self._money, percentage, _rounding_mode_or_default(rounding_mode))

    def percentage_decrease(self, percentage: DecimalLike, rounding_mode: RoundingMode | None = None) -> Money:
        """Supports negative $percentage values: "-20" decreases by 20% too."""
        return percentages.percentage_decrease(self._money, percentage, _rounding_mode_or_default(rounding_mode))

    def percentage_difference(self, money: Money) -> float:
        """Approximate relative difference of $money to the wrapped value, in percent (float)."""
        return percentages.percentage_difference(self._money, money)

    # endregion

    # region Split and aggregation

    def split(self, times: int, rounding_mode: RoundingMode | None = None, tries: int | None = None) -> list[Money]:
        """Split into $times parts adding up exactly to the wrapped value.

        Args:
            times: Number of parts, >= 1.
            rounding_mode: Rounding of the initial per-part division; defaults to the configured mode (HALF_UP).
            tries: Reconciliation budget; defaults to the configured `split_tries` (10).
        """
        budget = get_settings().split_tries if tries is None else tries
        return splitting.split(self._money, times, _rounding_mode_or_default(rounding_mode), budget)

    def assert_split(self, parts: Iterable[Money]) -> bool:
        """Check that $parts add up exactly to the wrapped value."""
        return aggregate.assert_split(self._money, parts)

    @staticmethod
    def join(parts: Iterable[Money]) -> Money:
        return aggregate.join(parts)

    @staticmethod
    def average(parts: Iterable[Money]) -> Money:
        return aggregate.average(parts)

    # endregion

    # region Formatting

    def format(self, locale: str | None = None, currencies: CurrencyRegistry | None = None) -> str:
        """Render the wrapped value for humans in $locale (defaults to the configured locale)."""
        return intl.format_money(self._money, locale, currencies)

    @staticmethod
    def parse(value: str, locale: str | None = None, currencies: CurrencyRegistry | None = None) -> Money:
        """Parse human-readable monetary text written in $locale."""
        return intl.parse_money(value, locale, currencies)

    def to_decimal(self) -> Decimal:
        """Wrapped amount in major units, e.g. 1234 USD -> Decimal("12.34")."""
        return self._money.to_decimal()

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Operation):
            return False
        return self._money == other.money

    def __hash__(self) -> int:
        return hash(self._money)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._money!r})"
