from __future__ import annotations

from decimal import Decimal

from money_operation.domain.monetary.currency import Currency
from money_operation.domain.monetary.currency_registry import ISO_CURRENCIES, CurrencyRegistry
from money_operation.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, round_fraction
from money_operation.errors import CurrencyMismatchError, DivisionUndefinedError, InvalidArgumentError
from money_operation.utils.numeric_tools import DecimalLike, IntLike, as_minor_units, decimal_ratio


class Money:
    """Represents a monetary amount with currency.

    The amount is an exact `int` of minor units (e.g. cents), so 2.88 EUR is `Money(288, EUR)`.
    Instances are immutable; every operation returns a new `Money`.

    Multiplication and division round the exact result to whole minor units with a
    `RoundingMode`; addition and subtraction are always exact.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: IntLike, currency: Currency):
        """Initialize Money with amount in minor units and currency.

        Args:
            amount: Integral number of minor units (`int` or numeric string like "288").
            currency (Currency): Currency object.

        Raises:
            ValueError: If amount is not integral.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $amount must be a whole number of minor units
        try:
            minor_units = as_minor_units(amount)
        except ValueError as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) is not a whole number of minor units") from e

        self._amount = minor_units
        self._currency = currency

    @classmethod
    def of(cls, amount: IntLike, code: str, currencies: CurrencyRegistry | None = None) -> Money:
        """Create Money from amount in minor units and a currency code.

        Args:
            amount: Integral number of minor units.
            code: Currency code (e.g. "EUR").
            currencies: Registry to resolve $code; defaults to `ISO_CURRENCIES`.

        Raises:
            UnknownCurrencyError: If $code is not part of the registry.
        """
        currency = (currencies if currencies is not None else ISO_CURRENCIES).get(code)
        return cls(amount, currency)

    @classmethod
    def from_decimal(cls, value: DecimalLike, currency: Currency, rounding_mode: RoundingMode | None = None) -> Money:
        """Create Money from a major-unit decimal value (e.g. "2.88" EUR -> 288 minor units).

        Args:
            value: Decimal-like value in major units.
            currency: Currency of the result.
            rounding_mode: Rounding for values finer than the currency precision. If None,
                such values are rejected.

        Raises:
            ValueError: If $value has more fraction digits than $currency allows and no
                $rounding_mode was given.
        """
        numerator, denominator = decimal_ratio(value)
        numerator *= currency.minor_unit_factor

        if rounding_mode is None:
            # Raise: value must be representable exactly in minor units
            if numerator % denominator != 0:
                raise ValueError(f"Cannot call `from_decimal` because $value ({value}) has more than {currency.precision} fraction digit(s) for {currency.code}")
            return cls(numerator // denominator, currency)

        return cls(round_fraction(numerator, denominator, rounding_mode), currency)

    @property
    def amount(self) -> int:
        """Get the amount in minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def to_decimal(self) -> Decimal:
        """Return the amount in major units, e.g. `Money(1234, USD)` -> `Decimal("12.34")`."""
        return Decimal(f"{self._amount}e-{self._currency.precision}")

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def is_same_currency(self, other: Money) -> bool:
        return self.currency == other.currency

    # region Primitives

    def add(self, other: Money) -> Money:
        """Return the exact sum of two values of the same currency."""
        self._check_same_currency(other)
        return self.__class__(self._amount + other.amount, self._currency)

    def subtract(self, other: Money) -> Money:
        """Return the exact difference of two values of the same currency."""
        self._check_same_currency(other)
        return self.__class__(self._amount - other.amount, self._currency)

    def multiply(self, factor: DecimalLike, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Money:
        """Multiply by an exact decimal factor and round to minor units.

        Args:
            factor: Decimal-like factor, e.g. "1.99". Floats go through `str`.
            rounding_mode: How to round the exact product.

        Raises:
            InvalidArgumentError: If $factor is not a finite number.
        """
        try:
            numerator, denominator = decimal_ratio(factor)
        except ValueError as e:
            raise InvalidArgumentError(f"Cannot call `multiply` because $factor ({factor}) is not a number") from e

        return self.__class__(round_fraction(self._amount * numerator, denominator, rounding_mode), self._currency)

    def divide(self, divisor: DecimalLike, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Money:
        """Divide by an exact decimal divisor and round to minor units.

        Args:
            divisor: Non-zero decimal-like divisor.
            rounding_mode: How to round the exact quotient.

        Raises:
            InvalidArgumentError: If $divisor is not a finite number.
            DivisionUndefinedError: If $divisor is zero.
        """
        try:
            numerator, denominator = decimal_ratio(divisor)
        except ValueError as e:
            raise InvalidArgumentError(f"Cannot call `divide` because $divisor ({divisor}) is not a number") from e

        # Raise: division by zero has no monetary result
        if numerator == 0:
            raise DivisionUndefinedError(f"Cannot call `divide` because $divisor ({divisor}) is zero")

        # amount / (n / d) == amount * d / n
        return self.__class__(round_fraction(self._amount * denominator, numerator, rounding_mode), self._currency)

    def negative(self) -> Money:
        return self.__class__(-self._amount, self._currency)

    def absolute(self) -> Money:
        return self.__class__(abs(self._amount), self._currency)

    def compare(self, other: Money) -> int:
        """Return -1, 0 or 1 when this value is less than, equal to or greater than $other."""
        self._check_same_currency(other)
        return (self._amount > other.amount) - (self._amount < other.amount)

    def equals(self, other: Money) -> bool:
        """Value equality over amount and currency."""
        return self._amount == other.amount and self._currency == other.currency

    def less_than(self, other: Money) -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) > 0

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self.equals(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number with the default rounding mode."""
        if isinstance(other, (Money, bool)):
            return NotImplemented  # Money * Money doesn't make sense
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number with the default rounding mode."""
        if isinstance(other, (Money, bool)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return self.negative()

    def __abs__(self):
        return self.absolute()

    # endregion

    # String representations
    def __str__(self) -> str:
        """Return string like '288 EUR' (amount in minor units)."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(288, EUR)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '288 EUR' (amount in minor units).

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        # Split by whitespace
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts

        try:
            amount = as_minor_units(amount_part)
        except ValueError as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        try:
            currency = ISO_CURRENCIES.get(currency_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e

        return cls(amount, currency)
