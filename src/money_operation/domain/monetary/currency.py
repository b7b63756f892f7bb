from __future__ import annotations

from enum import Enum


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class Currency:
    """Represents a currency with code, minor-unit precision, and metadata.

    Attributes:
        code (str): Currency code (e.g., "EUR", "JPY").
        precision (int): Number of decimal places of the minor unit (0-18), e.g. 2 for cents.
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
        numeric_code (int | None): ISO 4217 numeric code, if the currency has one.
    """

    __slots__ = ("_code", "_precision", "_name", "_currency_type", "_numeric_code")

    def __init__(
        self,
        code: str,
        precision: int,
        name: str,
        currency_type: CurrencyType = CurrencyType.FIAT,
        numeric_code: int | None = None,
    ):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "EUR", "JPY").
            precision (int): Number of decimal places of the minor unit (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.
            numeric_code (int | None): ISO 4217 numeric code.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        if numeric_code is not None and (not isinstance(numeric_code, int) or not 0 < numeric_code < 1000):
            raise ValueError(f"$numeric_code must be an integer between 1 and 999, but provided value is: {numeric_code}")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type
        self._numeric_code = numeric_code

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the number of decimal places of the minor unit."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def numeric_code(self) -> int | None:
        """Get the ISO 4217 numeric code."""
        return self._numeric_code

    @property
    def minor_unit_factor(self) -> int:
        """Number of minor units in one major unit (e.g. 100 for cents)."""
        return 10**self._precision

    def __eq__(self, other) -> bool:
        # Identity is the alphabetic code; registries may carry their own instances
        return isinstance(other, Currency) and self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', {self.currency_type})"
