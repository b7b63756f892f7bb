from __future__ import annotations

from collections.abc import Iterable, Iterator

from bidict import ValueDuplicationError, bidict

from money_operation.domain.monetary.currency import Currency, CurrencyType
from money_operation.errors import UnknownCurrencyError


class CurrencyRegistry:
    """Immutable collection of currencies consulted by formatting and parsing.

    Alphabetic and ISO numeric codes are kept in a `bidict`, so either one resolves the other.

    Examples:
        >>> registry = CurrencyRegistry([EUR, USD])
        >>> registry.subunit_for("EUR")  # 2
        >>> registry.by_numeric_code(840)  # USD
    """

    __slots__ = ("_currencies_by_code", "_numeric_codes_bidict")

    def __init__(self, currencies: Iterable[Currency]):
        self._currencies_by_code: dict[str, Currency] = {}
        self._numeric_codes_bidict: bidict[str, int] = bidict()

        for currency in currencies:
            # Raise: registry holds Currency objects only
            if not isinstance(currency, Currency):
                raise TypeError(f"Cannot call `CurrencyRegistry.__init__` because item ({currency}) is not Currency")

            # Raise: one entry per alphabetic code
            if currency.code in self._currencies_by_code:
                raise ValueError(f"Cannot call `CurrencyRegistry.__init__` because $code '{currency.code}' is listed twice")

            self._currencies_by_code[currency.code] = currency
            if currency.numeric_code is not None:
                try:
                    self._numeric_codes_bidict.put(currency.code, currency.numeric_code)
                except ValueDuplicationError as e:
                    owner = self._numeric_codes_bidict.inverse[currency.numeric_code]
                    raise ValueError(f"Cannot call `CurrencyRegistry.__init__` because $numeric_code {currency.numeric_code} of '{currency.code}' is already used by '{owner}'") from e

    def contains(self, currency: Currency | str) -> bool:
        """Check whether $currency (object or code) is part of this registry."""
        code = currency.code if isinstance(currency, Currency) else str(currency).upper().strip()
        return code in self._currencies_by_code

    def get(self, code: str) -> Currency:
        """Get currency by its alphabetic code.

        Raises:
            UnknownCurrencyError: If $code is not part of this registry.
        """
        key = code.upper().strip()
        if key not in self._currencies_by_code:
            raise UnknownCurrencyError(key, f"Cannot call `get` because currency with $code '{key}' is not part of the registry")
        return self._currencies_by_code[key]

    def subunit_for(self, currency: Currency | str) -> int:
        """Return the minor-unit precision this registry defines for $currency."""
        code = currency.code if isinstance(currency, Currency) else currency
        return self.get(code).precision

    def numeric_code_for(self, currency: Currency | str) -> int:
        """Return the ISO numeric code for $currency.

        Raises:
            UnknownCurrencyError: If the currency is unknown or has no numeric code.
        """
        code = self.get(currency.code if isinstance(currency, Currency) else currency).code
        if code not in self._numeric_codes_bidict:
            raise UnknownCurrencyError(code, f"Cannot call `numeric_code_for` because currency '{code}' has no numeric code")
        return self._numeric_codes_bidict[code]

    def by_numeric_code(self, numeric_code: int) -> Currency:
        """Get currency by its ISO numeric code.

        Raises:
            UnknownCurrencyError: If no currency of this registry has $numeric_code.
        """
        if numeric_code not in self._numeric_codes_bidict.inverse:
            raise UnknownCurrencyError(str(numeric_code), f"Cannot call `by_numeric_code` because $numeric_code {numeric_code} is not part of the registry")
        return self._currencies_by_code[self._numeric_codes_bidict.inverse[numeric_code]]

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies_by_code.values())

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} currencies)"


# Fiat currencies (ISO 4217)
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT, 840)
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT, 978)
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT, 826)
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT, 392)
CHF = Currency("CHF", 2, "Swiss Franc", CurrencyType.FIAT, 756)
CAD = Currency("CAD", 2, "Canadian Dollar", CurrencyType.FIAT, 124)
AUD = Currency("AUD", 2, "Australian Dollar", CurrencyType.FIAT, 36)
NZD = Currency("NZD", 2, "New Zealand Dollar", CurrencyType.FIAT, 554)
SEK = Currency("SEK", 2, "Swedish Krona", CurrencyType.FIAT, 752)
NOK = Currency("NOK", 2, "Norwegian Krone", CurrencyType.FIAT, 578)
DKK = Currency("DKK", 2, "Danish Krone", CurrencyType.FIAT, 208)
PLN = Currency("PLN", 2, "Polish Zloty", CurrencyType.FIAT, 985)
CZK = Currency("CZK", 2, "Czech Koruna", CurrencyType.FIAT, 203)
HUF = Currency("HUF", 2, "Hungarian Forint", CurrencyType.FIAT, 348)
RON = Currency("RON", 2, "Romanian Leu", CurrencyType.FIAT, 946)
TRY = Currency("TRY", 2, "Turkish Lira", CurrencyType.FIAT, 949)
RUB = Currency("RUB", 2, "Russian Ruble", CurrencyType.FIAT, 643)
UAH = Currency("UAH", 2, "Ukrainian Hryvnia", CurrencyType.FIAT, 980)
CNY = Currency("CNY", 2, "Chinese Yuan", CurrencyType.FIAT, 156)
HKD = Currency("HKD", 2, "Hong Kong Dollar", CurrencyType.FIAT, 344)
SGD = Currency("SGD", 2, "Singapore Dollar", CurrencyType.FIAT, 702)
KRW = Currency("KRW", 0, "South Korean Won", CurrencyType.FIAT, 410)
INR = Currency("INR", 2, "Indian Rupee", CurrencyType.FIAT, 356)
BRL = Currency("BRL", 2, "Brazilian Real", CurrencyType.FIAT, 986)
MXN = Currency("MXN", 2, "Mexican Peso", CurrencyType.FIAT, 484)
ZAR = Currency("ZAR", 2, "South African Rand", CurrencyType.FIAT, 710)
ILS = Currency("ILS", 2, "Israeli New Shekel", CurrencyType.FIAT, 376)
BHD = Currency("BHD", 3, "Bahraini Dinar", CurrencyType.FIAT, 48)
KWD = Currency("KWD", 3, "Kuwaiti Dinar", CurrencyType.FIAT, 414)
CLP = Currency("CLP", 0, "Chilean Peso", CurrencyType.FIAT, 152)

# Commodities (ISO 4217 defines no minor unit)
XAU = Currency("XAU", 0, "Gold", CurrencyType.COMMODITY, 959)
XAG = Currency("XAG", 0, "Silver", CurrencyType.COMMODITY, 961)

ISO_CURRENCIES = CurrencyRegistry(
    [USD, EUR, GBP, JPY, CHF, CAD, AUD, NZD, SEK, NOK, DKK, PLN, CZK, HUF, RON, TRY, RUB, UAH, CNY, HKD, SGD, KRW, INR, BRL, MXN, ZAR, ILS, BHD, KWD, CLP, XAU, XAG]
)
