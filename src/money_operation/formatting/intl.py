"""Locale-aware rendering and parsing of Money, backed by Babel (CLDR data).

Babel is imported lazily: when it is missing, or the requested locale has no CLDR data,
`FormattingUnavailableError` is raised, which is distinct from `ParseError` for malformed text.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from types import ModuleType

from money_operation.config import get_settings
from money_operation.domain.monetary.currency import Currency
from money_operation.domain.monetary.currency_registry import ISO_CURRENCIES, CurrencyRegistry
from money_operation.domain.monetary.money import Money
from money_operation.errors import FormattingUnavailableError, ParseError
from money_operation.utils.numeric_tools import as_decimal

logger = logging.getLogger(__name__)

# Minus signs used by CLDR locales besides ASCII hyphen-minus
_MINUS_SIGNS = ("−", "–", "‒")

# Bidi marks and embedding controls CLDR puts around numbers and symbols in RTL locales
_BIDI_CONTROLS = dict.fromkeys(map(ord, "\u200e\u200f\u061c\u202a\u202b\u202c\u202d\u202e\u2066\u2067\u2068\u2069"))


def _load_babel() -> ModuleType:
    """Import `babel.numbers`.

    Raises:
        FormattingUnavailableError: If Babel is not installed.
    """
    try:
        import babel.numbers
    except ImportError as e:
        raise FormattingUnavailableError("Babel is not available; install the `Babel` distribution for locale-aware formatting") from e
    return babel.numbers


def _resolve_locale(locale: str | None):
    """Return `(babel.numbers, babel.Locale)` for the $locale identifier.

    Raises:
        FormattingUnavailableError: If Babel is missing or has no data for $locale.
    """
    numbers = _load_babel()

    from babel import Locale, UnknownLocaleError

    identifier = locale if locale is not None else get_settings().default_locale
    try:
        return numbers, Locale.parse(identifier)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise FormattingUnavailableError(f"Locale data for $locale '{identifier}' is not available") from e


def _subunit_decimal(amount: int, subunit: int) -> Decimal:
    return Decimal(f"{amount}e-{subunit}")


def format_money(money: Money, locale: str | None = None, currencies: CurrencyRegistry | None = None) -> str:
    """Render $money for humans in $locale, e.g. `Money(288, EUR)` in "es_ES" -> "2,88 €".

    Args:
        money: Value to render.
        locale: Locale identifier like "en_US"; defaults to the configured locale.
        currencies: Registry defining the minor-unit precision; defaults to `ISO_CURRENCIES`.

    Raises:
        FormattingUnavailableError: If Babel or the locale data is unavailable.
        UnknownCurrencyError: If the currency of $money is not part of $currencies.
    """
    numbers, locale_obj = _resolve_locale(locale)
    registry = currencies if currencies is not None else ISO_CURRENCIES

    subunit = registry.subunit_for(money.currency)
    value = _subunit_decimal(money.amount, subunit)

    # No quantization: every minor unit stays visible even if CLDR knows fewer digits
    return numbers.format_currency(value, money.currency.code, locale=locale_obj, decimal_quantization=False)


def _find_currency(numbers: ModuleType, text: str, locale_obj, registry: CurrencyRegistry) -> tuple[Currency, str]:
    """Find the currency referenced in $text by symbol or ISO code.

    The longest matching token wins; a tie between currencies is resolved in favour of the
    currency of the locale's territory.

    Raises:
        ParseError: If no currency or more than one currency matches.
    """
    best_token_by_currency: dict[Currency, str] = {}
    for currency in registry:
        for token in (numbers.get_currency_symbol(currency.code, locale=locale_obj), currency.code):
            if token and token in text and len(token) > len(best_token_by_currency.get(currency, "")):
                best_token_by_currency[currency] = token

    # Raise: text must name its currency
    if not best_token_by_currency:
        raise ParseError(text, f"no known currency symbol was found for locale '{locale_obj}'")

    longest = max(len(token) for token in best_token_by_currency.values())
    candidates = [currency for currency, token in best_token_by_currency.items() if len(token) == longest]

    if len(candidates) > 1 and locale_obj.territory:
        territory_codes = numbers.get_territory_currencies(locale_obj.territory)
        preferred = [currency for currency in candidates if currency.code in territory_codes]
        if preferred:
            candidates = preferred[:1]

    # Raise: ambiguous symbol cannot be mapped to one currency
    if len(candidates) > 1:
        raise ParseError(text, f"currency symbol '{best_token_by_currency[candidates[0]]}' is ambiguous between {[c.code for c in candidates]}")

    currency = candidates[0]
    return currency, best_token_by_currency[currency]


def parse_money(text: str, locale: str | None = None, currencies: CurrencyRegistry | None = None) -> Money:
    """Parse human-readable monetary $text written in $locale, e.g. "$1.00" in "en_US" -> `Money(100, USD)`.

    Args:
        text: Text with a currency symbol or ISO code and a number.
        locale: Locale identifier like "es_ES"; defaults to the configured locale.
        currencies: Registry of candidate currencies; defaults to `ISO_CURRENCIES`.

    Raises:
        FormattingUnavailableError: If Babel or the locale data is unavailable.
        ParseError: If $text is malformed, names no or an ambiguous currency, or carries more
            fraction digits than the currency allows.
    """
    numbers, locale_obj = _resolve_locale(locale)
    registry = currencies if currencies is not None else ISO_CURRENCIES

    cleaned = text.translate(_BIDI_CONTROLS).strip()
    # Raise: nothing to parse
    if not cleaned:
        raise ParseError(text, "it is empty")

    currency, token = _find_currency(numbers, cleaned, locale_obj, registry)
    logger.debug(f"Resolved currency {currency.code} from token '{token}' in '{text}' ({locale_obj})")

    number_text = cleaned.replace(token, "", 1).strip()

    negative = False
    # Accounting notation: "($1.00)"
    if number_text.startswith("(") and number_text.endswith(")"):
        negative = True
        number_text = number_text[1:-1].strip()

    for minus_sign in (numbers.get_minus_sign_symbol(locale_obj), *_MINUS_SIGNS):
        number_text = number_text.replace(minus_sign, "-")
    if number_text.startswith("-"):
        negative = not negative
        number_text = number_text[1:].strip()

    try:
        value = numbers.parse_decimal(number_text, locale=locale_obj)
    except numbers.NumberFormatError as e:
        raise ParseError(text, f"'{number_text}' is not a number in locale '{locale_obj}'") from e

    # Raise: NaN and infinities are not amounts
    if not value.is_finite():
        raise ParseError(text, f"'{number_text}' is not a finite number")

    if negative:
        value = -value

    return _exact_money(text, value, currency)


def _exact_money(text: str, value: Decimal, currency: Currency) -> Money:
    """Build Money from parsed major units, refusing values finer than the currency's minor unit.

    Raises:
        ParseError: If $value has more fraction digits than $currency allows.
    """
    try:
        return Money.from_decimal(value, currency)
    except ValueError as e:
        raise ParseError(text, f"it has more fraction digits than {currency.code} allows") from e


def to_decimal_string(money: Money, currencies: CurrencyRegistry | None = None) -> str:
    """Render $money as a plain locale-independent decimal, e.g. `Money(288, EUR)` -> "2.88"."""
    registry = currencies if currencies is not None else ISO_CURRENCIES
    return str(_subunit_decimal(money.amount, registry.subunit_for(money.currency)))


def from_decimal_string(text: str, currency: Currency | str, currencies: CurrencyRegistry | None = None) -> Money:
    """Parse a plain decimal like "2.88" into Money of $currency.

    Raises:
        ParseError: If $text is not a decimal or is finer than the currency allows.
        UnknownCurrencyError: If $currency is not part of $currencies.
    """
    registry = currencies if currencies is not None else ISO_CURRENCIES
    resolved = registry.get(currency.code if isinstance(currency, Currency) else currency)

    try:
        value = as_decimal(text)
    except ValueError as e:
        raise ParseError(text, "it is not a decimal number") from e

    return _exact_money(text, value, resolved)
