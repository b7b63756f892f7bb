"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies: Currency
definitions with their minor-unit precision, the registry of ISO currencies, rounding modes
and the Money value with exact integer arithmetic in minor units.
"""
from money_operation.domain.monetary.currency import Currency, CurrencyType
from money_operation.domain.monetary.currency_registry import ISO_CURRENCIES, CurrencyRegistry
from money_operation.domain.monetary.money import Money
from money_operation.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode

__all__ = ["Currency", "CurrencyType", "CurrencyRegistry", "ISO_CURRENCIES", "Money", "RoundingMode", "DEFAULT_ROUNDING_MODE"]
