"""Error taxonomy of the money operation library.

Every failure is a subclass of `MoneyOperationError` and carries an `ErrorKind` tag, so callers
can branch on the cause either by catching a concrete class or by inspecting `error.kind`.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Enumeration of error causes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    EMPTY_INPUT = "EMPTY_INPUT"
    RECONCILIATION_FAILED = "RECONCILIATION_FAILED"
    FORMATTING_UNAVAILABLE = "FORMATTING_UNAVAILABLE"
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"
    DIVISION_UNDEFINED = "DIVISION_UNDEFINED"
    UNKNOWN_CURRENCY = "UNKNOWN_CURRENCY"
    PARSE_ERROR = "PARSE_ERROR"


class MoneyOperationError(Exception):
    """Base class for all errors raised by this library."""

    kind: ErrorKind


class InvalidArgumentError(MoneyOperationError, ValueError):
    """Raised when an argument is outside its allowed domain (e.g. `split` with $times < 1)."""

    kind = ErrorKind.INVALID_ARGUMENT


class EmptyInputError(MoneyOperationError, ValueError):
    """Raised when `join` or `average` receives no parts."""

    kind = ErrorKind.EMPTY_INPUT


class ReconciliationFailedError(MoneyOperationError):
    """Raised when `split` exhausts its retry budget before the parts sum up to the original.

    Attributes:
        amount (int): Amount of the value being split, in minor units.
        times (int): Requested number of parts.
    """

    kind = ErrorKind.RECONCILIATION_FAILED

    def __init__(self, amount: int, times: int):
        self.amount = amount
        self.times = times
        super().__init__(f"Could not split {amount} value to {times} parts")


class FormattingUnavailableError(MoneyOperationError):
    """Raised when locale-aware formatting or parsing has no runtime support (library or locale data)."""

    kind = ErrorKind.FORMATTING_UNAVAILABLE


class CurrencyMismatchError(MoneyOperationError, ValueError):
    """Raised when two monetary values with different currencies are combined."""

    kind = ErrorKind.CURRENCY_MISMATCH

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"Cannot operate on different currencies: {left} and {right}")


class DivisionUndefinedError(MoneyOperationError, ZeroDivisionError):
    """Raised when a division has a zero divisor."""

    kind = ErrorKind.DIVISION_UNDEFINED


class UnknownCurrencyError(MoneyOperationError, ValueError):
    """Raised when a currency code is not part of the consulted registry."""

    kind = ErrorKind.UNKNOWN_CURRENCY

    def __init__(self, code: str, message: str | None = None):
        self.code = code
        super().__init__(message or f"Currency with code '{code}' is not known")


class ParseError(MoneyOperationError, ValueError):
    """Raised when monetary text cannot be parsed (malformed, ambiguous or not representable)."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, text: str, reason: str):
        self.text = text
        super().__init__(f"Cannot parse '{text}' because {reason}")
