__version__ = "0.1.0"

from money_operation.domain.monetary import ISO_CURRENCIES, Currency, CurrencyRegistry, Money, RoundingMode
from money_operation.errors import (
    CurrencyMismatchError,
    DivisionUndefinedError,
    EmptyInputError,
    ErrorKind,
    FormattingUnavailableError,
    InvalidArgumentError,
    MoneyOperationError,
    ParseError,
    ReconciliationFailedError,
    UnknownCurrencyError,
)
from money_operation.operation.operation import Operation

__all__ = [
    "Operation",
    "Money",
    "Currency",
    "CurrencyRegistry",
    "ISO_CURRENCIES",
    "RoundingMode",
    "ErrorKind",
    "MoneyOperationError",
    "InvalidArgumentError",
    "EmptyInputError",
    "ReconciliationFailedError",
    "FormattingUnavailableError",
    "CurrencyMismatchError",
    "DivisionUndefinedError",
    "UnknownCurrencyError",
    "ParseError",
]
