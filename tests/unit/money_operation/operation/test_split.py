import pytest

from money_operation.domain.monetary.currency_registry import EUR, JPY
from money_operation.domain.monetary.money import Money
from money_operation.domain.monetary.rounding import RoundingMode
from money_operation.errors import ErrorKind, InvalidArgumentError, ReconciliationFailedError
from money_operation.operation.aggregate import join
from money_operation.operation.split import split


def eur(*amounts: int) -> list[Money]:
    return [Money(amount, EUR) for amount in amounts]


@pytest.mark.parametrize(
    "amount, expected_amounts",
    [
        (100, [25, 25, 25, 25]),
        (999, [333, 333, 333]),
        (1000, [334, 333, 333]),  # remainder unit lands on index 0
        (290, [58, 58, 58, 58, 58]),
        (288, [56, 58, 58, 58, 58]),  # 57.6 rounds up to 58, first part pays back 2 units
        (1234, [1234]),
        (-1000, [-334, -333, -333]),
    ],
)
def test_split_scenarios(amount, expected_amounts):
    parts = split(Money(amount, EUR), len(expected_amounts))
    assert parts == eur(*expected_amounts)


@pytest.mark.parametrize("amount", [0, 1, 7, 99, 100, 288, 1000, 12345, -1000])
@pytest.mark.parametrize("times", range(1, 12))
def test_split_preserves_sum_and_count(amount, times):
    subject = Money(amount, EUR)
    parts = split(subject, times)

    assert len(parts) == times
    assert join(parts) == subject


def test_split_with_rounding_mode():
    # 288 / 5 floors to 57, the first part collects the 3 missing units
    assert split(Money(288, EUR), 5, RoundingMode.FLOOR) == eur(60, 57, 57, 57, 57)
    assert split(Money(1000, JPY), 3, RoundingMode.CEILING) == [Money(332, JPY), Money(334, JPY), Money(334, JPY)]


def test_split_is_deterministic():
    subject = Money(12345, EUR)
    assert split(subject, 7) == split(subject, 7)


def test_split_does_not_mutate_subject():
    subject = Money(1000, EUR)
    split(subject, 3)
    assert subject == Money(1000, EUR)


@pytest.mark.parametrize("times", [0, -1, -100])
def test_split_rejects_times_below_one(times):
    with pytest.raises(InvalidArgumentError) as exc_info:
        split(Money(123, EUR), times)
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT


def test_split_rejects_negative_tries():
    with pytest.raises(InvalidArgumentError):
        split(Money(123, EUR), 2, tries=-1)


@pytest.mark.parametrize("tries", [0, 1])
def test_split_fails_when_budget_is_too_small(tries):
    with pytest.raises(ReconciliationFailedError) as exc_info:
        split(Money(288, EUR), 5, tries=tries)

    assert exc_info.value.amount == 288
    assert exc_info.value.times == 5
    assert exc_info.value.kind is ErrorKind.RECONCILIATION_FAILED
    assert str(exc_info.value) == "Could not split 288 value to 5 parts"


def test_split_zero_tries_is_fine_when_no_reconciliation_is_needed():
    assert split(Money(100, EUR), 4, tries=0) == eur(25, 25, 25, 25)


def test_split_default_budget_is_ten():
    # 10 / 20 rounds up to 1 per part: exactly 10 nudges are needed
    parts = split(Money(10, EUR), 20)
    assert parts[0] == Money(-9, EUR)
    assert join(parts) == Money(10, EUR)

    # 11 / 22 needs 11 nudges
    with pytest.raises(ReconciliationFailedError):
        split(Money(11, EUR), 22)

    parts = split(Money(11, EUR), 22, tries=11)
    assert parts[0] == Money(-10, EUR)
