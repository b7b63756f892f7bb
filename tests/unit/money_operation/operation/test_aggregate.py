import pytest

from money_operation.domain.monetary.currency_registry import EUR, USD
from money_operation.domain.monetary.money import Money
from money_operation.errors import CurrencyMismatchError, EmptyInputError, ErrorKind
from money_operation.operation.aggregate import assert_split, average, join


def eur(*amounts: int) -> list[Money]:
    return [Money(amount, EUR) for amount in amounts]


def test_join():
    assert join(eur(334, 333, 333)) == Money(1000, EUR)
    assert join(eur(1234)) == Money(1234, EUR)
    assert join(iter(eur(1, 2, 3))) == Money(6, EUR)


def test_join_empty():
    with pytest.raises(EmptyInputError) as exc_info:
        join([])
    assert exc_info.value.kind is ErrorKind.EMPTY_INPUT


def test_join_mixed_currencies():
    with pytest.raises(CurrencyMismatchError):
        join([Money(1, EUR), Money(1, USD)])


@pytest.mark.parametrize(
    "amounts, expected",
    [
        ([100, 200, 300, 400], 250),
        ([288, 422, 1714], 808),
        ([1, 2], 2),  # 1.5 rounds half up
    ],
)
def test_average(amounts, expected):
    assert average(eur(*amounts)) == Money(expected, EUR)


def test_average_matches_join_divided_by_count():
    parts = eur(5, 7, 11)
    assert average(parts) == join(parts).divide(len(parts))


def test_average_empty():
    with pytest.raises(EmptyInputError):
        average([])


def test_assert_split():
    subject = Money(1000, EUR)
    assert assert_split(subject, eur(334, 333, 333))
    assert not assert_split(subject, eur(333, 333, 333))
    assert not assert_split(subject, [Money(1000, USD)])


def test_assert_split_empty():
    with pytest.raises(EmptyInputError):
        assert_split(Money(1, EUR), [])
