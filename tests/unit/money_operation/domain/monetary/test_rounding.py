import pytest

from money_operation.domain.monetary.rounding import RoundingMode, round_fraction


@pytest.mark.parametrize(
    "numerator, denominator, rounding_mode, expected",
    [
        # ties
        (5, 2, RoundingMode.HALF_UP, 3),
        (-5, 2, RoundingMode.HALF_UP, -3),
        (5, 2, RoundingMode.HALF_DOWN, 2),
        (-5, 2, RoundingMode.HALF_DOWN, -2),
        (5, 2, RoundingMode.HALF_EVEN, 2),
        (7, 2, RoundingMode.HALF_EVEN, 4),
        (-5, 2, RoundingMode.HALF_EVEN, -2),
        (5, 2, RoundingMode.HALF_ODD, 3),
        (7, 2, RoundingMode.HALF_ODD, 3),
        (-5, 2, RoundingMode.HALF_POSITIVE_INFINITY, -2),
        (5, 2, RoundingMode.HALF_NEGATIVE_INFINITY, 2),
        # non-ties
        (576, 10, RoundingMode.HALF_DOWN, 58),
        (574, 10, RoundingMode.HALF_UP, 57),
        (1, 3, RoundingMode.CEILING, 1),
        (-1, 3, RoundingMode.CEILING, 0),
        (1, 3, RoundingMode.FLOOR, 0),
        (-1, 3, RoundingMode.FLOOR, -1),
        (-1, 3, RoundingMode.UP, -1),
        (1, 3, RoundingMode.UP, 1),
        (-1, 3, RoundingMode.DOWN, 0),
        (2, 3, RoundingMode.DOWN, 0),
        # exact and negative denominator
        (10, 5, RoundingMode.UP, 2),
        (5, -2, RoundingMode.HALF_UP, -3),
    ],
)
def test_round_fraction(numerator, denominator, rounding_mode, expected):
    assert round_fraction(numerator, denominator, rounding_mode) == expected


def test_round_fraction_large_operands_stay_exact():
    # 10**40 + 1 halves exactly to ...0.5 only with exact integer arithmetic
    assert round_fraction(10**40 + 1, 2, RoundingMode.HALF_UP) == 5 * 10**39 + 1
    assert round_fraction(10**40 + 1, 2, RoundingMode.HALF_DOWN) == 5 * 10**39


def test_round_fraction_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        round_fraction(1, 0)


def test_rounding_mode_from_str():
    assert RoundingMode.from_str(" half_even ") is RoundingMode.HALF_EVEN
    with pytest.raises(ValueError):
        RoundingMode.from_str("NEAREST")
