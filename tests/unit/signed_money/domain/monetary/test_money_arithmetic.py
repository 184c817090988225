import pytest

from signed_money.domain.monetary.currency import Currency
from signed_money.domain.monetary.errors import (
    FractionalOutOfRangeError,
    InvalidSignError,
    NullInputError,
    NumericOverflowError,
)
from signed_money.domain.monetary.money import Money
from signed_money.domain.monetary.sign import Sign
from signed_money.utils.data_generation.factory_money import money_series


def usd(text: str) -> Money:
    return Money.from_str(f"{text} USD")


# region Carry and borrow


def test_add_carries_fraction_into_integer_part():
    result = Money(Currency.USD, "+", 0, 75).add("+", 0, 50)

    assert result == Money(Currency.USD, "+", 1, 25)


def test_subtract_borrows_from_integer_part():
    result = Money(Currency.USD, "+", 1, 10).subtract("+", 0, 25)

    assert result == Money(Currency.USD, "+", 0, 85)


def test_subtract_larger_operand_flips_sign():
    result = Money(Currency.USD, "+", 0, 10).subtract("+", 5, 0)

    assert result == Money(Currency.USD, "-", 4, 90)


def test_carry_on_negative_target():
    assert usd("-0.50").subtract("+", 0, 75) == usd("-1.25")


def test_borrow_on_negative_target():
    assert usd("-1.10").add("+", 0, 25) == usd("-0.85")


# endregion

# region Sign combinations


@pytest.mark.parametrize(
    "start, sign, integer_part, fractional_part, expected",
    [
        ("+5.00", "+", 3, 0, "+8.00"),
        ("+5.00", "-", 3, 0, "+2.00"),
        ("+3.00", "-", 5, 0, "-2.00"),
        ("-5.00", "+", 3, 0, "-2.00"),
        ("-3.00", "+", 5, 0, "+2.00"),
        ("-5.00", "-", 3, 0, "-8.00"),
        ("-0.75", "+", 0, 50, "-0.25"),
        ("+0.00", "-", 0, 1, "-0.01"),
    ],
)
def test_add_for_all_sign_combinations(start, sign, integer_part, fractional_part, expected):
    assert usd(start).add(sign, integer_part, fractional_part) == usd(expected)


@pytest.mark.parametrize(
    "start, sign, integer_part, fractional_part, expected",
    [
        ("+5.00", "+", 3, 0, "+2.00"),
        ("+3.00", "+", 5, 0, "-2.00"),
        ("-5.00", "+", 3, 0, "-8.00"),
        ("-5.00", "-", 3, 0, "-2.00"),
        ("-3.00", "-", 5, 0, "+2.00"),
        ("+5.00", "-", 3, 0, "+8.00"),
        ("+0.00", "+", 0, 1, "-0.01"),
    ],
)
def test_subtract_for_all_sign_combinations(start, sign, integer_part, fractional_part, expected):
    assert usd(start).subtract(sign, integer_part, fractional_part) == usd(expected)


def test_add_negative_equals_subtract_positive():
    start = usd("+12.34")

    assert start.add("-", 20, 99) == start.subtract("+", 20, 99)
    assert start.subtract("-", 20, 99) == start.add("+", 20, 99)


# endregion

# region Zero results


@pytest.mark.parametrize(
    "start, sign, integer_part, fractional_part",
    [
        ("+1.25", "+", 1, 25),
        ("-1.25", "-", 1, 25),
    ],
)
def test_zero_result_of_subtract_is_positive(start, sign, integer_part, fractional_part):
    result = usd(start).subtract(sign, integer_part, fractional_part)

    assert result.is_zero
    assert result.sign is Sign.PLUS


def test_zero_result_of_add_is_positive():
    result = usd("-1.25").add("+", 1, 25)

    assert result.is_zero
    assert result.sign is Sign.PLUS


# endregion

# region Immutability and validation


def test_operations_do_not_modify_receiver():
    start = usd("+100.00")

    start.add("+", 20, 75)
    start.subtract("+", 500, 0)

    assert start == usd("+100.00")


def test_invalid_operand_sign_is_rejected():
    with pytest.raises(InvalidSignError):
        usd("+1.00").add("x", 1, 0)
    with pytest.raises(InvalidSignError):
        usd("+1.00").subtract("", 1, 0)


def test_invalid_operand_fraction_is_rejected():
    with pytest.raises(FractionalOutOfRangeError):
        usd("+1.00").add("+", 0, 100)
    with pytest.raises(FractionalOutOfRangeError):
        usd("+1.00").subtract("-", 0, -1)


def test_result_beyond_unsigned_range_is_rejected():
    largest = Money(Currency.USD, "+", Money.MAX_INTEGER_PART, 99)

    with pytest.raises(NumericOverflowError):
        largest.add("+", 0, 1)
    with pytest.raises(NumericOverflowError):
        Money(Currency.USD, "-", Money.MAX_INTEGER_PART, 0).subtract("+", 1, 0)


def test_largest_value_minus_itself_is_zero():
    largest = Money(Currency.USD, "+", Money.MAX_INTEGER_PART, 99)

    assert largest.subtract("+", Money.MAX_INTEGER_PART, 99).is_zero


# endregion

# region Sum and difference


def test_sum_and_difference_of_money_values():
    left = usd("+10.40")
    right = usd("-0.75")

    assert left.sum(right) == usd("+9.65")
    assert left.difference(right) == usd("+11.15")
    assert left + right == left.sum(right)
    assert left - right == left.difference(right)


def test_sum_keeps_left_currency():
    left = Money(Currency.USD, "+", 1, 0)
    right = Money(Currency.EUR, "+", 2, 50)

    result = left + right

    assert result == Money(Currency.USD, "+", 3, 50)


def test_difference_then_sum_is_identity():
    values = money_series(200, rng_seed=5)
    for m, n in zip(values[::2], values[1::2]):
        assert m.sum(n).difference(n) == m


def test_sum_with_none_is_rejected():
    with pytest.raises(NullInputError):
        usd("+1.00").sum(None)
    with pytest.raises(NullInputError):
        usd("+1.00").difference(None)


def test_operators_with_non_money_are_not_supported():
    with pytest.raises(TypeError):
        usd("+1.00") + 1
    with pytest.raises(TypeError):
        usd("+1.00") - "1.00"


# endregion


def test_scripted_add_then_subtract():
    money = Money(Currency.USD, "+", 100, 0)

    after_add = money.add("+", 20, 75)
    after_subtract = after_add.subtract("-", 10, 15)

    assert after_add.display() == "+120.75 USD"
    assert after_subtract.display() == "+130.90 USD"


def test_negative_operand_delegates_with_flipped_sign():
    start = usd("-0.40")

    assert start.add(Sign.MINUS, 0, 70) == start.subtract(Sign.MINUS.flipped(), 0, 70) == usd("-1.10")
    assert start.subtract(Sign.MINUS, 0, 70) == start.add(Sign.MINUS.flipped(), 0, 70) == usd("+0.30")
