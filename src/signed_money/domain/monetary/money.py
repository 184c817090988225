from __future__ import annotations

import logging
import re
from decimal import MAX_EMAX, MIN_EMIN, ROUND_DOWN, Decimal, Inexact, InvalidOperation, Overflow, localcontext
from random import Random

from signed_money.domain.monetary.currency import Currency
from signed_money.domain.monetary.errors import (
    EmptyInputError,
    FractionalOutOfRangeError,
    InvalidFormatError,
    InvalidRateError,
    MoneyError,
    NullInputError,
    NumericOverflowError,
)
from signed_money.domain.monetary.sign import Sign
from signed_money.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)

# Separators allowed between the integer and the fractional group of the text form
_GROUP_SEPARATORS = re.compile(r"[.,]")
_DIGITS = re.compile(r"[0-9]+")


class Money:
    """Signed fixed-point amount with two fractional digits and a currency.

    The value is kept in signed-magnitude form: a `Sign` plus a non-negative
    integer part and a fractional part counted in hundredths. Arithmetic works
    on the magnitudes with explicit carry and borrow, so the integer part is
    never negative.

    Instances are immutable. `add`, `subtract`, `sum`, `difference` and
    `convert` return new instances and never touch the receiver.

    Invariants held by every instance:
        * 0 <= $fractional_part <= 99
        * 0 <= $integer_part <= MAX_INTEGER_PART
        * a zero amount always has `Sign.PLUS`

    Examples:
        Carry across the fractional boundary::

            price = Money(Currency.USD, "+", 0, 75)
            price.add("+", 0, 50)  # Money(+1.25, USD)

        Parse and display::

            Money.from_str("-12,05 eur").display()  # '-12.05 EUR'
    """

    FRACTION_BASE = 100
    # Unsigned 64-bit range for the integer part
    MAX_INTEGER_PART = 2**64 - 1

    # region Init

    def __init__(self, currency: Currency, sign: Sign | str, integer_part: int, fractional_part: int):
        """Initialize Money from explicit fields.

        Args:
            currency (Currency): Currency tag.
            sign: `Sign` or one of the characters '+' / '-'.
            integer_part (int): Whole units, 0 <= value <= MAX_INTEGER_PART.
            fractional_part (int): Hundredths, 0 <= value <= 99.

        Raises:
            TypeError: If $currency is not a Currency or a part is not an int.
            InvalidSignError: If $sign is not '+' or '-'.
            FractionalOutOfRangeError: If $fractional_part is outside [0, 99].
            NumericOverflowError: If $integer_part is outside the unsigned range.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        sign_value = Sign.parse(sign)
        integer_value, fractional_value = _check_magnitude(integer_part, fractional_part, "create `Money`")

        # Zero is always positive
        if integer_value == 0 and fractional_value == 0:
            sign_value = Sign.PLUS

        self._currency = currency
        self._sign = sign_value
        self._integer_part = integer_value
        self._fractional_part = fractional_value

    @classmethod
    def from_money(cls, other: Money | None) -> Money:
        """Create an independent Money with the same fields as $other.

        Raises:
            NullInputError: If $other is None.
            TypeError: If $other is not a Money.
        """
        if other is None:
            raise NullInputError("Cannot copy `Money` because $other is None")
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")

        return cls(other.currency, other.sign, other.integer_part, other.fractional_part)

    @classmethod
    def from_str(cls, value_str: str | None) -> Money:
        """Parse Money from text like '+120.05 USD'.

        The integer and fractional groups may be separated by '.' or ','.
        The fractional group is read as a count of hundredths, so '+1.5 USD'
        is one unit and five hundredths. Currency names are case-insensitive.

        Args:
            value_str (str): Text in the form '<sign><digits>.<digits> <currency>'.

        Returns:
            Money: Parsed amount.

        Raises:
            EmptyInputError: If $value_str is None or blank.
            InvalidFormatError: If the sign, numeric groups or currency are malformed.
            FractionalOutOfRangeError: If the fractional group is 100 or more.
            NumericOverflowError: If a numeric group exceeds the unsigned range.
        """
        if value_str is None:
            raise EmptyInputError("Cannot parse `Money` because $value_str is None")
        if not isinstance(value_str, str):
            raise TypeError(f"$value_str must be a string, but provided value is: {value_str!r}")

        try:
            return cls._parse(value_str.strip())
        except MoneyError as e:
            logger.debug(f"Rejected $value_str '{value_str}': {e}")
            raise

    @classmethod
    def _parse(cls, text: str) -> Money:
        if not text:
            raise EmptyInputError("Cannot parse `Money` because $value_str is empty")

        sign_char = text[0]
        if sign_char not in (Sign.PLUS.value, Sign.MINUS.value):
            raise InvalidFormatError(f"Text '{text}' must start with '+' or '-', but starts with '{sign_char}'")

        parts = text[1:].split()
        if len(parts) != 2 or text[1:2].isspace():
            raise InvalidFormatError(f"Text '{text}' must be in format '<sign><integer>.<fraction> <currency>'")
        amount_part, currency_part = parts

        groups = _GROUP_SEPARATORS.split(amount_part)
        if len(groups) != 2 or not all(groups):
            raise InvalidFormatError(f"Amount '{amount_part}' in text '{text}' must have exactly two numeric groups separated by '.' or ','")

        integer_part = _parse_unsigned(groups[0], text)
        fractional_part = _parse_unsigned(groups[1], text)
        currency = Currency.from_str(currency_part)

        return cls(currency, sign_char, integer_part, fractional_part)

    @classmethod
    def random(cls, rng: Random | None = None) -> Money:
        """Create Money with uniformly random sign, parts and currency.

        Args:
            rng: Source of randomness. Pass a seeded `random.Random` for
                reproducible values. If None, uses system randomness.

        Returns:
            Money: Amount with $integer_part in [0, 1000) and $fractional_part in [0, 100).
        """
        if rng is None:
            rng = Random()

        sign = rng.choice(list(Sign))
        integer_part = rng.randrange(0, 1000)
        fractional_part = rng.randrange(0, cls.FRACTION_BASE)
        currency = rng.choice(list(Currency))
        return cls(currency, sign, integer_part, fractional_part)

    # endregion

    # region Properties

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def integer_part(self) -> int:
        return self._integer_part

    @property
    def fractional_part(self) -> int:
        return self._fractional_part

    @property
    def is_zero(self) -> bool:
        return self._integer_part == 0 and self._fractional_part == 0

    def to_decimal(self) -> Decimal:
        """Return the exact signed value, e.g. Decimal('-4.90')."""
        return Decimal(f"{self._sign.value}{self._integer_part}.{self._fractional_part:02d}")

    # endregion

    # region Arithmetic

    def add(self, sign: Sign | str, integer_part: int, fractional_part: int) -> Money:
        """Return a new Money equal to this amount plus the given signed operand.

        Adding a negative operand is subtracting its magnitude.

        Raises:
            InvalidSignError: If $sign is not '+' or '-'.
            FractionalOutOfRangeError: If $fractional_part is outside [0, 99].
            NumericOverflowError: If an operand part or the result exceeds the unsigned range.
        """
        operand_sign = Sign.parse(sign)
        operand = _check_magnitude(integer_part, fractional_part, "call `add`")
        if operand_sign is Sign.MINUS:
            return self.subtract(operand_sign.flipped(), *operand)

        return self._combine(Sign.PLUS, operand)

    def subtract(self, sign: Sign | str, integer_part: int, fractional_part: int) -> Money:
        """Return a new Money equal to this amount minus the given signed operand.

        Subtracting a negative operand is adding its magnitude. When the operand
        is larger than this amount, the result crosses zero and changes sign.

        Raises:
            InvalidSignError: If $sign is not '+' or '-'.
            FractionalOutOfRangeError: If $fractional_part is outside [0, 99].
            NumericOverflowError: If an operand part or the result exceeds the unsigned range.
        """
        operand_sign = Sign.parse(sign)
        operand = _check_magnitude(integer_part, fractional_part, "call `subtract`")
        if operand_sign is Sign.MINUS:
            return self.add(operand_sign.flipped(), *operand)

        return self._combine(Sign.MINUS, operand)

    def sum(self, other: Money) -> Money:
        """Return this amount plus $other, tagged with this amount's currency."""
        other = _require_money(other, "sum")
        return Money.from_money(self).add(other.sign, other.integer_part, other.fractional_part)

    def difference(self, other: Money) -> Money:
        """Return this amount minus $other, tagged with this amount's currency."""
        other = _require_money(other, "difference")
        return Money.from_money(self).subtract(other.sign, other.integer_part, other.fractional_part)

    def _combine(self, operand_sign: Sign, operand: tuple[int, int]) -> Money:
        """Add a signed operand magnitude to this signed magnitude."""
        magnitude = (self._integer_part, self._fractional_part)

        if operand_sign is self._sign:
            result_sign = self._sign
            result = _add_magnitudes(magnitude, operand)
        elif operand > magnitude:
            # Operand dominates: swap roles, result takes the operand's sign
            result_sign = operand_sign
            result = _subtract_magnitudes(operand, magnitude)
        else:
            result_sign = self._sign
            result = _subtract_magnitudes(magnitude, operand)

        if result[0] > self.MAX_INTEGER_PART:
            raise NumericOverflowError(f"Result integer part {result[0]} of {self} exceeds maximum allowed value {self.MAX_INTEGER_PART}")

        return Money(self._currency, result_sign, *result)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.sum(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.difference(other)

    # endregion

    # region Conversion

    def convert(self, target_currency: Currency | str, rate: DecimalLike) -> Money:
        """Convert this amount into $target_currency using a caller-supplied $rate.

        The exact decimal value is multiplied by $rate and truncated (never
        rounded) to hundredths. The sign of the result follows the product.

        Args:
            target_currency: Currency (or its name) of the result.
            rate: Units of $target_currency per unit of this currency; Decimal-like scalar.

        Returns:
            Money: New amount tagged with $target_currency.

        Raises:
            InvalidRateError: If $rate is not a finite positive number.
            InvalidFormatError: If $target_currency is an unknown currency name.
            NumericOverflowError: If the converted integer part exceeds the unsigned range.
        """
        if isinstance(target_currency, str):
            target_currency = Currency.from_str(target_currency)
        elif not isinstance(target_currency, Currency):
            raise TypeError(f"$target_currency must be a Currency instance or name, but provided value is: {target_currency!r}")

        # Raise: $rate must be convertible to Decimal
        try:
            rate_value = as_decimal(rate)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidRateError(f"Cannot call `convert` because $rate ({rate!r}) cannot be converted to Decimal") from e

        if not rate_value.is_finite() or rate_value <= 0:
            raise InvalidRateError(f"Cannot call `convert` because $rate ({rate_value}) is not a positive number")

        amount = self.to_decimal()
        try:
            with localcontext() as ctx:
                # Product of two decimals never needs more digits than both operands together
                ctx.prec = len(amount.as_tuple().digits) + len(rate_value.as_tuple().digits)
                ctx.Emin = MIN_EMIN
                ctx.Emax = MAX_EMAX
                ctx.traps[Inexact] = True
                converted = amount * rate_value

                result_sign = Sign.MINUS if converted < 0 else Sign.PLUS
                magnitude = abs(converted)
                # MAX_INTEGER_PART has 20 digits
                if magnitude and magnitude.adjusted() >= 20:
                    raise NumericOverflowError(f"Converted amount {converted} of {self} at $rate {rate_value} exceeds maximum allowed value {self.MAX_INTEGER_PART}")
                cents = int(magnitude.scaleb(2).to_integral_value(rounding=ROUND_DOWN))
        except Overflow as e:
            raise NumericOverflowError(f"Converted amount of {self} at $rate {rate_value} exceeds maximum allowed value {self.MAX_INTEGER_PART}") from e

        integer_part, fractional_part = divmod(cents, self.FRACTION_BASE)
        if integer_part > self.MAX_INTEGER_PART:
            raise NumericOverflowError(f"Converted integer part {integer_part} of {self} at $rate {rate_value} exceeds maximum allowed value {self.MAX_INTEGER_PART}")

        result = Money(target_currency, result_sign, integer_part, fractional_part)
        logger.debug(f"Converted {self} to {result} at $rate {rate_value}")
        return result

    # endregion

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1 comparing sign, then integer part, then fractional part.

        Currency is ignored. Negatives keep raw magnitude order, so -5.00 > -1.00.

        Raises:
            NullInputError: If $other is None.
        """
        other = _require_money(other, "compare_to")
        own_key = self._ordering_key()
        other_key = other._ordering_key()
        if own_key < other_key:
            return -1
        if own_key > other_key:
            return 1
        return 0

    def _ordering_key(self) -> tuple[int, int, int]:
        # Sign first ('-' before '+'), then raw magnitude for either sign
        sign_rank = 0 if self._sign is Sign.MINUS else 1
        return sign_rank, self._integer_part, self._fractional_part

    def __eq__(self, other) -> bool:
        """Equal when sign, both parts and currency all match."""
        if not isinstance(other, Money):
            return False
        return (
            self._sign is other._sign
            and self._integer_part == other._integer_part
            and self._fractional_part == other._fractional_part
            and self._currency is other._currency
        )

    def __hash__(self) -> int:
        return hash((self._sign, self._integer_part, self._fractional_part, self._currency))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._ordering_key() < other._ordering_key()

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._ordering_key() <= other._ordering_key()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._ordering_key() > other._ordering_key()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._ordering_key() >= other._ordering_key()

    # endregion

    # region String representations

    def display(self) -> str:
        """Return canonical text like '+120.05 USD', accepted back by `from_str`."""
        return f"{self._sign.value}{self._integer_part}.{self._fractional_part:02d} {self._currency.name}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        """Return string like 'Money(+120.05, USD)'."""
        return f"{self.__class__.__name__}({self._sign.value}{self._integer_part}.{self._fractional_part:02d}, {self._currency.name})"

    # endregion


# region Magnitude helpers


def _check_magnitude(integer_part: int, fractional_part: int, action: str) -> tuple[int, int]:
    """Validate an (integer, fractional) magnitude pair for $action."""
    for name, value in (("integer_part", integer_part), ("fractional_part", fractional_part)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Cannot {action} because ${name} must be an int, but provided value is: {value!r}")

    if integer_part < 0 or integer_part > Money.MAX_INTEGER_PART:
        raise NumericOverflowError(f"Cannot {action} because $integer_part ({integer_part}) is outside [0, {Money.MAX_INTEGER_PART}]")
    if fractional_part < 0 or fractional_part >= Money.FRACTION_BASE:
        raise FractionalOutOfRangeError(f"Cannot {action} because $fractional_part ({fractional_part}) is outside [0, {Money.FRACTION_BASE - 1}]")

    return integer_part, fractional_part


def _add_magnitudes(left: tuple[int, int], right: tuple[int, int]) -> tuple[int, int]:
    integer_part = left[0] + right[0]
    fractional_part = left[1] + right[1]
    # Carry
    if fractional_part >= Money.FRACTION_BASE:
        integer_part += fractional_part // Money.FRACTION_BASE
        fractional_part %= Money.FRACTION_BASE
    return integer_part, fractional_part


def _subtract_magnitudes(larger: tuple[int, int], smaller: tuple[int, int]) -> tuple[int, int]:
    """Return $larger - $smaller; requires $larger >= $smaller."""
    integer_part = larger[0] - smaller[0]
    fractional_part = larger[1] - smaller[1]
    # Borrow
    if fractional_part < 0:
        integer_part -= 1
        fractional_part += Money.FRACTION_BASE
    return integer_part, fractional_part


def _parse_unsigned(token: str, text: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise InvalidFormatError(f"Numeric group '{token}' in text '{text}' must contain only digits 0-9")

    # Length check first: int() refuses very long digit strings
    significant = token.lstrip("0") or "0"
    if len(significant) > len(str(Money.MAX_INTEGER_PART)) or int(significant) > Money.MAX_INTEGER_PART:
        raise NumericOverflowError(f"Numeric group '{token}' in text '{text}' exceeds maximum allowed value {Money.MAX_INTEGER_PART}")

    return int(significant)


def _require_money(other: Money | None, action: str) -> Money:
    if other is None:
        raise NullInputError(f"Cannot call `{action}` because $other is None")
    if not isinstance(other, Money):
        raise TypeError(f"Cannot call `{action}` because $other must be a Money instance, but provided value is: {other!r}")
    return other


# endregion
