"""Monetary domain package.

Contains the `Money` value type with signed-magnitude fixed-point arithmetic,
the closed `Currency` enumeration, the `Sign` enum and the validation errors
raised by them.
"""

from signed_money.domain.monetary.currency import Currency
from signed_money.domain.monetary.errors import (
    EmptyInputError,
    FractionalOutOfRangeError,
    InvalidFormatError,
    InvalidRateError,
    InvalidSignError,
    MoneyError,
    NullInputError,
    NumericOverflowError,
)
from signed_money.domain.monetary.money import Money
from signed_money.domain.monetary.sign import Sign

__all__ = [
    "Currency",
    "EmptyInputError",
    "FractionalOutOfRangeError",
    "InvalidFormatError",
    "InvalidRateError",
    "InvalidSignError",
    "Money",
    "MoneyError",
    "NullInputError",
    "NumericOverflowError",
    "Sign",
]
