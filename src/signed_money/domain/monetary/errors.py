class MoneyError(ValueError):
    """Base class for every validation failure raised by `Money`."""


class InvalidSignError(MoneyError):
    """Sign is neither '+' nor '-'."""


class FractionalOutOfRangeError(MoneyError):
    """Fractional part (hundredths) is outside [0, 99]."""


class EmptyInputError(MoneyError):
    """Text to parse is missing or blank."""


class InvalidFormatError(MoneyError):
    """Text does not follow the '<sign><integer>.<fraction> <currency>' format."""


class NumericOverflowError(MoneyError):
    """Integer part does not fit into the unsigned 64-bit range."""


class InvalidRateError(MoneyError):
    """Exchange rate is not a positive number."""


class NullInputError(MoneyError):
    """Source `Money` for a copy is missing."""
