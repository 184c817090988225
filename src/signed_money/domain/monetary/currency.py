from __future__ import annotations

from enum import Enum

from signed_money.domain.monetary.errors import InvalidFormatError


class Currency(Enum):
    """Closed set of currencies a `Money` can be tagged with.

    Adding a member is a breaking change: there is no runtime registration.
    """

    USD = "USD"
    RUB = "RUB"
    EUR = "EUR"

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get currency by its name, ignoring case and surrounding whitespace.

        Args:
            code (str): Currency name, e.g. "usd" or "EUR".

        Returns:
            Currency: The matching member.

        Raises:
            TypeError: If $code is not a string.
            InvalidFormatError: If $code is not one of the known names.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        normalized = code.strip().upper()
        try:
            return cls[normalized]
        except KeyError as e:
            raise InvalidFormatError(f"Currency with code '{code}' is not supported. Available currencies: {[c.name for c in cls]}") from e

    def __str__(self) -> str:
        return self.name
