from __future__ import annotations

from enum import Enum

from signed_money.domain.monetary.errors import InvalidSignError


class Sign(Enum):
    """Sign of a monetary amount, stored apart from its magnitude."""

    PLUS = "+"
    MINUS = "-"

    @classmethod
    def parse(cls, value: Sign | str) -> Sign:
        """Accept a `Sign` or one of the characters '+' / '-'.

        Raises:
            InvalidSignError: If $value is anything else.
        """
        if isinstance(value, Sign):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidSignError(f"$sign must be '+' or '-', but provided value is: {value!r}")

    def flipped(self) -> Sign:
        if self is Sign.PLUS:
            return Sign.MINUS
        return Sign.PLUS

    def __str__(self) -> str:
        return self.value
