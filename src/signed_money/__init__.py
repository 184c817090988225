__version__ = "0.0.1"

from signed_money.domain.monetary.currency import Currency
from signed_money.domain.monetary.money import Money
from signed_money.domain.monetary.sign import Sign

__all__ = ["Currency", "Money", "Sign"]
