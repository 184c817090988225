from __future__ import annotations

import logging
from decimal import Decimal

from signed_money.domain.monetary.currency import Currency
from signed_money.domain.monetary.errors import MoneyError
from signed_money.domain.monetary.money import Money


logger = logging.getLogger(__name__)

EUR_RATE = Decimal("0.85")


def read_money() -> Money:
    # Ask for each field separately
    currency = Currency.from_str(input("Enter currency (USD, RUB, EUR): "))
    sign = input("Enter sign (+ or -): ").strip()[:1]
    integer_part = int(input("Enter integer part: "))
    fractional_part = int(input("Enter fractional part (0 to 99): "))
    return Money(currency, sign, integer_part, fractional_part)


def demo_lines(m1: Money) -> list[str]:
    """Run the scripted sequence of operations on $m1 and return the printed lines."""
    lines = [f"Created money object: {m1.display()}"]

    m1 = m1.add("+", 20, 75)
    lines.append(f"After addition: {m1.display()}")

    m1 = m1.subtract("-", 10, 15)
    lines.append(f"After subtraction: {m1.display()}")

    m2 = m1.convert(Currency.EUR, EUR_RATE)
    lines.append(f"Converted to EUR: {m2.display()}")

    m3 = Money.from_money(m1)
    lines.append(f"Copy of m1: {m3.display()}")

    lines.append(f"Sum of m1 and m2: {m1.sum(m2).display()}")
    lines.append(f"Difference between m1 and m2: {m1.difference(m2).display()}")
    return lines


def run() -> None:
    logging.basicConfig(level=logging.INFO)

    try:
        m1 = read_money()
    except (MoneyError, ValueError) as e:
        logger.error(f"Cannot create money from input: {e}")
        return

    for line in demo_lines(m1):
        print(line)


if __name__ == "__main__":
    run()
