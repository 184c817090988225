from __future__ import annotations

from random import Random

from signed_money.domain.monetary.currency import Currency
from signed_money.domain.monetary.money import Money
from signed_money.domain.monetary.sign import Sign


def zero(currency: Currency = Currency.USD) -> Money:
    """Create a zero amount in $currency."""
    return Money(currency, Sign.PLUS, 0, 0)


def random_money(rng_seed: int | None = None) -> Money:
    """Create one random Money for demos and tests.

    Args:
        rng_seed: Random seed for reproducible values. If None, uses system randomness.

    Returns:
        New `Money` with random sign, parts and currency.

    Examples:
        Same seed, same amount::

            from signed_money.utils.data_generation.factory_money import random_money

            assert random_money(rng_seed=7) == random_money(rng_seed=7)
    """
    return Money.random(Random(rng_seed))


def money_series(count: int, rng_seed: int | None = None) -> list[Money]:
    """Create $count random Money values drawn from one seeded generator.

    Raises:
        ValueError: If $count is negative.
    """
    if count < 0:
        raise ValueError(f"$count must be >= 0, but provided value is: {count}")

    rng = Random(rng_seed)
    result = [Money.random(rng) for _ in range(count)]
    return result
