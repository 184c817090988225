"""Data generation utilities for creating reproducible demo and test data."""

from signed_money.utils.data_generation.factory_money import (
    money_series,
    random_money,
    zero,
)

__all__ = [
    # Money generation functions
    "money_series",
    "random_money",
    "zero",
]
