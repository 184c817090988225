from __future__ import annotations

from signed_money.utils.data_generation import factory_money


class DataGenerationAssistant:
    """Central access point for ready-made data generation utilities.

    Stateless: every value is created fresh by the helper functions, so the
    shared instance carries no mutable state.

    Attributes:
        money: Module with helper functions for Money fixtures.
    """

    # region Init

    def __init__(self) -> None:
        self.money = factory_money

    # endregion


# Singleton entry point for library users and tests.
DGA = DataGenerationAssistant()
