"""Goods sold in the shop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Item:
    """A stocked product with a unit price and a count on hand."""

    name: str = ""
    price: float = 0.0
    unit: str = ""
    amount: int = 100

    def __iadd__(self, count):
        self.amount += count
        return self

    def __isub__(self, count):
        self.amount -= count
        return self

    def __str__(self):
        return (
            f"|Name: {self.name:<12}"
            f"|Price per each 1 {self.unit + ':':<10}"
            f"{self.price:<10.2f}$    "
        )


class Fruit(Item):
    """Fruit, sold by the kilogram."""

    def __init__(self, name, price, amount=100):
        super().__init__(name, price, "kg", amount)


class Seasoning(Item):
    """Seasoning, sold by the gram."""

    def __init__(self, name, price, amount=100):
        super().__init__(name, price, "g", amount)


class Snack(Item):
    """Snacks, sold by the package."""

    def __init__(self, name, price, amount=100):
        super().__init__(name, price, "package", amount)