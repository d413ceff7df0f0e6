"""The shop's till and the shopping cart."""

from __future__ import annotations

from .item import Item

_RULE_WIDTH = 108
_FOOTER_WIDTH = 107


class Shop:
    """The shop's till, shared by every cart."""

    _balance: float = 0.0

    @classmethod
    def withdraw(cls, amount):
        """Pay ``amount`` into the shop's till."""
        Shop._balance += amount

    @classmethod
    def get_balance(cls):
        """Return the money taken by the shop so far."""
        return Shop._balance


class Cart(Shop):
    """A customer's cart; every fifth unit of a product comes free."""

    def __init__(self, owner):
        self.owner = owner
        self.items: list[tuple[Item, int]] = []
        self.price = 0.0

    def take(self, item, amount):
        """Put ``amount`` units of ``item`` into the cart, taking them from stock."""
        if item.amount < amount:
            raise ValueError(f"Sorry!Theres no enough amount of: {item.name}!!")
        if amount < 0:
            raise ValueError("You've entered a number lower than zero!!")
        self.items.append((item, amount))
        item -= amount
        charged = amount - amount // 5
        self.price += charged * item.price

    def return_items(self):
        """Put every product in the cart back into stock."""
        for item, count in self.items:
            item += count

    def format_receipt(self, currency_symbol):
        """Return the receipt text, or an empty string for an empty cart."""
        if not self.items:
            return ""
        lines = ["", "", "*" * 52 + "List" + "*" * 52]
        for item, count in self.items:
            lines.append(
                f"{item}|Amount you buy : {count:<4}"
                f"|Total: {item.price * count:<10.2f}$"
            )
            lines.append("-" * _RULE_WIDTH)
        lines.extend([" " * 54 + ".    "] * 3)
        lines.append("_" * _FOOTER_WIDTH)
        lines.append("")
        lines.append(
            f"Dear {self.owner}, thank you for your choice. "
            f"final amount with discount {self.price:.2f}{currency_symbol}"
        )
        lines.append("_" * _FOOTER_WIDTH)
        return "\n".join(lines) + "\n"

    def print_receipt(self, currency_symbol):
        """Print the receipt to standard output."""
        print(self.format_receipt(currency_symbol), end="")