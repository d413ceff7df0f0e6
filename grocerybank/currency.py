"""Currencies and the conversion of US dollar sums into other currencies."""

from __future__ import annotations

from enum import Enum

_TOLERANCE = 0.0001


class Curr(Enum):
    """Currencies an account may hold."""

    USD = "usd"
    IRR = "irr"
    EUR = "eur"
    IDN = "idn"


class Currency:
    """A sum of money held as a base value, comparable across currencies."""

    rate: int = 1
    code: Curr | None = None

    def __init__(self, amount=0):
        self.amount = int(amount)
        self.base = float(self.amount * self.rate)
        self.currency = self.code

    @classmethod
    def _from_base(cls, base: float) -> Currency:
        result = Currency()
        result.base = base
        return result

    def convert(self, target, amount):
        """Convert ``amount`` into ``target``, store it as the base and return it."""
        if target is Curr.USD:
            base = amount
        elif target is Curr.IRR:
            base = amount / 3
        elif target is Curr.EUR:
            base = amount / 2
        else:
            raise ValueError("This currency is not acceptable!!sorry.")
        self.currency = target
        self.base = base
        return base

    def __add__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency._from_base(self.base + other.base)

    def __sub__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency._from_base(self.base - other.base)

    def __eq__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return abs(self.base - other.base) < _TOLERANCE

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return self.base < other.base

    def __gt__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return self.base > other.base

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self.base!r})"


class Usd(Currency):
    """US dollars."""

    rate = 1
    code = Curr.USD


class Eur(Currency):
    """Euros."""

    rate = 2
    code = Curr.EUR


class Irr(Currency):
    """Iranian rials."""

    rate = 3
    code = Curr.IRR