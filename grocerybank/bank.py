"""Bank accounts that pay for the contents of a shopping cart."""

from __future__ import annotations

from .currency import Curr, Usd
from .shop import Cart, Shop

_PERSONAL_LIMIT = 1000
_ORGANIZATION_LIMIT = 10000


class BankError(Exception):
    """Raised when an account cannot pay."""


class LimitExceededError(BankError):
    """Raised when a payment exceeds the account's daily limit."""


class InsufficientFundsError(BankError):
    """Raised when a payment exceeds the account's balance."""


class BankAccount:
    """An account with a balance in one currency and a daily spending limit."""

    def __init__(self, holder_name, account_number, currency, balance, limit):
        self.holder_name = holder_name
        self.account_number = account_number
        self.currency = currency
        self.balance = float(balance)
        self.limit = int(limit)

    def withdraw(self, amount):
        """Credit ``amount`` to the account; the amount must be positive."""
        if amount <= 0:
            raise ValueError("this amount is lower than zero")
        self.balance += amount

    def currency_symbol(self):
        """Return the symbol printed after sums in this account's currency."""
        if self.currency is Curr.USD:
            return " $"
        if self.currency is Curr.IRR:
            return " IRR"
        return " €"


class _ShoppingAccount(BankAccount, Cart):
    """An account that also owns a cart and pays for it."""

    def __init__(self, holder_name, account_number, currency, balance, limit):
        BankAccount.__init__(
            self, holder_name, account_number, currency, balance, limit
        )
        Cart.__init__(self, holder_name)

    def _charge(self, amount):
        if self.limit < amount:
            raise LimitExceededError(
                "\nYour purchase and money transfer limit has been reached today.\n"
            )
        if amount > self.balance:
            raise InsufficientFundsError("\nyour account ballance is not enough.\n")
        self.limit = int(self.limit - amount)
        self.balance -= amount

    def _convert_price(self):
        money = Usd(self.price)
        self.price = money.convert(self.currency, money.base)

    def _settle(self):
        try:
            self.deposit(self.price)
        except BankError as exc:
            self.return_items()
            print(exc)
            return False
        Shop.withdraw(self.price)
        self.print_receipt(self.currency_symbol())
        return True


class PersonalAccount(_ShoppingAccount):
    """A personal account with a daily limit of 1000."""

    def __init__(self, holder_name, account_number, currency, balance):
        super().__init__(
            holder_name, account_number, currency, balance, _PERSONAL_LIMIT
        )

    def deposit(self, amount):
        """Take ``amount`` out of the account, within the limit and balance."""
        self._charge(amount)

    def calculate(self):
        """Pay for the cart; on failure the goods go back and False is returned."""
        if self.currency is not Curr.USD:
            self._convert_price()
        return self._settle()


class OrganizationAccount(_ShoppingAccount):
    """An organization's account with a daily limit of 10000."""

    def __init__(self, holder_name, account_number, currency, balance):
        super().__init__(
            holder_name, account_number, currency, balance, _ORGANIZATION_LIMIT
        )

    def deposit(self, amount):
        """Take ``amount`` out of the account, within the limit and balance."""
        self._charge(amount)

    def calculate(self):
        """Pay for the cart; on failure the goods go back and False is returned."""
        if self.currency is not Curr.USD:
            self._convert_price()
            limit_money = Usd(self.limit)
            self.limit = int(limit_money.convert(self.currency, limit_money.base))
        return self._settle()