import pytest

from grocerybank.bank import (
    BankAccount,
    InsufficientFundsError,
    LimitExceededError,
    OrganizationAccount,
    PersonalAccount,
)
from grocerybank.currency import Curr
from grocerybank.item import Fruit
from grocerybank.shop import Shop


def test_withdraw_adds_positive_amount():
    account = BankAccount("ann", 1, Curr.USD, 100, 500)
    account.withdraw(25)
    assert account.balance == 125


@pytest.mark.parametrize("amount", [0, -5])
def test_withdraw_rejects_non_positive(amount):
    account = BankAccount("ann", 1, Curr.USD, 100, 500)
    with pytest.raises(ValueError, match="lower than zero"):
        account.withdraw(amount)
    assert account.balance == 100


@pytest.mark.parametrize(
    "currency, symbol",
    [(Curr.USD, " $"), (Curr.IRR, " IRR"), (Curr.EUR, " €")],
)
def test_currency_symbol(currency, symbol):
    assert BankAccount("ann", 1, currency, 0, 0).currency_symbol() == symbol


def test_default_limits():
    assert PersonalAccount("p", 1, Curr.USD, 0).limit == 1000
    assert OrganizationAccount("o", 2, Curr.USD, 0).limit == 10000


def test_deposit_reduces_balance_and_limit():
    account = PersonalAccount("p", 1, Curr.USD, 600)
    account.deposit(200)
    assert account.balance == 400
    assert account.limit == 800


def test_deposit_over_limit_raises_before_balance_check():
    account = PersonalAccount("p", 1, Curr.USD, 0)
    with pytest.raises(LimitExceededError, match="limit has been reached"):
        account.deposit(1001)
    assert account.balance == 0


def test_deposit_over_balance_raises():
    account = OrganizationAccount("o", 1, Curr.USD, 50)
    with pytest.raises(InsufficientFundsError, match="not enough"):
        account.deposit(60)
    assert account.limit == 10000


def test_calculate_success_pays_shop(capsys):
    account = PersonalAccount("buyer", 1, Curr.USD, 500)
    apple = Fruit("apple", 10, 20)
    account.take(apple, 3)
    till_before = Shop.get_balance()
    assert account.calculate() is True
    assert account.balance == 500 - account.price
    assert Shop.get_balance() - till_before == pytest.approx(account.price)
    assert apple.amount == 17
    assert "Dear buyer" in capsys.readouterr().out


def test_calculate_failure_returns_items(capsys):
    account = OrganizationAccount("poor", 1, Curr.USD, 0)
    apple = Fruit("apple", 10, 20)
    account.take(apple, 4)
    till_before = Shop.get_balance()
    assert account.calculate() is False
    assert apple.amount == 20
    assert account.balance == 0
    assert Shop.get_balance() == till_before
    assert "not enough" in capsys.readouterr().out


def test_calculate_converts_price_to_euro(capsys):
    account = PersonalAccount("eu", 1, Curr.EUR, 500)
    account.take(Fruit("pear", 100, 10), 1)
    assert account.calculate() is True
    assert account.price == pytest.approx(50.0)
    assert account.balance == pytest.approx(500 - account.price)
    assert account.currency_symbol() in capsys.readouterr().out


def test_organization_calculate_converts_limit():
    account = OrganizationAccount("org", 1, Curr.IRR, 0)
    account.calculate()
    assert account.limit == 3333


def test_calculate_rejects_unknown_currency():
    account = PersonalAccount("x", 1, Curr.IDN, 100)
    account.take(Fruit("kiwi", 1, 5), 1)
    with pytest.raises(ValueError, match="not acceptable"):
        account.calculate()