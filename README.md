# grocerybank

A small grocery checkout. Customers put items from the shop's stock into a
cart. At checkout the cart's total is charged to a bank account. Each account
has a balance, a currency and a daily spending limit.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demonstration

```
grocerybank
```

The command takes no options apart from `--help`. It runs one fixed shopping
session. It sets up four accounts and a small stock of goods, fills the carts
and checks each cart out. The output shows the usual outcomes:

- a receipt for a purchase that succeeds;
- a purchase refused because it goes over the daily limit;
- a purchase refused because the balance is too low;
- a request for more of an item than is in stock.

## Using the library

### `grocerybank.item`

- `Item(name, price, unit, amount)` is a dataclass. `amount` defaults to 100.
  `+=` and `-=` change the stock count. `str(item)` gives the item's line on a
  receipt.
- `Fruit(name, price, amount)` is sold by the `kg`, `Seasoning` by the `g` and
  `Snack` by the `package`.

### `grocerybank.shop`

- `Shop` holds the shop's takings in one balance that all carts share.
  `Shop.withdraw(amount)` adds to the balance and `Shop.get_balance()` returns
  it.
- `Cart(owner)` holds the goods of one customer.
  - `take(item, amount)` takes `amount` units out of the item's stock and adds
    them to the cart's `price`. Every fifth unit is free. If the stock is too
    small or the amount is negative, it raises `ValueError` and takes nothing.
  - `return_items()` puts every product in the cart back into stock.
  - `format_receipt(currency_symbol)` returns the receipt as text. For an empty
    cart it returns an empty string. `print_receipt(currency_symbol)` prints
    the receipt.

### `grocerybank.currency`

- `Curr` lists the currencies: `USD`, `IRR`, `EUR` and `IDN`.
- `Currency` and its subclasses `Usd`, `Eur` and `Irr` hold an amount as a
  base value. The rate is 1 for `Usd`, 2 for `Eur` and 3 for `Irr`. Amounts
  can be added and subtracted. `==` compares them within a tolerance of 0.0001,
  and `<` and `>` compare them directly.
- `Currency.convert(target, amount)` converts a dollar amount into `target`.
  It stores the result as the base value and returns it. `IDN` is not
  supported and raises `ValueError`.

### `grocerybank.bank`

- `BankAccount(holder_name, account_number, currency, balance, limit)` is the
  base class for accounts.
  - `withdraw(amount)` credits the account. An amount that is not positive
    raises `ValueError`.
  - `currency_symbol()` returns the symbol shown on receipts: ` $`, ` IRR` or
    ` €`.
- `PersonalAccount(holder_name, account_number, currency, balance)` has a
  daily limit of 1000. `OrganizationAccount` takes the same arguments and has
  a daily limit of 10000. Both accounts are also carts.
  - `deposit(amount)` charges the account and lowers both the balance and the
    limit. It raises `LimitExceededError` if the amount is over the limit and
    `InsufficientFundsError` if it is over the balance. Both errors are
    subclasses of `BankError`.
  - `calculate()` checks out the cart. It converts the total from dollars into
    the account's currency, charges the account, pays the shop, prints the
    receipt and returns `True`. An `OrganizationAccount` also converts its
    limit. If the charge is refused, the goods go back into stock, the reason
    is printed and the method returns `False`.

### `grocerybank.cli`

- `main(argv=None)` runs the demonstration session and returns 0.

## What it does not do

Stock, accounts and the shop's takings live only in memory. Nothing is saved
between runs. The command does not read a customer's choices. It only runs the
fixed demonstration session.