"""A sample shopping session run from the command line."""

from __future__ import annotations

import argparse

from .bank import OrganizationAccount, PersonalAccount
from .currency import Curr
from .item import Fruit, Seasoning, Snack


def _take(account, item, amount):
    try:
        account.take(item, amount)
    except ValueError as exc:
        print(exc)


def main(argv=None):
    """Run a fixed shopping session with four customers and print the results."""
    parser = argparse.ArgumentParser(
        prog="grocerybank",
        description="Run a sample shopping session with four bank customers.",
    )
    parser.parse_args(argv)

    per1 = PersonalAccount("mina", 123456, Curr.EUR, 1001)
    per2 = OrganizationAccount("fafa", 999999, Curr.IRR, 500)
    per3 = OrganizationAccount("faf", 999999, Curr.IRR, 0)
    per4 = OrganizationAccount("fa", 999999, Curr.IRR, 50000)

    apple = Fruit("apple", 100, 10)
    chips = Snack("chips", 100, 2)
    expensive_chips = Snack("chips", 10000, 2)
    nmd = Seasoning("nmd", 20, 5)

    _take(per4, expensive_chips, 2)
    _take(per3, apple, 2)
    _take(per2, chips, 2)
    _take(per1, chips, 1)
    _take(per1, apple, 6)
    _take(per1, nmd, 3)
    _take(per2, apple, 11)

    for account in (per1, per2, per3, per4):
        account.calculate()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())