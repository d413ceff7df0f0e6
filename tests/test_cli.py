from grocerybank.cli import main
from grocerybank.shop import Shop


def _run(capsys):
    till_before = Shop.get_balance()
    status = main([])
    return status, capsys.readouterr().out, Shop.get_balance() - till_before


def test_main_returns_zero(capsys):
    status, _, _ = _run(capsys)
    assert status == 0


def test_main_reports_limit_and_funds_errors(capsys):
    _, out, _ = _run(capsys)
    assert "Your purchase and money transfer limit has been reached today." in out
    assert "your account ballance is not enough." in out


def test_main_reports_short_stock(capsys):
    _, out, _ = _run(capsys)
    assert "Sorry!Theres no enough amount of: chips!!" in out
    assert "Sorry!Theres no enough amount of: apple!!" in out


def test_main_prints_receipts_for_paying_customers(capsys):
    _, out, till = _run(capsys)
    assert "Dear mina, thank you for your choice." in out
    assert "Dear fafa, thank you for your choice." in out
    assert "Dear faf," not in out
    assert "Dear fa," not in out
    assert till > 0


def test_main_is_repeatable(capsys):
    _, first, till_first = _run(capsys)
    _, second, till_second = _run(capsys)
    assert first == second
    assert till_first == till_second