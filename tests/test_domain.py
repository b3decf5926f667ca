import pytest

from bank.domain import Client, ClientRecord, Deposit
from bank.rates import DEFAULT_RATES, DepositCategory


def test_deposit_interest_matches_rate():
    for amount in (0, 1, 100, 2500.5):
        for category in DepositCategory:
            d = Deposit(amount, category)
            assert d.interest() == amount * DEFAULT_RATES.rate_for(category)


def test_deposit_add_amount_is_additive():
    d = Deposit(100, DepositCategory.SAVINGS)
    d.add_amount(25)
    d.add_amount(75)
    assert d.amount == 200


def test_client_without_deposit():
    c = Client(id=1, name="Alice")
    assert c.deposit is None
    assert c.interest() == 0.0

    c.deposit_amount(50)
    assert c.deposit is None


def test_client_delegates_to_deposit():
    c = Client(id=1, name="Alice")
    assert c.add_deposit(Deposit(100, DepositCategory.SAVINGS)) is None

    c.deposit_amount(50)
    assert c.deposit.amount == 150
    assert c.interest() == pytest.approx(4.5)


def test_client_add_deposit_returns_replaced():
    c = Client(id=1, name="Alice")
    first = Deposit(100, DepositCategory.SAVINGS)
    c.add_deposit(first)

    replaced = c.add_deposit(Deposit(300, DepositCategory.FIXED))
    assert replaced is first
    assert c.deposit.amount == 300
    assert c.interest() == pytest.approx(15.0)


def test_describe_without_deposit():
    record = Client(id=7, name="Bob").describe()
    assert record == ClientRecord(id=7, name="Bob", amount=None)
    assert not record.has_deposit
    assert str(record) == "Client ID: 7, Name: Bob, Deposit: No deposit"


def test_describe_with_deposit():
    c = Client(id=2, name="Carol")
    c.add_deposit(Deposit(200, DepositCategory.FIXED))
    record = c.describe()

    assert record.amount == 200
    assert record.category is DepositCategory.FIXED
    assert record.interest == pytest.approx(10.0)
    assert str(record) == "Client ID: 2, Name: Carol, Deposit: 200"


def test_describe_is_a_snapshot():
    c = Client(id=2, name="Carol")
    c.add_deposit(Deposit(200, DepositCategory.FIXED))
    record = c.describe()
    c.deposit_amount(100)
    assert record.amount == 200
