import unittest
from types import SimpleNamespace

from recordkit.core.account import Account, format_amount, transfer
from recordkit.core.errors import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidTargetError,
)
from recordkit.core.record import freeze_record


class TestAccountBalance(unittest.TestCase):
    def test_setter_updates_backing_and_formatted(self) -> None:
        acct = Account(1000)
        acct.balance = 500
        self.assertEqual(acct._balance, 500)
        self.assertEqual(acct.balance, 500)
        self.assertEqual(acct.formatted_balance, "$500")

    def test_initial_formatted_balance(self) -> None:
        self.assertEqual(Account(1000).formatted_balance, "$1000")
        self.assertEqual(Account(12.5, currency="€").formatted_balance, "€12.50")

    def test_format_amount(self) -> None:
        self.assertEqual(format_amount(7), "$7")
        self.assertEqual(format_amount(7.0), "$7")
        self.assertEqual(format_amount(0.1), "$0.10")

    def test_rejects_non_numeric_balance(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Account("1000")
        with self.assertRaises(InvalidArgumentError):
            Account(True)

    def test_rejects_non_finite_balance(self) -> None:
        for value in (float("nan"), float("inf")):
            with self.assertRaises(InvalidArgumentError):
                Account(value)
        acct = Account(10)
        with self.assertRaises(InvalidArgumentError):
            acct.balance = float("nan")
        self.assertEqual(acct.balance, 10)
        self.assertEqual(acct.formatted_balance, "$10")


class TestTransfer(unittest.TestCase):
    def test_transfer_between_accounts(self) -> None:
        source = Account(1000)
        target = Account(0)
        source.transfer(target, 500)
        self.assertEqual(source.balance, 500)
        self.assertEqual(source.formatted_balance, "$500")
        self.assertEqual(target.balance, 500)
        self.assertEqual(target.formatted_balance, "$500")

    def test_transfer_to_plain_record_and_object(self) -> None:
        source = Account(1000)
        record = {"balance": 0}
        obj = SimpleNamespace(balance=10)
        transfer(source, record, 300)
        transfer(source, obj, 200)
        self.assertEqual(record["balance"], 300)
        self.assertEqual(obj.balance, 210)
        self.assertEqual(source.balance, 500)

    def test_insufficient_funds_rejected_before_debit(self) -> None:
        source = Account(100)
        target = Account(0)
        with self.assertRaises(InsufficientFundsError) as cm:
            transfer(source, target, 101)
        self.assertEqual(cm.exception.message, "Insufficient funds")
        self.assertEqual(source.balance, 100)
        self.assertEqual(target.balance, 0)

    def test_overdraft_allowed_when_requested(self) -> None:
        source = Account(100)
        target = Account(0)
        transfer(source, target, 150, allow_overdraft=True)
        self.assertEqual(source.balance, -50)
        self.assertEqual(source.formatted_balance, "$-50")
        self.assertEqual(target.balance, 150)

    def test_invalid_target(self) -> None:
        source = Account(100)
        for target in (None, {}, {"balance": "10"}, SimpleNamespace(), {"balance": True}):
            with self.assertRaises(InvalidTargetError):
                transfer(source, target, 10)
        self.assertEqual(source.balance, 100)

    def test_invalid_amount(self) -> None:
        source = Account(100)
        target = Account(0)
        for amount in (0, -5, "5", None, True, float("nan"), float("inf")):
            with self.assertRaises(InvalidAmountError):
                transfer(source, target, amount)
        self.assertEqual(source.balance, 100)

    def test_nan_amount_leaves_balances_untouched(self) -> None:
        source = Account(100)
        target = Account(0)
        with self.assertRaises(InvalidAmountError):
            transfer(source, target, float("nan"))
        self.assertEqual(source.balance, 100)
        self.assertEqual(source.formatted_balance, "$100")
        self.assertEqual(target.balance, 0)

    def test_frozen_target_rejected_before_debit(self) -> None:
        source = Account(100)
        target = freeze_record({"balance": 0})
        with self.assertRaises(InvalidTargetError):
            transfer(source, target, 40)
        self.assertEqual(source.balance, 100)
        self.assertEqual(target["balance"], 0)

    def test_read_only_property_target_rejected(self) -> None:
        class Statement:
            @property
            def balance(self):
                return 5

        source = Account(100)
        with self.assertRaises(InvalidTargetError):
            transfer(source, Statement(), 10)
        self.assertEqual(source.balance, 100)

    def test_frozen_source_rejected(self) -> None:
        source = freeze_record({"balance": 100})
        target = Account(0)
        with self.assertRaises(InvalidArgumentError):
            transfer(source, target, 10)
        self.assertEqual(source["balance"], 100)
        self.assertEqual(target.balance, 0)

    def test_invalid_amount_is_an_argument_error(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            transfer(Account(10), Account(0), -1)


if __name__ == "__main__":
    unittest.main()
