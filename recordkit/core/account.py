from __future__ import annotations

import math
from collections.abc import MutableMapping
from typing import Any, Union

from .errors import InsufficientFundsError, InvalidAmountError, InvalidArgumentError, InvalidTargetError
from .kinds import is_number
from .record import FrozenRecord

Number = Union[int, float]


def is_finite_number(value: Any) -> bool:
    return is_number(value) and (not isinstance(value, float) or math.isfinite(value))


def format_amount(amount: Number, currency: str = "$") -> str:
    if isinstance(amount, float) and not amount.is_integer():
        return f"{currency}{amount:.2f}"
    return f"{currency}{int(amount)}"


class Account:
    """
    Account record with a computed `balance` backed by `_balance`.

    Every write through `balance` refreshes `formatted_balance`.
    NaN and infinite balances are rejected.
    """

    def __init__(self, balance: Number = 0, *, currency: str = "$"):
        self.currency = currency
        self._balance: Number = 0
        self.formatted_balance = format_amount(0, currency)
        self.balance = balance

    @property
    def balance(self) -> Number:
        return self._balance

    @balance.setter
    def balance(self, amount: Number) -> None:
        if not is_finite_number(amount):
            raise InvalidArgumentError(
                code="account.invalid_balance",
                message="Balance must be a finite number",
                data={"balance": repr(amount)},
            )
        self._balance = amount
        self.formatted_balance = format_amount(amount, self.currency)

    def transfer(self, target: Any, amount: Any, *, allow_overdraft: bool = False) -> None:
        transfer(self, target, amount, allow_overdraft=allow_overdraft)

    def __repr__(self) -> str:
        return "Account(balance={!r}, formatted_balance={!r})".format(self._balance, self.formatted_balance)


def _read_balance(target: Any) -> Any:
    if isinstance(target, MutableMapping):
        return target.get("balance")
    return getattr(target, "balance", None)


def _balance_writable(target: Any) -> bool:
    if isinstance(target, FrozenRecord):
        return not target.is_frozen("balance")
    if isinstance(target, MutableMapping):
        return True
    prop = getattr(type(target), "balance", None)
    if isinstance(prop, property):
        return prop.fset is not None
    return True


def _write_balance(target: Any, value: Number) -> None:
    if isinstance(target, MutableMapping):
        target["balance"] = value
    else:
        target.balance = value


def transfer(source: Any, target: Any, amount: Any, *, allow_overdraft: bool = False) -> None:
    """
    Move `amount` from `source` to `target`.

    `target` may be an Account, any object with a numeric `balance` attribute,
    or a mutable mapping with a numeric "balance" key; a read-only balance
    makes it incompatible. Every check runs before anything is debited, and
    insufficient funds are rejected unless `allow_overdraft` is set.
    """
    if target is None or not is_finite_number(_read_balance(target)) or not _balance_writable(target):
        raise InvalidTargetError(code="transfer.invalid_target", message="Invalid target account")
    if not is_finite_number(amount) or not amount > 0:
        raise InvalidAmountError(
            code="transfer.invalid_amount",
            message="Invalid transfer amount",
            data={"amount": repr(amount)},
        )
    source_balance = _read_balance(source)
    if not is_finite_number(source_balance) or not _balance_writable(source):
        raise InvalidArgumentError(code="transfer.invalid_source", message="Invalid source account")
    if not allow_overdraft and source_balance < amount:
        raise InsufficientFundsError(
            code="transfer.insufficient_funds",
            message="Insufficient funds",
            data={"balance": source_balance, "amount": amount},
        )

    _write_balance(source, source_balance - amount)
    _write_balance(target, _read_balance(target) + amount)
