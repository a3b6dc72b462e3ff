"""A bank account that guards its balance against invalid changes."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class InsufficientBalanceError(ValueError):
    """Raised when a withdrawal is not positive or exceeds the balance."""


class BankAccount:
    """A named account whose balance never goes below zero."""

    def __init__(self, name: str, initial: float) -> None:
        self._name = name
        self._balance = initial if initial >= 0 else 0

    @property
    def name(self) -> str:
        """The account holder's name."""
        return self._name

    @property
    def balance(self) -> float:
        """The current balance."""
        return self._balance

    def deposit(self, amount: float) -> None:
        """Add a positive amount; other amounts are ignored."""
        if amount > 0:
            self._balance += amount

    def withdraw(self, amount: float) -> None:
        """Take a positive amount no larger than the balance."""
        if not 0 < amount <= self._balance:
            raise InsufficientBalanceError("Insufficient balance!")
        self._balance -= amount


def main(argv: Sequence[str] | None = None) -> int:
    """Show an account refusing an overdraft, then print its balance."""
    account = BankAccount("Alice", 1000)
    account.deposit(500)
    try:
        account.withdraw(2000)
    except InsufficientBalanceError as exc:
        sys.stdout.write(f"{exc}\n")
    sys.stdout.write(f"{account.name} has ${account.balance:g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())