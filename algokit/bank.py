"""A single bank account with deposits, withdrawals and a printable summary."""

from __future__ import annotations

from dataclasses import dataclass


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, message: str = "Cannot Withdraw Amount") -> None:
        super().__init__(message)


@dataclass
class Account:
    """A bank account identified by its number."""

    number: int
    name: str
    account_type: str
    balance: float = 0.0

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        if amount < 0:
            raise ValueError("deposit amount must not be negative")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` from the balance and return the new balance.

        Raises InsufficientFundsError, leaving the balance untouched, when
        ``amount`` is larger than the balance.
        """
        if amount < 0:
            raise ValueError("withdrawal amount must not be negative")
        if amount > self.balance:
            raise InsufficientFundsError()
        self.balance -= amount
        return self.balance

    def describe(self) -> str:
        """Return the account details, one field per line."""
        return "\n".join(
            [
                "----------------------",
                f"Account No. : {self.number}",
                f"Name : {self.name}",
                f"Account Type : {self.account_type}",
                f"Balance : {self.balance:g}",
            ]
        )