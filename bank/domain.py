from dataclasses import dataclass, field
from typing import Optional

from bank.rates import DEFAULT_RATES, DepositCategory, RateTable

NO_DEPOSIT = "No deposit"


@dataclass
class Deposit:
    amount: float
    category: DepositCategory
    rates: RateTable = field(default=DEFAULT_RATES, repr=False)

    def interest(self) -> float:
        return self.amount * self.rates.rate_for(self.category)

    # callers are expected to reject non-positive deltas
    def add_amount(self, delta: float) -> None:
        self.amount += delta


@dataclass(frozen=True)
class ClientRecord:
    id: int
    name: str
    amount: Optional[float]          # None when the client has no deposit
    category: Optional[DepositCategory] = None
    interest: float = 0.0

    @property
    def has_deposit(self) -> bool:
        return self.amount is not None

    def __str__(self) -> str:
        deposit = f"{self.amount:g}" if self.has_deposit else NO_DEPOSIT
        return f"Client ID: {self.id}, Name: {self.name}, Deposit: {deposit}"


@dataclass
class Client:
    id: int
    name: str
    deposit: Optional[Deposit] = None

    def add_deposit(self, deposit: Deposit) -> Optional[Deposit]:
        """Attach ``deposit``, returning the one it replaced (if any)."""
        previous, self.deposit = self.deposit, deposit
        return previous

    def interest(self) -> float:
        return self.deposit.interest() if self.deposit else 0.0

    def deposit_amount(self, delta: float) -> None:
        if self.deposit:
            self.deposit.add_amount(delta)

    def describe(self) -> ClientRecord:
        if self.deposit is None:
            return ClientRecord(id=self.id, name=self.name, amount=None)
        return ClientRecord(
            id=self.id,
            name=self.name,
            amount=self.deposit.amount,
            category=self.deposit.category,
            interest=self.deposit.interest(),
        )
