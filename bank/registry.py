import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from bank.domain import Client, ClientRecord, Deposit
from bank.functional import Either, Maybe, Right, failure, first_some
from bank.rates import DEFAULT_RATES, DepositCategory, RateTable

logger = logging.getLogger(__name__)

NO_CLIENTS = "no_clients"
CLIENT_NOT_FOUND = "client_not_found"
INVALID_AMOUNT = "invalid_amount"
INVALID_CLIENT_OR_AMOUNT = "invalid_client_or_amount"


class AttachResult(NamedTuple):
    client: Client
    replaced: Optional[Deposit]


class Registry:
    """Ordered collection of clients, the single source of truth for the bank.

    Business failures never raise: every operation that can fail returns a
    ``Left`` with ``{"error": <code>, "message": <text>}`` and leaves the
    registry untouched.
    """

    def __init__(self, rates: RateTable = DEFAULT_RATES):
        self.rates = rates
        self._clients: List[Client] = []

    def __len__(self) -> int:
        return len(self._clients)

    def __iter__(self) -> Iterator[Client]:
        return iter(self._clients)

    def is_empty(self) -> bool:
        return not self._clients

    def add_client(self, client_id: int, name: str) -> Client:
        if self.find_by_id(client_id).is_some():
            # lookups keep returning the first client with this id
            logger.warning("Duplicate client id", extra={"client_id": client_id})
        client = Client(id=client_id, name=name)
        self._clients.append(client)
        logger.info("Client added", extra={"client_id": client_id})
        return client

    def find_by_id(self, client_id: int) -> Maybe[Client]:
        return first_some(self._clients, lambda c: c.id == client_id)

    def attach_deposit(
        self, client_id: int, amount: float, category: DepositCategory
    ) -> Either[dict, AttachResult]:
        if not amount >= 0:
            logger.warning("Rejected negative deposit", extra={"client_id": client_id, "amount": amount})
            return failure(INVALID_AMOUNT, "Deposit amount cannot be negative.", amount=amount)

        found = self.find_by_id(client_id).to_either(
            {"error": CLIENT_NOT_FOUND, "message": "Client not found.", "client_id": client_id}
        )
        if found.is_left():
            logger.warning("Client not found", extra={"client_id": client_id})
            return found

        client = found.get_or_else(None)
        replaced = client.add_deposit(Deposit(amount=amount, category=category, rates=self.rates))
        if replaced is not None:
            logger.warning(
                "Existing deposit replaced",
                extra={"client_id": client_id, "discarded_amount": replaced.amount},
            )
        logger.info(
            "Deposit attached",
            extra={"client_id": client_id, "amount": amount, "category": category.value},
        )
        return Right(AttachResult(client, replaced))

    def deposit_to_client(self, client_id: int, amount: float) -> Either[dict, Client]:
        if self.is_empty():
            logger.warning("Replenish on empty registry", extra={"client_id": client_id})
            return self._no_clients()

        client = self.find_by_id(client_id).get_or_else(None)
        if client is None or not amount > 0:
            logger.warning("Replenish rejected", extra={"client_id": client_id, "amount": amount})
            return failure(
                INVALID_CLIENT_OR_AMOUNT,
                "Invalid client ID or amount.",
                client_id=client_id,
                amount=amount,
            )

        client.deposit_amount(amount)
        logger.info("Deposit replenished", extra={"client_id": client_id, "amount": amount})
        return Right(client)

    def total_interest(self) -> Either[dict, float]:
        if self.is_empty():
            return self._no_clients(total=0.0)
        return Right(sum(c.interest() for c in self._clients))

    def list_clients(self) -> Either[dict, Tuple[ClientRecord, ...]]:
        if self.is_empty():
            return self._no_clients()
        return Right(tuple(c.describe() for c in self._clients))

    @staticmethod
    def _no_clients(**details) -> Either:
        return failure(NO_CLIENTS, "No existing client.", **details)
