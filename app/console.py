import logging
import sys
from typing import Callable

from bank.config import settings
from bank.logging_config import setup_logging
from bank.rates import RateTable
from bank.registry import Registry
from bank.validation import (
    DEPOSIT_TYPE_PROMPT,
    parse_amount,
    parse_client_id,
    parse_client_name,
    parse_deposit_type,
    prompt_until_valid,
)

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "\nBank Management System\n"
    "1. Add Client\n"
    "2. Add Deposit to Client\n"
    "3. Replenish Deposit\n"
    "4. Calculate Total Interest\n"
    "5. List Clients\n"
    "6. Exit\n"
)


class ConsoleMenu:
    """Text menu over a Registry.

    ``read`` returns one line of input (raising EOFError when exhausted) and
    ``write`` emits text verbatim, so tests can drive the menu with a script.
    """

    def __init__(self, registry: Registry, read: Callable[[], str], write: Callable[[str], None]):
        self.registry = registry
        self.read = read
        self.write = write
        self.actions = {
            "1": self.add_client,
            "2": self.add_deposit,
            "3": self.replenish,
            "4": self.total_interest,
            "5": self.list_clients,
        }

    def run(self) -> None:
        self.write(INSTRUCTIONS)
        while True:
            self.write("Select an option: ")
            try:
                choice = self.read().strip()
                if choice == "6":
                    break
                action = self.actions.get(choice)
                if action is None:
                    self.write("Invalid choice, please try again.\n")
                    continue
                action()
            except EOFError:
                break

    def _client_id(self) -> int:
        return prompt_until_valid(self.read, self.write, parse_client_id)

    def _amount(self) -> float:
        return prompt_until_valid(self.read, self.write, parse_amount)

    def add_client(self) -> None:
        self.write("Enter Client ID: ")
        client_id = self._client_id()
        self.write("Enter Client Name: ")
        name = prompt_until_valid(self.read, self.write, parse_client_name)
        self.registry.add_client(client_id, name)
        self.write("Client added successfully.\n")

    def add_deposit(self) -> None:
        self.write("Enter Client ID: ")
        client_id = self._client_id()
        self.write("Enter Deposit Amount: ")
        amount = self._amount()
        category = prompt_until_valid(self.read, self.write, parse_deposit_type, DEPOSIT_TYPE_PROMPT)

        result = self.registry.attach_deposit(client_id, amount, category)
        if result.is_left():
            self.write(result.get_error()["message"] + "\n")
            return
        replaced = result.get_or_else(None).replaced
        if replaced is not None:
            self.write(f"Warning: previous deposit of {replaced.amount:g} was replaced.\n")
        self.write(f"Deposit added to client ID {client_id}\n")

    def replenish(self) -> None:
        self.write("Enter Client ID: ")
        client_id = self._client_id()
        self.write("Enter Amount to Replenish: ")
        amount = self._amount()

        result = self.registry.deposit_to_client(client_id, amount)
        if result.is_left():
            self.write(result.get_error()["message"] + "\n")
        else:
            self.write(f"Deposit added to client ID {client_id}\n")

    def total_interest(self) -> None:
        result = self.registry.total_interest()
        if result.is_left():
            self.write(result.get_error()["message"] + "\n")
        self.write(f"Total Interest for all clients: {result.get_or_else(0.0):g}\n")

    def list_clients(self) -> None:
        self.write("Listing all clients:\n")
        result = self.registry.list_clients()
        if result.is_left():
            self.write(result.get_error()["message"] + "\n")
            return
        for record in result.get_or_else(()):
            self.write(f"{record}\n")


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main() -> int:
    setup_logging(settings.log_level)
    registry = Registry(RateTable.from_settings(settings))
    logger.info("Console menu started", extra={"rates": {"savings": registry.rates.savings, "fixed": registry.rates.fixed}})
    ConsoleMenu(registry, _read_line, _write).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
