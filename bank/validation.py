"""Parsers for the values the menus collect from the user.

Every parser takes raw text and returns ``Right(value)`` or a ``Left`` whose
``message`` is the reprompt shown before asking for the same field again.
"""

import math
import re
from typing import Callable, Optional, TypeVar

from bank.functional import Either, Right, failure
from bank.rates import DepositCategory

T = TypeVar('T')

NAME_PATTERN = re.compile(r"^[A-Za-z]+$")

DEPOSIT_TYPE_PROMPT = "Enter Deposit Type (0 for Savings, 1 for Fixed): "

_SELECTORS = {0: DepositCategory.SAVINGS, 1: DepositCategory.FIXED}


def parse_amount(text: str) -> Either[dict, float]:
    try:
        amount = float(text.strip())
    except ValueError:
        amount = math.nan
    if not math.isfinite(amount):
        return failure("invalid_amount", "Invalid input. Please enter amount in digits: ", value=text)
    return Right(amount)


def parse_client_id(text: str) -> Either[dict, int]:
    try:
        return Right(int(text.strip()))
    except ValueError:
        return failure("invalid_client_id", "Invalid input. Please enter a numeric Client ID: ", value=text)


def parse_client_name(text: str) -> Either[dict, str]:
    name = text.strip()
    if not NAME_PATTERN.match(name):
        return failure(
            "invalid_client_name",
            "Invalid input. Please enter letters only for the Client Name: ",
            value=text,
        )
    return Right(name)


def parse_deposit_type(text: str) -> Either[dict, DepositCategory]:
    bad = failure(
        "invalid_deposit_type",
        "Invalid input. Please select 0 for Savings or 1 for Fixed.\n",
        value=text,
    )
    try:
        selector = int(text.strip())
    except ValueError:
        return bad
    if selector not in _SELECTORS:
        return bad
    return Right(_SELECTORS[selector])


def prompt_until_valid(
    read: Callable[[], str],
    write: Callable[[str], None],
    parser: Callable[[str], Either[dict, T]],
    prompt: Optional[str] = None,
) -> T:
    """Read and parse a field, requesting it again until it parses.

    ``prompt`` is written before every attempt; the parser's error message is
    written after each failed one. ``read`` raising EOFError ends the loop.
    """
    while True:
        if prompt:
            write(prompt)
        result = parser(read())
        if result.is_right():
            return result.get_or_else(None)
        write(result.get_error()["message"])
