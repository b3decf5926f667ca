from bank.rates import DepositCategory
from bank.validation import (
    parse_amount,
    parse_client_id,
    parse_client_name,
    parse_deposit_type,
    prompt_until_valid,
)


def make_reader(lines):
    it = iter(lines)

    def read() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_parse_amount():
    assert parse_amount("150").get_or_else(None) == 150.0
    assert parse_amount(" 12.5\n").get_or_else(None) == 12.5
    assert parse_amount("-3").get_or_else(None) == -3.0


def test_parse_amount_rejects_text_and_non_finite():
    for text in ("abc", "", "12,5", "nan", "inf"):
        result = parse_amount(text)
        assert result.is_left()
        assert result.get_error()["error"] == "invalid_amount"
        assert "amount in digits" in result.get_error()["message"]


def test_parse_client_id():
    assert parse_client_id("42").get_or_else(None) == 42
    assert parse_client_id("4.2").is_left()
    assert parse_client_id("x").get_error()["error"] == "invalid_client_id"


def test_parse_client_name():
    assert parse_client_name("Alice\n").get_or_else(None) == "Alice"
    for text in ("Alice1", "Mary Jane", "", "Zoë"):
        assert parse_client_name(text).get_error()["error"] == "invalid_client_name"


def test_parse_deposit_type():
    assert parse_deposit_type("0").get_or_else(None) is DepositCategory.SAVINGS
    assert parse_deposit_type("1").get_or_else(None) is DepositCategory.FIXED
    for text in ("2", "-1", "fixed", ""):
        assert parse_deposit_type(text).get_error()["error"] == "invalid_deposit_type"


def test_prompt_until_valid_reprompts():
    written = []
    value = prompt_until_valid(make_reader(["abc", "1x", "7"]), written.append, parse_client_id)

    assert value == 7
    assert written == ["Invalid input. Please enter a numeric Client ID: "] * 2


def test_prompt_until_valid_repeats_prompt():
    written = []
    value = prompt_until_valid(make_reader(["5", "1"]), written.append, parse_deposit_type, "Type? ")

    assert value is DepositCategory.FIXED
    assert written == [
        "Type? ",
        "Invalid input. Please select 0 for Savings or 1 for Fixed.\n",
        "Type? ",
    ]


def test_prompt_until_valid_propagates_eof():
    try:
        prompt_until_valid(make_reader(["bad"]), lambda _: None, parse_amount)
    except EOFError:
        pass
    else:
        raise AssertionError("expected EOFError")
