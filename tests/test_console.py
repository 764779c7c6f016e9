import io

import pytest

from ggcli.console import (
    Console,
    InvalidSelection,
    choose_many,
    choose_one,
    parse_selection,
)

ITEMS = ["alpha", "beta", "gamma"]


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_and_writeline():
    console, out = make_console("")
    console.write("a")
    console.writeline("b")
    assert out.getvalue() == "ab\n"


def test_read_line_and_eof():
    console, _ = make_console("first\n")
    assert console.read_line() == "first\n"
    assert console.read_line() == ""


def test_prompt_strips_and_echoes():
    console, out = make_console("  answer  \n")
    assert console.prompt("Q: ") == "answer"
    assert out.getvalue() == "Q: "


def test_parse_selection_maps_numbers():
    assert parse_selection("3 1", ITEMS) == ["gamma", "alpha"]


def test_parse_selection_empty():
    assert parse_selection("   ", ITEMS) == []


@pytest.mark.parametrize("token", ["0", "4", "x", "1.5", "-1"])
def test_parse_selection_rejects(token):
    with pytest.raises(InvalidSelection) as info:
        parse_selection(f"1 {token}", ITEMS)
    assert info.value.token == token


def test_choose_one_returns_index():
    console, out = make_console("2\n")
    assert choose_one(console, "Local branches:", ITEMS, "Enter: ") == 1
    assert "Local branches:" in out.getvalue()
    assert "[2] beta" in out.getvalue()


def test_choose_one_empty_answer():
    console, _ = make_console("\n")
    assert choose_one(console, "t", ITEMS, "> ") is None


def test_choose_one_invalid():
    console, _ = make_console("7\n")
    with pytest.raises(InvalidSelection):
        choose_one(console, "t", ITEMS, "> ")


def test_choose_many_all():
    console, _ = make_console("all\n")
    selection = choose_many(console, "Pick", ITEMS)
    assert selection.items == ITEMS
    assert selection.everything is True


def test_choose_many_numbers():
    console, _ = make_console("1 3\n")
    selection = choose_many(console, "Pick", ITEMS)
    assert selection.items == ["alpha", "gamma"]
    assert selection.everything is False


def test_choose_many_cancel():
    console, out = make_console("\n")
    assert choose_many(console, "Pick", ITEMS) is None
    assert "Cancelled." in out.getvalue()


def test_choose_many_eof_cancels():
    console, _ = make_console("")
    assert choose_many(console, "Pick", ITEMS) is None


def test_choose_many_retries_after_invalid_and_none():
    console, out = make_console("9\nnone\n2\n")
    selection = choose_many(console, "Pick", ITEMS)
    assert selection.items == ["beta"]
    text = out.getvalue()
    assert "Invalid number: 9" in text
    assert text.count("Pick") == 3