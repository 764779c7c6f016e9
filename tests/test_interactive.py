import io

from ggcli.console import Console
from ggcli.interactive import (
    COMMANDS,
    CommandPicker,
    extract_placeholders,
    fill_placeholders,
    interactive_ui,
)

ENTER = 13
CTRL_N = 14
CTRL_P = 16
BACKSPACE = 127


def type_text(picker, text):
    for char in text:
        picker.feed(ord(char))


def test_extract_placeholders_in_order():
    assert extract_placeholders("remote add <name> <url>") == ["name", "url"]


def test_extract_placeholders_none():
    assert extract_placeholders("branch current") == []


def test_fill_placeholders_replaces_values():
    result = fill_placeholders("remote set-url <name> <url>", {"name": "origin", "url": "u"})
    assert result == "remote set-url origin u"


def test_fill_then_extract_leaves_nothing():
    template = "remote add <name> <url>"
    values = {name: "x" for name in extract_placeholders(template)}
    assert extract_placeholders(fill_placeholders(template, values)) == []


def test_filtered_matches_substring():
    picker = CommandPicker()
    type_text(picker, "stash")
    assert picker.filtered() == ["stash trash", "stash-pull-pop"]


def test_empty_query_lists_everything():
    picker = CommandPicker()
    assert picker.filtered() == list(COMMANDS)


def test_enter_selects_first_match():
    picker = CommandPicker()
    type_text(picker, "stash")
    assert picker.feed(ENTER) is True
    assert picker.choice == "stash trash"


def test_ctrl_n_moves_down_and_ctrl_p_up():
    picker = CommandPicker()
    type_text(picker, "stash")
    picker.feed(CTRL_N)
    picker.feed(CTRL_N)
    assert picker.selected == 1
    picker.feed(CTRL_P)
    picker.feed(CTRL_P)
    assert picker.selected == 0
    picker.feed(CTRL_N)
    picker.feed(ENTER)
    assert picker.choice == "stash-pull-pop"


def test_backspace_removes_last_character():
    picker = CommandPicker()
    type_text(picker, "logx")
    picker.feed(BACKSPACE)
    assert picker.query == "log"
    picker.feed(8)
    assert picker.query == "lo"


def test_non_printable_bytes_ignored():
    picker = CommandPicker()
    picker.feed(3)
    picker.feed(200)
    assert picker.query == ""
    assert picker.finished is False


def test_enter_without_match_finishes_without_choice():
    picker = CommandPicker()
    type_text(picker, "zzz")
    assert picker.feed(ENTER) is True
    assert picker.choice is None


def test_selection_clamped_when_filter_narrows():
    picker = CommandPicker()
    type_text(picker, "stash")
    picker.feed(CTRL_N)
    type_text(picker, " ")
    picker.feed(ENTER)
    assert picker.choice == "stash trash"


def test_render_highlights_selected():
    picker = CommandPicker()
    type_text(picker, "stash")
    screen = picker.render()
    assert "\r> stash trash\n" in screen
    assert "\r  stash-pull-pop\n" in screen
    assert "\rSearch: stash\n\n" in screen


def test_render_empty_query_shows_hint():
    screen = CommandPicker().render()
    assert "(Type to filter commands...)" in screen
    assert screen.startswith("\033[H\033[2J\033[H")


def test_render_no_match():
    picker = CommandPicker()
    type_text(picker, "zzz")
    assert "  (No matching command)" in picker.render()


def test_custom_command_list():
    picker = CommandPicker(["alpha", "beta"])
    type_text(picker, "et")
    picker.feed(ENTER)
    assert picker.choice == "beta"


def test_interactive_ui_without_terminal_returns_none():
    out = io.StringIO()
    console = Console(io.StringIO(""), out)
    assert interactive_ui(console) is None
    assert out.getvalue().startswith("Failed to set terminal to raw mode:")