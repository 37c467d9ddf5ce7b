from datetime import datetime

import pytest

from sessionlore.model import Mode, Session, Turn, ViewState
from sessionlore.render_detail import (
    extract_tool_name,
    render_detail_footer,
    render_detail_header,
    turn_prefixes,
)


def detail_state(turns, cursor=0):
    return ViewState(
        projects_dir="/d",
        mode=Mode.DETAIL,
        detail_session=Session(
            slug="test-session",
            project="p",
            branch="b",
            timestamp=datetime(2026, 5, 1, 14, 30),
        ),
        turns=turns,
        cursor_detail=cursor,
        width=100,
        height=40,
    )


THREE_TURNS = [
    Turn(kind="user", body="first message"),
    Turn(kind="asst", body="first response"),
    Turn(kind="user", body="second message"),
]


def test_header_shows_first_turn_position():
    out = render_detail_header(detail_state(list(THREE_TURNS), 0))
    assert "turn 1/3" in out


def test_header_shows_last_turn_position():
    out = render_detail_header(detail_state(list(THREE_TURNS), 2))
    assert "turn 3/3" in out


def test_header_no_turn_indicator_when_empty():
    out = render_detail_header(detail_state([]))
    assert "turn " not in out


def test_header_skips_thinking_turns_in_count():
    turns = [Turn(kind="user", body="a"), Turn(kind="thinking"), Turn(kind="asst", body="b")]
    assert "turn 1/2" in render_detail_header(detail_state(turns))


def test_header_single_line_with_fields():
    state = detail_state([Turn(kind="user", body="hi")])
    state.detail_session = Session(
        slug="x", project="proj", branch="main", timestamp=datetime(2026, 5, 1, 9, 0)
    )
    out = render_detail_header(state)
    assert "\n" not in out
    assert "x · proj · main   2026-05-01" in out


def test_footer_mentions_expand_and_copy_not_thinking():
    out = render_detail_footer(detail_state([Turn(kind="user", body="msg")]))
    assert "thinking" not in out
    assert "expand" in out
    assert "copy" in out
    assert "copied" not in out


def test_footer_shows_copied():
    state = detail_state([Turn(kind="user", body="msg")])
    state.just_copied = True
    assert "✓ copied" in render_detail_footer(state)


def test_footer_has_back_hint():
    assert "q/esc/h/← back" in render_detail_footer(detail_state([Turn(kind="user", body="hi")]))


def test_footer_flash_takes_precedence():
    state = detail_state([Turn(kind="user", body="hi")])
    state.flash_msg = "FLASH-DETAIL"
    out = render_detail_footer(state)
    assert "FLASH-DETAIL" in out
    assert "q/esc/h/← back" not in out
    assert "q quit" not in out


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("user", (" user │ ", "      │ ")),
        ("asst", (" asst │ ", "      │ ")),
        ("thinking", (" think │ 〰 ", "       │   ")),
        ("tool", ("      │ ▸ ", "      │   ")),
        ("other", ("      │ ", "      │ ")),
    ],
)
def test_turn_prefixes(kind, expected):
    assert turn_prefixes(kind) == expected


@pytest.mark.parametrize(
    "body, expected",
    [("Edit /x.go", "Edit"), ("Write /y.go", "Write"), ("Bash ls -la", "Bash"), ("Read", "Read"), ("", "")],
)
def test_extract_tool_name(body, expected):
    assert extract_tool_name(body) == expected