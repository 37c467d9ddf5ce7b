"""Header, footer and turn prefixes of the session detail view."""

from __future__ import annotations

from sessionlore.model import ViewState
from sessionlore.render import FLASH_STYLE, FOOTER_STYLE, HEADER_STYLE

_PREFIXES = {
    "user": (" user │ ", "      │ "),
    "asst": (" asst │ ", "      │ "),
    "thinking": (" think │ 〰 ", "       │   "),
    "tool": ("      │ ▸ ", "      │   "),
}
_DEFAULT_PREFIXES = ("      │ ", "      │ ")


def turn_prefixes(kind: str) -> tuple[str, str]:
    """The first-line and continuation-line prefixes for a turn kind."""
    return _PREFIXES.get(kind, _DEFAULT_PREFIXES)


def extract_tool_name(body: str) -> str:
    """The tool name: the first space-separated word of a tool turn's body."""
    return body.split(" ", 1)[0]


def render_detail_header(state: ViewState) -> str:
    """Slug, project, branch, date and turn position of the open session."""
    session = state.detail_session
    day = session.timestamp.date().isoformat()
    visible = state.visible_turns()
    turn_info = f"   turn {state.cursor_detail + 1}/{len(visible)}" if visible else ""
    return HEADER_STYLE.render(
        f" {session.slug} · {session.project} · {session.branch}   {day}{turn_info}"
    )


def render_detail_footer(state: ViewState) -> str:
    """Key hints for the detail view, or the current flash message."""
    if state.flash_msg:
        return FLASH_STYLE.render(" " + state.flash_msg)
    copy_status = "  ✓ copied" if state.just_copied else ""
    return FOOTER_STYLE.render(
        " j/k move   d/u page   g/G top/bottom   space expand   y copy   r run"
        "   R resume   m bookmark   / search   ? help   q/esc/h/← back" + copy_status
    )