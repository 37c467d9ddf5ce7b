"""Shared rendering pieces: styles, layout constants, rows and help overlays."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sessionlore.model import Mode, Session

# Column layout shared by list and search rows.
PROJECT_COL_WIDTH = 12
BRANCH_COL_WIDTH = 20
# cursor (2) + mark (1) + space (1) + time (5) + gap (2) + project + gap (2)
# + branch + gap (2) when the row carries a trailing query column.
FIXED_COLS = 48
MIN_QUERY_WIDTH = 10

# Height bound of the prompt box in the re-run view.
RERUN_MAX_LINES = 5
# Character budget for search-result snippets.
SNIPPET_MAX_LEN = 80

DEFAULT_DIVIDER_WIDTH = 80


@dataclass(frozen=True)
class Style:
    """A terminal text style: optional bold and 256-colour foreground."""

    bold: bool = False
    foreground: int | None = None

    def _sgr(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.foreground is not None:
            codes.append(f"38;5;{self.foreground}")
        return ";".join(codes)

    def render(self, text: str) -> str:
        """Wrap each line of text in the escape sequences for this style."""
        sgr = self._sgr()
        if not sgr:
            return text
        return "\n".join(
            f"\x1b[{sgr}m{line}\x1b[0m" if line else line for line in text.split("\n")
        )


HEADER_STYLE = Style(bold=True)
BUCKET_STYLE = Style(foreground=244)
SELECTED_STYLE = Style(bold=True, foreground=212)
FOOTER_STYLE = Style(foreground=244)
FLASH_STYLE = Style(foreground=214)
ERROR_STYLE = Style(foreground=196)
DIFF_ADD_STYLE = Style(foreground=10)
DIFF_REMOVE_STYLE = Style(foreground=9)


def render_divider(width: int) -> str:
    """A horizontal rule of the given width; narrow or unknown widths use 80."""
    if width < 4:
        width = DEFAULT_DIVIDER_WIDTH
    return "─" * width


def plural(n: int) -> str:
    """The plural suffix for a count: empty for one, "s" otherwise."""
    suffix = "s"
    if n == 1:
        suffix = ""
    return suffix


def pad_trunc(s: str, max_len: int) -> str:
    """Pad s with spaces to max_len characters, or cut it and end with an ellipsis."""
    if len(s) <= max_len:
        return s + " " * (max_len - len(s))
    if max_len <= 1:
        return s[:max_len]
    return s[: max_len - 1] + "…"


def count_projects(sessions: Iterable[Session]) -> int:
    """Number of distinct working directories among the sessions."""
    return len({s.cwd for s in sessions})


def render_row(session: Session, selected: bool, bookmarked: bool, width: int) -> str:
    """One row of the session list: cursor, bookmark, time, project, branch, query."""
    cursor = " ►" if selected else "  "
    mark = "★" if bookmarked else " "
    query = session.query or session.slug
    query_width = max(width - FIXED_COLS, MIN_QUERY_WIDTH)
    row = (
        f"{cursor}{mark} {session.timestamp.strftime('%H:%M')}  "
        f"{pad_trunc(session.project, PROJECT_COL_WIDTH):<{PROJECT_COL_WIDTH}}  "
        f"{pad_trunc(session.branch, BRANCH_COL_WIDTH):<{BRANCH_COL_WIDTH}}  "
        f"{pad_trunc(query, query_width)}"
    )
    return SELECTED_STYLE.render(row) if selected else row


_BOX_INNER_WIDTH = 76


def _box(title: str, lines: list[str]) -> str:
    top = f" ┌─ {title} ".ljust(_BOX_INNER_WIDTH + 2, "─") + "┐"
    blank = " │" + " " * _BOX_INNER_WIDTH + "│"
    body = [" │" + line.ljust(_BOX_INNER_WIDTH) + "│" for line in lines]
    bottom = " └" + "─" * _BOX_INNER_WIDTH + "┘"
    return "\n".join([top, blank, *body, blank, bottom])


_HELP: dict[Mode, tuple[str, list[str]]] = {
    Mode.LIST: (
        "List Mode Help",
        [
            "  Navigation:",
            "    j/k, ↑/↓     Move cursor",
            "    d/u          Half-page down/up",
            "    g/G          Jump to top/bottom",
            "    enter, l, →  Open the highlighted session",
            "",
            "  Filtering:",
            "    p             Filter to one project (inline)",
            "    b             Filter to one branch (inline)",
            "    f             Fuzzy filter across slug, project, and branch",
            "    M             Toggle bookmark-only filter",
            "    esc           Clear filter",
            "",
            "  Other:",
            "    m             Bookmark / unbookmark the selected session",
            "    R             Resume session (claude --resume <id>)",
            "    P             Open project view for current session's CWD",
            "    S             Open usage stats panel (token counts + estimated cost)",
            "    T             Open timeline activity heatmap",
            "    /             Enter full-text search",
            "    ?             Show this help overlay",
            "    q             Quit",
        ],
    ),
    Mode.DETAIL: (
        "Detail Mode Help",
        [
            "  Navigation:",
            "    j/k, ↑/↓     Scroll through turns",
            "    d/u          Half-page down/up",
            "    g/G          Jump to top/bottom",
            "",
            "  Turn Actions:",
            "    space         Expand/collapse tool turn; Agent ⧑ loads sidechain",
            "    y             Copy the nearest user prompt to clipboard",
            "    r             Enter re-run mode with the selected user prompt",
            "    R             Resume this session (claude --resume <id>)",
            "    m             Bookmark / unbookmark this session",
            "",
            "  Other:",
            "    /             Enter full-text search",
            "    ?             Show this help overlay",
            "",
            "  Return to List:",
            "    esc, q, h, ←  Back to the session list",
        ],
    ),
    Mode.SEARCH: (
        "Search Mode Help",
        [
            "  Search Entry:",
            "    Type         Build search query",
            "                 Prefix syntax: project:<name>  branch:<name>",
            "    enter        Run search (FTS5 index or linear scan)",
            "    esc          Cancel, return to list",
            "",
            "  Search Results:",
            "    j/k, ↑/↓     Move through results (sorted by hit count)",
            "    d/u          Half-page down/up",
            "    g/G          Jump to top/bottom",
            "    enter        Open the selected session in detail",
            "    /            Re-search (edit query)",
            "    esc, q, h, ← Back to list",
            "    ?            Show this help overlay",
        ],
    ),
    Mode.PROJECT: (
        "Project Mode Help",
        [
            "  Navigation:",
            "    j/k, ↑/↓     Move within the project's sessions",
            "    d/u          Half-page down/up",
            "    g/G          Jump to top/bottom",
            "    enter        Open session detail",
            "",
            "  Return to List:",
            "    esc, q, h, ← Back to session list",
            "    ?            Show this help overlay",
            "",
            "  Sessions are grouped by branch (latest branch first).",
        ],
    ),
    Mode.RERUN: (
        "Re-run Mode Help",
        [
            "  Actions:",
            "    enter        Spawn 'claude' with the chosen prompt",
            "                 (subprocess owns the TTY; lore exits cleanly on return)",
            "    esc, q, h, ← Cancel and return to detail view",
            "    ?            Show this help overlay",
        ],
    ),
    Mode.STATS: (
        "Usage Stats Mode Help",
        [
            "  Navigation:",
            "    j/k, ↑/↓     Move cursor through sessions",
            "    g/G          Jump to top/bottom",
            "",
            "  Columns: project · branch · model · input tokens · output tokens · cost",
            "  Token counts use k (thousands) or M (millions) suffix.",
            "  Cost is an estimate based on published per-token pricing.",
            "",
            "  Return to List:",
            "    esc, q, h, ← Back to session list",
            "    ?            Show this help overlay",
        ],
    ),
    Mode.TIMELINE: (
        "Timeline Mode Help",
        [
            "  Activity heatmap: 8 weeks × 7 days. Each cell shows the day's",
            "  session count, shaded by intensity (dim → bright).",
            "",
            "  Navigation:",
            "    h, ←          Move cursor one day earlier",
            "    l, →          Move cursor one day later",
            "",
            "  Actions:",
            "    enter         Filter list to the highlighted day",
            "    esc, q        Back to session list",
            "    ?             Show this help overlay",
        ],
    ),
}

_GENERIC_HELP = (
    "Help",
    [
        "  Press ? in any mode to see mode-specific keybindings.",
        "  Any key dismisses this help overlay.",
    ],
)


def help_overlay(mode: Mode) -> str:
    """The keybinding help box for the given view mode."""
    title, lines = _HELP.get(mode, _GENERIC_HELP)
    return "\n" + _box(title, lines) + "\n"