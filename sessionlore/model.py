"""State of the session browser: sessions, turns, modes and filters."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable

# Fixed rows around the scrollable body: header, divider, divider, footer.
CHROME_LINES = 4


@dataclass
class Session:
    """One recorded conversation session."""

    id: str = ""
    path: str = ""
    project: str = ""
    branch: str = ""
    slug: str = ""
    query: str = ""
    cwd: str = ""
    timestamp: datetime = datetime.min


@dataclass
class Turn:
    """One displayed turn of a session (user, asst, tool or thinking)."""

    kind: str
    body: str = ""
    input: dict[str, Any] = field(default_factory=dict)
    sidechain_path: str = ""


class Mode(enum.Enum):
    """The view currently on screen."""

    LIST = "list"
    DETAIL = "detail"
    SEARCH = "search"
    PROJECT = "project"
    RERUN = "rerun"
    STATS = "stats"
    TIMELINE = "timeline"


class FilterMode(enum.Enum):
    """Which field an inline list filter matches against."""

    NONE = "none"
    PROJECT = "project"
    BRANCH = "branch"
    FUZZY = "fuzzy"


def _fuzzy_match(pattern: str, text: str) -> bool:
    """True if every character of pattern appears in text, in order, ignoring case."""
    remaining = iter(text.casefold())
    return all(ch in remaining for ch in pattern.casefold())


_FILTER_KEYS: dict[FilterMode, Callable[[Session], str]] = {
    FilterMode.PROJECT: lambda s: s.project,
    FilterMode.BRANCH: lambda s: s.branch,
    FilterMode.FUZZY: lambda s: f"{s.slug} {s.project} {s.branch}",
}


@dataclass
class ViewState:
    """Everything the browser needs to render and react to keys."""

    projects_dir: str = ""
    sessions: list[Session] = field(default_factory=list)
    visible_sessions: list[Session] = field(default_factory=list)
    cursor: int = 0
    loading: bool = True
    error: Exception | None = None
    width: int = 0
    height: int = 0
    filter_mode: FilterMode = FilterMode.NONE
    filter_text: str = ""
    applied_filter_mode: FilterMode = FilterMode.NONE

    # Detail view
    mode: Mode = Mode.LIST
    detail_session: Session = field(default_factory=Session)
    turns: list[Turn] = field(default_factory=list)
    cursor_detail: int = 0
    detail_error: Exception | None = None
    detail_loading: bool = False
    expanded_turns: set[int] = field(default_factory=set)
    just_copied: bool = False
    sidechain_turns: dict[int, list[Turn]] = field(default_factory=dict)

    # Search view
    search_query: str = ""
    search_results: list[Any] = field(default_factory=list)
    search_cursor: int = 0

    # Project view
    project_cwd: str = ""
    project_sessions: list[Session] = field(default_factory=list)
    project_cursor: int = 0

    # Re-run view
    rerun_prompt: str = ""
    rerun_cwd: str = ""

    # Stats view
    stats_data: list[Any] = field(default_factory=list)
    stats_cursor: int = 0
    stats_offset: int = 0

    # Per-mode scroll offsets
    list_offset: int = 0
    detail_offset: int = 0
    search_offset: int = 0
    project_offset: int = 0

    flash_msg: str = ""
    show_help: bool = False
    indexing: bool = True
    warnings: list[str] = field(default_factory=list)

    bookmarks: set[str] = field(default_factory=set)
    bookmarks_path: str = ""
    bookmark_only: bool = False

    timeline_cursor: date | None = None
    date_filter: date | None = None

    def body_height(self) -> int:
        """Rows available for the body, or -1 if the height is unknown or too small."""
        if self.height <= CHROME_LINES:
            return -1
        return self.height - CHROME_LINES

    def apply_filter(self) -> None:
        """Recompute visible_sessions from the text, bookmark and date filters."""
        sessions = self.sessions
        key = _FILTER_KEYS.get(self.filter_mode)
        if self.filter_text.strip() and key is not None:
            sessions = [s for s in sessions if _fuzzy_match(self.filter_text, key(s))]
        if self.bookmark_only:
            sessions = [s for s in sessions if s.id in self.bookmarks]
        if self.date_filter is not None:
            wanted = self.date_filter
            if isinstance(wanted, datetime):
                wanted = wanted.date()
            sessions = [s for s in sessions if s.timestamp.date() == wanted]
        self.visible_sessions = list(sessions)

    def visible_turns(self) -> list[Turn]:
        """Turns shown in the detail view; thinking blocks are always hidden."""
        return [t for t in self.turns if t.kind != "thinking"]

    def visible_index_to_full_index(self, visible_idx: int) -> int:
        """Map a position among visible turns to its index in ``turns``."""
        visible_positions = (i for i, t in enumerate(self.turns) if t.kind != "thinking")
        for count, full_idx in enumerate(visible_positions):
            if count == visible_idx:
                return full_idx
        raise IndexError(f"no visible turn at position {visible_idx}")