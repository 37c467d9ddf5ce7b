"""Header and footer of the session list view."""

from __future__ import annotations

from sessionlore.model import FilterMode, ViewState
from sessionlore.render import FLASH_STYLE, FOOTER_STYLE, HEADER_STYLE, count_projects, plural

_DEFAULT_HINTS = (
    " j/k move   d/u page   enter open   R resume   / search   p project   b branch"
    "   f fuzzy   m bookmark   M bookmarks   T timeline   P project view   S stats"
    "   g/G top/bottom   ? help   q quit"
)

_ENTRY_LABELS = {
    FilterMode.PROJECT: "project filter",
    FilterMode.BRANCH: "branch filter",
    FilterMode.FUZZY: "fuzzy filter",
}

_APPLIED_LABELS = {
    FilterMode.PROJECT: "filtered by project",
    FilterMode.BRANCH: "filtered by branch",
    FilterMode.FUZZY: "fuzzy filter",
}


def render_list_header(state: ViewState) -> str:
    """Session and project counts, plus skipped-file and indexing notes."""
    n_sessions = len(state.sessions)
    n_projects = count_projects(state.sessions)
    skipped = f"   ({len(state.warnings)} skipped)" if state.warnings else ""
    index_status = "   indexing…" if state.indexing else ""
    return HEADER_STYLE.render(
        f" lore · {n_sessions} session{plural(n_sessions)}"
        f" across {n_projects} project{plural(n_projects)}{skipped}{index_status}"
    )


def render_list_footer(state: ViewState) -> str:
    """The key hints, active-filter description or flash message for the list."""
    if state.flash_msg:
        return FLASH_STYLE.render(" " + state.flash_msg)
    if state.bookmark_only:
        return FOOTER_STYLE.render(" bookmarks only   esc clear   q quit")
    if state.date_filter is not None:
        day = state.date_filter.isoformat()[:10]
        return FOOTER_STYLE.render(f" date: {day}   esc clear   q quit")
    entry_label = _ENTRY_LABELS.get(state.filter_mode)
    if entry_label is not None:
        return FOOTER_STYLE.render(
            f" {entry_label}: {state.filter_text}_  [enter] apply  [esc] cancel"
        )
    applied_label = _APPLIED_LABELS.get(state.applied_filter_mode)
    if state.filter_text and applied_label is not None:
        return FOOTER_STYLE.render(
            f" {applied_label}: {state.filter_text}   j/k · enter open · esc clear   q quit"
        )
    return FOOTER_STYLE.render(_DEFAULT_HINTS)