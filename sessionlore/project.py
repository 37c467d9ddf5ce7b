"""Branch grouping and chrome of the per-project view."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from sessionlore.model import Session, ViewState
from sessionlore.render import FLASH_STYLE, FOOTER_STYLE, HEADER_STYLE, plural


@dataclass
class BranchGroup:
    """Sessions of one branch, newest first."""

    branch: str
    sessions: list[Session] = field(default_factory=list)


def group_by_branch(sessions: Iterable[Session]) -> list[BranchGroup]:
    """Group sessions by branch; groups and their members are ordered newest first."""
    by_branch: dict[str, list[Session]] = {}
    for session in sessions:
        by_branch.setdefault(session.branch, []).append(session)
    groups = [
        BranchGroup(branch, sorted(members, key=lambda s: s.timestamp, reverse=True))
        for branch, members in by_branch.items()
    ]
    groups.sort(key=lambda g: g.sessions[0].timestamp, reverse=True)
    return groups


def render_project_header(state: ViewState) -> str:
    """Project name, working directory and session count."""
    cwd = state.project_cwd
    head, sep, tail = cwd.rpartition("/")
    name = tail if sep and tail else cwd
    count = len(state.project_sessions)
    return HEADER_STYLE.render(f" {name} · {cwd}   {count} session{plural(count)}")


def render_project_footer(state: ViewState) -> str:
    """Key hints for the project view, or the current flash message."""
    if state.flash_msg:
        return FLASH_STYLE.render(" " + state.flash_msg)
    return FOOTER_STYLE.render(
        " j/k move   d/u page   enter open   g/G top/bottom   ? help   q/esc/h/← back"
    )