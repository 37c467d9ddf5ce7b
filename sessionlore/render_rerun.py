"""Header and footer of the re-run confirmation view."""

from __future__ import annotations

from sessionlore.model import ViewState
from sessionlore.render import FLASH_STYLE, FOOTER_STYLE, HEADER_STYLE


def render_rerun_header(state: ViewState) -> str:
    """Names the session the re-run prompt was taken from."""
    return HEADER_STYLE.render(f" re-run · source: {state.detail_session.slug}")


def render_rerun_footer(state: ViewState) -> str:
    """Key hints for the re-run view, or the current flash message."""
    if state.flash_msg:
        return FLASH_STYLE.render(" " + state.flash_msg)
    return FOOTER_STYLE.render(" enter run   ? help   q/esc/h/← back")