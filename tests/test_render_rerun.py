from sessionlore.model import Mode, Session, ViewState
from sessionlore.render_rerun import render_rerun_footer, render_rerun_header


def rerun_state(slug="src-slug"):
    return ViewState(
        projects_dir="/d",
        mode=Mode.RERUN,
        detail_session=Session(id="a", slug=slug, cwd="/home/test"),
        rerun_prompt="hello world",
        rerun_cwd="/home/test",
        width=100,
        height=40,
    )


def test_header_includes_source_slug():
    out = render_rerun_header(rerun_state("my-session"))
    assert "re-run" in out
    assert "my-session" in out


def test_header_single_line():
    out = render_rerun_header(rerun_state())
    assert "\n" not in out
    assert "re-run · source: src-slug" in out


def test_footer_shows_run_and_back():
    out = render_rerun_footer(rerun_state())
    assert "enter run" in out
    assert "q/esc/h/← back" in out


def test_footer_flash_takes_precedence():
    state = rerun_state()
    state.flash_msg = "FLASH-RERUN"
    out = render_rerun_footer(state)
    assert "FLASH-RERUN" in out
    assert "q/esc/h/← back" not in out
    assert "q quit" not in out