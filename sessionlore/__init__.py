"""View state, cursor navigation and text rendering for browsing session logs."""

__version__ = "0.1.0"
__all__ = ["model", "nav", "project", "render", "render_detail", "render_list", "render_rerun"]