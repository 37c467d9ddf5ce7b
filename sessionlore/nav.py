"""Cursor movement shared by every list-like view."""

from __future__ import annotations


def nav(key: str, cursor: int, count: int, half_page: int) -> int:
    """Return the cursor after applying a standard list key.

    Handles ``j``/``down``, ``k``/``up``, ``d``/``u`` (half-page steps) and
    ``g``/``G`` (top and bottom). Unknown keys leave the cursor unchanged;
    an empty list always yields 0.
    """
    if count <= 0:
        return 0
    half_page = max(half_page, 1)
    last = count - 1

    if key in ("j", "down"):
        return min(cursor + 1, last) if cursor < last else cursor
    if key in ("k", "up"):
        return cursor - 1 if cursor > 0 else cursor
    if key == "d":
        return min(cursor + half_page, last)
    if key == "u":
        return max(cursor - half_page, 0)
    if key == "g":
        return 0
    if key == "G":
        return last
    return cursor