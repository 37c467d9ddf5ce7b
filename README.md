# sessionlore

`sessionlore` holds the view state, cursor movement and plain-text pieces
(headers, footers, rows, help boxes) for a terminal browser of
coding-assistant session logs. It has no runtime dependencies.

## Modules

### `sessionlore.nav`

`nav(key, cursor, count, half_page)` returns the new cursor position for a
list of `count` items:

- `j` / `down` and `k` / `up` move one row and stop at the ends;
- `d` / `u` move `half_page` rows (at least 1), clamped to the list;
- `g` / `G` jump to the first / last row;
- any other key leaves the cursor where it is;
- an empty list always gives 0.

### `sessionlore.model`

- `Session`: a recorded session (`id`, `path`, `project`, `branch`, `slug`,
  `query`, `cwd`, `timestamp`).
- `Turn`: one turn of a session (`kind` such as `user`, `asst`, `tool` or
  `thinking`, `body`, tool `input`, `sidechain_path`).
- `Mode`: the view on screen (`LIST`, `DETAIL`, `SEARCH`, `PROJECT`,
  `RERUN`, `STATS`, `TIMELINE`).
- `FilterMode`: which field an inline filter matches (`NONE`, `PROJECT`,
  `BRANCH`, `FUZZY`).
- `ViewState`: all browser state, with:
  - `body_height()`: rows left for the body once the four chrome rows
    (header, two dividers, footer) are taken, or `-1` when the height is
    unknown or too small;
  - `apply_filter()`: recomputes `visible_sessions` from the text filter (a
    case-insensitive in-order character match against the project, the
    branch, or slug + project + branch), the bookmark-only filter and the
    date filter;
  - `visible_turns()`: the turns with thinking blocks removed;
  - `visible_index_to_full_index(i)`: maps a position among visible turns
    back to its index in `turns`; raises `IndexError` if there is none.

### `sessionlore.render`

- `Style` with `render(text)`: wraps each line in ANSI bold / 256-colour
  escape sequences; the module defines the styles used by every view
  (`HEADER_STYLE`, `SELECTED_STYLE`, `FOOTER_STYLE`, `FLASH_STYLE`, ...).
- `render_divider(width)`: a `─` rule, 80 wide when `width` is below 4.
- `pad_trunc(s, max_len)`: pads to `max_len` characters or cuts and ends
  with `…` (a plain cut when `max_len` is 1 or less).
- `plural(n)`: `""` for one, `"s"` otherwise.
- `count_projects(sessions)`: number of distinct working directories.
- `render_row(session, selected, bookmarked, width)`: one list row with
  cursor marker `►`, bookmark star `★`, time, project, branch and the query
  (or slug when there is no query).
- `help_overlay(mode)`: the keybinding help box for a `Mode`.

### Headers and footers

- `sessionlore.render_list`: `render_list_header(state)` (session and
  project counts, `(N skipped)`, `indexing…`) and `render_list_footer(state)`
  (flash message, bookmark-only or date filter note, filter entry or applied
  filter description, or the default key hints).
- `sessionlore.render_detail`: `render_detail_header(state)` (slug, project,
  branch, date, `turn i/n`), `render_detail_footer(state)`,
  `turn_prefixes(kind)` and `extract_tool_name(body)`.
- `sessionlore.render_rerun`: `render_rerun_header(state)` and
  `render_rerun_footer(state)`.
- `sessionlore.project`: `BranchGroup`, `group_by_branch(sessions)` (groups
  and their sessions ordered newest first), `render_project_header(state)`
  and `render_project_footer(state)`.

Every footer shows the current `flash_msg` in place of its hints when one is
set.

## Example

```python
from datetime import datetime

from sessionlore.model import Session
from sessionlore.nav import nav
from sessionlore.project import group_by_branch
from sessionlore.render import pad_trunc

sessions = [
    Session(id="a", branch="main", slug="first", timestamp=datetime(2026, 5, 1, 10)),
    Session(id="b", branch="feat", slug="second", timestamp=datetime(2026, 5, 1, 12)),
]
groups = group_by_branch(sessions)
print([g.branch for g in groups])   # ['feat', 'main']

print(nav("d", 2, 10, 3))            # 5
print(pad_trunc("very-long-branch-name", 10))  # 'very-long…'
```

## What it does not do

This package is the state and the text pieces, not a running program:

- there is no command and no terminal event loop; nothing reads keys or
  dispatches them to `ViewState`;
- it does not find or read session log files, and has no search index;
- it renders headers, footers, rows and help boxes, but not the full
  scrolling bodies of the list, detail, search, stats or timeline views;
- it does not copy to the clipboard, store bookmarks on disk, or start any
  other program.

## Running the tests

```
pip install -e ".[test]"
pytest
```