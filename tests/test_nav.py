import pytest

from sessionlore.nav import nav


@pytest.mark.parametrize(
    "key, cursor, count, half_page, want",
    [
        ("j", 0, 0, 5, 0),
        ("k", 0, 0, 5, 0),
        ("G", 0, 0, 5, 0),
        ("g", 0, 0, 5, 0),
        ("d", 0, 0, 5, 0),
        ("u", 0, 0, 5, 0),
        ("j", 0, 1, 1, 0),
        ("k", 0, 1, 1, 0),
        ("j", 3, 10, 3, 4),
        ("down", 3, 10, 3, 4),
        ("k", 3, 10, 3, 2),
        ("up", 3, 10, 3, 2),
        ("j", 9, 10, 3, 9),
        ("k", 0, 10, 3, 0),
        ("g", 5, 10, 3, 0),
        ("G", 0, 10, 3, 9),
        ("d", 2, 10, 3, 5),
        ("d", 8, 10, 3, 9),
        ("u", 7, 10, 3, 4),
        ("u", 1, 10, 3, 0),
        ("x", 3, 10, 3, 3),
        ("enter", 3, 10, 3, 3),
    ],
)
def test_nav(key, cursor, count, half_page, want):
    assert nav(key, cursor, count, half_page) == want


def test_half_page_below_one_steps_by_one():
    assert nav("d", 2, 10, 0) == 3
    assert nav("u", 2, 10, -4) == 1


def test_repeated_j_is_bounded():
    cursor = 0
    seen = []
    for _ in range(3):
        cursor = nav("j", cursor, 3, 1)
        seen.append(cursor)
    assert seen == [1, 2, 2]


def test_repeated_k_is_bounded():
    cursor = 1
    seen = []
    for _ in range(2):
        cursor = nav("k", cursor, 2, 1)
        seen.append(cursor)
    assert seen == [0, 0]