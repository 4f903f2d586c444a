"""
Ordering of index entries.

Keywords and links compare style-insensitively: underscores are ignored
and case is folded, so ``Foo_Bar``, ``foobar`` and ``FOOBAR`` sort as equal.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Iterable

    from docindex.entry import IndexEntry


def normalize_style(text: str) -> str:
    """Drop underscores and case-fold."""
    return text.replace("_", "").casefold()


def cmp_ignore_style(a: str, b: str) -> int:
    """
    Compare two strings ignoring underscores and case.

    Returns:
        -1, 0 or 1.
    """
    a = normalize_style(a)
    b = normalize_style(b)
    return (a > b) - (a < b)


def compare(a: IndexEntry, b: IndexEntry) -> int:
    """Compare two entries by keyword, then by link."""
    result = cmp_ignore_style(a.keyword, b.keyword)
    if result == 0:
        result = cmp_ignore_style(a.link, b.link)
    return result


sort_key = cmp_to_key(compare)


def sorted_entries(entries: Iterable[IndexEntry]) -> list[IndexEntry]:
    """Return entries sorted with ``compare``. The sort is stable."""
    return sorted(entries, key=sort_key)
