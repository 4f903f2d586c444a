"""
Hashing of index entries for deduplication by a merge stage.

The hash covers exactly four fields, in order: ``keyword``, ``link``,
``link_title`` and ``link_desc``. ``kind``, ``line``, ``module`` and ``aux``
do not contribute, so a heading and a symbol sharing those four fields
collide. Merge code relies on this; keep it.

Values are 64-bit unsigned and stable across interpreter runs (they do not
depend on ``PYTHONHASHSEED``).
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docindex.entry import IndexEntry

MASK = (1 << 64) - 1

HASHED_FIELDS = ("keyword", "link", "link_title", "link_desc")


def hash_text(text: str) -> int:
    """Stable 64-bit hash of a string."""
    digest = hashlib.blake2b(text.encode("utf-8", "surrogatepass"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


def mix(h: int, value: int) -> int:
    """
    Mix `value` into the running hash `h`.

    Order dependent: ``mix(mix(0, a), b) != mix(mix(0, b), a)`` in general.
    """
    h = (h + value) & MASK
    h = (h + (h << 10)) & MASK
    h ^= h >> 6
    return h


def finalize(h: int) -> int:
    """Avalanche the bits of a mixed hash."""
    h = (h + (h << 3)) & MASK
    h ^= h >> 11
    h = (h + (h << 15)) & MASK
    return h


def hash_entry(entry: IndexEntry) -> int:
    """
    Return the combined hash of an entry's text fields.

    Args:
        entry: The entry to hash.

    Returns:
        Unsigned 64-bit integer.
    """
    h = 0
    for field in HASHED_FIELDS:
        h = mix(h, hash_text(getattr(entry, field)))
    return finalize(h)
