"""
Serialization of index entries to index file lines.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from docindex.escaping import escape

if TYPE_CHECKING:
    from typing import Iterable

    from docindex.entry import EntryKind, IndexEntry

logger = logging.getLogger(__name__)


def format_entry(
    kind: EntryKind,
    html_file: str,
    fragment_id: str,
    term: str,
    link_title: str,
    link_desc: str,
    line: int,
) -> tuple[str, bool]:
    """
    Build one index file line.

    `term` and the kind tag are written as given; callers must sanitize
    markup-bearing kinds beforehand. Only `link_title` and `link_desc` are
    escaped.

    Args:
        kind: Entry kind.
        html_file: Page the entry links to.
        fragment_id: Anchor id inside the page, or "" for a title.
        term: Keyword shown in the index.
        link_title: Text for the generated href.
        link_desc: Title attribute for the generated href.
        line: Source line number.

    Returns:
        Tuple of (newline-terminated line, True if the link has no fragment).
    """
    if fragment_id:
        link = f"{html_file}#{fragment_id}"
        is_title = False
    else:
        link = html_file
        is_title = True

    columns = [
        str(kind),
        term,
        link,
        escape(link_title),
        escape(link_desc),
        str(line),
    ]
    return "\t".join(columns) + "\n", is_title


def format_index_entry(entry: IndexEntry) -> str:
    """Serialize an existing entry, using its ``link`` unchanged."""
    html_file, _, fragment_id = entry.link.partition("#")
    serialized, _ = format_entry(
        entry.kind,
        html_file,
        fragment_id,
        entry.keyword,
        entry.link_title,
        entry.link_desc,
        entry.line,
    )
    return serialized


def write_idx_file(
    path: Path,
    entries: Iterable[IndexEntry],
    encoding: str = "utf-8",
) -> int:
    """
    Write entries to an index file, one line each.

    Returns:
        Number of entries written.
    """
    count = 0
    with open(path, "w", encoding=encoding, newline="\n") as f:
        for entry in entries:
            f.write(format_index_entry(entry))
            count += 1
    logger.debug("Wrote %d entries to %s", count, path)
    return count
