"""
Parser for index files.

Besides decoding each line, the parser reconstructs which documentation
unit ("module") every entry belongs to. The file itself does not say; it is
derived from the title entries seen so far:

* ``idx`` entries always belong to the origin file.
* Other entries belong to the origin file until a title has been seen, and
  to the keyword of the most recent earlier title afterwards.

A title line is attributed before it updates the running title, so the
first title of a file belongs to the origin file itself. The last title
line of a file becomes its resolved title.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

from docindex.entry import EntryKind, IndexEntry
from docindex.errors import IndexFormatError, MalformedLineNumber, MalformedRecord
from docindex.escaping import unescape

if TYPE_CHECKING:
    from typing import Iterable

logger = logging.getLogger(__name__)

COLUMN_COUNT = 6

# ASCII digits only; int() alone also takes "1_000" and non-ASCII digits.
LINE_NUMBER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


class ParsedIndex(NamedTuple):
    """Result of parsing one index file."""

    entries: list[IndexEntry]
    title: IndexEntry


def _parse_line_number(text: str) -> int:
    if not LINE_NUMBER_RE.fullmatch(text):
        raise MalformedLineNumber(text)
    return int(text)


def _parse_record(line: str, title: IndexEntry, origin_name: str) -> IndexEntry:
    """Decode one tabbed line given the title seen so far."""
    cols = line.split("\t")
    if len(cols) < COLUMN_COUNT:
        raise MalformedRecord(line)

    kind = EntryKind.from_tag(cols[0])

    if kind is EntryKind.IDX_ROLE or not title.keyword:
        module = origin_name
    else:
        module = title.keyword

    return IndexEntry(
        kind=kind,
        keyword=cols[1],
        link=cols[2],
        link_title=unescape(cols[3]),
        link_desc=unescape(cols[4]),
        line=_parse_line_number(cols[5]),
        module=module,
    )


def parse_lines(lines: Iterable[str], origin_name: str) -> ParsedIndex:
    """
    Parse index file lines.

    Lines without a tab are skipped. Any malformed line aborts the parse.

    Args:
        lines: Lines of an index file, with or without line terminators.
        origin_name: Name of the documentation unit the file came from,
            usually the file's base name.

    Returns:
        ParsedIndex with all entries in input order and the resolved title
        (an empty ``IndexEntry`` if the file has no title line).

    Raises:
        UnknownEntryKind: Column 0 is not a known tag.
        MalformedLineNumber: Column 5 is not an integer.
        MalformedRecord: Fewer than six columns.
    """
    entries: list[IndexEntry] = []
    title = IndexEntry()
    skipped = 0

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if "\t" not in line:
            skipped += 1
            continue
        try:
            entry = _parse_record(line, title, origin_name)
        except IndexFormatError as e:
            raise e.locate(line_number, origin_name)
        if entry.is_title:
            title = entry
        entries.append(entry)

    logger.debug(
        "Parsed %d entries from %s (%d lines skipped), title %r",
        len(entries), origin_name, skipped, title.keyword,
    )
    return ParsedIndex(entries, title)


def parse(source_text: str, origin_name: str) -> ParsedIndex:
    """
    Parse the full text of an index file.

    See ``parse_lines`` for arguments and errors.
    """
    # str.splitlines also breaks on form feeds and U+2028, which escape()
    # leaves inside columns.
    return parse_lines(source_text.split("\n"), origin_name)


def parse_idx_file(path: Path | str, encoding: str = "utf-8") -> ParsedIndex:
    """
    Read and parse an index file from disk.

    The origin name is the file's base name without its extension.

    Raises:
        OSError: If the file can't be read.
        IndexFormatError: If any line is malformed.
    """
    path = Path(path)
    logger.debug("Reading index file %s", path)
    # Split on LF only, like parse(); a bare CR may sit inside a column.
    with open(path, "r", encoding=encoding, newline="\n") as f:
        return parse_lines(f, path.stem)
