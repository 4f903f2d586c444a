"""
Data model for index entries.

An index file holds one entry per line. The ``kind`` tells what the entry
describes; the remaining persisted fields are plain text plus the source
line number. ``module`` is reconstructed by the parser and ``aux`` is left
for callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from docindex.errors import UnknownEntryKind
from docindex.hashing import hash_entry


class EntryKind(Enum):
    """Discriminator of an index entry, valued by its serialized tag."""

    MARKUP_TITLE = "markupTitle"  # RST/Markdown title, HTML in link_title
    NIM_TITLE = "nimTitle"
    HEADING = "heading"           # markup heading, escaped
    IDX_ROLE = "idx"              # manual :idx: definition, escaped
    SYMBOL = "nim"                # language symbol, unescaped
    SYMBOL_GROUP = "nimgrp"       # overload group, unescaped

    def __str__(self) -> str:
        return self.value

    @property
    def tag(self) -> str:
        """Serialized tag written in column 0."""
        return self.value

    @property
    def is_title(self) -> bool:
        return self in TITLE_KINDS

    @property
    def is_escaped(self) -> bool:
        """True if keyword and link already carry HTML markup."""
        return self in ESCAPED_KINDS

    @classmethod
    def from_tag(cls, tag: str) -> EntryKind:
        """
        Look up a kind by its serialized tag.

        Raises:
            UnknownEntryKind: If `tag` is not a known tag.
        """
        try:
            return _KIND_BY_TAG[tag]
        except KeyError:
            raise UnknownEntryKind(tag) from None


TITLE_KINDS = frozenset({EntryKind.MARKUP_TITLE, EntryKind.NIM_TITLE})
ESCAPED_KINDS = frozenset({EntryKind.MARKUP_TITLE, EntryKind.HEADING, EntryKind.IDX_ROLE})

_KIND_BY_TAG: dict[str, EntryKind] = {kind.value: kind for kind in EntryKind}


@dataclass(frozen=True)
class IndexEntry:
    """
    One record of an index file.

    Equality compares every field. Hashing only covers the four text
    fields (see ``docindex.hashing``).
    """

    kind: EntryKind = EntryKind.SYMBOL
    keyword: str = ""
    link: str = ""              # "file" or "file#fragment"
    link_title: str = ""        # prettier text for the href
    link_desc: str = ""         # title attribute of the href
    line: int = 0
    module: str = ""            # origin unit, not stored in the file
    aux: str = ""               # free for callers, not stored in the file

    def __str__(self) -> str:
        return '("{}", "{}", "{}", "{}", {})'.format(
            self.keyword, self.link, self.link_title, self.link_desc, self.line
        )

    def __hash__(self) -> int:
        return hash_entry(self)

    @property
    def is_title(self) -> bool:
        return self.kind.is_title

    @property
    def fragment(self) -> str:
        """The anchor id after ``#`` in ``link``, or "" for a title link."""
        _, _, fragment = self.link.partition("#")
        return fragment


def is_documentation_title(hyperlink: str) -> bool:
    """
    Return True if `hyperlink` points at a whole documentation unit.

    Title links have no ``#fragment``; every other entry addresses an
    anchor inside the page.
    """
    return "#" not in hyperlink
