"""
docindex - codec for documentation index (``.idx``) files.

Reads and writes the tab-separated index files emitted per documentation
unit, and provides the ordering and hashing a merge stage builds on.
"""

__version__ = "1.0.0"

from docindex.entry import EntryKind, IndexEntry, is_documentation_title
from docindex.errors import (
    IndexFormatError,
    MalformedLineNumber,
    MalformedRecord,
    UnknownEntryKind,
)
from docindex.escaping import escape, unescape
from docindex.formatter import format_entry, format_index_entry, write_idx_file
from docindex.hashing import hash_entry
from docindex.ordering import cmp_ignore_style, compare, sort_key, sorted_entries
from docindex.parser import ParsedIndex, parse, parse_idx_file, parse_lines

__all__ = [
    "EntryKind",
    "IndexEntry",
    "IndexFormatError",
    "MalformedLineNumber",
    "MalformedRecord",
    "ParsedIndex",
    "UnknownEntryKind",
    "cmp_ignore_style",
    "compare",
    "escape",
    "format_entry",
    "format_index_entry",
    "hash_entry",
    "is_documentation_title",
    "parse",
    "parse_idx_file",
    "parse_lines",
    "sort_key",
    "sorted_entries",
    "unescape",
    "write_idx_file",
    "__version__",
]
