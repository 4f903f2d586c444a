"""
Column escaping for the index file format.

Index files are tab separated and line based, so text columns must never
contain a raw tab or line feed. ``escape`` makes any string safe to put in
one column and ``unescape`` reverses it:

* ``"\\"`` => ``"\\\\"``
* ``"\n"`` => ``"\\n"``
* ``"\t"`` => ``"\\t"``
* ``"\r"`` is dropped

Dropping carriage returns is a normalization: ``unescape(escape(s)) == s``
holds for every ``s`` without a ``"\r"``.
"""

from __future__ import annotations

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "",
    "\t": "\\t",
}

# Checked in this order at every position.
_UNESCAPES = (
    ("\\t", "\t"),
    ("\\n", "\n"),
    ("\\\\", "\\"),
)


def escape(text: str) -> str:
    """
    Return a version of `text` safe for a single tab-delimited column.

    Args:
        text: Arbitrary text.

    Returns:
        Escaped text without tabs, line feeds or carriage returns.
    """
    return "".join(_ESCAPES.get(c, c) for c in text)


def unescape(text: str) -> str:
    """
    Return the text that ``escape`` produced `text` from.

    Scans left to right. A backslash that does not start a known sequence
    is kept as-is.
    """
    result: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        for seq, char in _UNESCAPES:
            if text.startswith(seq, i):
                result.append(char)
                i += 2
                break
        else:
            result.append(text[i])
            i += 1
    return "".join(result)
