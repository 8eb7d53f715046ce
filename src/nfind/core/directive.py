"""INCLUDE directive parsing for NASTRAN-style input decks.

A directive starts at column 1 with the keyword ``INCLUDE`` (any case),
followed by at least one space or tab, then a quoted path::

    INCLUDE 'bulk/panels.bdf'
    include "loads.dat" $ trailing text is ignored

Malformed directives are treated as ordinary lines, not errors.
"""

from __future__ import annotations

KEYWORD = "INCLUDE"
QUOTES = ("'", '"')
_BLANKS = (" ", "\t")


def parse_include_target(line: str) -> str | None:
    """Return the quoted target of an INCLUDE directive, or None.

    Non-directives, malformed directives and empty targets (``INCLUDE ''``)
    all return None.
    """
    size = len(KEYWORD)
    if line[:size].upper() != KEYWORD:
        return None

    pos = size
    while pos < len(line) and line[pos] in _BLANKS:
        pos += 1
    if pos == size or pos >= len(line):
        return None

    delimiter = line[pos]
    if delimiter not in QUOTES:
        return None

    end = line.find(delimiter, pos + 1)
    if end < 0:
        return None

    return line[pos + 1 : end] or None
