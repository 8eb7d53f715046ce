"""Display-row accounting for scrolling through search results.

This is presentation policy: each file takes a header row, one row per
occurrence (or a single "(no results)" row), then a blank separator row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nfind.core.schema import FileResult

if TYPE_CHECKING:
    from nfind.core.engine import Engine

HEADER_ROWS = 1
SEPARATOR_ROWS = 1
PAGE_ROWS = 8


def result_rows(result: FileResult) -> int:
    """Rows taken by a file's occurrences (or placeholder) and its separator."""
    return max(result.occurrence_count, 1) + SEPARATOR_ROWS


def maximum_scroll(engine: Engine) -> int:
    """Total rows the results area can scroll through for the last search."""
    return sum(HEADER_ROWS + engine.result_count_lines(path) for path in engine.files())
