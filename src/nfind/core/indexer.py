"""Case-insensitive line search over the visited files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from nfind.core.resolver import PATH_ERRORS, describe_error, read_lines
from nfind.core.schema import FileResult, Occurrence

logger = logging.getLogger(__name__)


@dataclass
class OccurrenceIndex:
    results: dict[str, FileResult] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)


def index_occurrences(files: list[str], search_text: str) -> OccurrenceIndex:
    """Search each file in ``files`` for ``search_text``.

    Every file gets an entry, in ``files`` order. An empty search text matches
    nothing. A line containing the term several times is reported once. A
    file that can no longer be read gets zero occurrences and an error message.
    """
    index = OccurrenceIndex()
    needle = search_text.lower()

    for path in files:
        if not needle:
            index.results[path] = FileResult()
            continue
        try:
            lines = read_lines(path)
        except PATH_ERRORS as e:
            logger.warning("Cannot read %s during search: %s", path, e)
            index.errors.append(f"Cannot read file '{path}' during search: {describe_error(e)}")
            index.results[path] = FileResult()
            continue

        occurrences = [
            Occurrence.from_line(line_number, line)
            for line_number, line in enumerate(lines, 1)
            if needle in line.lower()
        ]
        logger.debug("%d occurrence(s) of %r in %s", len(occurrences), search_text, path)
        index.results[path] = FileResult(occurrences=occurrences)

    return index
