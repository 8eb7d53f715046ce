"""Include-graph traversal: discover every file reachable from a root deck."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

from nfind.core.directive import parse_include_target

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# Missing files, symlink loops, and paths the OS rejects (e.g. embedded NUL).
PATH_ERRORS = (OSError, RuntimeError, ValueError)


@dataclass
class FileGraph:
    """Visited files in open order, plus messages for files that could not be used."""

    files: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def canonicalize(target: str | Path, base_dir: str | Path | None = None) -> str:
    """Resolve ``target`` against ``base_dir`` to an existing absolute path.

    ``.``/``..`` segments and symlinks are resolved, so two spellings of the
    same file compare equal. Raises one of PATH_ERRORS when the target does
    not exist or is not a valid path.
    """
    path = Path(target)
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    return str(path.resolve(strict=True))


def read_lines(path: str | Path) -> list[str]:
    """Read a text file fully and return its lines without line terminators.

    Only ``\n`` ends a line; a ``\r`` before it is dropped, a lone ``\r`` is content.
    """
    with open(path, encoding=ENCODING, errors="replace", newline="\n") as fh:
        return [_strip_terminator(line) for line in fh]


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def resolve_file_graph(root: str | Path) -> FileGraph:
    """Walk INCLUDE directives breadth-first from ``root``.

    Files are queued in the order their directives are met (file order, then
    line order) and each canonical path is opened at most once, so cycles and
    repeated includes are harmless. Failures are recorded in
    ``FileGraph.errors`` and never stop the traversal.
    """
    graph = FileGraph()

    try:
        start = canonicalize(root)
    except PATH_ERRORS as e:
        logger.warning("Root file %s is not accessible: %s", root, e)
        graph.errors.append(_open_error(root, e))
        return graph

    queue: deque[str] = deque([start])
    seen: set[str] = {start}

    while queue:
        current = queue.popleft()
        try:
            lines = read_lines(current)
        except PATH_ERRORS as e:
            logger.warning("Cannot open %s: %s", current, e)
            graph.errors.append(_open_error(current, e))
            continue

        graph.files.append(current)
        logger.debug("Opened %s (%d lines)", current, len(lines))

        base_dir = Path(current).parent
        for line_number, line in enumerate(lines, 1):
            target = parse_include_target(line)
            if target is None:
                continue
            try:
                included = canonicalize(target, base_dir)
            except PATH_ERRORS as e:
                logger.warning("Unresolved include %r in %s:%d: %s", target, current, line_number, e)
                graph.errors.append(
                    f"Cannot find file '{target}' included from '{current}' (line {line_number})"
                )
                continue
            if included in seen:
                logger.debug("Skipping already queued %s", included)
                continue
            seen.add(included)
            queue.append(included)
            logger.debug("Queued %s from %s:%d", included, current, line_number)

    return graph


def describe_error(exc: BaseException) -> str:
    """Short reason for a failed path operation, e.g. ``No such file or directory``."""
    return getattr(exc, "strerror", None) or str(exc)


def _open_error(path: str | Path, exc: BaseException) -> str:
    return f"Cannot open file '{path}': {describe_error(exc)}"
