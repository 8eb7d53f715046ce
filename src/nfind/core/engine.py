"""Engine: the single entry point for searching an include tree."""

from __future__ import annotations

import logging
from pathlib import Path

from nfind.core.indexer import index_occurrences
from nfind.core.layout import result_rows
from nfind.core.resolver import resolve_file_graph
from nfind.core.schema import FileResult, SearchSnapshot

logger = logging.getLogger(__name__)


class Engine:
    """Searches a root deck and every file it includes.

    Each ``find`` builds a new SearchSnapshot and replaces the previous one
    wholesale; the query methods only ever read the current snapshot.
    """

    def __init__(self) -> None:
        self._snapshot = SearchSnapshot()

    @property
    def snapshot(self) -> SearchSnapshot:
        return self._snapshot

    @property
    def root(self) -> str:
        return self._snapshot.root

    @property
    def search_text(self) -> str:
        return self._snapshot.search_text

    def find(self, root: str | Path, search_text: str = "") -> SearchSnapshot:
        """Resolve the include tree of ``root`` and search it for ``search_text``.

        Never raises for file-level problems; they end up in ``errors``.
        """
        graph = resolve_file_graph(root)
        index = index_occurrences(graph.files, search_text)

        snapshot = SearchSnapshot(
            root=graph.files[0] if graph.files else str(root),
            search_text=search_text,
            files=graph.files,
            results=index.results,
            errors=graph.errors + index.errors,
        )
        logger.debug(
            "find(%s, %r): %d file(s), %d occurrence(s), %d error(s)",
            root,
            search_text,
            len(snapshot.files),
            snapshot.occurrence_count_all,
            len(snapshot.errors),
        )
        self._snapshot = snapshot
        return snapshot

    # -- Queries --

    def files(self) -> list[str]:
        return list(self._snapshot.files)

    def results(self) -> dict[str, FileResult]:
        return dict(self._snapshot.results)

    def link_count(self) -> int:
        """Number of visited files, root included."""
        return len(self._snapshot.files)

    def occurrence_count_all(self) -> int:
        return self._snapshot.occurrence_count_all

    def error_count(self) -> int:
        return len(self._snapshot.errors)

    def error_at(self, index: int) -> str:
        return self._snapshot.errors[index]

    def result_count_lines(self, path: str | Path) -> int:
        """Display rows taken by a file's results; 0 for a file that was not visited."""
        result = self._snapshot.results.get(str(path))
        if result is None:
            return 0
        return result_rows(result)
