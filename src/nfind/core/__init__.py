"""Traversal-and-search engine."""

from __future__ import annotations

from nfind.core.directive import parse_include_target
from nfind.core.engine import Engine
from nfind.core.schema import FileResult, Occurrence, SearchSnapshot

__all__ = [
    "Engine",
    "FileResult",
    "Occurrence",
    "SearchSnapshot",
    "parse_include_target",
]
