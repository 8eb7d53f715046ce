"""MCP server exposing the search engine as tools."""

from __future__ import annotations

import json
import logging

from mcp.server.fastmcp import FastMCP

from nfind.core.directive import parse_include_target
from nfind.core.engine import Engine

logger = logging.getLogger(__name__)

_INSTRUCTIONS = (
    "NASTRAN Find searches a NASTRAN input deck and every file reachable through "
    "INCLUDE directives. Use nastran_files to see the include tree and nastran_find "
    "to list the lines containing a term (case insensitive)."
)

mcp = FastMCP("nastran-find", instructions=_INSTRUCTIONS)

_engine: Engine | None = None


def _get_engine() -> Engine:
    """Return the module-level engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


def set_engine(engine: Engine) -> None:
    """Override the module-level engine (used in tests)."""
    global _engine
    _engine = engine


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
def nastran_find(root: str, text: str) -> str:
    """Search a root deck and all included files for a case-insensitive substring.

    Returns JSON with files (discovery order), results per file
    (occurrence_count and formatted occurrences), and error messages.
    """
    snapshot = _get_engine().find(root, text)
    logger.debug("nastran_find(%s, %r): %d occurrence(s)", root, text, snapshot.occurrence_count_all)
    return snapshot.model_dump_json(indent=2)


@mcp.tool()
def nastran_files(root: str) -> str:
    """List the root deck and every file reachable through INCLUDE directives."""
    engine = _get_engine()
    engine.find(root, "")
    errors = [engine.error_at(i) for i in range(engine.error_count())]
    return json.dumps({"files": engine.files(), "errors": errors}, indent=2)


@mcp.tool()
def nastran_parse_include(line: str) -> str:
    """Return the quoted target of an INCLUDE directive line, or an empty string."""
    return parse_include_target(line) or ""


# ---------------------------------------------------------------------------
# Resources (read-only)
# ---------------------------------------------------------------------------


@mcp.resource("nastran://last-search")
def resource_last_search() -> str:
    """Result of the most recent nastran_find or nastran_files call."""
    return _get_engine().snapshot.model_dump_json(indent=2)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """Run the MCP server on stdio."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
