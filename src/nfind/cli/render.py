"""Rich rendering of engine results, with NASTRAN syntax coloration.

Result lines look like::

    line      11: SPC1    100     123456  1       THRU    8 $ SIDE PANEL
    ^^^^^cyan^^^^ ^card^  ^digit^                         ^^^comment^^^
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.text import Text

from nfind.core.engine import Engine
from nfind.core.layout import maximum_scroll
from nfind.core.schema import LABEL_WIDTH

NO_RESULT = "(no results)"

STYLE_TITLE = "black on green"
STYLE_SEARCH = "green"
STYLE_FILE = "yellow"
STYLE_LABEL = "cyan"
STYLE_OCCURRENCE = "black on yellow"
STYLE_ERROR = "black on red"
STYLE_CARD = "yellow"
STYLE_COMMENT = "green"
STYLE_DIGIT = "red"
STYLE_QUOTE = "cyan"
STYLE_SYMBOL = "red"

_SEPARATORS = " =,"


def highlight_line(text: str, search_text: str = "") -> Text:
    """Colorize one formatted occurrence line."""
    line = Text(text)
    if len(text) < LABEL_WIDTH or not text.startswith("line"):
        return line

    line.stylize(STYLE_LABEL, 0, LABEL_WIDTH)
    for start, end, style in _token_spans(text[LABEL_WIDTH:]):
        line.stylize(style, LABEL_WIDTH + start, LABEL_WIDTH + end)

    # Terms with blanks are not boxed. Matches may overlap.
    if search_text and not any(ch.isspace() for ch in search_text):
        pattern = re.compile(f"(?=({re.escape(search_text)}))", re.IGNORECASE)
        for match in pattern.finditer(text, LABEL_WIDTH):
            line.stylize(STYLE_OCCURRENCE, match.start(1), match.end(1))
    return line


def _token_spans(content: str) -> list[tuple[int, int, str]]:
    """Classify deck content into (start, end, style) spans, one per character run."""
    spans: list[tuple[int, int, str]] = []
    state = ""
    for i, ch in enumerate(content):
        if ch == "$":
            spans.append((i, len(content), STYLE_COMMENT))
            break
        if ch in _SEPARATORS and state != "quote":
            state = ""
            continue
        if (not state and ch.isalpha()) or state == "card":
            state = "card"
        elif (not state and ch.isdigit()) or state == "digit":
            state = "digit"
        elif (not state and ch in "'\"") or state == "quote":
            state = "quote"
        else:
            spans.append((i, i + 1, STYLE_SYMBOL))
            continue
        style = {"card": STYLE_CARD, "digit": STYLE_DIGIT, "quote": STYLE_QUOTE}[state]
        if spans and spans[-1][1] == i and spans[-1][2] == style:
            spans[-1] = (spans[-1][0], i + 1, style)
        else:
            spans.append((i, i + 1, style))
    return spans


def render_header(engine: Engine) -> list[Text]:
    title = Text()
    title.append("NASTRAN Find", style=STYLE_TITLE)
    title.append(" - search a deck and its INCLUDE files")

    search = Text("Search: <")
    if engine.search_text:
        search.append(engine.search_text, style=STYLE_SEARCH)
    else:
        search.append("---search field empty---", style=STYLE_SEARCH)
    search.append(">   (case insensitive)")

    return [
        title,
        Text(f"File: {engine.root}   (total {engine.link_count()} included)"),
        search,
    ]


def render_summary(engine: Engine, scroll: int = 0) -> Text:
    return Text(
        f"Results: {engine.occurrence_count_all()} occurrences in {engine.link_count()} files."
        f" (scroll {scroll}/{maximum_scroll(engine)})"
    )


def render_rows(engine: Engine) -> list[Text]:
    """Every scrollable row of the results area, in display order."""
    rows: list[Text] = []
    results = engine.results()
    for path in engine.files():
        rows.append(Text(f"--- {path} ---", style=STYLE_FILE))
        result = results[path]
        if result.occurrences:
            rows.extend(highlight_line(o.text, engine.search_text) for o in result.occurrences)
        else:
            rows.append(Text(NO_RESULT))
        rows.append(Text(""))
    return rows


def render_errors(engine: Engine) -> list[Text]:
    return [
        Text(f"/!\\:{engine.error_at(i)}", style=STYLE_ERROR) for i in range(engine.error_count())
    ]


def print_results(console: Console, engine: Engine) -> None:
    """Print the last search of ``engine`` in full, unscrolled."""
    for row in render_header(engine):
        console.print(row, soft_wrap=True)
    console.print(render_summary(engine), soft_wrap=True)
    console.rule()
    for row in render_rows(engine):
        console.print(row, soft_wrap=True)
    for row in render_errors(engine):
        console.print(row, soft_wrap=True)


__all__ = [
    "NO_RESULT",
    "highlight_line",
    "print_results",
    "render_errors",
    "render_header",
    "render_rows",
    "render_summary",
]
