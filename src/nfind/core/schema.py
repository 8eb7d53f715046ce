"""Pydantic v2 models for search results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

LINE_NUMBER_WIDTH = 8
LABEL_WIDTH = len("line") + LINE_NUMBER_WIDTH + len(": ")


def format_label(line_number: int) -> str:
    """Return the fixed-width label prefixing an occurrence, e.g. ``line      11: ``."""
    return f"line{line_number:>{LINE_NUMBER_WIDTH}}: "


# -- Occurrences --


class Occurrence(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    text: str

    @classmethod
    def from_line(cls, line_number: int, line: str) -> Occurrence:
        return cls(line_number=line_number, text=format_label(line_number) + line)

    @property
    def content(self) -> str:
        """The raw line, without its label."""
        return self.text[LABEL_WIDTH:]


class FileResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    occurrences: list[Occurrence] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occurrence_count(self) -> int:
        return len(self.occurrences)


# -- Snapshot --


class SearchSnapshot(BaseModel):
    """Everything derived by one ``Engine.find`` call.

    ``results`` keys are exactly ``files``, in the same order.
    """

    model_config = ConfigDict(frozen=True)

    root: str = ""
    search_text: str = ""
    files: list[str] = Field(default_factory=list)
    results: dict[str, FileResult] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occurrence_count_all(self) -> int:
        return sum(r.occurrence_count for r in self.results.values())
