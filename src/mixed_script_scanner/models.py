from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Match:
    """A mixed-script word and its offset relative to the scanned line."""

    start: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class Line:
    """One line of a document with its absolute start offset (1-based number)."""

    number: int
    start: int
    text: str


@dataclass(frozen=True, slots=True)
class Highlight:
    """A match lifted to absolute document coordinates."""

    doc_id: str
    line: int
    column: int
    start: int
    length: int
    text: str


@dataclass(slots=True)
class DocumentReport:
    """Highlights found in a document plus the lines that could not be scanned."""

    doc_id: str
    highlights: list[Highlight] = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)
