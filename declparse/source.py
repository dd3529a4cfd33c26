"""
Source location tracking for declparse.

Locations are attached to declarations and diagnostics so that errors can
point at the statement that caused them.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Lines and columns are 1-based, offset is the 0-based character offset.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class LineIndex:
    """
    Line start offsets of a source text.

    Built once per source so repeated location lookups cost a binary
    search instead of a rescan from the start of the text.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.filename = filename
        self.length = len(source)
        self.line_starts: List[int] = [0]

        newline = source.find("\n")
        while newline != -1:
            self.line_starts.append(newline + 1)
            newline = source.find("\n", newline + 1)

    def location(self, offset: int) -> SourceLocation:
        """Compute the line/column location of a character offset."""
        offset = max(0, min(offset, self.length))
        line = bisect_right(self.line_starts, offset)
        return SourceLocation(self.filename, line, offset - self.line_starts[line - 1] + 1, offset)

    def span(self, start: int, end: int) -> SourceSpan:
        """Build the span covering source[start:end]."""
        return SourceSpan(self.location(start), self.location(end))


def location_at(source: str, offset: int, filename: str = "<input>") -> SourceLocation:
    """Compute the line/column location of a character offset in source."""
    return LineIndex(source, filename).location(offset)


def span_of(source: str, start: int, end: int, filename: str = "<input>") -> SourceSpan:
    """Build the span covering source[start:end]."""
    return LineIndex(source, filename).span(start, end)
