"""Source locations attached to decoded terms."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Position in source text. Lines are 1-based, columns 0-based."""

    line: int
    column: int
    file: str | None = None

    def __str__(self) -> str:
        if self.file:
            return f"{self.file}:{self.line}:{self.column}"
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Span:
    """Source span from start to end location."""

    start: Location
    end: Location

    def __str__(self) -> str:
        if self.start.line != self.end.line:
            where = f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        else:
            where = f"{self.start.line}:{self.start.column}-{self.end.column}"
        if self.start.file:
            return f"{self.start.file}:{where}"
        return where
