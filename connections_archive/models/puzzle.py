from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date as Date
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Category:
    """One named group of words inside a puzzle."""
    name: str
    rank: int                    # 0-based position in the puzzle (order seen in source)
    words: Tuple[str, ...]


@dataclass(frozen=True)
class Puzzle:
    """A single day's Connections puzzle: 4 categories of 4 words."""
    date: Date
    game_id: int
    categories: Tuple[Category, ...]

    @property
    def date_str(self) -> str:
        return self.date.isoformat()

    @property
    def words(self) -> List[str]:
        return [w for c in self.categories for w in c.words]

    @property
    def category_names(self) -> List[str]:
        return [c.name for c in self.categories]


# Diagnostic kinds
NOISE = "noise"
ORPHAN_WORDS = "orphan_words"
INCOMPLETE_RECORD = "incomplete_record"
INVALID_RECORD = "invalid_record"
INVALID_DATE = "invalid_date"


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal note about a line or record that could not be used."""
    kind: str
    message: str
    line_no: Optional[int] = None
    date_text: Optional[str] = None

    def __str__(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        return f"[{self.kind}] {where}{self.message}"


@dataclass
class CategoryDraft:
    """Category still collecting words."""
    name: str
    words: List[str] = field(default_factory=list)


@dataclass
class PuzzleDraft:
    """Puzzle still collecting categories. Dates and ids stay as source text
    until the normalizer runs."""
    date_text: str
    id_text: str
    line_no: int
    categories: List[Category] = field(default_factory=list)
