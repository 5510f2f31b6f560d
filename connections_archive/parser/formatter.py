"""
Render puzzles back into the raw dump layout that the parser reads.
"""

from __future__ import annotations
from datetime import date
from typing import Iterable, List

from ..models import Puzzle
from ..utils import MARKER
from .classifier import CONTINUATION_INDENT

MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def format_date(d: date) -> str:
    """date(2025, 7, 31) -> "Jul 31, 2025" """
    return f"{MONTH_ABBR[d.month - 1]} {d.day}, {d.year}"


def format_puzzle(puzzle: Puzzle) -> List[str]:
    indent = " " * CONTINUATION_INDENT
    lines = []
    for i, cat in enumerate(puzzle.categories):
        if i == 0:
            lines.append(f"{MARKER} {format_date(puzzle.date)} #{puzzle.game_id} {cat.name}")
        else:
            lines.append(f"{MARKER} {cat.name}")
        for j, word in enumerate(cat.words):
            sep = "," if j < len(cat.words) - 1 else ""
            lines.append(f"{MARKER}{indent}{word}{sep}")
    return lines


def format_puzzles(puzzles: Iterable[Puzzle]) -> str:
    lines: List[str] = []
    for p in puzzles:
        lines.extend(format_puzzle(p))
        lines.append("")
    return "\n".join(lines)
