"""
Date normalization and final ordering of parsed puzzles.
"""

from __future__ import annotations
import re
from datetime import date
from typing import List, Tuple

from ..models import Diagnostic, Puzzle, PuzzleDraft, INVALID_DATE

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
    "january": 1, "february": 2, "march": 3, "april": 4, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10,
    "november": 11, "december": 12,
}

HUMAN_DATE_RE = re.compile(r"^([A-Za-z]+)\s+(\d{1,2}),\s+(\d{4})$")


def parse_date(text: str) -> date:
    """
    Parse a human date like "Jul 31, 2025" into a date.

    Raises:
        ValueError: unknown month name, wrong shape, or a day that doesn't exist
    """
    m = HUMAN_DATE_RE.match(text.strip())
    if not m:
        raise ValueError(f"Invalid date format: {text!r}")
    month_name, day, year = m.groups()
    month = MONTHS.get(month_name.lower())
    if month is None:
        raise ValueError(f"Invalid month: {month_name!r}")
    return date(int(year), month, int(day))


def to_puzzle(draft: PuzzleDraft) -> Puzzle:
    return Puzzle(
        date=parse_date(draft.date_text),
        game_id=int(draft.id_text),
        categories=tuple(draft.categories),
    )


def normalize_drafts(drafts: List[PuzzleDraft]) -> Tuple[List[Puzzle], List[Diagnostic]]:
    """Convert drafts to puzzles and sort them by date (stable for equal dates)."""
    puzzles: List[Puzzle] = []
    diagnostics: List[Diagnostic] = []
    for draft in drafts:
        try:
            puzzles.append(to_puzzle(draft))
        except ValueError as e:
            diagnostics.append(Diagnostic(
                INVALID_DATE,
                f"puzzle #{draft.id_text} dropped: {e}",
                line_no=draft.line_no,
                date_text=draft.date_text,
            ))
    puzzles.sort(key=lambda p: p.date)
    return puzzles, diagnostics
