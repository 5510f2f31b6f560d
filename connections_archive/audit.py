"""
Stricter checks for stored puzzles, run before they are merged into the
archive. Unlike the parser's structural check these report every problem
found, and separate hard errors from warnings.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from .models import Puzzle
from .utils import find_duplicates

# NYT Connections launched on this date
LAUNCH_DATE = date(2023, 6, 12)
MAX_GAME_ID = 10000
MAX_NAME_LEN = 50
MAX_WORD_LEN = 30


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def extend(self, other: "ValidationResult"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def validate_date(d: date, allow_future: bool = False, today: Optional[date] = None) -> ValidationResult:
    result = ValidationResult()
    today = today or date.today()
    if not allow_future and d > today:
        result.errors.append(f"Date {d.isoformat()} is in the future.")
    if d < LAUNCH_DATE:
        result.warnings.append(
            f"Date {d.isoformat()} is before Connections launched ({LAUNCH_DATE.isoformat()})."
        )
    return result


def validate_puzzle(puzzle: Puzzle, allow_future: bool = False, today: Optional[date] = None) -> ValidationResult:
    """Check one puzzle. Messages are prefixed with the puzzle date."""
    result = validate_date(puzzle.date, allow_future=allow_future, today=today)

    if puzzle.game_id <= 0:
        result.errors.append(f"Invalid game ID {puzzle.game_id}. Must be a positive integer.")
    elif puzzle.game_id > MAX_GAME_ID:
        result.warnings.append(f"Game ID {puzzle.game_id} seems unusually high.")

    if len(puzzle.categories) != 4:
        result.errors.append(f"Must have exactly 4 groups. Found {len(puzzle.categories)}.")

    for i, cat in enumerate(puzzle.categories, start=1):
        if not cat.name.strip():
            result.errors.append(f"Group {i}: Missing name.")
        elif len(cat.name) > MAX_NAME_LEN:
            result.warnings.append(f"Group {i}: Name is quite long ({len(cat.name)} characters).")
        if len(cat.words) != 4:
            result.errors.append(f"Group {i}: Must have exactly 4 words. Found {len(cat.words)}.")
        for j, word in enumerate(cat.words, start=1):
            if not word.strip():
                result.errors.append(f"Group {i}, Word {j}: Missing word.")
            elif len(word) > MAX_WORD_LEN:
                result.warnings.append(f"Group {i}, Word {j}: Word is quite long ({len(word)} characters).")

    dupes = find_duplicates(puzzle.words)
    if dupes:
        result.errors.append(f"Duplicate words found: {', '.join(dupes)}")
    dupes = find_duplicates(puzzle.category_names)
    if dupes:
        result.errors.append(f"Duplicate group names found: {', '.join(dupes)}")

    prefix = f"{puzzle.date_str}: "
    result.errors = [prefix + e for e in result.errors]
    result.warnings = [prefix + w for w in result.warnings]
    return result


def validate_archive(puzzles: List[Puzzle], allow_future: bool = False, today: Optional[date] = None) -> ValidationResult:
    """Validate every puzzle, plus dates and game IDs that appear more than once."""
    result = ValidationResult()
    for p in puzzles:
        result.extend(validate_puzzle(p, allow_future=allow_future, today=today))

    for d, n in Counter(p.date_str for p in puzzles).items():
        if n > 1:
            result.errors.append(f"Date {d} appears {n} times.")
    for gid, n in Counter(p.game_id for p in puzzles).items():
        if n > 1:
            result.errors.append(f"Game ID {gid} appears {n} times.")
    return result
