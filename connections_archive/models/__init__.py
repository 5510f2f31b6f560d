"""
Data model for parsed Connections puzzles.

Usage:
    from connections_archive.models import Puzzle, Category

    puzzle.date_str        # "2025-07-31"
    puzzle.category_names  # in the order they appeared in the dump
"""

from .puzzle import (
    Category,
    Puzzle,
    Diagnostic,
    CategoryDraft,
    PuzzleDraft,
    NOISE,
    ORPHAN_WORDS,
    INCOMPLETE_RECORD,
    INVALID_RECORD,
    INVALID_DATE,
)

__all__ = [
    # Final records
    "Category",
    "Puzzle",
    "Diagnostic",

    # In-progress state (parser internals)
    "CategoryDraft",
    "PuzzleDraft",

    # Diagnostic kinds
    "NOISE",
    "ORPHAN_WORDS",
    "INCOMPLETE_RECORD",
    "INVALID_RECORD",
    "INVALID_DATE",
]
