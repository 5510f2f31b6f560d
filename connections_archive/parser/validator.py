"""
Structural check on sealed puzzle drafts. A draft is kept whole or dropped
whole; nothing is repaired.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from ..models import Diagnostic, PuzzleDraft, INVALID_RECORD

CATEGORIES_PER_PUZZLE = 4
WORDS_PER_CATEGORY = 4


def check_draft(draft: PuzzleDraft) -> Optional[str]:
    """Return a description of the first shortfall, or None if the draft is well-formed."""
    if len(draft.categories) != CATEGORIES_PER_PUZZLE:
        return f"expected {CATEGORIES_PER_PUZZLE} categories, found {len(draft.categories)}"
    for cat in draft.categories:
        if len(cat.words) != WORDS_PER_CATEGORY:
            return (f"category {cat.name!r} has {len(cat.words)} words, "
                    f"expected {WORDS_PER_CATEGORY}")
    if not draft.id_text.isdigit() or int(draft.id_text) <= 0:
        return f"invalid puzzle number #{draft.id_text}, must be a positive integer"
    return None


def validate_drafts(drafts: List[PuzzleDraft]) -> Tuple[List[PuzzleDraft], List[Diagnostic]]:
    kept: List[PuzzleDraft] = []
    diagnostics: List[Diagnostic] = []
    for draft in drafts:
        problem = check_draft(draft)
        if problem is None:
            kept.append(draft)
            continue
        diagnostics.append(Diagnostic(
            INVALID_RECORD,
            f"puzzle {draft.date_text}: {problem}",
            line_no=draft.line_no,
            date_text=draft.date_text,
        ))
    return kept, diagnostics
