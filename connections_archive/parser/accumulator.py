"""
Record accumulator: a two-state fold over classified lines.

    IDLE       no puzzle open (start of input, before the first date line)
    IN_RECORD  a puzzle is open; a category may or may not be open

Closing a category and sealing a puzzle each happen in exactly one place
(_close_category / _seal_record), whichever transition triggers them.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

from ..models import (
    Category,
    CategoryDraft,
    Diagnostic,
    PuzzleDraft,
    INCOMPLETE_RECORD,
    NOISE,
    ORPHAN_WORDS,
)
from ..utils import clean_category_name, split_words
from .classifier import (
    CategoryHeader,
    LineKind,
    Noise,
    RecordStart,
    WordContinuation,
    classify_line,
)
from .validator import CATEGORIES_PER_PUZZLE

logger = logging.getLogger(__name__)

IDLE = "idle"
IN_RECORD = "in_record"


class Accumulator:
    """Folds classified lines into sealed puzzle drafts."""

    def __init__(self):
        self.record: Optional[PuzzleDraft] = None
        self.category: Optional[CategoryDraft] = None
        self.sealed: List[PuzzleDraft] = []
        self.diagnostics: List[Diagnostic] = []

    @property
    def state(self) -> str:
        return IN_RECORD if self.record is not None else IDLE

    def feed(self, line_no: int, item: LineKind) -> None:
        """Apply one classified line."""
        if isinstance(item, RecordStart):
            self._seal_record()
            self.record = PuzzleDraft(item.date_text, item.id_text, line_no)
            logger.debug("line %d: new puzzle %s #%s", line_no, item.date_text, item.id_text)
            if item.trailing_text:
                self._open_category(line_no, item.trailing_text)

        elif isinstance(item, CategoryHeader):
            if self.record is None:
                self._diagnose(NOISE, line_no, f"category line before any date line: {item.raw_text!r}")
                return
            self._close_category()
            self._open_category(line_no, item.raw_text)

        elif isinstance(item, WordContinuation):
            words = split_words(item.raw_text)
            if self.category is None:
                self._diagnose(ORPHAN_WORDS, line_no, f"word line with no open category, dropped {words}")
                return
            self.category.words.extend(words)
            logger.debug("line %d: added %s to %r", line_no, words, self.category.name)

        elif isinstance(item, Noise):
            self._diagnose(NOISE, line_no, f"{item.reason}: {item.raw_text!r}")

        else:
            raise TypeError(f"Unknown line kind: {item!r}")

    def finish(self) -> List[PuzzleDraft]:
        """End of input: seal whatever is still open and return all sealed drafts."""
        self._seal_record()
        return self.sealed

    def _open_category(self, line_no: int, text: str) -> None:
        name = clean_category_name(text)
        if not name:
            # category names are never blank
            self._diagnose(NOISE, line_no, f"category name is only markup: {text!r}")
            return
        self.category = CategoryDraft(name)
        logger.debug("opened category %r", name)

    def _close_category(self) -> None:
        cat, self.category = self.category, None
        if cat is None or self.record is None:
            return
        if not cat.words:
            # header followed directly by another header: no phantom empty group
            logger.debug("dropping empty category %r", cat.name)
            return
        rank = len(self.record.categories)
        self.record.categories.append(Category(cat.name, rank, tuple(cat.words)))

    def _seal_record(self) -> None:
        self._close_category()
        rec, self.record = self.record, None
        if rec is None:
            return
        n = len(rec.categories)
        if n == CATEGORIES_PER_PUZZLE:
            self.sealed.append(rec)
            logger.debug("sealed puzzle %s with %d categories", rec.date_text, n)
        else:
            self.diagnostics.append(Diagnostic(
                INCOMPLETE_RECORD,
                f"puzzle {rec.date_text} #{rec.id_text} has {n} categories, expected {CATEGORIES_PER_PUZZLE}",
                line_no=rec.line_no,
                date_text=rec.date_text,
            ))

    def _diagnose(self, kind: str, line_no: int, message: str) -> None:
        logger.debug("line %d: %s", line_no, message)
        self.diagnostics.append(Diagnostic(kind, message, line_no=line_no))


def accumulate(lines: Iterable[str]) -> Tuple[List[PuzzleDraft], List[Diagnostic]]:
    """Classify and fold raw lines. Blank lines are skipped."""
    acc = Accumulator()
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        acc.feed(line_no, classify_line(line))
    return acc.finish(), acc.diagnostics
