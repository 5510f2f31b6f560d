"""
Parser for the raw Connections text dump.

Usage:
    from connections_archive.parser import parse

    puzzles, diagnostics = parse(raw_text)

Pipeline: classify each line -> fold into drafts -> drop malformed drafts
-> parse dates and sort. Malformed content never raises; it shows up in
`diagnostics` and is left out of `puzzles`.
"""

from __future__ import annotations
import logging
from typing import List, Tuple

from ..models import Diagnostic, Puzzle
from .accumulator import Accumulator, accumulate
from .classifier import (
    CategoryHeader,
    Noise,
    RecordStart,
    WordContinuation,
    classify_line,
)
from .formatter import format_date, format_puzzles
from .normalize import normalize_drafts, parse_date
from .validator import validate_drafts

logger = logging.getLogger(__name__)


def parse(raw_text: str) -> Tuple[List[Puzzle], List[Diagnostic]]:
    """Parse a raw dump into date-sorted puzzles plus diagnostics."""
    lines = raw_text.splitlines()
    logger.info("Processing %d lines", len(lines))

    drafts, diagnostics = accumulate(lines)
    drafts, problems = validate_drafts(drafts)
    diagnostics.extend(problems)
    puzzles, problems = normalize_drafts(drafts)
    diagnostics.extend(problems)

    logger.info("Parsed %d complete puzzles (%d diagnostics)", len(puzzles), len(diagnostics))
    return puzzles, diagnostics


__all__ = [
    "parse",
    "accumulate",
    "Accumulator",
    "classify_line",
    "RecordStart",
    "WordContinuation",
    "CategoryHeader",
    "Noise",
    "validate_drafts",
    "normalize_drafts",
    "parse_date",
    "format_date",
    "format_puzzles",
]
