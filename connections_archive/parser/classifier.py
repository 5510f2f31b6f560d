"""
Line classifier for the raw puzzle dump.

Every structurally meaningful line starts with the marker "*". The dump
uses indentation after the marker to tell word lines from category lines:

    * Jul 31, 2025 #781 FIRST CATEGORY      <- record start (+ inline category)
    *    WORD ONE,                          <- word continuation (3+ spaces)
    * SECOND CATEGORY                       <- category header (0-2 spaces)
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional, Union

from ..utils import MARKER

# Indentation (after the marker) at which a line counts as a word line
CONTINUATION_INDENT = 3

RECORD_START_RE = re.compile(
    r"^\*\s+(?P<date>[A-Za-z]{3}\s+\d{1,2},\s+\d{4})\s+#(?P<id>\d+)\s*(?P<rest>.*)$"
)
DATE_LIKE_RE = re.compile(r"[A-Za-z]{3}\s+\d{1,2},\s+\d{4}")
INDENT_RE = re.compile(r"^\*(\s*)(.*)$")


@dataclass(frozen=True)
class RecordStart:
    date_text: str
    id_text: str
    trailing_text: Optional[str] = None


@dataclass(frozen=True)
class WordContinuation:
    raw_text: str


@dataclass(frozen=True)
class CategoryHeader:
    raw_text: str


@dataclass(frozen=True)
class Noise:
    raw_text: str
    reason: str


LineKind = Union[RecordStart, WordContinuation, CategoryHeader, Noise]


def is_continuation_indent(whitespace: str) -> bool:
    """True when the whitespace after the marker is deep enough for a word line."""
    return len(whitespace) >= CONTINUATION_INDENT


def classify_line(line: str) -> LineKind:
    """
    Classify one line of the dump.

    The line is stripped of surrounding whitespace first; whitespace that
    follows the marker is what separates word lines from category headers,
    so it is measured before anything else is trimmed.
    """
    line = line.strip()
    if not line:
        return Noise(line, "blank line")
    if not line.startswith(MARKER):
        return Noise(line, "no leading marker")

    m = RECORD_START_RE.match(line)
    if m:
        rest = (m.group("rest") or "").strip()
        return RecordStart(m.group("date"), m.group("id"), rest or None)

    indent, body = INDENT_RE.match(line).groups()
    if not body:
        return Noise(line, "marker with no text")

    if is_continuation_indent(indent):
        return WordContinuation(body)

    if DATE_LIKE_RE.match(body):
        return Noise(line, "date line does not match the record-start pattern")

    return CategoryHeader(body)
