"""
Utility functions for cleaning tokens pulled out of the raw dump.
"""

from collections import Counter
from typing import List, Iterable

MARKER = "*"
MARKUP_CHARS = "*`"


def split_words(text: str) -> List[str]:
    """
    Split a word line into words.
    Handles both comma-separated lists ("FOO, BAR, BAZ,") and a single
    bare word ("QUX"). Empty tokens are dropped.
    """
    # splitting on "," also removes the trailing comma of each token
    return [w.strip() for w in text.split(",") if w.strip()]


def clean_category_name(text: str) -> str:
    """Trim whitespace and surrounding markup (e.g. **BOLD**) from a category label."""
    return text.strip().strip(MARKUP_CHARS).strip()


def find_duplicates(items: Iterable[str]) -> List[str]:
    """Return items that occur more than once, compared case-insensitively."""
    items = list(items)
    counts = Counter(i.lower() for i in items)
    seen = set()
    dupes = []
    for item in items:
        key = item.lower()
        if counts[key] > 1 and key not in seen:
            seen.add(key)
            dupes.append(item)
    return dupes
