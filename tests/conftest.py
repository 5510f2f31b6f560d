from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"

WELL_FORMED = [
    ("SOUNDS OF DISAPPROVAL", ["BOO", "HISS", "JEER", "RASPBERRY"]),
    ("KINDS OF PASTA", ["Penne", "Ziti", "Orzo", "Farfalle"]),
    ("FAMOUS BEARS", ["PADDINGTON", "POOH", "BALOO", "YOGI"]),
    ("___ BALL", ["FOOT", "BASKET", "SNOW", "EYE"]),
]


def make_block(header: str, groups: List[Tuple[str, List[str]]], inline_first: bool = True) -> str:
    """Build one puzzle in the raw dump layout, one word per indented line."""
    lines = []
    for i, (name, words) in enumerate(groups):
        if i == 0 and inline_first:
            lines.append(f"* {header} {name}")
        else:
            if i == 0:
                lines.append(f"* {header}")
            lines.append(f"* {name}")
        for j, w in enumerate(words):
            lines.append(f"*    {w}" + ("," if j < len(words) - 1 else ""))
    return "\n".join(lines) + "\n"


@pytest.fixture()
def sample_text() -> str:
    return (DATA_DIR / "sample_raw.txt").read_text(encoding="utf-8")


@pytest.fixture()
def sample_path() -> Path:
    return DATA_DIR / "sample_raw.txt"


@pytest.fixture()
def well_formed() -> str:
    return make_block("Jul 31, 2025 #781", WELL_FORMED)
