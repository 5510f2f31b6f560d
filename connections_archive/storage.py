"""
Reading the raw dump and persisting parsed puzzles.
"""

from __future__ import annotations
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List

import orjson

from .models import Category, Puzzle

logger = logging.getLogger(__name__)

SUMMARY_FILE = "summary.json"


def read_raw_text(path: str | Path) -> str:
    """Read the raw dump. Decode errors propagate to the caller."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Raw data file not found: {path}")
    return path.read_text(encoding="utf-8")


def read_jsonl(path: str | Path) -> Iterable[Dict[str, Any]]:
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                yield orjson.loads(line)


def write_jsonl(path: str | Path, rows: Iterable[Dict[str, Any]]):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        for r in rows:
            f.write(orjson.dumps(r) + b"\n")


def puzzle_to_dict(puzzle: Puzzle) -> Dict[str, Any]:
    return {
        "date": puzzle.date_str,
        "game_id": puzzle.game_id,
        "groups": [
            {"name": c.name, "level": c.rank, "words": list(c.words)}
            for c in puzzle.categories
        ],
    }


def puzzle_from_dict(data: Dict[str, Any]) -> Puzzle:
    return Puzzle(
        date=date.fromisoformat(data["date"]),
        game_id=int(data["game_id"]),
        categories=tuple(
            Category(g["name"], int(g["level"]), tuple(g["words"]))
            for g in data["groups"]
        ),
    )


def to_solver_row(puzzle: Puzzle) -> Dict[str, Any]:
    """Row in the puzzle JSONL format the solver experiments read."""
    return {
        "game_id": str(puzzle.game_id),
        "date": puzzle.date_str,
        "words": puzzle.words,
        "groups": [
            {"name": c.name, "level": c.rank, "members": list(c.words)}
            for c in puzzle.categories
        ],
    }


def build_summary(puzzles: List[Puzzle]) -> Dict[str, Any]:
    return {
        "total_puzzles": len(puzzles),
        "date_range": {
            "start": puzzles[0].date_str if puzzles else None,
            "end": puzzles[-1].date_str if puzzles else None,
        },
        "puzzles": [
            {"date": p.date_str, "game_id": p.game_id, "categories": p.category_names}
            for p in puzzles
        ],
    }


def puzzle_filename(puzzle: Puzzle) -> str:
    return f"puzzle-{puzzle.date_str}-{puzzle.game_id}.json"


def save_puzzles(puzzles: List[Puzzle], out_dir: str | Path) -> int:
    """
    Write one JSON file per puzzle plus summary.json.

    Returns:
        Number of puzzle files written
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    logger.info("Saving %d puzzles to %s", len(puzzles), out)

    saved = 0
    for p in puzzles:
        (out / puzzle_filename(p)).write_bytes(
            orjson.dumps(puzzle_to_dict(p), option=orjson.OPT_INDENT_2)
        )
        saved += 1

    (out / SUMMARY_FILE).write_bytes(
        orjson.dumps(build_summary(puzzles), option=orjson.OPT_INDENT_2)
    )
    return saved


def load_puzzles(out_dir: str | Path) -> List[Puzzle]:
    """Load every puzzle-*.json in a directory, sorted by date."""
    out = Path(out_dir)
    if not out.is_dir():
        raise FileNotFoundError(f"Puzzle directory not found: {out}")
    puzzles = [
        puzzle_from_dict(orjson.loads(f.read_bytes()))
        for f in sorted(out.glob("puzzle-*.json"))
    ]
    return sorted(puzzles, key=lambda p: p.date)
