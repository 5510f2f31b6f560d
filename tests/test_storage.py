from __future__ import annotations

from pathlib import Path

import orjson
import pytest
from conftest import WELL_FORMED, make_block

from connections_archive import parse
from connections_archive.storage import (
    load_puzzles,
    read_jsonl,
    read_raw_text,
    save_puzzles,
    to_solver_row,
    write_jsonl,
)


def test_save_and_load(tmp_path: Path, sample_text):
    puzzles, _ = parse(sample_text)
    assert save_puzzles(puzzles, tmp_path) == 2

    files = sorted(f.name for f in tmp_path.iterdir())
    assert files == ["puzzle-2025-07-30-780.json", "puzzle-2025-07-31-781.json", "summary.json"]

    data = orjson.loads((tmp_path / "puzzle-2025-07-31-781.json").read_bytes())
    assert data["game_id"] == 781
    assert data["groups"][0] == {
        "name": "SOUNDS OF DISAPPROVAL",
        "level": 0,
        "words": ["BOO", "HISS", "JEER", "RASPBERRY"],
    }

    assert load_puzzles(tmp_path) == puzzles


def test_summary(tmp_path: Path, sample_text):
    puzzles, _ = parse(sample_text)
    save_puzzles(puzzles, tmp_path)
    summary = orjson.loads((tmp_path / "summary.json").read_bytes())
    assert summary["total_puzzles"] == 2
    assert summary["date_range"] == {"start": "2025-07-30", "end": "2025-07-31"}
    assert summary["puzzles"][0]["categories"][0] == "KEYBOARD KEYS"


def test_solver_rows_round_trip_jsonl(tmp_path: Path, sample_text):
    puzzles, _ = parse(sample_text)
    path = tmp_path / "out" / "puzzles.jsonl"
    write_jsonl(path, (to_solver_row(p) for p in puzzles))
    rows = list(read_jsonl(path))
    assert [r["game_id"] for r in rows] == ["780", "781"]
    assert len(rows[0]["words"]) == 16
    assert rows[0]["groups"][0]["members"] == ["SHIFT", "TAB", "RETURN", "OPTION"]


def test_read_raw_text_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_raw_text(tmp_path / "nope.txt")


def test_read_raw_text_undecodable(tmp_path: Path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(UnicodeDecodeError):
        read_raw_text(path)


def test_load_puzzles_missing_dir(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(tmp_path / "missing")


def test_same_date_puzzles_get_separate_files(tmp_path: Path):
    text = make_block("Jul 31, 2025 #781", WELL_FORMED) + make_block("Jul 31, 2025 #900", WELL_FORMED)
    puzzles, _ = parse(text)
    assert save_puzzles(puzzles, tmp_path) == 2
    assert len(list(tmp_path.glob("puzzle-*.json"))) == 2
    assert sorted(p.game_id for p in load_puzzles(tmp_path)) == [781, 900]
