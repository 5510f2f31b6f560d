from __future__ import annotations

from dataclasses import replace
from datetime import date

from connections_archive.audit import validate_archive, validate_puzzle
from connections_archive.models import Category, Puzzle

TODAY = date(2025, 8, 1)


def _puzzle(d=date(2025, 7, 31), game_id=781, groups=None):
    groups = groups or [
        ("KEYBOARD KEYS", ["SHIFT", "TAB", "RETURN", "OPTION"]),
        ("NBA TEAMS", ["HEAT", "BUCKS", "JAZZ", "NETS"]),
        ("PALINDROMES", ["LEVEL", "KAYAK", "RACECAR", "MOM"]),
        ("WET WEATHER", ["SNOW", "HAIL", "RAIN", "SLEET"]),
    ]
    cats = tuple(Category(name, i, tuple(words)) for i, (name, words) in enumerate(groups))
    return Puzzle(d, game_id, cats)


def test_clean_puzzle():
    result = validate_puzzle(_puzzle(), today=TODAY)
    assert result.is_valid
    assert result.warnings == []


def test_duplicate_words_case_insensitive():
    p = _puzzle(groups=[
        ("A", ["ONE", "TWO", "THREE", "FOUR"]),
        ("B", ["one", "SIX", "SEVEN", "EIGHT"]),
        ("C", ["W1", "W2", "W3", "W4"]),
        ("D", ["X1", "X2", "X3", "X4"]),
    ])
    result = validate_puzzle(p, today=TODAY)
    assert not result.is_valid
    assert "2025-07-31: Duplicate words found: ONE" in result.errors


def test_duplicate_group_names():
    p = _puzzle()
    cats = list(p.categories)
    cats[3] = replace(cats[3], name="nba teams")
    result = validate_puzzle(replace(p, categories=tuple(cats)), today=TODAY)
    assert any("Duplicate group names" in e for e in result.errors)


def test_future_date():
    assert not validate_puzzle(_puzzle(d=date(2025, 9, 1)), today=TODAY).is_valid
    assert validate_puzzle(_puzzle(d=date(2025, 9, 1)), allow_future=True, today=TODAY).is_valid


def test_warnings_do_not_fail():
    result = validate_puzzle(_puzzle(d=date(2023, 1, 1), game_id=20000), today=TODAY)
    assert result.is_valid
    assert len(result.warnings) == 2


def test_bad_game_id():
    assert not validate_puzzle(_puzzle(game_id=0), today=TODAY).is_valid


def test_archive_duplicates():
    result = validate_archive([_puzzle(), _puzzle()], today=TODAY)
    assert "Date 2025-07-31 appears 2 times." in result.errors
    assert "Game ID 781 appears 2 times." in result.errors
