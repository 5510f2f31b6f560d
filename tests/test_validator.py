from __future__ import annotations

from connections_archive.models import Category, PuzzleDraft, INVALID_RECORD
from connections_archive.parser.validator import check_draft, validate_drafts


def _draft(word_counts=(4, 4, 4, 4), id_text="781", date_text="Jul 31, 2025"):
    d = PuzzleDraft(date_text, id_text, line_no=1)
    for rank, n in enumerate(word_counts):
        d.categories.append(Category(f"CAT {rank}", rank, tuple(f"W{rank}{i}" for i in range(n))))
    return d


def test_well_formed_draft_passes():
    assert check_draft(_draft()) is None


def test_short_category_drops_whole_record():
    good, bad = _draft(), _draft((4, 3, 4, 4), date_text="Jul 30, 2025")
    kept, diags = validate_drafts([bad, good])
    assert kept == [good]
    assert len(diags) == 1
    assert diags[0].kind == INVALID_RECORD
    assert diags[0].date_text == "Jul 30, 2025"
    assert "'CAT 1' has 3 words" in diags[0].message


def test_long_category_is_rejected():
    assert "has 5 words" in check_draft(_draft((4, 4, 4, 5)))


def test_category_count_is_checked():
    assert "found 3" in check_draft(_draft((4, 4, 4)))


def test_zero_puzzle_number_is_rejected():
    assert "positive integer" in check_draft(_draft(id_text="0"))
