"""
NYT Connections archive - raw dump parser and puzzle storage.
"""

from .parser import parse, format_puzzles
from .models import Puzzle, Category, Diagnostic
from .storage import read_raw_text, save_puzzles, load_puzzles

__all__ = [
    "parse",
    "format_puzzles",
    "Puzzle",
    "Category",
    "Diagnostic",
    "read_raw_text",
    "save_puzzles",
    "load_puzzles",
]
