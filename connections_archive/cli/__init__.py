"""
CLI commands for building and browsing the puzzle archive.
"""

from .parse_raw import main as run_parse
from .explore_data import main as list_puzzles
from .search import main as search_archive, search_puzzles
from .validate_data import main as audit_archive

__all__ = [
    "run_parse",
    "list_puzzles",
    "search_archive",
    "search_puzzles",
    "audit_archive",
]
