from __future__ import annotations
import typer
from typing import List, Optional
from rich.console import Console
from rich.table import Table

from ..core.env import load_settings
from ..models import Puzzle
from ..storage import load_puzzles

app = typer.Typer()
console = Console()


def search_puzzles(puzzles: List[Puzzle], query: str):
    """
    Find categories whose name or words contain `query` (case-insensitive).
    Yields (puzzle, category) pairs in date order.
    """
    q = query.lower()
    for p in puzzles:
        for cat in p.categories:
            if q in cat.name.lower() or any(q in w.lower() for w in cat.words):
                yield p, cat


@app.command()
def main(query: str, out_dir: Optional[str] = None):
    out_dir = out_dir or load_settings().out_dir
    try:
        puzzles = load_puzzles(out_dir)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)

    hits = list(search_puzzles(puzzles, query))
    if not hits:
        console.print(f"[yellow]No matches for[/] {query!r}")
        return

    table = Table("date", "game_id", "level", "category", "words")
    for p, cat in hits:
        table.add_row(p.date_str, str(p.game_id), str(cat.rank), cat.name, ", ".join(cat.words))
    console.print(table)
    console.print(f"{len(hits)} matching groups")


if __name__ == "__main__":
    app()
