from __future__ import annotations
import typer
from collections import Counter
from typing import Optional
from rich import print
from rich.console import Console
from rich.table import Table

from ..core.env import load_settings
from ..storage import load_puzzles

app = typer.Typer()
console = Console()


@app.command()
def main(out_dir: Optional[str] = None, limit: int = 20):
    """List stored puzzles (most recent first) with a few stats."""
    out_dir = out_dir or load_settings().out_dir
    try:
        puzzles = load_puzzles(out_dir)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)

    if not puzzles:
        print(f"[yellow]No puzzles stored in[/] {out_dir}")
        return

    word_lengths = [len(w) for p in puzzles for w in p.words]
    name_counts = Counter(n for p in puzzles for n in p.category_names)

    print(f"[bold]Puzzles[/]: {len(puzzles)}")
    print(f"[bold]Date range[/]: {puzzles[0].date_str} → {puzzles[-1].date_str}")
    print(f"[bold]Avg word len[/]: {sum(word_lengths)/len(word_lengths):.2f}")
    repeated = [(n, c) for n, c in name_counts.most_common(5) if c > 1]
    if repeated:
        print(f"[bold]Repeated categories[/]: {dict(repeated)}")

    table = Table("date", "game_id", "categories")
    for p in reversed(puzzles[-limit:]):
        table.add_row(p.date_str, str(p.game_id), " | ".join(p.category_names))
    console.print(table)


if __name__ == "__main__":
    app()
