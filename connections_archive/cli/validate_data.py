from __future__ import annotations
import typer
from typing import Optional
from rich.console import Console

from ..audit import validate_archive
from ..core.env import load_settings
from ..storage import load_puzzles

app = typer.Typer()
console = Console()


@app.command()
def main(out_dir: Optional[str] = None, allow_future: bool = False, strict: bool = False):
    """Audit stored puzzles. Exits 1 on errors (or on warnings with --strict)."""
    out_dir = out_dir or load_settings().out_dir
    try:
        puzzles = load_puzzles(out_dir)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)

    result = validate_archive(puzzles, allow_future=allow_future)

    for w in result.warnings:
        console.print(f"[yellow]⚠ {w}[/]")
    for e in result.errors:
        console.print(f"[red]❌ {e}[/]")

    if not result.is_valid or (strict and result.warnings):
        console.print(f"[red]Validation failed[/] ({len(result.errors)} errors, {len(result.warnings)} warnings)")
        raise SystemExit(1)
    console.print(f"[green]✅ {len(puzzles)} puzzles passed validation[/]")


if __name__ == "__main__":
    app()
