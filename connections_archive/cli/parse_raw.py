from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core.env import load_settings
from ..core.log import setup_logging
from ..parser import parse
from ..storage import read_raw_text, save_puzzles, to_solver_row, write_jsonl

app = typer.Typer()
console = Console()


@app.command()
def main(
    raw_path: Optional[str] = typer.Option(None, help="Raw text dump (default: $CONNECTIONS_RAW_PATH)"),
    out_dir: Optional[str] = typer.Option(None, help="Output directory (default: $CONNECTIONS_OUT_DIR)"),
    jsonl_path: Optional[str] = typer.Option(None, help="Also export puzzles as solver JSONL rows"),
    show_diagnostics: int = typer.Option(20, min=0, help="How many diagnostics to print"),
    verbose: bool = False,
):
    """
    Parse the raw Connections text dump into one JSON file per puzzle
    plus summary.json.
    """
    settings = load_settings()
    try:
        setup_logging(settings.log_level, verbose=verbose)
    except ValueError as e:
        console.print(f"[red]❌ Bad CONNECTIONS_LOG_LEVEL:[/] {e}")
        raise SystemExit(1)
    raw_path = raw_path or settings.raw_path
    out_dir = out_dir or settings.out_dir

    console.rule(f"[bold green]Parsing[/] {raw_path}")
    try:
        raw = read_raw_text(raw_path)
    except (FileNotFoundError, UnicodeDecodeError) as e:
        console.print(f"[red]❌ Could not read input:[/] {e}")
        raise SystemExit(1)

    puzzles, diagnostics = parse(raw)

    if diagnostics:
        console.rule(f"[bold yellow]Diagnostics ({len(diagnostics)})")
        table = Table("line", "kind", "message")
        for d in diagnostics[:show_diagnostics]:
            table.add_row(str(d.line_no or ""), d.kind, d.message[:120])
        console.print(table)
        if len(diagnostics) > show_diagnostics:
            console.print(f"...and {len(diagnostics) - show_diagnostics} more.")

    if not puzzles:
        console.print("[red]❌ No valid puzzles found in the raw data[/]")
        raise SystemExit(1)

    saved = save_puzzles(puzzles, out_dir)
    console.print(f"[green]✅ Saved {saved} puzzle files to[/] {out_dir}")
    console.print(f"Date range: {puzzles[0].date_str} → {puzzles[-1].date_str}")

    if jsonl_path:
        write_jsonl(Path(jsonl_path), (to_solver_row(p) for p in puzzles))
        console.print(f"[green]Wrote[/] {len(puzzles)} rows to {jsonl_path}")


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
