from __future__ import annotations
import logging
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", verbose: bool = False):
    """Route library logging through rich. --verbose forces DEBUG."""
    level = "DEBUG" if verbose else level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
