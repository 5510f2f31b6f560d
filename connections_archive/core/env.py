# connections_archive/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULTS = {
    "CONNECTIONS_RAW_PATH": "data/raw/raw_connections_data.txt",
    "CONNECTIONS_OUT_DIR": "data/parsed",
    "CONNECTIONS_LOG_LEVEL": "WARNING",
}


@dataclass
class Settings:
    raw_path: str
    out_dir: str
    log_level: str


def load_settings(dotenv_path: str | None = None) -> Settings:
    """
    Load .env once (existing environment wins) and read our settings.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    values = {k: os.getenv(k) or v for k, v in DEFAULTS.items()}
    return Settings(
        raw_path=values["CONNECTIONS_RAW_PATH"],
        out_dir=values["CONNECTIONS_OUT_DIR"],
        log_level=values["CONNECTIONS_LOG_LEVEL"].upper(),
    )
