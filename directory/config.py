from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent / "data" / "catalog.json"


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DirectoryConfig:
    catalog_path: Path = Path(os.getenv("DIRECTORY_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    initial_page_size: int = 12
    page_step: int = 12
    loading_delay: float = float(os.getenv("DIRECTORY_LOADING_DELAY", "2.0"))
    trace_scoring: bool = _env_flag("DIRECTORY_TRACE_SCORING")


DEFAULT_DIRECTORY_CONFIG = DirectoryConfig()
