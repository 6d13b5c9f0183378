"""CLI types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class AppEnv:
    config_path: Path | None = None
    verbose: bool = False
