"""Low-level JSON helpers for repositories."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Configuration file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read configuration file: {path}") from exc
    return load_json_text(text, str(path))


def load_json_text(text: str, source: str) -> object:
    """Decode a JSON document held in a string, e.g. a nested plugin parameter."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {source}: {exc}") from exc
