"""Minimal data loader: reads JSON parameter files and command scripts.

Missing files are not an error; callers get None (or no lines) and fall
back to defaults.
"""
from pathlib import Path
import json
import logging
from typing import Any, List, Optional

_logger = logging.getLogger("chaldean_clock.data.loader")


def load_json(path: Path) -> Optional[Any]:
    """Parse a JSON file. Raises OSError/ValueError for unreadable or bad JSON."""
    path = Path(path)
    if not path.exists():
        _logger.warning("Definition not found: %s", path)
        return None
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_lines(path: Path) -> List[str]:
    """Read a plain-text command script, one command per line.

    An unreadable or non-UTF-8 script is logged and treated as empty.
    """
    path = Path(path)
    if not path.exists():
        _logger.warning("Script not found: %s", path)
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        _logger.warning("Skipping unreadable script %s: %s", path, e)
        return []
