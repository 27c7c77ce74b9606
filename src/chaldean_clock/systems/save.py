from __future__ import annotations

"""Transactional save/load helpers for clock snapshots.

Writes go to a temp file in the target directory, are fsynced and then
swapped in with os.replace. The previous file is kept as `.bak` and used
when the main file fails to parse.
"""

from pathlib import Path
import json
import os
import shutil
import tempfile
import time
from typing import Any, Dict

SAVE_VERSION = 1


class SaveError(Exception):
    pass


class LoadError(Exception):
    pass


def ensure_data_dirs(data_dir: Path) -> Path:
    """Create `data_dir` and its `saves/` folder; return `data_dir`."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "saves").mkdir(exist_ok=True)
    return data_dir


def slot_path(data_dir: Path, slot: str) -> Path:
    return Path(data_dir) / "saves" / f"{slot}.json"


def _save_atomic(target_path: Path, data_bytes: bytes) -> None:
    target_path.parent.mkdir(parents=True, exist_ok=True)
    fd = None
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=target_path.name, dir=str(target_path.parent))
        with os.fdopen(fd, "wb") as f:
            fd = None
            f.write(data_bytes)
            f.flush()
            os.fsync(f.fileno())
        if target_path.exists():
            shutil.copy2(target_path, target_path.with_suffix(target_path.suffix + ".bak"))
        os.replace(tmp_path, target_path)
        tmp_path = None
    except OSError as e:
        raise SaveError(f"Atomic save failed: {e}") from e
    finally:
        if fd is not None:
            os.close(fd)
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)


def _serialize(data: Dict[str, Any]) -> bytes:
    envelope = {
        "metadata": {"version": SAVE_VERSION, "timestamp": int(time.time())},
        "payload": data,
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False).encode("utf-8")


def save_snapshot(data_dir: Path, slot: str, data: Dict[str, Any]) -> Path:
    target = slot_path(ensure_data_dirs(data_dir), slot)
    _save_atomic(target, _serialize(data))
    return target


def _read(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            obj = json.load(f)
    except (OSError, ValueError) as e:
        raise LoadError(f"Failed to read save '{path}': {e}") from e
    if not isinstance(obj, dict) or not isinstance(obj.get("payload"), dict):
        raise LoadError(f"Invalid save file structure: {path}")
    return obj


def load_snapshot(data_dir: Path, slot: str) -> Dict[str, Any]:
    """Return the saved payload for `slot`, falling back to its `.bak`."""
    target = slot_path(data_dir, slot)
    bak = target.with_suffix(target.suffix + ".bak")
    if not target.exists():
        raise LoadError(f"Save not found: {target}")
    try:
        return _read(target)["payload"]
    except LoadError:
        if not bak.exists():
            raise
    try:
        return _read(bak)["payload"]
    except LoadError as e:
        raise LoadError(f"Both save and backup are invalid: {e}") from e

