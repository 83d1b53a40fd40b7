# src/taskmaster/storage/json_util.py

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from ..errors import CorruptDataError, StorageWriteError

logger = logging.getLogger(__name__)

_locks_guard = threading.Lock()
_path_locks: dict[Path, threading.Lock] = {}


def path_lock(path: str | Path) -> threading.Lock:
    """One lock per absolute path, shared by every reader/writer in the process."""
    # abspath does no filesystem calls, so it cannot fail on odd paths.
    key = Path(os.path.abspath(path))
    with _locks_guard:
        lock = _path_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _path_locks[key] = lock
        return lock


def read_json_file(path: str | Path) -> Any | None:
    """
    Parse a JSON file.

    Returns None if the file does not exist.
    Raises CorruptDataError if it exists but cannot be read or parsed.
    """
    path = Path(path)
    with path_lock(path):
        try:
            raw = path.read_text("utf-8")
        except (FileNotFoundError, NotADirectoryError):
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptDataError(path, f"unreadable: {e}") from e
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and over-long integer literals.
        raise CorruptDataError(path, f"invalid JSON: {e}") from e


def write_json_file(path: str | Path, payload: Any) -> None:
    """
    Write JSON via a sibling .tmp file and os.replace.

    A crash mid-write leaves the previous file intact. Raises StorageWriteError.
    """
    path = Path(path)
    try:
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    except (TypeError, ValueError, RecursionError) as e:
        raise StorageWriteError(path, e) from e
    with path_lock(path):
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            raise StorageWriteError(path, e) from e
    logger.debug("Wrote %s (%d bytes)", path, len(text))
