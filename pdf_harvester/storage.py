"""Filesystem helpers: output directory bootstrap, snapshots and atomic writes."""

import contextlib
import logging
import os
import tempfile
from typing import Optional

from .logger import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def file_exists(path: str) -> bool:
    """True only for an existing regular file (directories don't count)."""
    return os.path.isfile(path)


def ensure_directory(path: str, mode: int = 0o755,
                     log: Optional[logging.Logger] = None) -> bool:
    log = log or logger
    if os.path.isdir(path):
        return True
    try:
        os.makedirs(path, mode=mode)
    except OSError as e:
        log.error(f"Failed to create directory {path}: {e}")
        return False
    log.info(f"Created output directory {path}")
    return True


def append_to_file(path: str, content: str,
                   log: Optional[logging.Logger] = None) -> bool:
    """Append ``content`` plus a newline to ``path``, creating it if needed."""
    log = log or logger
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(content + "\n")
    except OSError as e:
        log.error(f"Failed to write {path}: {e}")
        return False
    return True


def write_atomic(path: str, data: bytes, mode: int = 0o644) -> int:
    """Write ``data`` to ``path`` via a temporary ``.part`` file in the same
    directory. Raises OSError on failure and leaves no partial file behind."""
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path) or ".", suffix=".part")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError:
        with contextlib.suppress(OSError):
            os.remove(tmp_path)
        raise
    return len(data)
