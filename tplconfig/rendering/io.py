"""Persisting rendered configuration documents."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


def _replacement_target(path: Path) -> Path:
    # Replacing a symlink would swap the link for a regular file.
    return path.resolve() if path.is_symlink() else path


def _existing_mode(path: Path, default: int) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return default


def replace_file(path: Path, data: bytes, default_mode: int = DEFAULT_FILE_MODE) -> Path:
    """Replace the contents of ``path`` with ``data`` in one step.

    Parent directories are created as needed. A symlinked ``path`` is
    written through to its target, and an existing file keeps its
    permissions; new files get ``default_mode``. Readers see either the
    previous document or the complete new one.

    Returns:
        The path of the file actually written
    """
    target = _replacement_target(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    mode = _existing_mode(target, default_mode)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)

    if target != path:
        logger.debug(f"Followed symlink {path} -> {target}")
    return target
