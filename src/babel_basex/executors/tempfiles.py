"""
Temporary files for passing block text to a program and reading its output back.

Every file lives in one per-process directory, removed when the interpreter
exits unless ``keep`` is set.
"""

from __future__ import annotations

import atexit
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional, Tuple

from loguru import logger


class TempFileManager:
    def __init__(self, base_dir: Optional[str | Path] = None, keep: bool = False):
        self.base_dir = Path(base_dir).expanduser() if base_dir else None
        self.keep = keep
        self._directory: Optional[Path] = None
        atexit.register(self._cleanup_at_exit)

    @property
    def directory(self) -> Path:
        if self._directory is None or not self._directory.exists():
            if self.base_dir is not None:
                self.base_dir.mkdir(parents=True, exist_ok=True)
            self._directory = Path(tempfile.mkdtemp(prefix="babel-", dir=self.base_dir))
            logger.debug(f"Temporary directory: {self._directory}")
        return self._directory

    def make_temp_file(self, prefix: str, suffix: str = "") -> Path:
        """Create an empty file and return its path."""
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=self.directory)
        os.close(fd)
        return Path(name)

    def cleanup(self) -> None:
        if self._directory is None:
            return
        shutil.rmtree(self._directory, ignore_errors=True)
        self._directory = None

    def _cleanup_at_exit(self) -> None:
        if not self.keep:
            self.cleanup()


# one manager per (directory, keep), so executors built repeatedly share it
_managers: Dict[Tuple[Optional[str], bool], TempFileManager] = {}


def get_temp_file_manager(base_dir: Optional[str | Path] = None, keep: bool = False) -> TempFileManager:
    key = (str(Path(base_dir).expanduser()) if base_dir else None, bool(keep))
    manager = _managers.get(key)
    if manager is None:
        manager = TempFileManager(base_dir, keep=keep)
        _managers[key] = manager
    return manager


def make_temp_file(prefix: str, suffix: str = "") -> Path:
    return get_temp_file_manager().make_temp_file(prefix, suffix)


def cleanup() -> None:
    for manager in _managers.values():
        manager.cleanup()
