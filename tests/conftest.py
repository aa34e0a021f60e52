# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import babel_basex` works without installing.
"""

import os
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from babel_basex.config import BasexConfig, Settings, TempFilesConfig  # noqa: E402
from babel_basex.executors import TempFileManager  # noqa: E402

# Prints its arguments, then the content of the last one (the query file).
ECHO_SCRIPT = """\
echo "args: $*"
for last; do :; done
cat "$last"
"""


@pytest.fixture
def fake_basex(tmp_path):
    """Factory writing an executable shell script that stands in for basex."""

    def make(body: str = ECHO_SCRIPT, name: str = "basex") -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        os.chmod(script, 0o755)
        return script

    return make


@pytest.fixture
def temp_files(tmp_path):
    manager = TempFileManager(tmp_path / "babel-tmp")
    yield manager
    manager.cleanup()


@pytest.fixture
def make_settings(tmp_path):
    def make(command: str = "basex", **basex_kwargs) -> Settings:
        return Settings(
            basex=BasexConfig(command=command, **basex_kwargs),
            tempfiles=TempFilesConfig(directory=str(tmp_path / "babel-tmp")),
        )

    return make


@pytest.fixture(autouse=True)
def reset_loguru():
    """The CLI points loguru at whatever sys.stderr is; undo that after each test."""
    yield
    from loguru import logger

    logger.remove()
    logger.add(sys.__stderr__, level="INFO")
