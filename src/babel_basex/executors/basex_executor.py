# executors/basex_executor.py
"""
XQuery code blocks evaluated with the BaseX command line client.

Supported header arguments:
- :db        database to open before the query (``basex -i <db>``)
- :preamble  text prepended to the block body
- :var       simple variables, declared in the query prologue

Sessions are not supported.
"""

from __future__ import annotations

import os
import shlex
import shutil
import signal
import subprocess
import time
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from loguru import logger

from babel_basex.config import Settings, load_settings
from babel_basex.core.errors import BlockExecutionError, ExecutorUnavailableError
from .base_executor import BaseExecutor
from .execution_result import ExecutionResult
from .header_args import get_param, merge_defaults, var_declarations
from .tempfiles import TempFileManager, get_temp_file_manager

# The program runs in its own process group; a timeout kills the whole group,
# including the JVM started by the basex launcher script.
_POSIX = os.name == "posix"


class BasexExecutor(BaseExecutor):
    """
    Runs ``basex [-i <db>] <input-file>`` and returns what it printed.

    The expanded block is written to one temp file, stdout is redirected
    into another, and that second file is read back as the result.

    Without explicit settings, the YAML config and ``BABEL_BASEX_*``
    environment variables are loaded.
    """

    lang = "xquery"
    default_header_args: Mapping[str, Any] = MappingProxyType({})

    def __init__(self, settings: Optional[Settings] = None, temp_files: Optional[TempFileManager] = None):
        self.settings = settings if settings is not None else load_settings()
        if temp_files is None:
            temp_files = get_temp_file_manager(
                self.settings.tempfiles.directory,
                keep=self.settings.tempfiles.keep,
            )
        self.temp_files = temp_files

    @property
    def command(self) -> str:
        return self.settings.basex.command

    def available(self) -> bool:
        return shutil.which(self.command) is not None

    def expand_body(
        self,
        body: str,
        params: Mapping[str, Any],
        processed_params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        params = merge_defaults(self.default_header_args, processed_params if processed_params is not None else params)
        preamble = get_param(params, "preamble", "")
        return f"{preamble}{var_declarations(params)}{body}"

    def build_command(self, params: Mapping[str, Any], in_file: Optional[str | Path] = None) -> List[str]:
        params = merge_defaults(self.default_header_args, params)
        db = get_param(params, "db", self.settings.basex.default_db)
        cmd = [self.command]
        if db:
            cmd.extend(["-i", str(db)])
        if in_file is not None:
            cmd.append(str(in_file))
        return cmd

    def format_command(self, params: Mapping[str, Any], in_file: Optional[str | Path] = None) -> str:
        return shlex.join(self.build_command(params, in_file))

    def run(self, body: str, params: Mapping[str, Any]) -> ExecutionResult:
        in_file = self.temp_files.make_temp_file("xq-", ".xq")
        out_file = self.temp_files.make_temp_file("xq-out-")
        in_file.write_text(self.expand_body(body, params), encoding="utf-8")

        cmd = self.build_command(params, in_file)
        timeout = self.settings.basex.timeout_sec
        meta = {"in_file": str(in_file), "out_file": str(out_file), "timeout_sec": timeout}
        logger.debug(f"Running {shlex.join(cmd)}")

        start = time.time()
        try:
            with open(out_file, "wb") as out:
                proc = subprocess.Popen(
                    cmd,
                    stdout=out,
                    stderr=subprocess.PIPE,
                    stdin=subprocess.DEVNULL,
                    start_new_session=_POSIX,
                )
                try:
                    _, stderr_data = proc.communicate(timeout=timeout)
                except subprocess.TimeoutExpired:
                    _kill_process_tree(proc)
                    _, stderr_data = proc.communicate()
                    logger.error(f"{self.command} timed out after {timeout}s")
                    return ExecutionResult(
                        status="error",
                        exit_code=-1,
                        output=out_file.read_text(encoding="utf-8", errors="replace"),
                        stderr=_decode(stderr_data),
                        duration_sec=time.time() - start,
                        command=cmd,
                        error=f"Timed out after {timeout}s",
                        runtime_meta={**meta, "timed_out": True},
                    )
        except (FileNotFoundError, PermissionError) as e:
            logger.error(f"Cannot run {self.command}: {e}")
            return ExecutionResult(
                status="error",
                exit_code=127 if isinstance(e, FileNotFoundError) else 126,
                command=cmd,
                error=str(e),
                runtime_meta=meta,
            )

        duration = time.time() - start
        output = out_file.read_text(encoding="utf-8", errors="replace")
        stderr = _decode(stderr_data)
        logger.debug(f"{self.command} exited with {proc.returncode} in {duration:.2f}s")
        return ExecutionResult(
            status="success" if proc.returncode == 0 else "failed",
            exit_code=proc.returncode,
            output=output,
            stderr=stderr,
            duration_sec=duration,
            command=cmd,
            runtime_meta=meta,
        )

    def execute(self, body: str, params: Mapping[str, Any]) -> str:
        result = self.run(body, params)
        if result.runtime_meta.get("timed_out"):
            raise BlockExecutionError(
                message=result.error or "Timed out",
                context={"command": result.command},
                exit_code=result.exit_code,
                stderr=result.stderr,
            )
        if result.status == "error":
            raise ExecutorUnavailableError(
                message=f"Cannot run {self.command}: {result.error}",
                context={"command": result.command},
            )
        if not result.success:
            logger.error(f"{self.command} exited with code {result.exit_code}: {result.stderr.strip()}")
            if self.settings.basex.raise_on_error:
                raise BlockExecutionError(
                    message=f"{self.command} exited with code {result.exit_code}",
                    context={"command": result.command},
                    exit_code=result.exit_code,
                    stderr=result.stderr,
                )
        return result.output


def _kill_process_tree(proc: subprocess.Popen) -> None:
    if not _POSIX:
        proc.kill()
        return
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")
