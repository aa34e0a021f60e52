"""
Unified errors for block execution, so the host can decide whether to keep
evaluating the document or abort.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ErrorSeverity(Enum):
    WARNING = "warning"      # block result may still be usable
    ERROR = "error"          # block failed
    CRITICAL = "critical"    # the requested evaluation mode is unsupported


@dataclass
class BabelError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class SessionNotSupportedError(BabelError):
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "SESSION_UNSUPPORTED"


@dataclass
class ExecutorUnavailableError(BabelError):
    code: str = "EXECUTOR_UNAVAILABLE"


@dataclass
class BlockExecutionError(BabelError):
    code: str = "BLOCK_EXECUTION_ERROR"
    exit_code: int | None = None
    stderr: str = ""


@dataclass
class ConfigError(BabelError):
    code: str = "CONFIG_ERROR"
