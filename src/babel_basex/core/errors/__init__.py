"""
统一错误模块。
"""

from .errors import (
    ErrorSeverity,
    BabelError,
    SessionNotSupportedError,
    ExecutorUnavailableError,
    BlockExecutionError,
    ConfigError,
)

__all__ = [
    "ErrorSeverity",
    "BabelError",
    "SessionNotSupportedError",
    "ExecutorUnavailableError",
    "BlockExecutionError",
    "ConfigError",
]
