# babel_basex/__init__.py
"""
babel-basex - XQuery code blocks for literate programming hosts

A language plugin for code-block execution frameworks. Each block is written
to a temporary file, run with the BaseX command line client, and the text it
prints is returned to the host. Copy executors/basex_executor.py to wire in
another language.
"""

from __future__ import annotations

__version__ = "0.1.0"


# 延迟导入以避免循环依赖
def __getattr__(name: str):
    """延迟导入模块"""
    if name == "BaseExecutor":
        from babel_basex.executors import BaseExecutor
        return BaseExecutor
    if name == "BasexExecutor":
        from babel_basex.executors import BasexExecutor
        return BasexExecutor
    if name == "ExecutionResult":
        from babel_basex.executors import ExecutionResult
        return ExecutionResult
    if name == "Settings":
        from babel_basex.config import Settings
        return Settings
    if name == "load_settings":
        from babel_basex.config import load_settings
        return load_settings
    if name == "LanguageRegistry":
        from babel_basex.application.registries import LanguageRegistry
        return LanguageRegistry

    raise AttributeError(f"module 'babel_basex' has no attribute '{name}'")


__all__ = [
    "__version__",
    "BaseExecutor",
    "BasexExecutor",
    "ExecutionResult",
    "Settings",
    "load_settings",
    "LanguageRegistry",
]
