"""
Core building blocks shared by executors and the CLI.
"""

from .errors import ErrorSeverity, BabelError
from .logging_setup import configure_logging

__all__ = ["ErrorSeverity", "BabelError", "configure_logging"]
