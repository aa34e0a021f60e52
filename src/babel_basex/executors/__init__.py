"""
Code block executors.

Modules:
- base_executor: Abstract adapter interface
- basex_executor: XQuery blocks run by the BaseX command line
- execution_result: Result of one block run
- header_args: Header argument helpers
- tempfiles: Temporary file convention
"""

from .base_executor import BaseExecutor
from .basex_executor import BasexExecutor
from .execution_result import ExecutionResult
from .tempfiles import TempFileManager, make_temp_file

__all__ = [
    "BaseExecutor",
    "BasexExecutor",
    "ExecutionResult",
    "TempFileManager",
    "make_temp_file",
]
