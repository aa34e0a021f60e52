# executors/base_executor.py
"""
Abstract base class for language adapters.

A literate-programming host hands each code block to the adapter registered
for its language. To wire in a new language, copy BasexExecutor, rename it,
and adjust:
- lang / default_header_args
- expand_body(): how header arguments are folded into the block text
- execute(): how the expanded text is run and its output collected
- prep_session(): only if the language supports interactive sessions
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, Optional

from babel_basex.core.errors import SessionNotSupportedError


class BaseExecutor(ABC):
    """
    Abstract base class for code block execution backends.

    All executors must implement:
    - available(): Check if the backing program is ready
    - expand_body(): Build the text that will actually be evaluated
    - execute(): Evaluate a block and return its result text
    """

    lang: str = ""
    default_header_args: Mapping[str, Any] = MappingProxyType({})

    @abstractmethod
    def available(self) -> bool:
        """Check if the executor is available and ready to use."""
        pass

    @abstractmethod
    def expand_body(
        self,
        body: str,
        params: Mapping[str, Any],
        processed_params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Expand BODY according to PARAMS.

        Args:
            body: Code block text
            params: Header arguments of the block
            processed_params: Header arguments already normalized by the host;
                used instead of params when given

        Returns:
            The text to evaluate
        """
        pass

    @abstractmethod
    def execute(self, body: str, params: Mapping[str, Any]) -> str:
        """
        Execute a block of code and return the result text.

        Args:
            body: Code block text
            params: Header arguments of the block

        Returns:
            Whatever the program wrote to stdout
        """
        pass

    def prep_session(self, session: Optional[str], params: Mapping[str, Any]) -> Any:
        """Prepare SESSION according to PARAMS. Sessions are unsupported unless overridden."""
        raise SessionNotSupportedError(
            message=f"Sessions are not supported for {self.lang or self.executor_type} blocks",
            context={"session": session},
        )

    @property
    def executor_type(self) -> str:
        """Return the executor type identifier."""
        return self.__class__.__name__
