"""
Executor Port Interface

Defines the contract for running code against a judge.
Implementations are provided by the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List

from judge_sandbox.domain.value_objects import ExecutionRequest, ExecutionResult, LanguageConfig


class ICodeExecutorPort(ABC):
    """
    Port interface for code execution.

    A hosted judge and a local container runner must both satisfy this
    contract so that callers never depend on a concrete implementation.
    """

    @abstractmethod
    async def execute(self, request: ExecutionRequest) -> ExecutionResult:
        """
        Execute code and wait for a terminal result.

        Args:
            request: Code, language, stdin and resource limits

        Returns:
            ExecutionResult with a terminal status. Transport and provider
            failures are reported as INTERNAL_ERROR results.

        Raises:
            UnsupportedLanguageError: If the language has no configuration
        """
        pass

    @abstractmethod
    def get_supported_languages(self) -> List[LanguageConfig]:
        """Return every language this executor can run."""
        pass

    @abstractmethod
    def is_language_supported(self, language: str) -> bool:
        """Check a language name or alias."""
        pass

    async def close(self) -> None:
        """Release network or process resources held by the executor."""
        return None
