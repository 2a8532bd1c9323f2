"""
Shared test utilities.

Canned execution results and an in-memory executor used in place of the
Judge0 adapter.
"""

from typing import Callable, Dict, List, Optional

from judge_sandbox.domain.languages import get_all_languages, get_language_config
from judge_sandbox.domain.ports import ICodeExecutorPort
from judge_sandbox.domain.value_objects import (
    ExecutionRequest,
    ExecutionResult,
    ExecutionStatus,
    LanguageConfig,
)


def make_result(
    stdout: str = "",
    status: ExecutionStatus = ExecutionStatus.SUCCESS,
    stderr: str = "",
    exit_code: int = 0,
    execution_time_ms: float = 12.0,
    memory_used_kb: int = 1024,
    error: Optional[str] = None,
) -> ExecutionResult:
    """
    Build an ExecutionResult with test defaults.

    Returns:
        ExecutionResult
    """
    return ExecutionResult(
        stdout=stdout,
        stderr=stderr,
        exit_code=exit_code,
        execution_time_ms=execution_time_ms,
        memory_used_kb=memory_used_kb,
        status=status,
        error=error,
    )


class FakeExecutor(ICodeExecutorPort):
    """
    In-memory executor.

    ``responder`` maps each request to a result (or raises); every request
    is recorded in ``requests``. The default responder echoes stdin.
    """

    def __init__(self, responder: Optional[Callable[[ExecutionRequest], ExecutionResult]] = None):
        self.responder = responder or (lambda request: make_result(stdout=request.stdin or ""))
        self.requests: List[ExecutionRequest] = []
        self.closed = False

    async def execute(self, request: ExecutionRequest) -> ExecutionResult:
        self.requests.append(request)
        return self.responder(request)

    def get_supported_languages(self) -> List[LanguageConfig]:
        return get_all_languages()

    def is_language_supported(self, language: str) -> bool:
        return get_language_config(language) is not None

    async def close(self) -> None:
        self.closed = True


def outputs_by_input(outputs: Dict[str, ExecutionResult]) -> Callable[[ExecutionRequest], ExecutionResult]:
    """Responder returning a canned result per stdin value."""
    return lambda request: outputs[request.stdin]
