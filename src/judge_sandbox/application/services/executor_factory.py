"""
Executor Factory

Holds the one active code executor for a process. The factory is built once
at startup and passed to the services that need an executor; swapping the
implementation is an explicit, lock-guarded administrative operation.
"""

import asyncio
from enum import Enum
from typing import Optional

from judge_sandbox.domain.ports import ICodeExecutorPort
from judge_sandbox.errors import ExecutorNotAvailableError
from judge_sandbox.infrastructure.config import Settings, get_settings
from judge_sandbox.infrastructure.judge0 import Judge0Executor
from judge_sandbox.infrastructure.logging import get_logger


logger = get_logger(__name__)


class ExecutorType(str, Enum):
    """Executor implementations known to the factory."""

    JUDGE0 = "judge0"
    DOCKER = "docker"


class ExecutorFactory:
    """
    Owner of the active executor.

    Readers call get_executor() per execution. switch_* and swap() replace
    the executor under a lock and close the previous one.
    """

    def __init__(
        self,
        executor: Optional[ICodeExecutorPort] = None,
        executor_type: ExecutorType = ExecutorType.JUDGE0,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the factory.

        Args:
            executor: Executor to start with; a Judge0Executor is built when omitted
            executor_type: Type of the given executor
            settings: Settings used to build executors
        """
        self._settings = settings or get_settings()
        if executor is None:
            executor_type = ExecutorType(self._settings.executor_type)
            if executor_type is ExecutorType.DOCKER:
                raise ExecutorNotAvailableError(
                    ExecutorType.DOCKER.value, "container runner is not implemented"
                )
            executor = Judge0Executor(settings=self._settings)

        self._executor = executor
        self._executor_type = executor_type
        self._lock = asyncio.Lock()

    def get_executor(self) -> ICodeExecutorPort:
        return self._executor

    @property
    def executor_type(self) -> ExecutorType:
        return self._executor_type

    async def switch_to_judge0(self) -> None:
        """Make a fresh Judge0Executor the active executor."""
        if self._executor_type is ExecutorType.JUDGE0:
            return
        await self.swap(Judge0Executor(settings=self._settings), ExecutorType.JUDGE0)

    async def switch_to_docker(self) -> None:
        """
        Placeholder for a self-hosted container runner.

        No container executor exists yet, so the active executor is kept.
        """
        logger.warning(
            "Docker executor not yet implemented, keeping current executor",
            executor_type=self._executor_type.value,
        )

    async def swap(self, executor: ICodeExecutorPort, executor_type: ExecutorType) -> None:
        """Replace the active executor and close the previous one."""
        async with self._lock:
            previous = self._executor
            self._executor = executor
            self._executor_type = executor_type

        logger.info("Executor switched", executor_type=executor_type.value)
        if previous is not executor:
            await previous.close()

    async def close(self) -> None:
        async with self._lock:
            await self._executor.close()
