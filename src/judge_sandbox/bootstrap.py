"""
Composition root.

Builds the executor, factory, detector and services once from settings.
Callers hold the returned container instead of reaching for module-level
singletons.
"""

from dataclasses import dataclass
from typing import Optional

from judge_sandbox.application.services import (
    CodeExecutionService,
    CodeValidator,
    ExecutorFactory,
)
from judge_sandbox.domain.ports import ICodeExecutorPort
from judge_sandbox.domain.services import LanguageDetector
from judge_sandbox.infrastructure.config import Settings, get_settings
from judge_sandbox.infrastructure.logging import configure_logging


@dataclass
class SandboxServices:
    settings: Settings
    executor_factory: ExecutorFactory
    language_detector: LanguageDetector
    execution_service: CodeExecutionService
    code_validator: CodeValidator

    async def close(self) -> None:
        await self.executor_factory.close()

    async def __aenter__(self) -> "SandboxServices":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def build_services(
    settings: Optional[Settings] = None,
    executor: Optional[ICodeExecutorPort] = None,
    setup_logging: bool = False,
) -> SandboxServices:
    """
    Wire every service from settings.

    Args:
        settings: Settings to use; the cached process settings when omitted
        executor: Executor to start with instead of the configured one
        setup_logging: Configure structlog from the settings first
    """
    settings = settings or get_settings()
    if setup_logging:
        configure_logging(settings.log_level, settings.log_format)

    executor_factory = ExecutorFactory(executor=executor, settings=settings)
    language_detector = LanguageDetector()
    execution_service = CodeExecutionService(executor_factory, language_detector)
    code_validator = CodeValidator(
        execution_service,
        default_time_limit=settings.validator_default_time_limit,
        default_memory_limit=settings.validator_default_memory_limit,
        max_concurrency=settings.validator_max_concurrency,
        feedback_max_failures=settings.feedback_max_failures,
    )

    return SandboxServices(
        settings=settings,
        executor_factory=executor_factory,
        language_detector=language_detector,
        execution_service=execution_service,
        code_validator=code_validator,
    )
