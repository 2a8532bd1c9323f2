"""
Code Execution Service

Entrypoint for running a piece of code: resolves the language (detecting
it when needed), delegates to the factory's active executor and emits
execution metrics.
"""

from typing import List, Optional

from judge_sandbox.application.dto import ExecuteCodeOptions
from judge_sandbox.application.services.executor_factory import ExecutorFactory
from judge_sandbox.domain.languages import get_language_names, normalize_language
from judge_sandbox.domain.services import LanguageDetector
from judge_sandbox.domain.value_objects import (
    DetectionResult,
    ExecutionMetrics,
    ExecutionResult,
)
from judge_sandbox.errors import UnsupportedLanguageError
from judge_sandbox.infrastructure.logging import get_logger


logger = get_logger(__name__)
metrics_logger = get_logger("judge_sandbox.metrics")


class CodeExecutionService:
    """
    Runs code through the active executor.

    Unsupported languages raise UnsupportedLanguageError. Every other
    failure is returned as an INTERNAL_ERROR result.
    """

    def __init__(
        self,
        executor_factory: ExecutorFactory,
        language_detector: Optional[LanguageDetector] = None,
    ):
        self._executor_factory = executor_factory
        self._language_detector = language_detector or LanguageDetector()

    async def execute_code(self, options: ExecuteCodeOptions) -> ExecutionResult:
        """
        Execute code with the given options.

        The language is detected when it is omitted or when
        ``options.auto_detect`` is set.

        Raises:
            UnsupportedLanguageError: If the resolved language is not registered
        """
        language = self._resolve_language(options)
        executor = self._executor_factory.get_executor()

        try:
            result = await executor.execute(options.to_domain(language))
        except UnsupportedLanguageError:
            raise
        except Exception as e:
            logger.exception("Code execution failed", language=language, error=str(e))
            result = ExecutionResult.internal_error(str(e) or "Unknown error")

        if options.user_id:
            self._log_metrics(language, result, options.user_id)

        return result

    def _resolve_language(self, options: ExecuteCodeOptions) -> str:
        if options.language and not options.auto_detect:
            return normalize_language(options.language)

        detection = self._language_detector.detect_language(options.code)
        logger.info(
            "Auto-detected language",
            language=detection.language,
            confidence=detection.confidence,
            declared_language=options.language,
        )
        return detection.language

    def _log_metrics(self, language: str, result: ExecutionResult, user_id: str) -> None:
        metrics = ExecutionMetrics(
            language=language,
            execution_time_ms=result.execution_time_ms,
            memory_used_kb=result.memory_used_kb,
            status=result.status,
            executor=self._executor_factory.executor_type.value,
            user_id=user_id,
        )
        metrics_logger.info("Execution metrics", **metrics.to_dict())

    def detect_language(self, code: str) -> DetectionResult:
        return self._language_detector.detect_language(code)

    def get_supported_languages(self) -> List[str]:
        return get_language_names()
