"""
Code Validator

Runs a submission against every test case of an exercise, compares
normalized outputs, scores partial credit and writes feedback for the
student.
"""

import asyncio
import re
import uuid
from typing import List, Optional

from judge_sandbox.application.dto import ExecuteCodeOptions
from judge_sandbox.application.services.execution_service import CodeExecutionService
from judge_sandbox.domain.entities import (
    CodeExercise,
    TestCase,
    TestCaseResult,
    ValidationResult,
)
from judge_sandbox.domain.value_objects import ExecutionStatus
from judge_sandbox.infrastructure.logging import get_logger


logger = get_logger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


class CodeValidator:
    """
    Validates student code against an exercise's test cases.

    Every test case is executed, even after failures, and results keep the
    exercise's order. A failure of one test case is recorded on its result
    and never aborts the others.

    A test case passes only when the execution status is success and the
    normalized output matches. A program that prints the expected answer
    and then exits non-zero, crashes or times out fails that case.
    """

    def __init__(
        self,
        execution_service: CodeExecutionService,
        default_time_limit: float = 10,
        default_memory_limit: int = 256,
        max_concurrency: int = 1,
        feedback_max_failures: int = 3,
    ):
        """
        Initialize the validator.

        Args:
            execution_service: Service used to run each test case
            default_time_limit: Seconds, when the exercise sets no limit
            default_memory_limit: MB, when the exercise sets no limit
            max_concurrency: Test cases run at once; 1 runs them serially
            feedback_max_failures: Failed cases detailed in the feedback
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._execution_service = execution_service
        self._default_time_limit = default_time_limit
        self._default_memory_limit = default_memory_limit
        self._max_concurrency = max_concurrency
        self._feedback_max_failures = feedback_max_failures

    async def validate_code(
        self,
        student_code: str,
        exercise: CodeExercise,
        user_id: Optional[str] = None,
    ) -> ValidationResult:
        """
        Validate a submission against all test cases of an exercise.

        Args:
            student_code: Submitted source code
            exercise: Exercise holding the ordered test cases
            user_id: Optional caller identity, forwarded for metrics

        Returns:
            ValidationResult with one TestCaseResult per test case
        """
        log = logger.bind(exercise_id=exercise.id, user_id=user_id)
        log.info("Validating submission", total_tests=len(exercise.test_cases))

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def run(test_case: TestCase) -> TestCaseResult:
            async with semaphore:
                return await self._run_test_case(student_code, exercise, test_case, user_id)

        # gather keeps input order regardless of completion order
        test_results: List[TestCaseResult] = list(
            await asyncio.gather(*(run(tc) for tc in exercise.test_cases))
        )

        score = sum(r.test_case.points for r in test_results if r.passed)
        passed_tests = sum(1 for r in test_results if r.passed)
        total_tests = len(test_results)
        is_correct = passed_tests == total_tests

        log.info(
            "Validation finished",
            passed_tests=passed_tests,
            total_tests=total_tests,
            score=score,
            total_points=exercise.total_points,
        )

        return ValidationResult(
            is_correct=is_correct,
            score=score,
            total_points=exercise.total_points,
            passed_tests=passed_tests,
            total_tests=total_tests,
            test_results=test_results,
            feedback=self.generate_feedback(test_results, is_correct, passed_tests, total_tests),
            execution_error=self._first_execution_error(test_results),
        )

    async def _run_test_case(
        self,
        student_code: str,
        exercise: CodeExercise,
        test_case: TestCase,
        user_id: Optional[str],
    ) -> TestCaseResult:
        options = ExecuteCodeOptions(
            code=student_code,
            language=exercise.language,
            input=test_case.input,
            time_limit=exercise.time_limit or self._default_time_limit,
            memory_limit=exercise.memory_limit or self._default_memory_limit,
            user_id=user_id,
        )

        try:
            result = await self._execution_service.execute_code(options)
        except Exception as e:
            logger.warning(
                "Test case execution raised",
                test_case_id=test_case.id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return TestCaseResult(
                test_case=test_case,
                passed=False,
                actual_output="",
                execution_time_ms=0,
                error=str(e) or "Unknown error",
            )

        passed = result.succeeded and self.compare_outputs(result.stdout, test_case.expected_output)
        logger.debug(
            "Test case finished",
            test_case_id=test_case.id,
            passed=passed,
            status=result.status.value,
            execution_time_ms=result.execution_time_ms,
        )

        return TestCaseResult(
            test_case=test_case,
            passed=passed,
            actual_output=result.stdout,
            execution_time_ms=result.execution_time_ms,
            error=result.stderr or result.error or None,
            status=result.status,
        )

    @staticmethod
    def _first_execution_error(test_results: List[TestCaseResult]) -> Optional[str]:
        """Error of the first test case that could not run the program at all."""
        for r in test_results:
            # status is None when the execution call itself raised
            if r.status is None and r.error:
                return r.error
            if r.status in (ExecutionStatus.COMPILATION_ERROR, ExecutionStatus.INTERNAL_ERROR):
                return r.error
        return None

    @staticmethod
    def normalize_output(output: str) -> str:
        """Trim, convert CRLF to LF, then collapse whitespace runs to one space."""
        return _WHITESPACE_RUN.sub(" ", output.strip().replace("\r\n", "\n"))

    @classmethod
    def compare_outputs(cls, actual: str, expected: str) -> bool:
        return cls.normalize_output(actual) == cls.normalize_output(expected)

    def generate_feedback(
        self,
        test_results: List[TestCaseResult],
        is_correct: bool,
        passed_tests: int,
        total_tests: int,
    ) -> str:
        if is_correct:
            return f"🎉 Excellent! All {total_tests} test cases passed. Your solution is correct!"

        failed = [r for r in test_results if not r.passed]
        feedback = f"✅ {passed_tests}/{total_tests} test cases passed.\n\n"

        if failed:
            feedback += "❌ Failed test cases:\n"
            for index, result in enumerate(failed[: self._feedback_max_failures], start=1):
                feedback += f"\n{index}. {result.test_case.description}\n"
                feedback += f'   Expected: "{result.test_case.expected_output}"\n'
                feedback += f'   Got: "{result.actual_output}"\n'
                if result.error:
                    feedback += f"   Error: {result.error}\n"

            if len(failed) > self._feedback_max_failures:
                remaining = len(failed) - self._feedback_max_failures
                feedback += f"\n... and {remaining} more test cases failed."

        return feedback

    @staticmethod
    def create_test_case(
        input: Optional[str],
        expected_output: str,
        description: str,
        points: int = 10,
    ) -> TestCase:
        """Build a test case with a random short id."""
        return TestCase(
            id=uuid.uuid4().hex[:9],
            input=input,
            expected_output=expected_output,
            description=description,
            points=points,
        )
