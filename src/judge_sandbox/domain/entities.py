"""
Exercise Entities

Code exercises, their test cases, and the outcome of validating a
submission against them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from judge_sandbox.domain.value_objects import ExecutionStatus


@dataclass(frozen=True)
class TestCase:
    """
    A single input/expected-output pair of an exercise.

    Attributes:
        id: Test case identifier
        expected_output: Exact output the program must print
        description: Shown to the student when the case fails
        points: Credit awarded when the case passes
        input: Optional standard input for the program
    """

    __test__ = False  # not a pytest test class

    id: str
    expected_output: str
    description: str
    points: int = 10
    input: Optional[str] = None

    def __post_init__(self):
        if self.points < 0:
            raise ValueError("points cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "input": self.input,
            "expected_output": self.expected_output,
            "description": self.description,
            "points": self.points,
        }


@dataclass
class CodeExercise:
    """
    A programming exercise with an ordered list of test cases.

    When ``total_points`` is omitted it is the sum of the test case points.
    """

    id: str
    title: str
    description: str
    language: str
    test_cases: List[TestCase] = field(default_factory=list)
    total_points: Optional[int] = None
    starter_code: Optional[str] = None
    time_limit: Optional[float] = None
    memory_limit: Optional[int] = None

    def __post_init__(self):
        awarded = sum(tc.points for tc in self.test_cases)
        if self.total_points is None:
            self.total_points = awarded
        elif self.total_points < awarded:
            raise ValueError(
                f"total_points ({self.total_points}) is less than the sum of "
                f"test case points ({awarded})"
            )
        ids = [tc.id for tc in self.test_cases]
        if len(ids) != len(set(ids)):
            raise ValueError("test case ids must be unique")


@dataclass(frozen=True)
class TestCaseResult:
    """Outcome of running a submission against one test case."""

    __test__ = False

    test_case: TestCase
    passed: bool
    actual_output: str
    execution_time_ms: float
    error: Optional[str] = None
    status: Optional[ExecutionStatus] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "test_case": self.test_case.to_dict(),
            "passed": self.passed,
            "actual_output": self.actual_output,
            "execution_time_ms": self.execution_time_ms,
            "error": self.error,
            "status": self.status.value if self.status else None,
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a submission against a whole exercise.

    ``test_results`` keeps the exercise's test case order.
    """

    is_correct: bool
    score: int
    total_points: int
    passed_tests: int
    total_tests: int
    test_results: List[TestCaseResult]
    feedback: str
    execution_error: Optional[str] = None

    def __post_init__(self):
        if self.passed_tests > self.total_tests:
            raise ValueError("passed_tests cannot exceed total_tests")
        if self.score > self.total_points:
            raise ValueError("score cannot exceed total_points")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_correct": self.is_correct,
            "score": self.score,
            "total_points": self.total_points,
            "passed_tests": self.passed_tests,
            "total_tests": self.total_tests,
            "test_results": [r.to_dict() for r in self.test_results],
            "execution_error": self.execution_error,
            "feedback": self.feedback,
        }
