"""
Unit tests for Exercise Entities.
"""

import pytest

from judge_sandbox.domain.entities import (
    CodeExercise,
    TestCase,
    TestCaseResult,
    ValidationResult,
)
from judge_sandbox.domain.value_objects import ExecutionStatus


def _case(case_id: str, points: int = 10) -> TestCase:
    return TestCase(id=case_id, expected_output="ok", description=case_id, points=points)


class TestTestCase:
    """Tests for TestCase entity."""

    def test_defaults(self):
        case = TestCase(id="t1", expected_output="3", description="adds")

        assert case.points == 10
        assert case.input is None

    def test_negative_points_rejected(self):
        with pytest.raises(ValueError):
            _case("t1", points=-1)


class TestCodeExercise:
    """Tests for CodeExercise entity."""

    def test_total_points_defaults_to_sum(self):
        exercise = CodeExercise(
            id="ex",
            title="Sum",
            description="",
            language="python",
            test_cases=[_case("a", 10), _case("b", 20), _case("c", 30)],
        )

        assert exercise.total_points == 60

    def test_explicit_total_points_kept(self):
        exercise = CodeExercise(
            id="ex", title="Sum", description="", language="python",
            test_cases=[_case("a", 10)], total_points=100,
        )

        assert exercise.total_points == 100

    def test_total_points_below_sum_rejected(self):
        with pytest.raises(ValueError, match="total_points"):
            CodeExercise(
                id="ex", title="Sum", description="", language="python",
                test_cases=[_case("a", 10), _case("b", 20)], total_points=15,
            )

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="unique"):
            CodeExercise(
                id="ex", title="Sum", description="", language="python",
                test_cases=[_case("a"), _case("a")],
            )

    def test_empty_exercise(self):
        exercise = CodeExercise(id="ex", title="Empty", description="", language="c")

        assert exercise.test_cases == []
        assert exercise.total_points == 0


class TestValidationResult:
    """Tests for ValidationResult invariants."""

    def _result(self, **overrides):
        values = dict(
            is_correct=False,
            score=10,
            total_points=30,
            passed_tests=1,
            total_tests=2,
            test_results=[],
            feedback="",
        )
        values.update(overrides)
        return ValidationResult(**values)

    def test_valid(self):
        assert self._result().score == 10

    def test_passed_cannot_exceed_total(self):
        with pytest.raises(ValueError):
            self._result(passed_tests=3)

    def test_score_cannot_exceed_total_points(self):
        with pytest.raises(ValueError):
            self._result(score=40)

    def test_to_dict_includes_test_results(self):
        case_result = TestCaseResult(
            test_case=_case("a"),
            passed=False,
            actual_output="nope",
            execution_time_ms=5.0,
            error="boom",
            status=ExecutionStatus.RUNTIME_ERROR,
        )

        data = self._result(test_results=[case_result]).to_dict()

        assert data["test_results"][0]["test_case"]["id"] == "a"
        assert data["test_results"][0]["status"] == "runtime_error"
        assert data["execution_error"] is None
