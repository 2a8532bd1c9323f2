"""
Exercise DTOs

Validated shape of exercise documents (YAML or JSON) and their mapping to
domain entities.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from judge_sandbox.domain.entities import CodeExercise, TestCase


class TestCaseDTO(BaseModel):
    """One test case as written in an exercise document."""

    __test__ = False

    id: Optional[str] = Field(None, description="Generated when omitted")
    input: Optional[str] = None
    expected_output: str
    description: str = ""
    points: int = Field(default=10, ge=0)

    def to_domain(self, position: int) -> TestCase:
        return TestCase(
            id=self.id or f"test_{position + 1}",
            input=self.input,
            expected_output=self.expected_output,
            description=self.description or f"Test case {position + 1}",
            points=self.points,
        )


class ExerciseDTO(BaseModel):
    """A code exercise document."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    title: str
    description: str = ""
    language: str
    starter_code: Optional[str] = None
    test_cases: List[TestCaseDTO] = Field(default_factory=list)
    total_points: Optional[int] = Field(None, ge=0)
    time_limit: Optional[float] = Field(None, gt=0)
    memory_limit: Optional[int] = Field(None, gt=0)

    def to_domain(self) -> CodeExercise:
        return CodeExercise(
            id=self.id,
            title=self.title,
            description=self.description,
            language=self.language,
            starter_code=self.starter_code,
            test_cases=[tc.to_domain(i) for i, tc in enumerate(self.test_cases)],
            total_points=self.total_points,
            time_limit=self.time_limit,
            memory_limit=self.memory_limit,
        )
