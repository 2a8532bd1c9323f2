"""
Application DTOs
"""

from .execute_options import ExecuteCodeOptions
from .exercise import ExerciseDTO, TestCaseDTO

__all__ = ["ExecuteCodeOptions", "ExerciseDTO", "TestCaseDTO"]
