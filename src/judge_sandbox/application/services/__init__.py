"""
Application Services

Service classes for handling use cases.
"""

from .code_validator import CodeValidator
from .execution_service import CodeExecutionService
from .executor_factory import ExecutorFactory, ExecutorType

__all__ = [
    "CodeValidator",
    "CodeExecutionService",
    "ExecutorFactory",
    "ExecutorType",
]
