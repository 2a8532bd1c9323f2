"""
judge-sandbox

Run untrusted code snippets on a remote judge, detect their language and
grade them against exercise test cases.
"""

__version__ = "0.1.0"

from judge_sandbox.errors import (
    ExecutorNotAvailableError,
    ExerciseLoadError,
    SandboxError,
    UnsupportedLanguageError,
)

__all__ = [
    "__version__",
    "SandboxError",
    "UnsupportedLanguageError",
    "ExecutorNotAvailableError",
    "ExerciseLoadError",
]
