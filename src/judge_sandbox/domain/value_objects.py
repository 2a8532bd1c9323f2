"""
Execution Value Objects

Immutable value objects for execution-related concepts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class ExecutionStatus(str, Enum):
    """Status of a code execution."""

    SUCCESS = "success"
    COMPILATION_ERROR = "compilation_error"
    RUNTIME_ERROR = "runtime_error"
    TIME_LIMIT_EXCEEDED = "time_limit_exceeded"
    MEMORY_LIMIT_EXCEEDED = "memory_limit_exceeded"
    INTERNAL_ERROR = "internal_error"
    # Only observed while polling the judge
    PENDING = "pending"

    def is_terminal(self) -> bool:
        """Whether callers may receive this status."""
        return self is not ExecutionStatus.PENDING


@dataclass(frozen=True)
class ExecutionRequest:
    """
    Input to one execution attempt.

    Attributes:
        code: Source code to execute
        language: Language name (canonical or alias)
        stdin: Optional standard input passed to the program
        time_limit: Optional CPU time limit in seconds
        memory_limit: Optional memory limit in megabytes
    """

    code: str
    language: str
    stdin: Optional[str] = None
    time_limit: Optional[float] = None
    memory_limit: Optional[int] = None

    def __post_init__(self):
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError("time_limit must be positive")
        if self.memory_limit is not None and self.memory_limit <= 0:
            raise ValueError("memory_limit must be positive")


@dataclass(frozen=True)
class ExecutionResult:
    """
    Result of a code execution.

    Attributes:
        stdout: Standard output of the program
        stderr: Standard error, or compiler output when compilation failed
        exit_code: Process exit code
        execution_time_ms: Wall time in milliseconds
        memory_used_kb: Peak memory in kilobytes
        status: Terminal execution status
        error: Optional provider or transport error message
    """

    stdout: str
    stderr: str
    exit_code: int
    execution_time_ms: float
    memory_used_kb: int
    status: ExecutionStatus
    error: Optional[str] = None

    def __post_init__(self):
        if not self.status.is_terminal():
            raise ValueError("ExecutionResult requires a terminal status")

    @classmethod
    def internal_error(cls, message: str) -> "ExecutionResult":
        """Build the result reported when the judge could not be reached or understood."""
        return cls(
            stdout="",
            stderr=message,
            exit_code=1,
            execution_time_ms=0,
            memory_used_kb=0,
            status=ExecutionStatus.INTERNAL_ERROR,
            error=message,
        )

    @property
    def succeeded(self) -> bool:
        return self.status is ExecutionStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "stdout": self.stdout,
            "stderr": self.stderr,
            "exit_code": self.exit_code,
            "execution_time_ms": self.execution_time_ms,
            "memory_used_kb": self.memory_used_kb,
            "status": self.status.value,
            "error": self.error,
        }


@dataclass(frozen=True)
class LanguageConfig:
    """
    Static configuration for a supported language.

    Attributes:
        judge_id: Language identifier understood by the remote judge
        name: Canonical language name
        display_name: Human-readable name
        extension: Source file extension
        default_time_limit: Default CPU time limit in seconds
        default_memory_limit: Default memory limit in megabytes
        editor_language: Syntax identifier for code editors
    """

    judge_id: int
    name: str
    display_name: str
    extension: str
    default_time_limit: float
    default_memory_limit: int
    editor_language: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "judge_id": self.judge_id,
            "name": self.name,
            "display_name": self.display_name,
            "extension": self.extension,
            "default_time_limit": self.default_time_limit,
            "default_memory_limit": self.default_memory_limit,
            "editor_language": self.editor_language,
        }


@dataclass(frozen=True)
class LanguageAlternative:
    """A lower-ranked language candidate."""

    language: str
    confidence: float


@dataclass(frozen=True)
class DetectionResult:
    """
    Outcome of language detection for a code string.

    Attributes:
        language: Best-guess canonical language name
        confidence: Confidence in [0, 1]
        reasons: Ordered evidence supporting the guess
        alternatives: Next best candidates, highest first
    """

    language: str
    confidence: float
    reasons: List[str] = field(default_factory=list)
    alternatives: List[LanguageAlternative] = field(default_factory=list)

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be within [0, 1]")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "alternatives": [
                {"language": a.language, "confidence": a.confidence}
                for a in self.alternatives
            ],
        }


@dataclass(frozen=True)
class ExecutionMetrics:
    """
    Per-execution metrics emitted for monitoring.

    Attributes:
        language: Canonical language that was executed
        execution_time_ms: Wall time reported by the executor
        memory_used_kb: Memory reported by the executor
        status: Terminal execution status
        executor: Executor implementation that ran the code
        user_id: Optional caller identity
        timestamp: When the execution finished
    """

    language: str
    execution_time_ms: float
    memory_used_kb: int
    status: ExecutionStatus
    executor: str
    user_id: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "language": self.language,
            "execution_time_ms": self.execution_time_ms,
            "memory_used_kb": self.memory_used_kb,
            "status": self.status.value,
            "executor": self.executor,
            "timestamp": self.timestamp.isoformat(),
        }
