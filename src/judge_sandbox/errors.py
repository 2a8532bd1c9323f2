import json
from typing import Any, Dict, List, Optional


class SandboxError(Exception):
    """Base error for the judge sandbox with message, detail and extra fields."""

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        **kwargs: Any
    ):
        self.message = message
        self.detail = detail
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        error_dict = {
            "message": self.message,
            "detail": self.detail,
        }
        error_dict.update(self.extra)
        # Remove None values
        return {k: v for k, v in error_dict.items() if v is not None}

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', detail='{self.detail}', extra={self.extra})"


class UnsupportedLanguageError(SandboxError):
    """The requested language has no registered configuration."""

    def __init__(self, language: str, supported: List[str]):
        self.language = language
        self.supported = list(supported)
        super().__init__(
            f"Unsupported language: {language}. "
            f"Supported languages: {', '.join(self.supported)}",
            language=language,
        )


class ExecutorNotAvailableError(SandboxError):
    """The requested executor implementation cannot be used."""

    def __init__(self, executor_type: str, reason: str = ""):
        self.executor_type = executor_type
        super().__init__(
            f"Executor '{executor_type}' is not available",
            detail=reason or None,
            executor_type=executor_type,
        )


class ExerciseLoadError(SandboxError):
    """An exercise document could not be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to load exercise from {path}", detail=reason, path=path)
