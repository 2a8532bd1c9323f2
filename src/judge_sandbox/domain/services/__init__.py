"""
Domain Services

Pure, stateless services: language detection and TypeScript degrading.
"""

from .language_detector import LanguageDetector
from .typescript_handler import (
    handle_typescript_execution,
    is_typescript_code,
    transpile_typescript,
)

__all__ = [
    "LanguageDetector",
    "handle_typescript_execution",
    "is_typescript_code",
    "transpile_typescript",
]
