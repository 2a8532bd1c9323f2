"""
Language Registry

Static table of supported languages keyed by canonical name, plus the
alias table consulted by normalize_language().
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

from judge_sandbox.domain.value_objects import LanguageConfig


SUPPORTED_LANGUAGES: Mapping[str, LanguageConfig] = MappingProxyType({
    "javascript": LanguageConfig(
        judge_id=63,  # Node.js
        name="javascript",
        display_name="JavaScript (Node.js)",
        extension="js",
        default_time_limit=5,
        default_memory_limit=128,
        editor_language="javascript",
    ),
    "python": LanguageConfig(
        judge_id=71,  # Python 3
        name="python",
        display_name="Python 3",
        extension="py",
        default_time_limit=10,
        default_memory_limit=256,
        editor_language="python",
    ),
    "java": LanguageConfig(
        judge_id=62,
        name="java",
        display_name="Java",
        extension="java",
        default_time_limit=15,
        default_memory_limit=512,
        editor_language="java",
    ),
    "cpp": LanguageConfig(
        judge_id=54,  # GCC 9.2.0
        name="cpp",
        display_name="C++",
        extension="cpp",
        default_time_limit=10,
        default_memory_limit=256,
        editor_language="cpp",
    ),
    "c": LanguageConfig(
        judge_id=50,  # GCC 9.2.0
        name="c",
        display_name="C",
        extension="c",
        default_time_limit=10,
        default_memory_limit=256,
        editor_language="c",
    ),
    "typescript": LanguageConfig(
        judge_id=63,  # runs on the JavaScript engine after type stripping
        name="typescript",
        display_name="TypeScript (transpiled to JS)",
        extension="ts",
        default_time_limit=5,
        default_memory_limit=128,
        editor_language="typescript",
    ),
})

LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType({
    "js": "javascript",
    "node": "javascript",
    "nodejs": "javascript",
    "py": "python",
    "python3": "python",
    "ts": "typescript",
    "c++": "cpp",
    "cxx": "cpp",
})

DEFAULT_LANGUAGE = "javascript"


def normalize_language(language: str) -> str:
    """Lower-case a language name and resolve it through the alias table."""
    normalized = language.strip().lower()
    return LANGUAGE_ALIASES.get(normalized, normalized)


def get_language_config(language: str) -> Optional[LanguageConfig]:
    """Look up the configuration for a language name or alias."""
    return SUPPORTED_LANGUAGES.get(normalize_language(language))


def get_all_languages() -> List[LanguageConfig]:
    return list(SUPPORTED_LANGUAGES.values())


def get_language_names() -> List[str]:
    return list(SUPPORTED_LANGUAGES.keys())


def is_language_supported(language: str) -> bool:
    return get_language_config(language) is not None
