"""
Language Detector

Guesses the language of a code string in two tiers:

1. Quick detection: an ordered cascade of high-precision signatures where the
   first match wins.
2. Full scoring: every pattern set accumulates weighted evidence, is
   penalised for evidence of competing languages, and the ranked scores are
   passed through disambiguation rules.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from judge_sandbox.domain.languages import DEFAULT_LANGUAGE
from judge_sandbox.domain.services.language_patterns import (
    LANGUAGE_PATTERNS,
    TYPE_ANNOTATION,
    LanguagePatternSet,
)
from judge_sandbox.domain.value_objects import DetectionResult, LanguageAlternative


@dataclass(frozen=True)
class SignalClass:
    """How much one class of matches contributes to a language score."""

    attribute: str
    weight_per_match: float
    max_weight: float
    label: str


SIGNAL_CLASSES: Tuple[SignalClass, ...] = (
    SignalClass("keywords", 0.1, 0.3, "keyword matches"),
    SignalClass("syntax", 0.15, 0.4, "syntax patterns"),
    SignalClass("imports", 0.2, 0.3, "import statements"),
    SignalClass("functions", 0.1, 0.2, "function patterns"),
)

QUICK_CONFIDENCE_STRONG = 0.9
QUICK_CONFIDENCE = 0.7
MAX_REASONS = 3


def _is_java(code: str) -> bool:
    return (
        "System.out.print" in code
        or "public class" in code
        or "public static void main" in code
        or re.search(r"public\s+class\s+\w+", code) is not None
    )


def _is_cpp(code: str) -> bool:
    return "#include" in code and ("std::" in code or "cout" in code or "cin" in code)


def _is_c(code: str) -> bool:
    return (
        "#include" in code
        and ("printf" in code or "scanf" in code)
        and "std::" not in code
    )


def _is_typescript(code: str) -> bool:
    has_types = (
        TYPE_ANNOTATION.search(code) is not None
        or "interface " in code
        or "type " in code
        or re.search(r"<[^>]+>", code) is not None
    )
    uses_js = "function" in code or "=>" in code or "console." in code
    return has_types and uses_js


def _is_python(code: str) -> bool:
    return (
        "def " in code
        or ("print(" in code and "System.out.print" not in code)
        or re.search(r"^\s*import\s+\w+", code, re.M) is not None
        or re.search(r"^\s*from\s+\w+\s+import", code, re.M) is not None
    )


def _is_javascript(code: str) -> bool:
    return (
        "console." in code
        or re.search(r"function\s+\w+\s*\(", code) is not None
        or re.search(r"\w+\s*=>\s*", code) is not None
        or "const " in code
        or "let " in code
    )


# Most specific first; the first match wins.
QUICK_DETECTION_CASCADE: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    ("java", _is_java),
    ("cpp", _is_cpp),
    ("c", _is_c),
    ("typescript", _is_typescript),
    ("python", _is_python),
    ("javascript", _is_javascript),
)


@dataclass
class LanguageScore:
    language: str
    confidence: float
    reasons: List[str] = field(default_factory=list)


class LanguageDetector:
    """
    Heuristic language classifier.

    Stateless: every call recomputes the result from the code string alone.
    """

    def __init__(self, patterns: Sequence[LanguagePatternSet] = LANGUAGE_PATTERNS):
        self._patterns = tuple(patterns)
        self._patterns_by_language = {p.language: p for p in self._patterns}

    def detect_language(self, code: Optional[str]) -> DetectionResult:
        """
        Detect the language of a code string.

        Never raises. Empty input yields javascript with zero confidence.
        """
        if not code or not code.strip():
            return DetectionResult(language=DEFAULT_LANGUAGE, confidence=0.0, reasons=["empty"])

        quick = self.quick_detect(code)
        strong = self._has_strong_indicators(code, quick)
        if quick != DEFAULT_LANGUAGE or strong:
            return DetectionResult(
                language=quick,
                confidence=QUICK_CONFIDENCE_STRONG if strong else QUICK_CONFIDENCE,
                reasons=[f"Strong {quick} patterns detected"],
            )

        results = [self._score(code, p) for p in self._patterns]
        results = [r for r in results if r.confidence > 0]
        results.sort(key=lambda r: r.confidence, reverse=True)

        if not results:
            return DetectionResult(
                language=DEFAULT_LANGUAGE,
                confidence=0.0,
                reasons=["No clear language patterns detected"],
            )

        final = self._apply_disambiguation_rules(code, results)
        # Ranked runners-up, independent of which result the rules picked
        alternatives = [
            LanguageAlternative(language=r.language, confidence=r.confidence)
            for r in results[1:3]
        ]

        return DetectionResult(
            language=final.language,
            confidence=final.confidence,
            reasons=list(final.reasons),
            alternatives=alternatives,
        )

    def quick_detect(self, code: str) -> str:
        """Return the first language whose signature matches, else the default."""
        trimmed = code.strip()
        for language, matches in QUICK_DETECTION_CASCADE:
            if matches(trimmed):
                return language
        return DEFAULT_LANGUAGE

    def _has_strong_indicators(self, code: str, language: str) -> bool:
        patterns = self._patterns_by_language.get(language)
        return patterns is not None and patterns.has_strong_indicators(code)

    def _score(self, code: str, patterns: LanguagePatternSet) -> LanguageScore:
        confidence = 0.0
        reasons: List[str] = []

        for signal in SIGNAL_CLASSES:
            count = sum(len(p.findall(code)) for p in getattr(patterns, signal.attribute))
            if count:
                confidence += min(count * signal.weight_per_match, signal.max_weight)
                reasons.append(f"Found {count} {signal.label}")

        confidence = max(0.0, confidence + patterns.negative_adjustment(code))
        confidence = min(confidence, 1.0)

        return LanguageScore(
            language=patterns.language,
            confidence=round(confidence, 2),
            reasons=reasons[:MAX_REASONS],
        )

    def _apply_disambiguation_rules(self, code: str, results: List[LanguageScore]) -> LanguageScore:
        top = results[0]
        by_language = {r.language: r for r in results}
        js = by_language.get("javascript")
        ts = by_language.get("typescript")
        py = by_language.get("python")

        # Explicit type annotations decide between JavaScript and TypeScript
        if js and ts and ts.confidence > 0.3 and TYPE_ANNOTATION.search(code):
            return ts

        # Close Python/JavaScript call: Python-only syntax wins
        if py and js and abs(py.confidence - js.confidence) < 0.2:
            if re.search(r"def\s+\w+\s*\(", code) or re.search(r"print\s*\(", code):
                return py

        if top.confidence > 0.6:
            return top

        if top.confidence < 0.3:
            return LanguageScore(
                language=DEFAULT_LANGUAGE,
                confidence=0.2,
                reasons=["low confidence default"],
            )

        return top

    @staticmethod
    def get_confidence_explanation(confidence: float) -> str:
        if confidence >= 0.8:
            return "Very confident"
        if confidence >= 0.6:
            return "Confident"
        if confidence >= 0.4:
            return "Moderately confident"
        if confidence >= 0.2:
            return "Low confidence"
        return "Guessing"
