"""
Unit tests for the Language Detector.
"""

from unittest.mock import patch

import pytest

from judge_sandbox.domain.languages import SUPPORTED_LANGUAGES
from judge_sandbox.domain.services import LanguageDetector
from judge_sandbox.domain.services.language_detector import LanguageScore
from judge_sandbox.domain.services.language_patterns import (
    JAVASCRIPT,
    LANGUAGE_PATTERNS,
    PYTHON,
    TYPESCRIPT,
)


JAVA_MAIN = (
    "public class Main { public static void main(String[] args) "
    "{ System.out.println(1); } }"
)

PYTHON_FUNCTION = """def foo():
    return 42

print(foo())
"""

TYPESCRIPT_INTERFACE = """interface User { id: number }

function show(user: User) {
  console.log(user.id);
}
"""

C_PROGRAM = """#include <stdio.h>
int main() {
    printf("hi");
    return 0;
}
"""

CPP_PROGRAM = """#include <iostream>
int main() {
    std::cout << "hi";
}
"""

JS_ARROW = "const add = (a, b) => a + b;\nconsole.log(add(1, 2));"

SAMPLES = [
    "",
    "   ",
    JAVA_MAIN,
    PYTHON_FUNCTION,
    TYPESCRIPT_INTERFACE,
    C_PROGRAM,
    CPP_PROGRAM,
    JS_ARROW,
    "let x = 1",
    "hello world",
    "{}{}{}[]()",
    "SELECT * FROM users;",
    "x" * 500,
]


@pytest.fixture
def detector():
    return LanguageDetector()


class TestDetectLanguage:
    """Tests for detect_language()."""

    @pytest.mark.parametrize("code", SAMPLES)
    def test_result_is_bounded_and_registered(self, detector, code):
        result = detector.detect_language(code)

        assert 0.0 <= result.confidence <= 1.0
        assert result.language in SUPPORTED_LANGUAGES

    @pytest.mark.parametrize("code", ["", "   ", "\n\t"])
    def test_empty_input(self, detector, code):
        result = detector.detect_language(code)

        assert result.language == "javascript"
        assert result.confidence == 0.0
        assert result.reasons == ["empty"]

    def test_none_input_does_not_raise(self, detector):
        assert detector.detect_language(None).language == "javascript"

    def test_java(self, detector):
        result = detector.detect_language(JAVA_MAIN)

        assert result.language == "java"
        assert result.confidence >= 0.8

    def test_python(self, detector):
        result = detector.detect_language(PYTHON_FUNCTION)

        assert result.language == "python"
        assert result.confidence == 0.9

    def test_typescript_not_javascript(self, detector):
        result = detector.detect_language(TYPESCRIPT_INTERFACE)

        assert result.language == "typescript"

    def test_c(self, detector):
        assert detector.detect_language(C_PROGRAM).language == "c"

    def test_cpp(self, detector):
        assert detector.detect_language(CPP_PROGRAM).language == "cpp"

    def test_quick_path_reason(self, detector):
        result = detector.detect_language(JAVA_MAIN)

        assert result.reasons == ["Strong java patterns detected"]
        assert result.alternatives == []

    def test_javascript_falls_through_to_scoring(self, detector):
        """JavaScript quick matches are re-checked by full scoring."""
        result = detector.detect_language(JS_ARROW)

        assert result.language == "javascript"
        assert result.confidence == pytest.approx(0.35)
        assert result.reasons == ["Found 2 keyword matches", "Found 1 syntax patterns"]

    def test_alternatives_are_next_ranked(self, detector):
        result = detector.detect_language(JS_ARROW)

        assert [alt.language for alt in result.alternatives] == ["cpp"]

    def test_alternatives_follow_ranking_not_winner(self, detector):
        """A disambiguation rule may pick a lower-ranked language."""
        with patch.object(
            LanguageDetector, "_apply_disambiguation_rules", lambda self, code, results: results[1]
        ):
            result = detector.detect_language(JS_ARROW)

        assert result.language == "cpp"
        assert [alt.language for alt in result.alternatives] == ["cpp"]

    def test_low_confidence_default(self, detector):
        result = detector.detect_language("let x = 1")

        assert result.language == "javascript"
        assert result.confidence == 0.2
        assert result.reasons == ["low confidence default"]

    def test_no_patterns(self, detector):
        result = detector.detect_language("hello world")

        assert result.language == "javascript"
        assert result.confidence == 0.0
        assert result.reasons == ["No clear language patterns detected"]

    def test_detection_is_stateless(self, detector):
        first = detector.detect_language(PYTHON_FUNCTION)
        detector.detect_language(JAVA_MAIN)

        assert detector.detect_language(PYTHON_FUNCTION) == first


class TestQuickDetect:
    """Tests for the quick detection cascade."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("System.out.println(1);", "java"),
            ("#include <iostream>\nusing namespace std;\ncout << 1;", "cpp"),
            ('#include <stdio.h>\nprintf("x");', "c"),
            ("const f = (x: number) => x;", "typescript"),
            ("import os\nos.getcwd()", "python"),
            ("from math import pi", "python"),
            ("console.log(1)", "javascript"),
            ("nothing to see", "javascript"),
        ],
    )
    def test_cascade(self, detector, code, expected):
        assert detector.quick_detect(code) == expected

    def test_java_print_is_not_python(self, detector):
        """System.out.print contains print( but the cascade checks Java first."""
        assert detector.quick_detect('System.out.print("x");') == "java"


class TestScoring:
    """Tests for per-language scoring."""

    def test_signal_weights(self, detector):
        score = detector._score(JS_ARROW, JAVASCRIPT)

        assert score.language == "javascript"
        assert score.confidence == pytest.approx(0.35)

    def test_keyword_cap(self, detector):
        code = "\n".join(f"const v{i} = {i};" for i in range(6))

        assert detector._score(code, JAVASCRIPT).confidence == pytest.approx(0.3)

    def test_negative_adjustment_clamps_at_zero(self, detector):
        assert detector._score("const x = 1", TYPESCRIPT).confidence == 0.0

    @pytest.mark.parametrize("code", SAMPLES)
    def test_scores_are_bounded(self, detector, code):
        for patterns in LANGUAGE_PATTERNS:
            score = detector._score(code, patterns)
            assert 0.0 <= score.confidence <= 1.0
            assert len(score.reasons) <= 3


class TestNegativeAdjustment:
    """Tests for the per-language penalties."""

    def test_python_penalised_by_javascript_syntax(self):
        assert PYTHON.negative_adjustment("function f() { }") == pytest.approx(-0.5)

    def test_python_penalised_by_annotations(self):
        assert PYTHON.negative_adjustment("let x: number = 1") == pytest.approx(-0.4)

    def test_javascript_penalised_by_python_def(self):
        assert JAVASCRIPT.negative_adjustment("def f():\n    pass") == pytest.approx(-0.3)

    def test_javascript_penalised_by_java(self):
        assert JAVASCRIPT.negative_adjustment("System.out.println(1);") == pytest.approx(-0.4)

    def test_typescript_without_types(self):
        assert TYPESCRIPT.negative_adjustment("const x = 1") == pytest.approx(-0.2)
        assert TYPESCRIPT.negative_adjustment("interface A {}") == 0.0


class TestDisambiguation:
    """Tests for the rules applied to the ranked scores."""

    def test_type_annotation_prefers_typescript(self, detector):
        ranked = [LanguageScore("javascript", 0.5), LanguageScore("typescript", 0.4)]

        result = detector._apply_disambiguation_rules("let x: number = 1", ranked)

        assert result.language == "typescript"

    def test_close_python_javascript_call_prefers_python(self, detector):
        ranked = [LanguageScore("javascript", 0.5), LanguageScore("python", 0.4)]

        result = detector._apply_disambiguation_rules("print(x)", ranked)

        assert result.language == "python"

    def test_confident_top_result(self, detector):
        ranked = [LanguageScore("java", 0.7), LanguageScore("cpp", 0.2)]

        assert detector._apply_disambiguation_rules("", ranked).language == "java"

    def test_low_confidence_falls_back_to_default(self, detector):
        result = detector._apply_disambiguation_rules("", [LanguageScore("cpp", 0.25)])

        assert result.language == "javascript"
        assert result.confidence == 0.2
        assert result.reasons == ["low confidence default"]

    def test_moderate_top_result_kept(self, detector):
        result = detector._apply_disambiguation_rules("", [LanguageScore("cpp", 0.45)])

        assert result.language == "cpp"
        assert result.confidence == 0.45


class TestConfidenceExplanation:
    """Tests for get_confidence_explanation()."""

    @pytest.mark.parametrize(
        "confidence,explanation",
        [
            (0.95, "Very confident"),
            (0.8, "Very confident"),
            (0.6, "Confident"),
            (0.5, "Moderately confident"),
            (0.2, "Low confidence"),
            (0.1, "Guessing"),
        ],
    )
    def test_thresholds(self, confidence, explanation):
        assert LanguageDetector.get_confidence_explanation(confidence) == explanation
