"""
Result formatting utilities for CLI output
"""

import json
import sys
from typing import Any, Dict, List

import yaml

from judge_sandbox.domain.entities import ValidationResult
from judge_sandbox.domain.services import LanguageDetector
from judge_sandbox.domain.value_objects import (
    DetectionResult,
    ExecutionResult,
    ExecutionStatus,
    LanguageConfig,
)


COLOR_NAMES = ["reset", "red", "green", "yellow", "blue", "magenta", "cyan", "dim", "bold"]


class ResultFormatter:
    """
    Format execution, validation and detection results for the terminal
    """

    def __init__(self, format: str = "pretty", verbose: bool = False, use_colors: bool = True):
        self.format = format
        self.verbose = verbose
        self.use_colors = use_colors and self._supports_color()

        if self.use_colors:
            self.colors = {
                "reset": "\033[0m",
                "red": "\033[91m",
                "green": "\033[92m",
                "yellow": "\033[93m",
                "blue": "\033[94m",
                "magenta": "\033[95m",
                "cyan": "\033[96m",
                "dim": "\033[2m",
                "bold": "\033[1m",
            }
        else:
            self.colors = {k: "" for k in COLOR_NAMES}

    def _supports_color(self) -> bool:
        """Check if terminal supports colors"""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _colorize(self, text: str, color: str) -> str:
        return f"{self.colors[color]}{text}{self.colors['reset']}"

    def _dump(self, data: Any) -> str:
        if self.format == "yaml":
            return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)

    def _section(self, title: str, color: str, body: str) -> List[str]:
        content = body.rstrip()
        return [
            self._colorize(title, color),
            self._colorize("-" * 40, "dim"),
            content if content else "(empty)",
            "",
        ]

    def format_execution(self, result: ExecutionResult) -> str:
        """
        Format the result of a single execution

        Args:
            result: Execution result

        Returns:
            Formatted string
        """
        if self.format != "pretty":
            return self._dump(result.to_dict())

        output = []
        if result.status is ExecutionStatus.SUCCESS:
            header = self._colorize("✅ Execution succeeded", "green")
        else:
            header = self._colorize(
                f"❌ Execution failed: {result.status.value} (exit code: {result.exit_code})", "red"
            )
        output.append(header)
        output.append("")

        if result.stdout:
            output.extend(self._section("📤 STDOUT:", "blue", result.stdout))
        if result.stderr:
            output.extend(self._section("📥 STDERR:", "yellow", result.stderr))

        output.append(self._colorize("⚡ METRICS:", "cyan"))
        output.append(self._colorize("-" * 40, "dim"))
        output.append(f"  Time:    {self._colorize(f'{result.execution_time_ms:.2f}', 'yellow')} ms")
        output.append(f"  Memory:  {self._colorize(str(result.memory_used_kb), 'yellow')} KB")
        if self.verbose and result.error:
            output.append(f"  Error:   {result.error}")
        output.append("")

        return "\n".join(output)

    def format_validation(self, result: ValidationResult) -> str:
        """Format the result of validating a submission against an exercise"""
        if self.format != "pretty":
            return self._dump(result.to_dict())

        output = []
        color = "green" if result.is_correct else "red"
        output.append(
            self._colorize(
                f"Score: {result.score}/{result.total_points}  "
                f"Tests: {result.passed_tests}/{result.total_tests}",
                color,
            )
        )
        output.append("")

        for index, test_result in enumerate(result.test_results, start=1):
            mark = self._colorize("PASS", "green") if test_result.passed else self._colorize("FAIL", "red")
            line = f"  {index}. [{mark}] {test_result.test_case.description}"
            if self.verbose:
                line += self._colorize(f" ({test_result.execution_time_ms:.0f} ms)", "dim")
            output.append(line)
        output.append("")

        output.append(result.feedback)
        return "\n".join(output)

    def format_detection(self, result: DetectionResult) -> str:
        """Format a language detection result"""
        explanation = LanguageDetector.get_confidence_explanation(result.confidence)
        if self.format != "pretty":
            data = result.to_dict()
            data["explanation"] = explanation
            return self._dump(data)

        output = [
            f"{self._colorize('Language:', 'bold')}   {result.language}",
            f"{self._colorize('Confidence:', 'bold')} {result.confidence:.2f} ({explanation})",
        ]
        if result.reasons:
            output.append(self._colorize("Reasons:", "bold"))
            output.extend(f"  - {reason}" for reason in result.reasons)
        if result.alternatives:
            output.append(self._colorize("Alternatives:", "bold"))
            output.extend(
                f"  - {alt.language} ({alt.confidence:.2f})" for alt in result.alternatives
            )
        return "\n".join(output)

    def format_languages(self, languages: List[LanguageConfig]) -> str:
        """Format the language registry"""
        if self.format != "pretty":
            data: List[Dict[str, Any]] = [config.to_dict() for config in languages]
            return self._dump(data)

        output = [self._colorize(f"{'NAME':<12}{'JUDGE ID':<10}{'TIME':<8}{'MEMORY':<10}DISPLAY NAME", "bold")]
        for config in languages:
            output.append(
                f"{config.name:<12}{config.judge_id:<10}"
                f"{str(config.default_time_limit) + 's':<8}"
                f"{str(config.default_memory_limit) + 'MB':<10}"
                f"{config.display_name}"
            )
        return "\n".join(output)
