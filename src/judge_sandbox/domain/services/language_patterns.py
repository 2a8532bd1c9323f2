"""
Language Pattern Sets

One pattern set per supported language. Each set carries its own signal
patterns, strong indicators and negative adjustment, so the weights of one
language can be tuned without touching the others.
"""

import re
from dataclasses import dataclass
from typing import Tuple

# Explicit type annotation such as ``x: number`` or ``): string[] {``
TYPE_ANNOTATION = re.compile(r":\s*\w+(\[\])?(\s*\|\s*\w+)*(?=\s*[=,){\n])")


def _compile(*patterns: str, flags: int = 0) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(p, flags) for p in patterns)


@dataclass(frozen=True)
class LanguagePatternSet:
    """
    Weighted evidence for one language.

    Attributes:
        language: Canonical language name
        keywords: Keyword patterns
        syntax: Syntax-shape patterns
        imports: Import/include statement patterns
        functions: Function definition patterns
        strong_indicators: High-precision patterns used by quick detection
    """

    language: str
    keywords: Tuple[re.Pattern, ...] = ()
    syntax: Tuple[re.Pattern, ...] = ()
    imports: Tuple[re.Pattern, ...] = ()
    functions: Tuple[re.Pattern, ...] = ()
    strong_indicators: Tuple[re.Pattern, ...] = ()

    def negative_adjustment(self, code: str) -> float:
        """Penalty (<= 0) for evidence that points at a competing language."""
        return 0.0

    def has_strong_indicators(self, code: str) -> bool:
        return any(p.search(code) for p in self.strong_indicators)


@dataclass(frozen=True)
class JavaScriptPatternSet(LanguagePatternSet):

    def negative_adjustment(self, code: str) -> float:
        adjustment = 0.0
        # Python definitions or bare module imports
        if re.search(r"def\s+\w+\s*\(", code) or re.search(r"^\s*import\s+\w+$", code, re.M):
            adjustment -= 0.3
        # Java
        if "System.out.print" in code or re.search(r"public\s+class", code):
            adjustment -= 0.4
        return adjustment


@dataclass(frozen=True)
class TypeScriptPatternSet(LanguagePatternSet):

    def negative_adjustment(self, code: str) -> float:
        # TypeScript without any type syntax is just JavaScript
        if not TYPE_ANNOTATION.search(code) and "interface" not in code and "type " not in code:
            return -0.2
        return 0.0


@dataclass(frozen=True)
class PythonPatternSet(LanguagePatternSet):

    def negative_adjustment(self, code: str) -> float:
        adjustment = 0.0
        if "function" in code or "=>" in code or "console." in code:
            adjustment -= 0.3
        # Type annotations point at TypeScript
        if TYPE_ANNOTATION.search(code):
            adjustment -= 0.4
        if "{" in code and "}" in code:
            adjustment -= 0.2
        return adjustment


JAVASCRIPT = JavaScriptPatternSet(
    language="javascript",
    keywords=_compile(
        r"\b(const|let|var)\s+\w+",
        r"\b(function|arrow|=>)\b",
        r"\bconsole\.log\(",
        r"\b(async|await)\b",
        r"\b(import|export)\s+",
    ),
    syntax=_compile(
        r"\$\{.*\}",  # template literals
        r"\.\w+\(",
        r"\[\s*\]",
        r"\{[\s\S]*\}",
    ),
    functions=_compile(
        r"function\s+\w+\s*\(",
        r"\w+\s*=>\s*",
        r"\w+\s*:\s*function",
    ),
)

TYPESCRIPT = TypeScriptPatternSet(
    language="typescript",
    keywords=_compile(
        r"\b(interface|type|enum)\s+\w+",
        r"\b(public|private|protected)\b",
        r"\b(implements|extends)\b",
    ),
    syntax=_compile(
        r":\s*\w+(\[\])?(\s*\|\s*\w+)*(?=\s*[=,;)\n])",
        r"<[^>]+>",
        r"\bas\s+\w+",
        r"\?\s*:",  # optional properties
    ),
    imports=_compile(
        r"import\s+type\s+",
        r"export\s+type\s+",
    ),
    strong_indicators=(
        TYPE_ANNOTATION,
        re.compile(r"interface\s+\w+"),
        re.compile(r"type\s+\w+\s*="),
    ),
)

PYTHON = PythonPatternSet(
    language="python",
    keywords=_compile(
        r"\b(def|class|import|from|if|elif|else|for|while|try|except|finally|with|as)\b",
        r"\b(print|input|len|range|str|int|float|list|dict|set|tuple)\b",
        r"\b(True|False|None)\b",
    ),
    syntax=_compile(
        r"^\s*def\s+\w+\s*\(",
        r"^\s*class\s+\w+",
        r"^\s*if\s+.*:",
        r"^\s*for\s+\w+\s+in\s+",
        r"print\s*\(",
        r":\s*$",
        r"^\s{4,}",  # block indentation
        flags=re.M,
    ),
    imports=_compile(
        r"^import\s+\w+",
        r"^from\s+\w+\s+import",
        flags=re.M,
    ),
    strong_indicators=(
        re.compile(r"def\s+\w+\s*\("),
        re.compile(r"print\s*\("),
        re.compile(r"^\s*import\s+\w+", re.M),
        re.compile(r"^\s*from\s+\w+\s+import", re.M),
    ),
)

JAVA = LanguagePatternSet(
    language="java",
    keywords=_compile(
        r"\b(public|private|protected|static|final|abstract|class|interface|extends|implements)\b",
        r"\b(int|double|float|boolean|char|String|void)\b",
        r"\b(if|else|for|while|do|switch|case|break|continue|return)\b",
    ),
    syntax=_compile(
        r"public\s+class\s+\w+",
        r"public\s+static\s+void\s+main",
        r"System\.out\.print",
        r"\w+\s+\w+\s*=\s*new\s+\w+",
        r"\w+\[\]\s+\w+",  # array declarations
    ),
    imports=_compile(r"^import\s+[\w.]+;", flags=re.M),
    strong_indicators=_compile(
        r"public\s+class\s+\w+",
        r"System\.out\.print",
        r"public\s+static\s+void\s+main",
    ),
)

CPP = LanguagePatternSet(
    language="cpp",
    keywords=_compile(
        r"\b(int|double|float|char|bool|void|string|vector|map|set)\b",
        r"\b(if|else|for|while|do|switch|case|break|continue|return)\b",
        r"\b(class|struct|namespace|template|typename)\b",
        r"\b(public|private|protected|virtual|static|const)\b",
    ),
    syntax=_compile(
        r"#include\s*<.*>",
        r"std::",
        r"cout\s*<<|cin\s*>>",
        r"\w+::\w+",
        r"template\s*<.*>",
    ),
    imports=_compile(r"#include\s*[<\"].*[>\"]"),
    strong_indicators=_compile(
        r"#include\s*<.*>",
        r"std::",
        r"cout\s*<<",
        r"cin\s*>>",
    ),
)

C = LanguagePatternSet(
    language="c",
    keywords=_compile(
        r"\b(int|double|float|char|void|struct|union|enum)\b",
        r"\b(if|else|for|while|do|switch|case|break|continue|return)\b",
        r"\b(printf|scanf|malloc|free|sizeof)\b",
    ),
    syntax=_compile(
        r"#include\s*<.*\.h>",
        r"printf\s*\(",
        r"scanf\s*\(",
        r"int\s+main\s*\(",
        r"\w+\s*\*\s*\w+",  # pointers
    ),
    imports=_compile(r"#include\s*<.*\.h>"),
    strong_indicators=_compile(
        r"#include\s*<.*\.h>",
        r"printf\s*\(",
        r"scanf\s*\(",
    ),
)

LANGUAGE_PATTERNS: Tuple[LanguagePatternSet, ...] = (
    JAVASCRIPT,
    TYPESCRIPT,
    PYTHON,
    JAVA,
    CPP,
    C,
)
