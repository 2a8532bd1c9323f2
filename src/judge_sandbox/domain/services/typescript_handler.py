"""
TypeScript degrader.

Strips type syntax with regular expressions so TypeScript-like snippets can
run on a plain JavaScript runtime. This is lexical, not a compiler:
generics mixed with comparison operators, union types containing call-like
syntax, nested generics and type predicates can be stripped incorrectly.
"""

import re
from typing import Tuple

# Parameter, return and property annotations, including simple unions
_PARAM_ANNOTATION = re.compile(r":\s*\w+(\[\])?(\s*\|[^=,){\n]*)?(?=\s*[,)={\n])")
_INTERFACE_DECL = re.compile(r"interface\s+\w+\s*{[^}]*}")
_TYPE_ALIAS = re.compile(r"type\s+\w+\s*=\s*[^;\n]+;?")
_GENERIC_PARAMS = re.compile(r"<[^>]*>")
_AS_ASSERTION = re.compile(r"\s+as\s+\w+")
_VARIABLE_ANNOTATION = re.compile(r":\s*\w+(\[\])?(?=\s*[=;,\n])")
_IMPORT_TYPE = re.compile(r"import\s+type\s+")
_EXPORT_TYPE = re.compile(r"export\s+type\s+")

_TYPE_NAME = r"[A-Za-z_][\w.]*(?:\[\])?"

# Markers that cannot appear in valid JavaScript. Generics, `as` and
# `key: value` are left out: `<`/`>` comparisons, import aliases and object
# literals share that syntax.
_TYPESCRIPT_ONLY_MARKERS = (
    re.compile(r"^\s*(?:export\s+)?interface\s+\w+", re.M),
    re.compile(r"^\s*(?:export\s+)?type\s+\w+\s*=", re.M),
    re.compile(r"\bimport\s+type\s"),
    re.compile(r"\bexport\s+type\s"),
    re.compile(r"\b(?:let|const|var)\s+\w+\s*:\s*" + _TYPE_NAME + r"\s*[=;]"),
    re.compile(r"\bfunction\b\s*\w*\s*\((?:[^(){}]*,)?\s*\w+\s*\??:\s*" + _TYPE_NAME),
    re.compile(r"\bfunction\b\s*\w*\s*\([^(){}]*\)\s*:\s*" + _TYPE_NAME),
    re.compile(r"\(\s*\w+\s*\??:\s*" + _TYPE_NAME + r"\s*(?:,[^(){}]*)?\)\s*(?::\s*" + _TYPE_NAME + r"\s*)?=>"),
)


def transpile_typescript(code: str) -> str:
    """Remove TypeScript-only syntax, leaving plain JavaScript."""
    js_code = _PARAM_ANNOTATION.sub("", code)
    js_code = _INTERFACE_DECL.sub("", js_code)
    js_code = _TYPE_ALIAS.sub("", js_code)
    js_code = _GENERIC_PARAMS.sub("", js_code)
    js_code = _AS_ASSERTION.sub("", js_code)
    js_code = _VARIABLE_ANNOTATION.sub("", js_code)
    js_code = _IMPORT_TYPE.sub("import ", js_code)
    js_code = _EXPORT_TYPE.sub("export ", js_code)
    return js_code


def is_typescript_code(code: str) -> bool:
    """Check whether code contains syntax only TypeScript accepts."""
    return any(pattern.search(code) for pattern in _TYPESCRIPT_ONLY_MARKERS)


def handle_typescript_execution(code: str, language: str) -> Tuple[str, str]:
    """
    Degrade TypeScript to JavaScript when needed.

    Args:
        code: Source code
        language: Canonical language name

    Returns:
        (code, language) to submit; language becomes "javascript" when the
        code was transpiled
    """
    if language == "typescript" or (language == "javascript" and is_typescript_code(code)):
        return transpile_typescript(code), "javascript"
    return code, language
