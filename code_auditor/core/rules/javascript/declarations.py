"""
Declaration collection for the JavaScript rules that need to know which
names are in scope somewhere in the text.

Text-level heuristics only: every declared name counts as visible
everywhere, regardless of block or function scope.
"""

from __future__ import annotations

import re

IDENTIFIER = r"[A-Za-z_$][\w$]*"

_DECLARATION = re.compile(rf"\b(?:const|let|var|function|class)\s+({IDENTIFIER})", re.ASCII)
_FUNCTION_PARAMS = re.compile(rf"\bfunction\b\s*(?:{IDENTIFIER})?\s*\(([^)]*)\)", re.ASCII)
_ARROW_PARAMS = re.compile(r"\(([^()]*)\)\s*=>", re.ASCII)
_ARROW_SINGLE_PARAM = re.compile(rf"({IDENTIFIER})\s*=>", re.ASCII)
_CATCH_PARAM = re.compile(rf"\bcatch\s*\(\s*({IDENTIFIER})", re.ASCII)
_DESTRUCTURING = re.compile(r"\b(?:const|let|var)\s*[{\[]([^}\]=]*)[}\]]\s*=", re.ASCII)
_IMPORT_CLAUSE = re.compile(r"\bimport\b([^;]*?)\bfrom\b", re.ASCII)
_NAME = re.compile(IDENTIFIER, re.ASCII)

JS_KEYWORDS: frozenset[str] = frozenset({
    "as", "async", "await", "break", "case", "catch", "class", "const",
    "continue", "debugger", "default", "delete", "do", "else", "export",
    "extends", "false", "finally", "for", "from", "function", "get", "if",
    "import", "in", "instanceof", "let", "new", "null", "of", "return",
    "set", "static", "super", "switch", "this", "throw", "true", "try",
    "typeof", "undefined", "var", "void", "while", "with", "yield",
})

KNOWN_GLOBALS: frozenset[str] = frozenset({
    "console", "document", "window", "Math", "Array", "Object", "Number",
    "String", "Boolean", "Date", "RegExp", "JSON", "NaN", "Infinity",
    "undefined", "Promise", "Map", "Set", "WeakMap", "WeakSet", "Symbol",
    "BigInt", "Error", "TypeError", "RangeError", "SyntaxError", "Reflect",
    "Proxy", "Intl", "globalThis", "self", "arguments", "parseInt",
    "parseFloat", "isNaN", "isFinite", "eval", "encodeURIComponent",
    "decodeURIComponent", "encodeURI", "decodeURI", "setTimeout",
    "clearTimeout", "setInterval", "clearInterval", "requestAnimationFrame",
    "cancelAnimationFrame", "queueMicrotask", "structuredClone", "fetch",
    "alert", "prompt", "confirm", "localStorage", "sessionStorage",
    "navigator", "location", "history", "performance", "crypto", "atob",
    "btoa", "URL", "URLSearchParams", "FormData", "Headers", "Request",
    "Response", "Blob", "File", "FileReader", "WebSocket", "Worker",
    "XMLHttpRequest", "Event", "CustomEvent", "Image", "HTMLElement",
    "Node", "MutationObserver", "IntersectionObserver", "event",
    "require", "module", "exports", "process", "Buffer", "__dirname",
    "__filename",
})


def declared_names(text: str) -> set[str]:
    """
    Collect every name the text declares: variables, functions, classes,
    parameters, catch bindings, destructured names and imports.

    ``text`` should already have its string literals and comments masked.
    """
    names: set[str] = {m.group(1) for m in _DECLARATION.finditer(text)}
    names.update(m.group(1) for m in _ARROW_SINGLE_PARAM.finditer(text))
    names.update(m.group(1) for m in _CATCH_PARAM.finditer(text))
    for pattern in (_FUNCTION_PARAMS, _ARROW_PARAMS, _DESTRUCTURING):
        for m in pattern.finditer(text):
            names.update(_binding_names(m.group(1)))
    for m in _IMPORT_CLAUSE.finditer(text):
        names.update(name for name in _NAME.findall(m.group(1)) if name != "as")
    return names


def _binding_names(params: str) -> list[str]:
    """Names bound by a parameter or destructuring list, ignoring defaults."""
    bound = []
    for part in params.split(","):
        target = part.split("=", 1)[0]
        # `{ a: alias }` binds the alias
        if ":" in target:
            target = target.split(":", 1)[1]
        match = _NAME.search(target)
        if match:
            bound.append(match.group(0))
    return bound
