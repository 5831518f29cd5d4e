"""
For-In Array Rule — Detects `for...in` loops over values that look like arrays.

A loop target looks like an array when it is an inline array assignment
(`x = [...]`), an indexed expression (`x[...]`), or a name the text declares
with an array literal.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, mask_js_literals
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "for-in-array"

_FOR_IN = re.compile(
    r"for\s*\(\s*(?:(?:const|let|var)\s+)?[a-zA-Z_$][\w$]*\s+in\s+([^)]*?)\s*\)", re.ASCII
)
_ARRAY_TARGET = re.compile(
    r"[a-zA-Z_$][\w$]*\s*=\s*\[.*\]|[a-zA-Z_$][\w$]*\[.*\]", re.ASCII | re.DOTALL
)
_ARRAY_DECLARATION = re.compile(r"\b(?:const|let|var)\s+([a-zA-Z_$][\w$]*)\s*=\s*\[", re.ASCII)

EDUCATIONAL_CONTENT = """\
for...in iterates over the enumerable property names of an object. On an
array that means:
- You get string indices ("0", "1", ...) rather than the elements.
- Inherited enumerable properties are visited too.
- The iteration order is not something to rely on.

Use for...of to iterate values, Array.prototype.forEach() for simple
callbacks, or a classic indexed for loop.

Bad:
    const arr = ["a", "b", "c"];
    for (let index in arr) {
      console.log(arr[index]);
    }

Good:
    const arr = ["a", "b", "c"];
    for (const value of arr) {
      console.log(value);
    }
    arr.forEach(value => console.log(value));
"""


def detect(text: str) -> list[Finding]:
    masked = mask_js_literals(text)
    source = SourceText(text)
    arrays = {m.group(1) for m in _ARRAY_DECLARATION.finditer(masked)}

    findings: list[Finding] = []
    for match in _FOR_IN.finditer(masked):
        target = match.group(1).strip()
        if _ARRAY_TARGET.fullmatch(target) or target in arrays:
            findings.append(
                source.finding_at(
                    match.start(),
                    "`for...in` loop used on what appears to be an array. "
                    "Consider `for...of` or `forEach`.",
                )
            )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.JAVASCRIPT,
    category="Performance",
    severity=Severity.WARNING,
    title="`for...in` Used on Array",
    description=(
        "Using `for...in` to iterate over arrays is not recommended in JavaScript. It "
        "iterates over enumerable properties, which can include inherited properties, and "
        "the order of iteration is not guaranteed. It's better suited for iterating over "
        "object keys."
    ),
    suggestion=(
        "Use `for...of`, `forEach()`, or a traditional `for` loop to iterate over array "
        "elements. These methods iterate directly over values and maintain predictable order."
    ),
    detect=detect,
    educational_content=EDUCATIONAL_CONTENT,
)
