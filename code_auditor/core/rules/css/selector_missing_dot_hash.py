"""
Selector Missing Dot Hash Rule — Detects bare-word selectors that are not HTML element names.

Only the first selector of a comma-separated list is examined.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, iter_css_selectors
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "css-selector-missing-dot-hash"

KNOWN_ELEMENTS: frozenset[str] = frozenset({
    "a", "abbr", "address", "article", "aside", "audio", "b", "blockquote",
    "body", "br", "button", "canvas", "caption", "cite", "code", "col",
    "colgroup", "data", "datalist", "dd", "del", "details", "dfn", "dialog",
    "div", "dl", "dt", "em", "embed", "fieldset", "figcaption", "figure",
    "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header",
    "hgroup", "hr", "html", "i", "iframe", "img", "input", "ins", "kbd",
    "label", "legend", "li", "link", "main", "mark", "menu", "meta", "meter",
    "nav", "noscript", "object", "ol", "optgroup", "option", "output", "p",
    "picture", "pre", "progress", "q", "s", "samp", "script", "search",
    "section", "select", "slot", "small", "source", "span", "strong", "style",
    "sub", "summary", "sup", "svg", "table", "tbody", "td", "template",
    "textarea", "tfoot", "th", "thead", "time", "title", "tr", "track", "u",
    "ul", "var", "video", "wbr",
    # keyframe selectors
    "from", "to",
})

_BARE_WORD = re.compile(r"[a-z][a-z0-9-]*")


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    findings: list[Finding] = []
    for selector, offset in iter_css_selectors(text):
        first = selector.split(",")[0].strip()
        if _BARE_WORD.fullmatch(first) and first not in KNOWN_ELEMENTS:
            findings.append(
                source.finding_at(offset, f"Selector '{first}' may be missing '.' or '#'.")
            )
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Best Practice",
    severity=Severity.WARNING,
    title="Selector May Be Missing . or #",
    description="A bare selector like box { } might be intended as a class (.box) or id (#box).",
    suggestion=(
        "If targeting a class or id, prefix with . or #. Otherwise ensure it is a valid "
        "element selector."
    ),
    detect=detect,
)
