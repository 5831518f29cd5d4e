"""
Unknown Property Rule — Detects declaration property names outside a known set.

Custom properties (`--name`) and vendor-prefixed properties are never
reported. Findings sit on the line of the block's opening brace.
"""

from __future__ import annotations

import re

from code_auditor.core.text import SourceText, iter_css_blocks
from code_auditor.models.rule_models import Finding, LanguageGroup, Rule, Severity


RULE_ID = "css-unknown-property"

KNOWN_PROPERTIES: frozenset[str] = frozenset({
    "accent-color", "align-content", "align-items", "align-self", "all",
    "animation", "animation-delay", "animation-direction", "animation-duration",
    "animation-fill-mode", "animation-iteration-count", "animation-name",
    "animation-play-state", "animation-timing-function", "appearance",
    "aspect-ratio", "backdrop-filter", "backface-visibility", "background",
    "background-attachment", "background-blend-mode", "background-clip",
    "background-color", "background-image", "background-origin",
    "background-position", "background-position-x", "background-position-y",
    "background-repeat", "background-size", "block-size", "border",
    "border-block", "border-bottom", "border-bottom-color",
    "border-bottom-left-radius", "border-bottom-right-radius",
    "border-bottom-style", "border-bottom-width", "border-collapse",
    "border-color", "border-image", "border-inline", "border-left",
    "border-left-color", "border-left-style", "border-left-width",
    "border-radius", "border-right", "border-right-color", "border-right-style",
    "border-right-width", "border-spacing", "border-style", "border-top",
    "border-top-color", "border-top-left-radius", "border-top-right-radius",
    "border-top-style", "border-top-width", "border-width", "bottom",
    "box-shadow", "box-sizing", "break-after", "break-before", "break-inside",
    "caption-side", "caret-color", "clear", "clip", "clip-path", "color",
    "column-count", "column-gap", "column-rule", "column-span", "column-width",
    "columns", "contain", "content", "counter-increment", "counter-reset",
    "cursor", "direction", "display", "empty-cells", "fill", "filter", "flex",
    "flex-basis", "flex-direction", "flex-flow", "flex-grow", "flex-shrink",
    "flex-wrap", "float", "font", "font-display", "font-family",
    "font-feature-settings", "font-kerning", "font-size", "font-stretch",
    "font-style", "font-variant", "font-weight", "gap", "grid", "grid-area",
    "grid-auto-columns", "grid-auto-flow", "grid-auto-rows", "grid-column",
    "grid-column-end", "grid-column-gap", "grid-column-start", "grid-gap",
    "grid-row", "grid-row-end", "grid-row-gap", "grid-row-start",
    "grid-template", "grid-template-areas", "grid-template-columns",
    "grid-template-rows", "height", "hyphens", "image-rendering", "inline-size",
    "inset", "isolation", "justify-content", "justify-items", "justify-self",
    "left", "letter-spacing", "line-height", "list-style", "list-style-image",
    "list-style-position", "list-style-type", "margin", "margin-block",
    "margin-bottom", "margin-inline", "margin-left", "margin-right",
    "margin-top", "mask", "max-block-size", "max-height", "max-inline-size",
    "max-width", "min-block-size", "min-height", "min-inline-size",
    "min-width", "mix-blend-mode", "object-fit", "object-position", "opacity",
    "order", "outline", "outline-color", "outline-offset", "outline-style",
    "outline-width", "overflow", "overflow-wrap", "overflow-x", "overflow-y",
    "padding", "padding-block", "padding-bottom", "padding-inline",
    "padding-left", "padding-right", "padding-top", "page-break-after",
    "page-break-before", "page-break-inside", "perspective",
    "perspective-origin", "place-content", "place-items", "place-self",
    "pointer-events", "position", "quotes", "resize", "right", "rotate",
    "row-gap", "scale", "scroll-behavior", "scroll-margin", "scroll-padding",
    "scroll-snap-align", "scroll-snap-type", "scrollbar-color",
    "scrollbar-width", "src", "stroke", "stroke-width", "tab-size",
    "table-layout", "text-align", "text-align-last", "text-decoration",
    "text-decoration-color", "text-decoration-line", "text-decoration-style",
    "text-indent", "text-overflow", "text-rendering", "text-shadow",
    "text-transform", "text-underline-offset", "top", "touch-action",
    "transform", "transform-origin", "transform-style", "transition",
    "transition-delay", "transition-duration", "transition-property",
    "transition-timing-function", "translate", "unicode-bidi", "unicode-range",
    "user-select", "vertical-align", "visibility", "white-space", "width",
    "will-change", "word-break", "word-spacing", "word-wrap", "writing-mode",
    "z-index",
})

_PROPERTY = re.compile(r"(?:^|;)\s*([A-Za-z-]+)\s*:")


def detect(text: str) -> list[Finding]:
    source = SourceText(text)
    findings: list[Finding] = []
    for block in iter_css_blocks(text):
        line_number = source.line_number(block.open_offset)
        for match in _PROPERTY.finditer(block.body):
            prop = match.group(1).lower()
            if prop.startswith("-") or prop in KNOWN_PROPERTIES:
                continue
            findings.append(source.finding_on_line(line_number, f"Unknown CSS property '{prop}'."))
    return findings


RULE = Rule(
    id=RULE_ID,
    language=LanguageGroup.CSS,
    category="Error",
    severity=Severity.ERROR,
    title="Unknown CSS Property Name",
    description="A CSS property name appears to be invalid (e.g., colr instead of color).",
    suggestion="Use valid CSS property names. Check for typos like color, background-color, etc.",
    detect=detect,
)
