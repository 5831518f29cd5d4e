"""
Rule Engine — Runs every registered rule of a language group over a text.

The registry is built once at import time and is read-only afterwards.
Rules are pure functions of the text: no caching, no shared state, every
call is a full re-scan.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from code_auditor.models.rule_models import AnnotatedFinding, LanguageGroup, Rule

# Import all rule modules
from code_auditor.core.rules.javascript import (
    assignment_in_conditional,
    console_log,
    deep_nesting,
    dom_access_before_ready,
    dom_api_casing,
    empty_block,
    eval_usage,
    for_in_array,
    global_variable,
    long_function,
    strict_equality,
    unbalanced_brackets,
    undeclared_variable,
    unquoted_string_literal,
    unused_variable,
)
from code_auditor.core.rules.html import (
    deprecated_tag,
    duplicate_id,
    incomplete_tag,
    inline_style,
    linking_issues,
    missing_alt,
    no_doctype,
    wrong_nesting,
)
from code_auditor.core.rules.css import (
    conflicting_overrides,
    equals_instead_of_colon,
    id_selector_overuse,
    important_usage,
    selector_missing_dot_hash,
    shorthand_property,
    unitless_line_height,
    unknown_property,
)

logger = logging.getLogger("code_auditor.rule_engine")

RuleRegistry = Mapping[LanguageGroup, tuple[Rule, ...]]

# Registration order is the order findings come out in
RULE_REGISTRY: RuleRegistry = MappingProxyType({
    LanguageGroup.JAVASCRIPT: (
        unused_variable.RULE,
        deep_nesting.RULE,
        long_function.RULE,
        global_variable.RULE,
        eval_usage.RULE,
        console_log.RULE,
        strict_equality.RULE,
        for_in_array.RULE,
        empty_block.RULE,
        assignment_in_conditional.RULE,
        dom_api_casing.RULE,
        undeclared_variable.RULE,
        unquoted_string_literal.RULE,
        unbalanced_brackets.RULE,
        dom_access_before_ready.RULE,
    ),
    LanguageGroup.HTML: (
        inline_style.RULE,
        missing_alt.RULE,
        deprecated_tag.RULE,
        no_doctype.RULE,
        incomplete_tag.RULE,
        duplicate_id.RULE,
        wrong_nesting.RULE,
        linking_issues.RULE,
    ),
    LanguageGroup.CSS: (
        important_usage.RULE,
        id_selector_overuse.RULE,
        shorthand_property.RULE,
        unitless_line_height.RULE,
        unknown_property.RULE,
        equals_instead_of_colon.RULE,
        selector_missing_dot_hash.RULE,
        conflicting_overrides.RULE,
    ),
})


def _index_by_id(registry: RuleRegistry) -> Mapping[str, Rule]:
    index: dict[str, Rule] = {}
    for rules in registry.values():
        for rule in rules:
            if rule.id in index:
                raise ValueError(f"Duplicate rule id: {rule.id}")
            index[rule.id] = rule
    return MappingProxyType(index)


RULES_BY_ID: Mapping[str, Rule] = _index_by_id(RULE_REGISTRY)


def _coerce_language(language: LanguageGroup | str) -> LanguageGroup | None:
    try:
        return LanguageGroup(language)
    except ValueError:
        return None


def get_rule(rule_id: str) -> Rule | None:
    return RULES_BY_ID.get(rule_id)


def rules_for(language: LanguageGroup | str | None = None) -> list[Rule]:
    """All rules of one language group, or of every group when ``language`` is None."""
    if language is None:
        return [rule for rules in RULE_REGISTRY.values() for rule in rules]
    group = _coerce_language(language)
    if group is None:
        return []
    return list(RULE_REGISTRY.get(group, ()))


class AnalysisEngine:
    """
    Applies a language group's rules to a source text.

    A rule that raises is logged and contributes no findings; the
    remaining rules still run.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry if registry is not None else RULE_REGISTRY

    @property
    def rule_count(self) -> int:
        return sum(len(rules) for rules in self.registry.values())

    def analyze(self, text: str, language: LanguageGroup | str) -> list[AnnotatedFinding]:
        """
        Run every rule registered for ``language`` against ``text``.

        Args:
            text: Source text to analyze.
            language: Language group, as enum or its string value.

        Returns:
            Annotated findings ordered by rule, then by match. Empty when the
            language has no registered rules.
        """
        group = _coerce_language(language)
        if group is None:
            logger.debug(f"No rules registered for language {language!r}")
            return []

        findings: list[AnnotatedFinding] = []
        for rule in self.registry.get(group, ()):
            try:
                raw = rule.detect(text)
            except Exception as e:
                logger.warning(f"Rule '{rule.id}' failed: {e}", exc_info=True)
                continue
            findings.extend(rule.annotate(finding) for finding in raw)
        return findings
