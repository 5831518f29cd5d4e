"""
Tests for HTML rules.
"""

import time

import pytest

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


def _messages(findings):
    return [f.message for f in findings]


def test_inline_style_detected():
    findings = inline_style.detect('<div>\n  <p style="color: red">Hi</p>\n</div>\n')
    assert len(findings) == 1
    assert findings[0].line_number == 2
    assert findings[0].snippet == '<p style="color: red">'
    assert findings[0].message == "Inline style found."


def test_empty_style_and_data_attribute_not_flagged():
    assert inline_style.detect('<p style="">x</p>\n<p data-style="a">y</p>\n') == []


def test_missing_alt_detected():
    findings = missing_alt.detect('<img src="a.png">\n<img src="b.png" alt="B">\n')
    assert len(findings) == 1
    assert findings[0].line_number == 1
    assert findings[0].message == "Image tag has no alt attribute."


def test_empty_alt_is_accepted():
    assert missing_alt.detect('<img src="line.png" alt="">\n') == []


def test_deprecated_tags_detected():
    findings = deprecated_tag.detect("<center>\n  <s>old</s>\n</center>\n")
    assert _messages(findings) == [
        "Deprecated HTML tag '<center>' detected.",
        "Deprecated HTML tag '<s>' detected.",
    ]
    assert findings[1].line_number == 2


def test_tags_sharing_a_prefix_not_flagged():
    code = "<script></script>\n<section></section>\n<ul></ul>\n<div></div>\n"
    assert deprecated_tag.detect(code) == []


def test_missing_doctype_detected():
    findings = no_doctype.detect("<html></html>")
    assert len(findings) == 1
    assert findings[0].line_number == 1
    assert findings[0].snippet == "<html></html>..."
    assert findings[0].message == "Missing or invalid <!DOCTYPE html> declaration."


def test_doctype_case_and_leading_bom_accepted():
    assert no_doctype.detect("<!doctype html>\n<html></html>\n") == []
    assert no_doctype.detect("\ufeff\n  <!DOCTYPE html>\n<html></html>\n") == []


def test_incomplete_opening_tag_detected():
    findings = incomplete_tag.detect('<div class="a"\n  <p>text</p>\n')
    assert len(findings) == 1
    assert findings[0].line_number == 1
    assert findings[0].message == "Incomplete HTML opening tag: missing closing '>'."


def test_incomplete_closing_tag_detected():
    findings = incomplete_tag.detect("<div>\n</div\n")
    assert _messages(findings) == ["Incomplete HTML closing tag: missing closing '>'."]
    assert findings[0].line_number == 2


def test_comment_opener_not_flagged():
    assert incomplete_tag.detect("<!--\n  note\n-->\n") == []


def test_duplicate_ids_detected():
    code = (
        '<div id="main"></div>\n'
        '<div id="main"></div>\n'
        '<div id="other" data-id="main"></div>\n'
        '<span id="main"></span>\n'
    )
    findings = duplicate_id.detect(code)
    assert [f.line_number for f in findings] == [2, 4]
    assert findings[0].message == "Duplicate id 'main' detected."


def test_mismatched_closing_tag():
    findings = wrong_nesting.detect("<div><p>text</div>")
    assert _messages(findings) == ["Mismatched closing tag </div>. Expected </p>."]


def test_orphan_closing_tag():
    findings = wrong_nesting.detect("</span>")
    assert _messages(findings) == ["Closing tag </span> has no opening tag."]


def test_unclosed_tags_reported_outermost_first():
    findings = wrong_nesting.detect("<section>\n<div>\n")
    assert _messages(findings) == [
        "Unclosed tag <section> detected.",
        "Unclosed tag <div> detected.",
    ]
    assert [f.line_number for f in findings] == [1, 2]


def test_void_and_self_closed_tags_not_tracked():
    code = '<div>\n  <br>\n  <img src="a.png" alt="a">\n  <widget />\n</div>\n'
    assert wrong_nesting.detect(code) == []


def test_stylesheet_link_without_css_extension():
    code = (
        '<link rel="stylesheet" href="styles.txt">\n'
        '<link rel="stylesheet" href="main.css?v=2">\n'
    )
    findings = linking_issues.detect(code)
    assert len(findings) == 1
    assert findings[0].line_number == 1
    assert findings[0].message == "Stylesheet link may be incorrect or missing .css extension."


def test_script_source_without_js_extension():
    code = (
        '<script src="app.jsx"></script>\n'
        '<script src="lib.js"></script>\n'
        '<script type="module" src="mod.mjs"></script>\n'
    )
    findings = linking_issues.detect(code)
    assert _messages(findings) == ["Script source may be incorrect or missing .js extension."]
    assert findings[0].line_number == 1


UNTERMINATED_TAGS = (
    '<img src="a.png" style="x" <link rel="stylesheet" <script src="a" <center <div '
) * 5000


@pytest.mark.parametrize(
    "rule",
    [deprecated_tag, inline_style, linking_issues, missing_alt, wrong_nesting, duplicate_id],
)
def test_unterminated_tags_scanned_in_linear_time(rule):
    start = time.monotonic()
    findings = rule.detect(UNTERMINATED_TAGS)
    assert time.monotonic() - start < 2.0
    assert findings == []


def test_unterminated_tags_reported_once():
    findings = incomplete_tag.detect(UNTERMINATED_TAGS)
    assert _messages(findings) == ["Incomplete HTML opening tag: missing closing '>'."]
