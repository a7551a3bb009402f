"""Tests for single-issue and bulk fixes."""

import pytest

from deprecation_engine import (
    Finding,
    Fix,
    FixStatus,
    NoApplicableFixesError,
    Severity,
    SnippetNotFoundError,
    apply_all_fixes,
    apply_fix,
    fixes_from_findings,
)


def test_apply_fix_replaces_first_occurrence_only():
    text = "a = new Buffer(1); b = new Buffer(2);"
    result = apply_fix(text, "new Buffer(", "Buffer.from(")
    assert result.status == FixStatus.APPLIED
    assert result.rewritten_text == "a = Buffer.from(1); b = new Buffer(2);"
    assert result.original_text == text
    assert result.original_highlights == ["new Buffer("]
    assert result.rewritten_highlights == ["Buffer.from("]
    assert result.applied_count == 1


def test_apply_fix_falls_back_to_trimmed_snippet():
    result = apply_fix("x = Vue.observable(s)", "  Vue.observable(\n", "reactive(")
    assert result.ok
    assert result.rewritten_text == "x = reactive(s)"
    assert result.original_highlights == ["Vue.observable("]


def test_apply_fix_reports_snippet_not_found():
    text = "import fs from 'fs';"
    result = apply_fix(text, "require('fs')", "import")
    assert result.status == FixStatus.SNIPPET_NOT_FOUND
    assert result.rewritten_text == text
    assert result.unresolved == ["require('fs')"]
    with pytest.raises(SnippetNotFoundError):
        result.raise_for_status()


def test_apply_fix_with_empty_snippet_is_not_found():
    assert apply_fix("abc", "", "x").status == FixStatus.SNIPPET_NOT_FOUND


def test_bulk_fix_replaces_every_occurrence():
    text = "new Buffer(1);\nnew Buffer(2);\nnew Buffer(3);"
    result = apply_all_fixes(text, [Fix("new Buffer(", "Buffer.from(")])
    assert result.rewritten_text.count("new Buffer(") == 0
    assert result.rewritten_text.count("Buffer.from(") == 3
    assert result.applied_count == 3


def test_bulk_fix_duplicate_findings_count_once():
    text = "NgZone NgZone NgZone"
    fixes = [Fix("NgZone", "Signals")] * 3
    result = apply_all_fixes(text, fixes)
    assert result.rewritten_text == "Signals Signals Signals"
    assert result.applied_count == 3
    assert result.unresolved == []


def test_bulk_fix_longest_snippet_first():
    text = "a = forwardRef(props, ref); b = forwardRef(x);"
    fixes = [
        Fix("forwardRef(", "wrap("),
        Fix("forwardRef(props, ref)", "props"),
    ]
    result = apply_all_fixes(text, fixes)
    assert result.rewritten_text == "a = props; b = wrap(x);"
    assert result.original_highlights == ["forwardRef(props, ref)", "forwardRef("]
    assert result.rewritten_highlights == ["props", "wrap("]
    assert result.rewritten_text.count("(") == result.rewritten_text.count(")")


def test_bulk_fix_skips_snippets_removed_by_earlier_fixes():
    text = "const C = forwardRef(props, ref) => null;"
    fixes = [Fix("forwardRef(", "wrap("), Fix("forwardRef(props, ref)", "(props)")]
    result = apply_all_fixes(text, fixes)
    assert result.status == FixStatus.APPLIED
    assert result.rewritten_text == "const C = (props) => null;"
    assert result.applied_count == 1
    assert result.unresolved == ["forwardRef("]


def test_bulk_fix_with_no_applicable_issue_is_a_no_op():
    text = "const a = 1;"
    result = apply_all_fixes(text, [Fix("require('x')", "import x"), Fix("", "y")])
    assert result.status == FixStatus.NO_APPLICABLE_FIXES
    assert result.rewritten_text == text
    assert result.applied_count == 0
    with pytest.raises(NoApplicableFixesError):
        result.raise_for_status()


def test_bulk_fix_with_no_issues():
    result = apply_all_fixes("abc", [])
    assert result.status == FixStatus.NO_APPLICABLE_FIXES
    assert result.rewritten_text == "abc"


def test_bulk_fix_uses_trimmed_lookup():
    result = apply_all_fixes("x = NgZone;", [Fix(" NgZone \n", "zone")])
    assert result.rewritten_text == "x = zone;"


def test_fixes_from_findings_skips_findings_without_rewrite():
    def finding(matched, replacement):
        return Finding("r", Severity.WARNING, "m", "s", matched, 1, 0, len(matched),
                       replacement_text=replacement)

    fixes = fixes_from_findings([finding("a", "b"), finding("c", None)])
    assert fixes == [Fix("a", "b")]
