"""Tests for the scanner."""

from deprecation_engine import Severity, get_profile, scan, score


def test_require_scenario_yields_one_critical_finding(require_profile):
    result = scan("const x = require('fs');", require_profile)

    assert len(result.findings) == 1
    finding = result.findings[0]
    assert finding.rule_id == "no-require"
    assert finding.severity == Severity.CRITICAL
    assert finding.line_number == 1
    assert finding.matched_text == "require('fs')"
    assert (finding.start_offset, finding.end_offset) == (10, 23)
    assert score(result.findings) == 75


def test_findings_copy_rule_fields(require_profile):
    finding = scan("require('a')", require_profile).findings[0]
    rule = require_profile.rules[0]
    assert finding.message == rule.message
    assert finding.suggestion == rule.migration_suggestion
    assert not hasattr(finding, "rule")


def test_line_numbers_count_preceding_newlines(require_profile):
    text = "// header\n\nconst a = require('a');\nconst b = require('b');\n"
    lines = [f.line_number for f in scan(text, require_profile).findings]
    assert lines == [3, 4]


def test_match_at_start_of_line_belongs_to_that_line(require_profile):
    text = "x\nrequire('a')"
    assert scan(text, require_profile).findings[0].line_number == 2


def test_findings_ordered_by_rule_then_position(mixed_profile):
    text = "with (o) {}\neval(code);\nvar a = 1;\nvar b = eval(x);"
    findings = scan(text, mixed_profile).findings
    assert [(f.rule_id, f.line_number) for f in findings] == [
        ("var-keyword", 3),
        ("var-keyword", 4),
        ("eval-call", 2),
        ("eval-call", 4),
        ("with-stmt", 1),
    ]


def test_scan_is_deterministic(mixed_profile):
    text = "var a = eval(b); with (c) {}"
    assert scan(text, mixed_profile) == scan(text, mixed_profile)


def test_no_match_gives_empty_findings_and_full_score(mixed_profile):
    result = scan("const a = 1;", mixed_profile)
    assert result.findings == []
    assert score(result.findings) == 100
    assert result.logs == ["[Success] Application mounted successfully in Mixed v1."]


def test_log_lines_per_matching_rule(mixed_profile):
    result = scan("var a = eval(b); with (c) {} var d;", mixed_profile)
    assert result.logs == [
        "[Warn] var is legacy.",
        "[Error] eval is forbidden.",
        "[Warn] with statements are deprecated.",
        "[System] Process terminated with 4 issues.",
    ]


def test_scan_does_not_mutate_inputs(mixed_profile):
    text = "var a = eval(b);"
    rules_before = mixed_profile.rules
    scan(text, mixed_profile)
    assert text == "var a = eval(b);"
    assert mixed_profile.rules is rules_before


def test_forward_ref_twice_scores_fifty():
    text = (
        "const A = forwardRef(function A(props, ref) { return null; });\n"
        "const B = forwardRef(function B(props, ref) { return null; });\n"
    )
    findings = scan(text, get_profile("react-19")).findings
    assert [f.rule_id for f in findings] == ["no-forward-ref", "no-forward-ref"]
    assert score(findings) == 50


def test_rewrite_is_resolved_at_scan_time():
    text = "const A = forwardRef(function A(props, ref) { return null; });"
    finding = scan(text, get_profile("react-19")).findings[0]
    assert finding.matched_text == "forwardRef("
    assert finding.affected_text == "forwardRef(function A(props, ref)"
    assert finding.replacement_text == "function A(props, ref)"
    assert finding.fixable


def test_rule_without_rewrite_has_no_replacement():
    finding = scan("Comp.defaultProps = {};", get_profile("react-19")).findings[0]
    assert finding.rule_id == "no-default-props"
    assert finding.replacement_text is None
    assert finding.affected_text == finding.matched_text
