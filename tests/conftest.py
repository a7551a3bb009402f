"""Shared fixtures."""

from types import SimpleNamespace

import pytest

from deprecation_engine import Literal, Pattern, PatternRule, PlatformProfile, Severity


@pytest.fixture
def require_profile():
    """Single-rule profile flagging CommonJS require calls."""
    return PlatformProfile(
        id="esm-only",
        name="Node.js",
        version_label="ESM",
        description="CommonJS is gone.",
        rules=[
            PatternRule(
                id="no-require",
                matcher=Pattern(r"""require\(['"][^'"]+['"]\)"""),
                severity=Severity.CRITICAL,
                message='CommonJS "require" is disabled.',
                migration_suggestion='Switch to ESM "import" syntax.',
            ),
        ],
    )


@pytest.fixture
def mixed_profile():
    """Three rules of different severities, declared Info, Critical, Warning."""
    return PlatformProfile(
        id="mixed",
        name="Mixed",
        version_label="v1",
        description="Rules of every severity.",
        rules=[
            PatternRule("var-keyword", Pattern(r"\bvar\b"), Severity.INFO,
                        "var is legacy.", "Use let or const."),
            PatternRule("eval-call", Literal("eval("), Severity.CRITICAL,
                        "eval is forbidden.", "Remove eval."),
            PatternRule("with-stmt", Pattern(r"\bwith\s*\("), Severity.WARNING,
                        "with statements are deprecated.", "Use explicit references."),
        ],
    )


class FakeCompletions:
    """Stands in for client.chat.completions; returns content or raises exc."""

    def __init__(self, content=None, exc=None, finish_reason="stop"):
        self.content = content
        self.exc = exc
        self.finish_reason = finish_reason
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        message = SimpleNamespace(content=self.content)
        choice = SimpleNamespace(message=message, finish_reason=self.finish_reason)
        return SimpleNamespace(choices=[choice])


def fake_client(content=None, exc=None, finish_reason="stop"):
    completions = FakeCompletions(content, exc, finish_reason)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def make_client():
    return fake_client


@pytest.fixture(autouse=True)
def _no_api_key(monkeypatch):
    monkeypatch.delenv("TOGETHER_API_KEY", raising=False)
    for name in ("DEPRECHECK_PENALTY_CRITICAL", "DEPRECHECK_PENALTY_WARNING",
                 "DEPRECHECK_PENALTY_INFO", "DEPRECHECK_DEFAULT_PROFILE"):
        monkeypatch.delenv(name, raising=False)
