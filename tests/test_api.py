"""HTTP API tests with FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

import app.routes.analyze as analyze_route
from app.ai_status import reset_cache
from app.main import app
from deprecation_engine import ExternalAnalyzerError, assemble
from deprecation_engine import errors

NODE_CODE = "const fs = require('fs');\nconst b = new Buffer(10);"


@pytest.fixture
def client():
    reset_cache()
    return TestClient(app)


class StubAnalyzer:
    def __init__(self, report=None, exc=None):
        self.report = report
        self.exc = exc

    def analyze(self, code, context=None):
        if self.exc is not None:
            raise self.exc
        return self.report


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "/profiles" in r.text


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_health_ai_without_key(client):
    body = client.get("/health/ai").json()
    assert body["available"] is False
    assert body["api_key_set"] is False
    assert body["category"] == "unavailable"


def test_health_ai_with_key_not_probed(client, monkeypatch):
    monkeypatch.setenv("TOGETHER_API_KEY", "tok-0123456789abcdef")
    body = client.get("/health/ai", params={"probe": "false"}).json()
    assert body["available"] is True
    assert body["api_key_set"] is True


def test_list_profiles(client):
    body = client.get("/profiles").json()
    assert [p["id"] for p in body] == ["react-19", "node-24", "angular-2026", "vue-5"]
    node = body[1]
    automated = {r["id"]: r["automated"] for r in node["rules"]}
    assert automated["no-require"] is True
    assert automated["fs-exists-removed"] is False


def test_get_profile(client):
    body = client.get("/profiles/vue-5").json()
    assert body["name"] == "Vue.js"
    assert body["version_label"] == "v5 (Vapor Mode)"


def test_unknown_profile_is_404(client):
    assert client.get("/profiles/cobol-85").status_code == 404
    assert client.post("/scan", json={"code": "x", "profile_id": "cobol-85"}).status_code == 404
    assert client.post("/simulate", json={"code": "x", "profile_id": "cobol-85"}).status_code == 404


def test_scan(client):
    r = client.post("/scan", json={"code": NODE_CODE, "profile_id": "node-24"})
    assert r.status_code == 200
    body = r.json()
    assert body["source"] == "rules"
    assert body["profile_id"] == "node-24"
    assert body["health_score"] == 50
    assert body["severity_counts"] == {"Critical": 2, "Warning": 0, "Info": 0}
    assert [i["rule_id"] for i in body["issues"]] == ["no-require", "buffer-constructor"]
    assert [i["line_number"] for i in body["issues"]] == [1, 2]
    assert body["issues"][0]["matched_text"] == "require('fs')"
    assert body["issues"][0]["affected_text"] == "const fs = require('fs')"
    assert body["logs"][-1] == "[System] Process terminated with 2 issues."
    assert len(body["timeline"]) == 12
    assert body["timestamp"]


def test_scan_defaults_to_first_profile(client):
    body = client.post("/scan", json={"code": "const a = 1;"}).json()
    assert body["profile_id"] == "react-19"
    assert body["health_score"] == 100
    assert body["summary"] == "No issues found"


def test_scan_honours_default_profile_setting(client, monkeypatch):
    monkeypatch.setenv("DEPRECHECK_DEFAULT_PROFILE", "vue-5")
    body = client.post("/scan", json={"code": "const a = 1;"}).json()
    assert body["profile_id"] == "vue-5"


def test_scan_requires_code(client):
    assert client.post("/scan", json={}).status_code == 422


def test_simulate(client):
    body = client.post("/simulate", json={"code": NODE_CODE, "profile_id": "node-24"}).json()
    assert body["score"] == 50
    assert body["patched_code"] == 'import fs from "fs";\nconst b = Buffer.from(10);'


def test_report_is_markdown(client):
    r = client.post("/report", json={"code": NODE_CODE, "profile_id": "node-24"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/markdown")
    assert r.text.startswith("# Future compatibility: node-24")
    assert "## Patched code" in r.text
    assert "Buffer.from(10)" in r.text


def test_fix(client):
    r = client.post("/fix", json={
        "code": "a(); a();",
        "matched_text": "a()",
        "replacement_text": "b()",
    })
    assert r.status_code == 200
    body = r.json()
    assert body["rewritten_code"] == "b(); a();"
    assert body["status"] == "Applied"
    assert body["original_highlights"] == ["a()"]


def test_fix_missing_snippet_is_409(client):
    r = client.post("/fix", json={
        "code": "const a = 1;",
        "matched_text": "forwardRef(",
        "replacement_text": "",
    })
    assert r.status_code == 409
    assert "Could not locate" in r.json()["detail"]


def test_fix_all(client):
    r = client.post("/fix-all", json={
        "code": "x(); x(); gone();",
        "issues": [
            {"matched_text": "x()", "replacement_text": "y()"},
            {"matched_text": "missing()", "replacement_text": "z()"},
        ],
    })
    assert r.status_code == 200
    body = r.json()
    assert body["rewritten_code"] == "y(); y(); gone();"
    assert body["applied_count"] == 2
    assert body["unresolved"] == ["missing()"]


def test_fix_all_nothing_applied_is_422(client):
    r = client.post("/fix-all", json={
        "code": "const a = 1;",
        "issues": [{"matched_text": "nope", "replacement_text": "yes"}],
    })
    assert r.status_code == 422
    assert "No applicable fixes" in r.json()["detail"]


def test_analyze_without_key_is_503(client):
    r = client.post("/analyze", json={"code": "x"})
    assert r.status_code == 503
    assert r.json()["detail"]["category"] == "unavailable"


@pytest.mark.parametrize("category, status", [
    (errors.AUTH, 401),
    (errors.RATE_LIMIT, 429),
    (errors.OVERLOADED, 503),
    (errors.BLOCKED, 422),
    (errors.MALFORMED, 502),
    (errors.NETWORK, 502),
])
def test_analyze_error_status(client, monkeypatch, category, status):
    stub = StubAnalyzer(exc=ExternalAnalyzerError(category, "failed"))
    monkeypatch.setattr(analyze_route, "ai_svc", stub)
    r = client.post("/analyze", json={"code": "x"})
    assert r.status_code == status
    assert r.json()["detail"] == {"message": "failed", "category": category}


def test_analyze_success(client, monkeypatch):
    report = assemble([], 100, ["[System] External analyzer returned 0 issues."], summary="Clean")
    monkeypatch.setattr(analyze_route, "ai_svc", StubAnalyzer(report=report))
    body = client.post("/analyze", json={"code": "x", "context": "Vue app"}).json()
    assert body["source"] == "analyzer"
    assert body["health_score"] == 100
    assert body["summary"] == "Clean"
    assert body["profile_id"] is None


def test_health_ai_probe_failure_is_classified(client, monkeypatch, make_client):
    import app.ai_status as ai_status

    monkeypatch.setenv("TOGETHER_API_KEY", "tok-0123456789abcdef")
    stub = make_client(exc=RuntimeError("rate limit reached"))
    monkeypatch.setattr(ai_status, "default_client", lambda: stub)
    body = client.get("/health/ai", params={"probe": "true"}).json()
    assert body["available"] is False
    assert body["category"] == "rate_limit"

    # second call is served from the cache
    client.get("/health/ai", params={"probe": "true"})
    assert len(stub.chat.completions.calls) == 1


def test_health_ai_placeholder_key(client, monkeypatch):
    monkeypatch.setenv("TOGETHER_API_KEY", "your_api_key_here")
    body = client.get("/health/ai").json()
    assert body["available"] is False
    assert body["category"] == "auth"
