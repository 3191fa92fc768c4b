"""Tests for the HTTP surface and environment configuration."""

import pytest
from fastapi.testclient import TestClient

from review_api import main
from review_api.config import get_lint_config, get_port
from review_api.main import app

SAMPLE = "\n".join([
    "import { FC } from 'react';",
    "export function Card() {",
    "  console.log('x');",
    "  return null;",
    "}",
])


@pytest.fixture
def client():
    get_lint_config.cache_clear()
    yield TestClient(app)
    get_lint_config.cache_clear()


# ============================================================================
# /health
# ============================================================================


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["thresholds"]["max_state_hooks"] == 5


# ============================================================================
# /check
# ============================================================================


class TestCheck:
    """Tests for POST /check."""

    def test_code_and_filename(self, client):
        response = client.post("/check", json={"code": SAMPLE, "filename": "src/components/molecules/Card.tsx"})
        assert response.status_code == 200
        data = response.json()
        categories = [i["category"] for i in data["issues"]]
        assert categories == ["unused-import", "console-log"]
        assert data["summary"] == {"unused-import": 1, "console-log": 1}
        first = data["issues"][0]
        assert first["line"] == 1
        assert first["severity"] == "warn"
        assert first["file_level"] is False
        assert first["file_path"] == "src/components/molecules/Card.tsx"

    def test_threshold_override(self, client):
        response = client.post(
            "/check",
            json={"code": SAMPLE, "filename": "src/components/molecules/Card.tsx", "thresholds": {"max_file_lines": 2}},
        )
        assert response.status_code == 200
        issues = response.json()["issues"]
        file_size = [i for i in issues if i["category"] == "file-size"]
        assert len(file_size) == 1
        assert file_size[0]["file_level"] is True

    def test_file_path(self, client, bot_review_file):
        path = str(bot_review_file.resolve())
        response = client.post("/check", json={"file_path": path})
        assert response.status_code == 200
        issues = response.json()["issues"]
        assert len(issues) == 4
        assert all(i["file_path"] == path for i in issues)

    def test_missing_input(self, client):
        response = client.post("/check", json={"code": SAMPLE})
        assert response.status_code == 400

    def test_relative_path(self, client):
        response = client.post("/check", json={"file_path": "src/components/molecules/Card.tsx"})
        assert response.status_code == 400

    def test_missing_file(self, client, tmp_path):
        response = client.post("/check", json={"file_path": str(tmp_path / "missing.tsx")})
        assert response.status_code == 404

    @pytest.mark.parametrize("thresholds", [{"max_params": 0}, {"max_lines": 10}])
    def test_invalid_thresholds(self, client, thresholds):
        response = client.post(
            "/check",
            json={"code": SAMPLE, "filename": "src/a.tsx", "thresholds": thresholds},
        )
        assert response.status_code == 422


# ============================================================================
# /check/report and /check/batch
# ============================================================================


class TestReport:
    """Tests for POST /check/report."""

    def test_markdown_sections(self, client):
        response = client.post(
            "/check/report",
            json={"code": SAMPLE, "filename": "src/components/molecules/Card.tsx", "thresholds": {"max_file_lines": 2}},
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        body = response.text
        assert body.startswith("# Results: src/components/molecules/Card.tsx")
        assert "## Summary" in body
        assert "## Issues" in body
        assert "**Line 1 · Unused Import · Warn**" in body

    def test_clean_report(self, client):
        response = client.post("/check/report", json={"code": "export const a = 1;", "filename": "src/a.ts"})
        assert "No issues found." in response.text


class TestBatch:
    """Tests for POST /check/batch."""

    def test_per_file_results(self, client):
        response = client.post(
            "/check/batch",
            json={"files": [
                {"code": SAMPLE, "filename": "src/components/molecules/Card.tsx"},
                {"code": "export const a = 1;", "filename": "src/a.ts"},
            ]},
        )
        assert response.status_code == 200
        files = response.json()["files"]
        assert [f["file_path"] for f in files] == ["src/components/molecules/Card.tsx", "src/a.ts"]
        assert len(files[0]["issues"]) == 2
        assert files[1]["issues"] == []


# ============================================================================
# Environment configuration
# ============================================================================


class TestEnvConfig:
    """Tests for environment settings: LINT_* thresholds, HOST and PORT."""

    def test_env_threshold(self, client, monkeypatch):
        monkeypatch.setenv("LINT_MAX_FILE_LINES", "2")
        get_lint_config.cache_clear()
        assert get_lint_config().max_file_lines == 2
        response = client.post("/check", json={"code": SAMPLE, "filename": "src/components/molecules/Card.tsx"})
        assert "file-size" in response.json()["summary"]

    @pytest.mark.parametrize("raw", ["abc", "0", "-4"])
    def test_invalid_env_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("LINT_MAX_PARAMS", raw)
        get_lint_config.cache_clear()
        try:
            assert get_lint_config().max_params == 3
        finally:
            get_lint_config.cache_clear()

    def test_server_uses_host_and_port(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9100")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        main.run()
        assert calls == [(main.app, {"host": "127.0.0.1", "port": 9100, "log_level": "info"})]

    def test_invalid_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("PORT", "http")
        assert get_port() == 8000
