"""Tests for YAML config and environment settings."""

from __future__ import annotations

from pathlib import Path

from deferred_link.config import load_config
from deferred_link.tracking import DEFAULT_TRACKING_BASE_URL


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("DEFERRED_LINK_TRACKING_BASE_URL", raising=False)

        cfg = load_config(str(tmp_path / "missing.yaml"))

        assert cfg.deep_links == []
        assert cfg.settings.tracking_base_url == DEFAULT_TRACKING_BASE_URL
        assert cfg.settings.http_timeout == 30.0

    def test_reads_patterns_and_settings(self, tmp_path: Path):
        path = tmp_path / "deferred_links.yaml"
        path.write_text(
            "deep_links:\n"
            "  - go.example.com/profile\n"
            "  - '*.example.com/offers/*'\n"
            "settings:\n"
            "  log_dir: /tmp/dl-logs\n"
            "  http_timeout: 5\n"
        )

        cfg = load_config(str(path))

        assert cfg.deep_links == ["go.example.com/profile", "*.example.com/offers/*"]
        assert cfg.settings.log_dir == "/tmp/dl-logs"
        assert cfg.settings.http_timeout == 5.0

    def test_env_fills_unset_settings(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DEFERRED_LINK_TRACKING_BASE_URL", "http://tracker.test/v2")
        monkeypatch.setenv("DEFERRED_LINK_LOG_DIR", "/from/env")
        path = tmp_path / "deferred_links.yaml"
        path.write_text("settings:\n  log_dir: /from/file\n")

        cfg = load_config(str(path))

        assert cfg.settings.tracking_base_url == "http://tracker.test/v2"
        assert cfg.settings.log_dir == "/from/file"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "deferred_links.yaml"
        path.write_text("")

        assert load_config(str(path)).deep_links == []
