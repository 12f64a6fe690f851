"""Tests for coldcall.config."""

from __future__ import annotations

from coldcall.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("APP_NAME", "PORT", "AGENT_NAME", "DEFAULT_TEMPLATE_ID"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.app_name == "Coldcall"
        assert s.port == 8000
        assert s.agent_name == "Alex"
        assert s.default_template_id == "web-design"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("AGENT_NAME", "Jordan")
        s = Settings(_env_file=None)
        assert s.port == 9001
        assert s.agent_name == "Jordan"

    def test_populate_by_name(self):
        s = Settings(_env_file=None, company_name="Acme")
        assert s.company_name == "Acme"
