"""Tests for connector settings."""

import pytest

from algoan_bridge_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ALGOAN_EVENT_LIST", raising=False)
        settings = Settings(_env_file=None)

        assert settings.bridge_base_url == "https://sync.bankin.com"
        assert settings.bridge_version == "2019-02-18"
        assert settings.bridge_user_email_domain == "algoan-bridge.com"
        assert settings.event_names == [
            "bankreader_link_required",
            "bankreader_required",
        ]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ALGOAN_EVENT_LIST", " bankreader_required , ,")
        monkeypatch.setenv("BRIDGE_CLIENT_SECRET", "very-secret")
        monkeypatch.setenv("API_PORT", "9090")

        settings = Settings(_env_file=None)

        assert settings.event_names == ["bankreader_required"]
        assert settings.bridge_client_secret.get_secret_value() == "very-secret"
        assert "very-secret" not in repr(settings)
        assert settings.api_port == 9090

    def test_event_list_accepts_a_list(self):
        settings = Settings(
            _env_file=None,
            algoan_event_list=["bankreader_required", "bankreader_link_required"],
        )

        assert settings.algoan_event_list == "bankreader_required,bankreader_link_required"

    def test_get_settings_is_cached(self, monkeypatch):
        clear_settings_cache()
        first = get_settings()

        assert get_settings() is first

        monkeypatch.setenv("BRIDGE_COUNTRY", "es")
        clear_settings_cache()
        try:
            assert get_settings().bridge_country == "es"
        finally:
            clear_settings_cache()

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_event_list(self, value):
        settings = Settings(_env_file=None, algoan_event_list=value)

        assert settings.event_names == []
