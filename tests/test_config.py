"""Tests for settings loading."""

import pytest

from core.config import DEFAULT_SENDGRID_BASE_URL, Settings, load_settings


class TestLoadSettings:
    def test_defaults_from_empty_environment(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.port == 3000
        assert settings.environment == "development"
        assert settings.sendgrid_base_url == DEFAULT_SENDGRID_BASE_URL
        assert settings.cors_origins == ("*",)
        assert not settings.store_configured
        assert not settings.email_configured
        assert not settings.enforce_api_key

    def test_reads_all_options(self):
        settings = load_settings(
            {
                "DATABASE_URL": " postgresql://db/postgres ",
                "SENDGRID_API_KEY": "SG.key",
                "SENDGRID_SENDER": "academy@example.com",
                "BIZFLOW_API_KEY": "secret",
                "PORT": "8080",
                "APP_ENV": "production",
                "CORS_ORIGINS": "https://a.example, https://b.example",
            }
        )
        assert settings.database_url == "postgresql://db/postgres"
        assert settings.store_configured
        assert settings.email_configured
        assert settings.enforce_api_key
        assert settings.port == 8080
        assert settings.environment == "production"
        assert settings.cors_origins == ("https://a.example", "https://b.example")

    def test_email_needs_key_and_sender(self):
        assert not load_settings({"SENDGRID_API_KEY": "SG.key"}).email_configured
        assert not load_settings({"SENDGRID_SENDER": "a@example.com"}).email_configured

    def test_allow_insecure_disables_gate(self):
        settings = load_settings({"BIZFLOW_API_KEY": "secret", "BIZFLOW_ALLOW_INSECURE": "true"})
        assert settings.allow_insecure
        assert not settings.enforce_api_key

    def test_allow_insecure_requires_literal_true(self):
        settings = load_settings({"BIZFLOW_API_KEY": "secret", "BIZFLOW_ALLOW_INSECURE": "yes"})
        assert settings.enforce_api_key

    def test_invalid_port_raises(self):
        with pytest.raises(ValueError, match="PORT"):
            load_settings({"PORT": "eighty"})

    def test_settings_are_immutable(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.port = 1
