"""
Settings loading and validation
"""

import pytest

from config.settings import Settings, get_settings

SETTINGS_ENV = (
    "ENV", "DATABASE_URL", "PORT", "LOG_LEVEL", "SQLALCHEMY_ECHO",
    "DATABASE_ENSURE_CREATED", "ALLOWED_ORIGINS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.env == "PROD"
        assert settings.database_url is None
        assert settings.port == 8080
        assert settings.log_level == "INFO"
        assert settings.sqlalchemy_echo is False
        assert settings.database_ensure_created is False
        assert settings.allowed_origins == []

    def test_reads_environment(self, clean_env):
        clean_env.setenv("ENV", "QA")
        clean_env.setenv("DATABASE_URL", "postgresql://app@db/library")
        clean_env.setenv("PORT", "9000")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("SQLALCHEMY_ECHO", "true")
        clean_env.setenv("DATABASE_ENSURE_CREATED", "1")
        clean_env.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

        settings = Settings()

        assert settings.env == "QA"
        assert settings.database_url == "postgresql://app@db/library"
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.sqlalchemy_echo is True
        assert settings.database_ensure_created is True
        assert settings.allowed_origins == ["https://a.example", "https://b.example"]

    def test_validate_collects_errors(self, clean_env):
        settings = Settings(port=0, log_level="LOUD")

        errors = settings.validate()

        assert len(errors) == 3
        assert "DATABASE_URL environment variable is required" in errors

    def test_get_settings_requires_database_url(self, clean_env):
        with pytest.raises(ValueError, match="DATABASE_URL"):
            get_settings()

    def test_get_settings(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://app@db/library")

        assert get_settings().database_url == "postgresql://app@db/library"
