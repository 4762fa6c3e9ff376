import pytest
from pydantic import ValidationError

from core.config import Settings


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_defaults():
    settings = _settings()

    assert settings.api_prefix == ""
    assert settings.default_page_size == 20
    assert settings.max_page_size == 100
    assert settings.max_page == 1_000_000


def test_log_level_is_normalized():
    assert _settings(LOG_LEVEL="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        _settings(LOG_LEVEL="chatty")


def test_cors_origins_list():
    settings = _settings(CORS_ALLOWED_ORIGINS="https://a.example, https://b.example,")

    assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


def test_production_config_checks():
    settings = _settings(
        DATABASE_URL="sqlite:///attributes.db",
        DEFAULT_PAGE_SIZE=200,
        MAX_PAGE_SIZE=100,
    )

    errors, warnings = settings.validate_production_config()

    assert errors == ["DEFAULT_PAGE_SIZE cannot exceed MAX_PAGE_SIZE"]
    assert any("SQLite" in w for w in warnings)


def test_postgres_config_is_clean():
    settings = _settings(
        DATABASE_URL="postgresql://svc:secret@db/attributes",
        CORS_ALLOWED_ORIGINS="https://admin.example",
    )

    assert settings.validate_production_config() == ([], [])
