"""Application Configuration — verifies settings parsing."""

from folio.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/folio")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/folio"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_catalogue_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BASE_URI", "https://books.example/meta/")
    monkeypatch.setenv("ADMINISTRATOR", "curator")
    settings = Settings()
    assert settings.base_uri == "https://books.example/meta/"
    assert settings.administrator == "curator"
