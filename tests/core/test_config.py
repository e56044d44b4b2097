from relay_resolver.core.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.MAX_PAGE_SIZE == 100
    assert settings.IDENTIFIER_SUFFIX == "_id"


def test_environment_overrides(monkeypatch):
    """Settings are read from the environment"""
    monkeypatch.setenv("MAX_PAGE_SIZE", "25")
    monkeypatch.setenv("IDENTIFIER_SUFFIX", "Id")
    settings = Settings()
    assert settings.MAX_PAGE_SIZE == 25
    assert settings.IDENTIFIER_SUFFIX == "Id"


def test_settings_are_cached():
    assert get_settings() is get_settings()
