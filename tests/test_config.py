"""Environment-driven configuration."""

from taskboard.config import Settings, load_settings


def test_defaults(monkeypatch) -> None:
    for name in [
        "TASKBOARD_HOST",
        "TASKBOARD_PORT",
        "TASKBOARD_API_PREFIX",
        "CORS_ALLOW_ORIGINS",
        "TASKBOARD_LOG_LEVEL",
        "TASKBOARD_LOG_JSON",
    ]:
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.api_prefix == ""
    assert settings.cors_allow_origins == ["*"]
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASKBOARD_PORT", "9001")
    monkeypatch.setenv("TASKBOARD_API_PREFIX", "/api/")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " https://a.com , ,https://b.com")
    monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKBOARD_LOG_JSON", "yes")

    settings = Settings()
    assert settings.port == 9001
    assert settings.api_prefix == "/api"
    assert settings.cors_allow_origins == ["https://a.com", "https://b.com"]
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_invalid_port_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("TASKBOARD_PORT", "not-a-port")
    assert Settings().port == 8080
