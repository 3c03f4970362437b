from places_client.config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "env-key")
    monkeypatch.setenv("PLACES_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("AGENT_OBSERVABILITY_ENABLED", "false")

    settings = Settings(_env_file=None)

    assert settings.GOOGLE_PLACES_API_KEY == "env-key"
    assert settings.PLACES_HTTP_TIMEOUT_SECONDS == 2.5
    assert settings.AGENT_OBSERVABILITY_ENABLED is False


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("GOOGLE_PLACES_API_KEY", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.GOOGLE_PLACES_API_KEY == ""
    assert settings.LOG_LEVEL == "INFO"
    assert settings.OTEL_SERVICE_NAME == "places-client-mcp"
