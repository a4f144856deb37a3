import pytest
from pydantic import ValidationError

from fieldroute.config import Settings


def test_origins_parse_from_comma_separated_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FIELDROUTE_FRONTEND_ALLOWED_ORIGINS", "https://a.example, https://b.example")

    config = Settings(_env_file=None)

    assert config.frontend_allowed_origins == ("https://a.example", "https://b.example")


def test_origins_parse_from_json_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FIELDROUTE_FRONTEND_ALLOWED_ORIGINS", '["https://planner.example"]')

    config = Settings(_env_file=None)

    assert config.frontend_allowed_origins == ("https://planner.example",)


def test_provider_and_log_level_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FIELDROUTE_MATRIX_PROVIDER", "osrm")
    monkeypatch.setenv("FIELDROUTE_OSRM_BASE_URL", "http://osrm.local:5000")
    monkeypatch.setenv("FIELDROUTE_LOG_LEVEL", "debug")

    config = Settings(_env_file=None)

    assert config.matrix_provider == "osrm"
    assert config.osrm_base_url == "http://osrm.local:5000"
    assert config.log_level == "DEBUG"


def test_unknown_provider_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FIELDROUTE_MATRIX_PROVIDER", "teleport")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
