from pathlib import Path
from unittest.mock import MagicMock

import pytest

from echoscribe import config as config_module
from echoscribe.config import OPENAI_TRANSCRIPTION_URL, load_config
from echoscribe.exceptions import ConfigurationError

_VARIABLES = [
    "DATABASE_URL",
    "OPENAI_API_KEY",
    "TRANSCRIPTION_PROVIDER",
    "TRANSCRIPTION_API_URL",
    "TRANSCRIPTION_MODEL",
    "TRANSCRIPTION_TIMEOUT",
    "ASSEMBLYAI_API_KEY",
    "UPLOAD_DIR",
    "UPLOADS_URL_PREFIX",
    "CORS_ORIGIN",
    "HOST",
    "PORT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_database_url_fails_fast(clean_env):
    with pytest.raises(ConfigurationError) as excinfo:
        load_config()

    assert excinfo.value.variable == "DATABASE_URL"


def test_defaults(clean_env):
    clean_env.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db:5432/notes")
    clean_env.setenv("OPENAI_API_KEY", "sk-test")

    config = load_config()

    assert config.database.url == "postgresql+psycopg://u:p@db:5432/notes"
    assert config.server.port == 3880
    assert config.server.cors_origin == "http://localhost:3000"
    assert config.storage.upload_dir == Path("uploads")
    assert config.storage.url_prefix == "/uploads"
    assert config.transcription.provider == "openai"
    assert config.transcription.api_url == OPENAI_TRANSCRIPTION_URL
    assert config.transcription.model == "whisper-1"
    assert config.transcription.timeout == 120.0


def test_overrides(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite://")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("TRANSCRIPTION_MODEL", "gpt-4o-transcribe")
    clean_env.setenv("TRANSCRIPTION_TIMEOUT", "30")
    clean_env.setenv("CORS_ORIGIN", "https://notes.example.com")

    config = load_config()

    assert config.server.port == 8080
    assert config.transcription.model == "gpt-4o-transcribe"
    assert config.transcription.timeout == 30.0
    assert config.server.cors_origin == "https://notes.example.com"


def test_missing_api_key_only_warns(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite://")
    fake_logger = MagicMock()
    clean_env.setattr(config_module, "logger", fake_logger)

    config = load_config()

    assert config.transcription.api_key == ""
    fake_logger.warning.assert_called_once()


def test_unknown_provider_is_rejected(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite://")
    clean_env.setenv("TRANSCRIPTION_PROVIDER", "carrier-pigeon")

    with pytest.raises(ValueError):
        load_config()

