"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from echoscribe.exceptions import ConfigurationError
from echoscribe.logging import setup_logging

logger = setup_logging()

OPENAI_TRANSCRIPTION_URL = "https://api.openai.com/v1/audio/transcriptions"


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    url: str


class StorageConfig(BaseModel, frozen=True):
    """Local audio storage configuration."""

    upload_dir: Path = Path("uploads")
    url_prefix: str = "/uploads"


class TranscriptionConfig(BaseModel, frozen=True):
    """Speech-to-text provider configuration."""

    provider: Literal["openai", "assemblyai"] = "openai"
    api_key: str = ""
    api_url: str = OPENAI_TRANSCRIPTION_URL
    model: str = "whisper-1"
    timeout: float = 120.0
    assemblyai_api_key: str = ""


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3880
    cors_origin: str = "http://localhost:3000"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    storage: StorageConfig
    transcription: TranscriptionConfig
    server: ServerConfig


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If DATABASE_URL is not set.
    """
    database_url = os.getenv("DATABASE_URL", "")
    if not database_url:
        logger.critical("DATABASE_URL is missing, refusing to start")
        raise ConfigurationError("DATABASE_URL")

    transcription = TranscriptionConfig(
        provider=os.getenv("TRANSCRIPTION_PROVIDER", "openai"),
        api_key=os.getenv("OPENAI_API_KEY", ""),
        api_url=os.getenv("TRANSCRIPTION_API_URL", OPENAI_TRANSCRIPTION_URL),
        model=os.getenv("TRANSCRIPTION_MODEL", "whisper-1"),
        timeout=float(os.getenv("TRANSCRIPTION_TIMEOUT", "120")),
        assemblyai_api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
    )
    active_key = (
        transcription.assemblyai_api_key
        if transcription.provider == "assemblyai"
        else transcription.api_key
    )
    if not active_key:
        logger.warning(
            "Transcription API key is missing, transcription calls will fail",
            extra={"provider": transcription.provider},
        )

    return AppConfig(
        database=DatabaseConfig(url=database_url),
        storage=StorageConfig(
            upload_dir=Path(os.getenv("UPLOAD_DIR", "uploads")),
            url_prefix=os.getenv("UPLOADS_URL_PREFIX", "/uploads"),
        ),
        transcription=transcription,
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3880")),
            cors_origin=os.getenv("CORS_ORIGIN", "http://localhost:3000"),
        ),
    )
