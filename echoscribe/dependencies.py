"""FastAPI dependency injection configuration."""

from typing import Annotated, Generator

import assemblyai as aai
import httpx
from fastapi import Depends
from sqlmodel import Session as DBSession
from sqlmodel import SQLModel, create_engine

from echoscribe.config import AppConfig, load_config
from echoscribe.handlers import TranscriptionRequestHandler
from echoscribe.infrastructure import (
    AssemblyAITranscriber,
    LocalAudioStore,
    OpenAITranscriber,
)
from echoscribe.infrastructure.interfaces import AudioStore, TranscriptionService
from echoscribe.logging import setup_logging
from echoscribe.repositories import NoteRepository

logger = setup_logging()

_config = load_config()
_engine = create_engine(_config.database.url, pool_pre_ping=True)

_audio_store = LocalAudioStore(_config.storage.upload_dir, _config.storage.url_prefix)
_audio_store.ensure_directory_exists()


def _build_transcription_service(config: AppConfig) -> TranscriptionService:
    if config.transcription.provider == "assemblyai":
        aai.settings.api_key = config.transcription.assemblyai_api_key
        aai.settings.http_timeout = config.transcription.timeout
        return AssemblyAITranscriber(aai.Transcriber(config=aai.TranscriptionConfig()))

    http_client = httpx.Client(timeout=config.transcription.timeout)
    return OpenAITranscriber(
        http_client,
        api_url=config.transcription.api_url,
        api_key=config.transcription.api_key,
        model=config.transcription.model,
    )


_transcription_service = _build_transcription_service(_config)
logger.info(
    "Transcription service configured",
    extra={"provider": _config.transcription.provider},
)


def init_database() -> None:
    """Creates missing tables."""
    SQLModel.metadata.create_all(_engine)
    logger.info("Database tables ensured")


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_db_session() -> Generator[DBSession, None, None]:
    """Yields a database session, ensuring proper cleanup."""
    with DBSession(_engine) as session:
        yield session


def get_note_repository(
    db_session: Annotated[DBSession, Depends(get_db_session)],
) -> NoteRepository:
    """Creates a NoteRepository with the provided database session."""
    return NoteRepository(db_session)


def get_audio_store() -> AudioStore:
    """Returns the configured audio store."""
    return _audio_store


def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    return _transcription_service


def get_handler(
    audio_store: Annotated[AudioStore, Depends(get_audio_store)],
    transcription_service: Annotated[
        TranscriptionService, Depends(get_transcription_service)
    ],
    repository: Annotated[NoteRepository, Depends(get_note_repository)],
) -> TranscriptionRequestHandler:
    """Returns a request handler wired to the configured collaborators."""
    return TranscriptionRequestHandler(audio_store, transcription_service, repository)
