from pathlib import Path

import assemblyai as aai

from echoscribe.config import (
    AppConfig,
    DatabaseConfig,
    ServerConfig,
    StorageConfig,
    TranscriptionConfig,
)
from echoscribe.dependencies import (
    _build_transcription_service,
    get_audio_store,
    get_config,
)
from echoscribe.infrastructure import AssemblyAITranscriber, OpenAITranscriber


def _config(**transcription):
    return AppConfig(
        database=DatabaseConfig(url="sqlite://"),
        storage=StorageConfig(),
        transcription=TranscriptionConfig(**transcription),
        server=ServerConfig(),
    )


def test_openai_provider_is_default():
    service = _build_transcription_service(_config(api_key="sk-test"))

    assert isinstance(service, OpenAITranscriber)


def test_assemblyai_provider_can_be_selected():
    service = _build_transcription_service(
        _config(provider="assemblyai", assemblyai_api_key="aai-test")
    )

    assert isinstance(service, AssemblyAITranscriber)


def test_assemblyai_provider_uses_configured_timeout():
    _build_transcription_service(
        _config(provider="assemblyai", assemblyai_api_key="aai-test", timeout=45.0)
    )

    assert aai.settings.http_timeout == 45.0


def test_audio_store_directory_created_at_startup():
    store = get_audio_store()

    assert store.directory == Path(get_config().storage.upload_dir)
    assert store.directory.is_dir()
