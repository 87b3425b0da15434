import os
import tempfile
from pathlib import Path

_UPLOAD_DIR = tempfile.mkdtemp(prefix="echoscribe-uploads-")

# Must be set before any echoscribe module is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = _UPLOAD_DIR
os.environ["OPENAI_API_KEY"] = "test-key"
os.environ["DD_TRACE_ENABLED"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session as DBSession  # noqa: E402
from sqlmodel import SQLModel, create_engine  # noqa: E402

from echoscribe.dependencies import (  # noqa: E402
    get_audio_store,
    get_db_session,
    get_transcription_service,
)
from echoscribe.exceptions import TranscriptionError  # noqa: E402
from echoscribe.infrastructure import LocalAudioStore  # noqa: E402
from echoscribe.infrastructure.interfaces import TranscriptionService  # noqa: E402
from echoscribe.main import app  # noqa: E402


class FakeTranscriber(TranscriptionService):
    """Returns a fixed transcript, or raises the configured error."""

    def __init__(self, text: str = "Remember to buy milk."):
        self.text = text
        self.error: Exception | None = None
        self.calls: list[Path] = []

    def transcribe(self, audio_path: Path) -> str:
        self.calls.append(Path(audio_path))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with DBSession(engine) as session:
        yield session


@pytest.fixture
def fake_transcriber():
    return FakeTranscriber()


@pytest.fixture
def failing_transcriber():
    transcriber = FakeTranscriber()
    transcriber.error = TranscriptionError(
        "audio.mp3", Exception("provider unavailable")
    )
    return transcriber


@pytest.fixture
def audio_store(tmp_path):
    store = LocalAudioStore(tmp_path / "uploads", "/uploads")
    store.ensure_directory_exists()
    return store


@pytest.fixture
def upload_dir():
    """The directory the application serves under /uploads, emptied per test."""
    directory = get_audio_store().directory
    for path in directory.iterdir():
        path.unlink()
    yield directory
    for path in directory.iterdir():
        path.unlink()


@pytest.fixture
def client(engine, fake_transcriber, upload_dir):
    def _db_session():
        with DBSession(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _db_session
    app.dependency_overrides[get_transcription_service] = lambda: fake_transcriber
    yield TestClient(app)
    app.dependency_overrides.clear()
