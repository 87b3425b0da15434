"""Handler orchestrating upload, transcription and note persistence."""

from pathlib import Path
from typing import BinaryIO, List, Optional

from echoscribe.db_models import Note
from echoscribe.exceptions import (
    AudioStoreError,
    PersistenceError,
    TranscriptionError,
    ValidationError,
)
from echoscribe.infrastructure.interfaces import AudioStore, TranscriptionService
from echoscribe.logging import setup_logging
from echoscribe.repositories import NoteRepository
from echoscribe.response_models import NoteResponse

logger = setup_logging()

NO_AUDIO_MESSAGE = "No audio file was uploaded."
DEFAULT_FILENAME = "audio"


class TranscriptionRequestHandler:
    """Orchestrates audio-to-note operations for a single request."""

    def __init__(
        self,
        audio_store: AudioStore,
        transcription_service: TranscriptionService,
        repository: NoteRepository,
    ):
        self._audio_store = audio_store
        self._transcription_service = transcription_service
        self._repository = repository

    def list_notes(self) -> List[NoteResponse]:
        """
        Returns all notes, newest first.

        Raises:
            PersistenceError: If the notes cannot be read.
        """
        return self._repository.list_all()

    def create_note_from_upload(
        self,
        data: Optional[BinaryIO],
        filename: Optional[str],
        title: Optional[str] = None,
    ) -> NoteResponse:
        """
        Stores an uploaded audio file, transcribes it and saves the note.

        Args:
            data: The uploaded audio, or None if nothing was sent.
            filename: The filename submitted by the caller.
            title: Optional display title.

        Returns:
            The persisted note.

        Raises:
            ValidationError: If no audio file was uploaded.
            AudioStoreError: If the audio file cannot be written.
            TranscriptionError: If transcription fails. The stored file is kept.
            PersistenceError: If the note cannot be saved. The stored file is
                removed here, as it is for any other failure while saving.
        """
        if data is None:
            raise ValidationError(NO_AUDIO_MESSAGE)

        original_filename = filename or DEFAULT_FILENAME
        logger.info(
            "Received transcription request",
            extra={"original_filename": original_filename, "has_title": bool(title)},
        )

        stored_path = self._audio_store.store(data, original_filename)

        try:
            transcript = self._transcription_service.transcribe(stored_path)
        except TranscriptionError:
            logger.error(
                "Transcription failed, keeping uploaded audio",
                extra={"stored_file": stored_path.name},
            )
            raise

        note = Note(
            title=(title or "").strip() or f"Note: {original_filename}",
            transcript=transcript,
            audio_reference=self._audio_store.public_url(stored_path),
            original_filename=original_filename,
        )

        try:
            saved = self._repository.insert(note)
        except Exception:
            self._discard(stored_path)
            raise

        logger.info(
            "Note created from upload",
            extra={"note_id": str(saved.id), "stored_file": stored_path.name},
        )
        return saved

    def _discard(self, stored_path: Path) -> None:
        """Removes an orphaned upload. Failures are logged only."""
        try:
            self._audio_store.remove(stored_path)
        except AudioStoreError:
            logger.exception(
                "Failed to remove orphaned audio file",
                extra={"stored_file": stored_path.name},
            )
