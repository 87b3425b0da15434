"""AssemblyAI implementation of the TranscriptionService interface."""

from pathlib import Path

import assemblyai as aai

from echoscribe.exceptions import TranscriptionError
from echoscribe.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio_path: Path) -> str:
        """
        Transcribes a stored audio file using AssemblyAI.

        The SDK uploads the local file itself and polls until the
        transcript is ready.
        """
        audio_path = Path(audio_path)
        try:
            transcription = self._transcriber.transcribe(str(audio_path))

            if transcription.status == aai.TranscriptStatus.error:
                raise TranscriptionError(audio_path.name, Exception(transcription.error))

            if not transcription.text:
                raise TranscriptionError(
                    audio_path.name,
                    Exception("Transcription returned no text"),
                )

            logger.info(
                "Audio transcription successful",
                extra={"file_name": audio_path.name, "characters": len(transcription.text)},
            )
            return transcription.text

        except TranscriptionError:
            logger.error(
                "AssemblyAI transcription failed",
                extra={"file_name": audio_path.name},
            )
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError(audio_path.name, e) from e
