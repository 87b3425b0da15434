"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_path: Path) -> str:
        """
        Transcribes a stored audio file into plain text.

        Args:
            audio_path: Path of the audio file in the audio store.

        Returns:
            The non-empty transcript text.

        Raises:
            TranscriptionError: If the provider call fails, times out or
                returns a malformed response.
        """
