"""Infrastructure interface exports."""

from .audio_store import AudioStore
from .transcription_service import TranscriptionService

__all__ = ["AudioStore", "TranscriptionService"]
