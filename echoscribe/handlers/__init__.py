from .transcription_handler import TranscriptionRequestHandler

__all__ = ["TranscriptionRequestHandler"]
