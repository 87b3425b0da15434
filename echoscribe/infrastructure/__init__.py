"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .local_audio_store import LocalAudioStore
from .openai_transcriber import OpenAITranscriber

__all__ = ["LocalAudioStore", "OpenAITranscriber", "AssemblyAITranscriber"]
