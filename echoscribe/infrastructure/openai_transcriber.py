"""Whisper-compatible HTTP implementation of the TranscriptionService interface."""

from pathlib import Path

import httpx

from echoscribe.exceptions import TranscriptionError
from echoscribe.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class OpenAITranscriber(TranscriptionService):
    """
    Sends audio to an OpenAI-style ``/audio/transcriptions`` endpoint.

    The stored file is streamed as the ``file`` part of a multipart request,
    next to the ``model`` field, with a bearer token for authentication.
    """

    def __init__(self, client: httpx.Client, api_url: str, api_key: str, model: str):
        self._client = client
        self._api_url = api_url
        self._api_key = api_key
        self._model = model

    def transcribe(self, audio_path: Path) -> str:
        audio_path = Path(audio_path)
        if not self._api_key:
            logger.error(
                "Transcription requested without an API key",
                extra={"file_name": audio_path.name},
            )
            raise TranscriptionError(audio_path.name, Exception("API key is not configured"))

        try:
            with open(audio_path, "rb") as audio_file:
                response = self._client.post(
                    self._api_url,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    data={"model": self._model},
                    files={"file": (audio_path.name, audio_file)},
                )
            response.raise_for_status()
            text = response.json().get("text")
        except httpx.HTTPStatusError as e:
            logger.exception(
                "Transcription API returned an error",
                extra={
                    "file_name": audio_path.name,
                    "status_code": e.response.status_code,
                    "response_body": e.response.text,
                },
            )
            raise TranscriptionError(audio_path.name, e) from e
        except (httpx.HTTPError, OSError, ValueError, AttributeError) as e:
            logger.exception(
                "Transcription API call failed",
                extra={"file_name": audio_path.name},
            )
            raise TranscriptionError(audio_path.name, e) from e

        if not isinstance(text, str) or not text.strip():
            logger.error(
                "Transcription API returned no text",
                extra={"file_name": audio_path.name},
            )
            raise TranscriptionError(audio_path.name, Exception("Transcription returned no text"))

        logger.info(
            "Audio transcription successful",
            extra={"file_name": audio_path.name, "characters": len(text)},
        )
        return text
