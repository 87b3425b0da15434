"""Local filesystem implementation of the AudioStore interface."""

import shutil
import time
import uuid
from pathlib import Path, PurePath
from typing import BinaryIO

from echoscribe.exceptions import AudioStoreError
from echoscribe.logging import setup_logging

from .interfaces import AudioStore

logger = setup_logging()

_FALLBACK_NAME = "audio"


class LocalAudioStore(AudioStore):
    """Keeps uploaded audio files in a single directory served as static files."""

    def __init__(self, directory: Path, url_prefix: str = "/uploads"):
        self._directory = Path(directory)
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def directory(self) -> Path:
        return self._directory

    def store(self, data: BinaryIO, suggested_name: str) -> Path:
        file_name = self._unique_name(suggested_name)
        stored_path = self._directory / file_name
        try:
            # "xb" so two writers can never share a file.
            with open(stored_path, "xb") as destination:
                shutil.copyfileobj(data, destination)
        except OSError as e:
            logger.exception(
                "Audio file write failed",
                extra={"file_name": file_name, "directory": str(self._directory)},
            )
            raise AudioStoreError(file_name, e) from e

        logger.info(
            "Audio file stored",
            extra={"file_name": file_name, "size": stored_path.stat().st_size},
        )
        return stored_path

    def remove(self, stored_path: Path) -> None:
        try:
            Path(stored_path).unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise AudioStoreError(Path(stored_path).name, e) from e
        logger.info("Audio file removed", extra={"file_name": Path(stored_path).name})

    def public_url(self, stored_path: Path) -> str:
        return f"{self._url_prefix}/{Path(stored_path).name}"

    def ensure_directory_exists(self) -> None:
        if not self._directory.exists():
            self._directory.mkdir(parents=True, exist_ok=True)
            logger.info("Upload directory created", extra={"directory": str(self._directory)})
        else:
            logger.info("Upload directory already exists", extra={"directory": str(self._directory)})

    def _unique_name(self, suggested_name: str) -> str:
        """Prefixes the bare file name with epoch millis and a random token."""
        base_name = PurePath(suggested_name.replace("\\", "/")).name or _FALLBACK_NAME
        if base_name in (".", ".."):
            base_name = _FALLBACK_NAME
        millis = time.time_ns() // 1_000_000
        return f"{millis}-{uuid.uuid4().hex[:8]}-{base_name}"
