"""Abstract interface for uploaded audio storage."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class AudioStore(ABC):
    """Abstract base class for audio file storage backends."""

    @abstractmethod
    def store(self, data: BinaryIO, suggested_name: str) -> Path:
        """
        Writes an uploaded audio file under a unique name.

        Args:
            data: File-like object positioned at the start of the audio.
            suggested_name: The filename submitted by the caller.

        Returns:
            Path of the stored file.

        Raises:
            AudioStoreError: If the file cannot be written.
        """

    @abstractmethod
    def remove(self, stored_path: Path) -> None:
        """
        Deletes a stored file. Does nothing if it is already gone.

        Raises:
            AudioStoreError: If the file exists but cannot be deleted.
        """

    @abstractmethod
    def public_url(self, stored_path: Path) -> str:
        """Returns the URL path the stored file is served under."""

    @abstractmethod
    def ensure_directory_exists(self) -> None:
        """Creates the storage location if it is missing."""
