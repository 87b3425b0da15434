"""Custom exceptions for the echoscribe service."""


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Required environment variable '{variable}' is not set")


class ValidationError(Exception):
    """Raised when a request is missing required input."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AudioStoreError(Exception):
    """Raised when writing or removing a stored audio file fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Audio store operation failed for '{file_name}'")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class PersistenceError(Exception):
    """Raised when the note storage layer fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Note storage failed during '{operation}'")
