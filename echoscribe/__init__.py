"""EchoScribe: upload audio, transcribe it and keep the resulting notes."""

__version__ = "0.1.0"
