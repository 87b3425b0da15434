from .note_repository import NoteRepository

__all__ = ["NoteRepository"]
