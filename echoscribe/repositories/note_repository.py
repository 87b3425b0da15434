"""Repository for note data access."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session as DBSession
from sqlmodel import select

from echoscribe.db_models import Note
from echoscribe.exceptions import PersistenceError
from echoscribe.logging import setup_logging
from echoscribe.response_models import NoteResponse

logger = setup_logging()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NoteRepository:
    """
    Handles all database operations for notes.

    Encapsulates SQL queries and returns response models,
    keeping the HTTP layer free of database concerns.
    """

    def __init__(self, db_session: DBSession, clock: Callable[[], datetime] = _utcnow):
        self._db = db_session
        self._clock = clock

    def insert(self, note: Note) -> NoteResponse:
        """
        Persists a new note, assigning its id and timestamps.

        Raises:
            PersistenceError: If the database rejects or fails the insert.
        """
        now = self._clock()
        note.id = uuid4()
        note.created_at = now
        note.updated_at = now

        try:
            self._db.add(note)
            self._db.commit()
            self._db.refresh(note)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(
                "Note insert failed",
                extra={"title": note.title, "audio_reference": note.audio_reference},
            )
            raise PersistenceError("insert", e) from e

        stored = NoteResponse.model_validate(note)
        logger.info("Note saved", extra={"note_id": str(stored.id)})
        return stored

    def list_all(self) -> List[NoteResponse]:
        """
        Retrieves every note, newest first.

        Raises:
            PersistenceError: If the query fails.
        """
        statement = select(Note).order_by(Note.created_at.desc())
        try:
            results = self._db.exec(statement).all()
            return [NoteResponse.model_validate(note) for note in results]
        except SQLAlchemyError as e:
            logger.exception("Note listing failed")
            raise PersistenceError("list_all", e) from e
