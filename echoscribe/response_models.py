"""Response models for the notes API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NoteResponse(BaseModel):
    """A persisted note as returned to API callers."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: UUID
    title: str
    transcript: str
    audio_reference: str
    original_filename: str
    created_at: datetime
    updated_at: datetime


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
