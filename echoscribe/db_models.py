from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Column, DateTime
from sqlalchemy.types import Text
from sqlmodel import Field, SQLModel


class Note(SQLModel, table=True):
    __tablename__ = "notes"

    id: Optional[UUID] = Field(default=None, primary_key=True)
    title: str = Field(sa_column=Column(Text, nullable=False))
    transcript: str = Field(sa_column=Column(Text, nullable=False))
    audio_reference: str = Field(sa_column=Column(Text, nullable=False))
    original_filename: str = Field(sa_column=Column(Text, nullable=False))
    created_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
    updated_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
