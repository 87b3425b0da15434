"""Note-related API endpoints."""

from typing import Annotated, List, Optional, Union

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from echoscribe.dependencies import get_handler
from echoscribe.exceptions import (
    AudioStoreError,
    PersistenceError,
    TranscriptionError,
    ValidationError,
)
from echoscribe.handlers import TranscriptionRequestHandler
from echoscribe.logging import setup_logging
from echoscribe.response_models import ErrorResponse, NoteResponse

logger = setup_logging()

router = APIRouter(prefix="/api/notes", tags=["notes"])

HandlerDep = Annotated[TranscriptionRequestHandler, Depends(get_handler)]

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("", response_model=List[NoteResponse], responses=_ERROR_RESPONSES)
def list_notes(handler: HandlerDep):
    """Returns all transcribed notes, newest first."""
    try:
        return handler.list_notes()
    except PersistenceError as e:
        logger.error(f"Error fetching notes: {e.cause}")
        raise HTTPException(status_code=500, detail="Server error while fetching notes.")


@router.post(
    "/transcribe",
    status_code=201,
    response_model=NoteResponse,
    responses=_ERROR_RESPONSES,
)
def transcribe_note(
    handler: HandlerDep,
    audio: Annotated[Union[UploadFile, str, None], File()] = None,
    title: Annotated[Optional[str], Form()] = None,
):
    """
    Uploads an audio file, transcribes it and saves the note.

    Returns the created note.
    """
    # A plain text "audio" field carries no file.
    upload = audio if isinstance(audio, UploadFile) else None
    try:
        return handler.create_note_from_upload(
            data=upload.file if upload is not None else None,
            filename=upload.filename if upload is not None else None,
            title=title,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except TranscriptionError as e:
        logger.error(f"Transcription error for '{e.file_name}': {e.cause}")
        raise HTTPException(status_code=500, detail="Failed to transcribe audio.")
    except (PersistenceError, AudioStoreError) as e:
        logger.error(f"Server error during transcription: {e}: {e.cause}")
        raise HTTPException(
            status_code=500, detail="Server error during transcription process."
        )
