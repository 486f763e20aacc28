import mimetypes
import os
from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from .config import get_settings
from .schemas import ClinicalNote

GENERIC_FAILURE_MESSAGE = "Failed to process audio file"
MISSING_FILE_MESSAGE = "Please select an audio file"


class NoteUploadError(RuntimeError):
    """Raised when the audio upload or the returned payload fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NoteUploadClient:
    """
    Client for the note generation service: uploads one audio recording and
    returns the transcription / SOAP note payload.
    """
    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the upload client.

        Args:
            endpoint: Base URL of the service, defaults to NOTE_API_ENDPOINT
            timeout: Request timeout in seconds, defaults to UPLOAD_TIMEOUT
            transport: Optional httpx transport, used to stub the service in tests
        """
        settings = get_settings()
        self.endpoint = endpoint or settings.NOTE_API_ENDPOINT
        self.timeout = timeout if timeout is not None else settings.UPLOAD_TIMEOUT
        self.transport = transport

    @property
    def upload_url(self) -> str:
        if self.endpoint.endswith("/"):
            return f"{self.endpoint}upload-audio"
        return f"{self.endpoint}/upload-audio"

    async def upload_audio(self, audio_path: Optional[str]) -> ClinicalNote:
        """
        Upload an audio file and return the generated clinical note.

        Args:
            audio_path: Path of the recording to upload

        Returns:
            The validated transcription, SOAP note and timestamp

        Raises:
            NoteUploadError: If the file is missing, the service answers with a
                non-success status, or the response is not a valid payload
        """
        if not audio_path or not os.path.isfile(audio_path):
            raise NoteUploadError(MISSING_FILE_MESSAGE)

        filename = os.path.basename(audio_path)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"

        try:
            with open(audio_path, "rb") as audio_file:
                files = {"file": (filename, audio_file, content_type)}
                async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                    logger.info(f"Uploading {filename} to {self.upload_url}")
                    response = await client.post(self.upload_url, files=files)
        except httpx.HTTPError as e:
            logger.error(f"Audio upload failed: {e}")
            raise NoteUploadError(GENERIC_FAILURE_MESSAGE) from e

        if not response.is_success:
            logger.error(f"Note service error: {response.status_code} - {response.text}")
            raise NoteUploadError(f"Server error: {response.status_code}", status_code=response.status_code)

        try:
            note = ClinicalNote.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed note payload: {e}")
            raise NoteUploadError(GENERIC_FAILURE_MESSAGE, status_code=response.status_code) from e

        logger.info("Clinical note received successfully.")
        return note
