from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from loguru import logger

from ..export import build_clipboard_text, build_download_filename, build_download_text
from ..render_service import render_note
from ..schemas import (
    ClinicalNote,
    ParseRequest,
    RenderedNoteResponse,
    SOAPSegmentsResponse,
    build_rendered_response,
)
from ..section_parser import parse_soap_note

# Create router
router = APIRouter(
    prefix="/api/notes",
    tags=["notes"],
)


@router.post("/parse", response_model=SOAPSegmentsResponse)
async def parse_note(request: ParseRequest):
    """
    Split a raw SOAP note into its four sections.
    """
    try:
        return SOAPSegmentsResponse.from_segments(parse_soap_note(request.soap_note))
    except Exception as e:
        logger.exception(f"Error parsing SOAP note: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Parsing failed: {str(e)}")


@router.post("/render", response_model=RenderedNoteResponse)
async def render_clinical_note(note: ClinicalNote):
    """
    Render a clinical note for display.

    Args:
        note: The payload returned by the note generation service

    Returns:
        The parsed sections with their display fragments, plus the clipboard text
    """
    try:
        rendered = render_note(note.soap_note, note.transcription)
        return build_rendered_response(
            rendered,
            timestamp=note.timestamp,
            clipboard_text=build_clipboard_text(note),
        )
    except Exception as e:
        logger.exception(f"Error rendering clinical note: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Rendering failed: {str(e)}")


@router.post("/export", response_class=PlainTextResponse)
async def export_clinical_note(note: ClinicalNote):
    """
    Download the transcription and raw SOAP note as a text file.
    """
    filename = build_download_filename()
    logger.info(f"Exporting clinical note as {filename}")
    return PlainTextResponse(
        content=build_download_text(note),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
