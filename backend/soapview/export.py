"""
Export helpers for a generated note.

Both exports work on the raw transcription / SOAP note pair, never on the
parsed sections, so the exported text is exactly what the service returned.
"""
import time
from datetime import datetime
from typing import Optional

from .schemas import ClinicalNote

SEPARATOR = "=" * 60
DOWNLOAD_HEADER = "CLINICAL NOTE - SOAP FORMAT"


def build_clipboard_text(note: ClinicalNote) -> str:
    return f"TRANSCRIPTION:\n{note.transcription}\n\nSOAP NOTE:\n{note.soap_note}"


def format_generated_at(timestamp: datetime) -> str:
    """Format a timestamp as e.g. 03/14/2025, 09:26:53 AM."""
    return timestamp.strftime("%m/%d/%Y, %I:%M:%S %p")


def build_download_text(note: ClinicalNote) -> str:
    """
    Build the contents of the downloadable text file: a header banner with
    the generation time, then the transcription and the raw SOAP note.
    """
    return (
        f"{DOWNLOAD_HEADER}\n"
        f"Generated: {format_generated_at(note.timestamp)}\n\n"
        f"{SEPARATOR}\n\n"
        f"TRANSCRIPTION:\n{note.transcription}\n\n"
        f"{SEPARATOR}\n\n"
        f"SOAP NOTE:\n{note.soap_note}"
    )


def build_download_filename(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"clinical-note-{now_ms}.txt"
