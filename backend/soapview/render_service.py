from typing import List
from loguru import logger

from .formatter import format_section_content
from .models import RenderedNote, RenderedSection, SECTION_KEYS
from .section_parser import parse_soap_note

# Display metadata per section: (letter, title)
SECTION_DISPLAY = {
    "subjective": ("S", "Subjective - Patient History"),
    "objective": ("O", "Objective - Clinical Findings"),
    "assessment": ("A", "Assessment - Diagnosis & Analysis"),
    "plan": ("P", "Plan - Treatment & Management"),
}


def render_note(soap_note: str, transcription: str = "") -> RenderedNote:
    """
    Parse a raw SOAP note and format every non-empty section for display.

    Args:
        soap_note: The raw note body returned by the note generation service
        transcription: The transcription, passed through untouched

    Returns:
        The parsed segments plus the rendered sections in S, O, A, P order.
        Sections with nothing to display are left out.
    """
    segments = parse_soap_note(soap_note)

    sections: List[RenderedSection] = []
    for key in SECTION_KEYS:
        content = getattr(segments, key)
        fragments = list(format_section_content(content))
        if not fragments:
            continue
        letter, title = SECTION_DISPLAY[key]
        sections.append(
            RenderedSection(
                key=key,
                letter=letter,
                title=title,
                content=content,
                fragments=fragments,
            )
        )

    logger.info(f"Rendered SOAP note with {len(sections)} non-empty sections")
    return RenderedNote(transcription=transcription, segments=segments, sections=sections)
