"""
Pydantic models for API schemas
"""
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field
from datetime import datetime

from .formatter import fragments_to_markdown
from .models import HeadingRun, PlainRun, RenderedNote, SOAPSegments


# Payload returned by the upload / note generation service
class ClinicalNote(BaseModel):
    transcription: str
    soap_note: str
    timestamp: datetime


# Parse models
class ParseRequest(BaseModel):
    soap_note: str


class SOAPSegmentsResponse(BaseModel):
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""

    @classmethod
    def from_segments(cls, segments: SOAPSegments) -> "SOAPSegmentsResponse":
        return cls(**segments.as_dict())


# Render models
class PlainRunSchema(BaseModel):
    kind: Literal["plain"] = "plain"
    text: str
    line_break: bool = False


class HeadingRunSchema(BaseModel):
    kind: Literal["heading"] = "heading"
    prefix: str = ""
    label: str
    rest: str = ""
    line_break: bool = False


FragmentSchema = Annotated[Union[PlainRunSchema, HeadingRunSchema], Field(discriminator="kind")]


class RenderedSectionResponse(BaseModel):
    key: str
    letter: str
    title: str
    content: str
    markdown: str
    fragments: List[FragmentSchema] = []


class RenderedNoteResponse(BaseModel):
    transcription: str
    timestamp: Optional[datetime] = None
    segments: SOAPSegmentsResponse
    sections: List[RenderedSectionResponse] = []
    clipboard_text: str = ""


def fragment_to_schema(fragment: Union[PlainRun, HeadingRun]) -> FragmentSchema:
    if isinstance(fragment, HeadingRun):
        return HeadingRunSchema(
            prefix=fragment.prefix,
            label=fragment.label,
            rest=fragment.rest,
            line_break=fragment.line_break,
        )
    return PlainRunSchema(text=fragment.text, line_break=fragment.line_break)


def build_rendered_response(
    rendered: RenderedNote,
    timestamp: Optional[datetime] = None,
    clipboard_text: str = "",
) -> RenderedNoteResponse:
    """Convert a RenderedNote into its API representation."""
    return RenderedNoteResponse(
        transcription=rendered.transcription,
        timestamp=timestamp,
        segments=SOAPSegmentsResponse.from_segments(rendered.segments),
        sections=[
            RenderedSectionResponse(
                key=section.key,
                letter=section.letter,
                title=section.title,
                content=section.content,
                markdown=fragments_to_markdown(section.fragments),
                fragments=[fragment_to_schema(fragment) for fragment in section.fragments],
            )
            for section in rendered.sections
        ],
        clipboard_text=clipboard_text,
    )
