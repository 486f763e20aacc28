"""
Core data types shared by the section parser and the content formatter.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Union

SECTION_KEYS = ("subjective", "objective", "assessment", "plan")


@dataclass(frozen=True)
class SOAPSegments:
    """The raw text of the four SOAP sections, possibly empty."""
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in SECTION_KEYS}


@dataclass(frozen=True)
class PlainRun:
    """A line rendered verbatim."""
    text: str
    line_break: bool = False
    kind: Literal["plain"] = field(default="plain", init=False)


@dataclass(frozen=True)
class HeadingRun:
    """A line with an emphasized label, e.g. "1. " + "Diagnosis:" + " viral URI"."""
    prefix: str
    label: str
    rest: str
    line_break: bool = False
    kind: Literal["heading"] = field(default="heading", init=False)


Fragment = Union[PlainRun, HeadingRun]


@dataclass(frozen=True)
class RenderedSection:
    key: str
    letter: str
    title: str
    content: str
    fragments: List[Fragment]


@dataclass(frozen=True)
class RenderedNote:
    transcription: str
    segments: SOAPSegments
    sections: List[RenderedSection]
