"""Segmentation and formatting of generated SOAP clinical notes."""

from .models import SOAPSegments, PlainRun, HeadingRun, Fragment, RenderedNote, RenderedSection
from .section_parser import parse_soap_note
from .formatter import format_section_content, normalize_bullets, fragments_to_markdown
from .render_service import render_note
