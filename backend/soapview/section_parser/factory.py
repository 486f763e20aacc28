from typing import Tuple
from loguru import logger

from .base import BaseConventionMatcher
from .full_word import FullWordConventionMatcher
from .abbreviated import AbbreviatedConventionMatcher
from .fallback import FallbackConventionMatcher
from ..models import SOAPSegments

# Cache for the matcher chain
_matchers: Tuple[BaseConventionMatcher, ...] = ()


def get_convention_matchers() -> Tuple[BaseConventionMatcher, ...]:
    """
    Return the header convention matchers in priority order.
    The fallback matcher is always last and accepts any note.

    Returns:
        Ordered tuple of matcher instances
    """
    global _matchers
    if not _matchers:
        _matchers = (
            FullWordConventionMatcher(),
            AbbreviatedConventionMatcher(),
            FallbackConventionMatcher(),
        )
    return _matchers


def parse_soap_note(note: str) -> SOAPSegments:
    """
    Split a raw clinical note into its Subjective, Objective, Assessment and
    Plan segments. Never fails: unrecognized notes land in Subjective.

    Args:
        note: The note body as produced by the note generation service

    Returns:
        The four segments, empty strings for missing sections
    """
    *conventions, fallback = get_convention_matchers()
    for matcher in conventions:
        if matcher.matches(note):
            logger.debug(f"Parsing SOAP note with {matcher.name} convention")
            return matcher.extract(note)
    logger.debug(f"No header convention recognized, using {fallback.name}")
    return fallback.extract(note)
