import re
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..models import SOAPSegments


class BaseConventionMatcher(ABC):
    """A header convention the section parser can recognize."""

    name: str = "base"

    @abstractmethod
    def matches(self, note: str) -> bool:
        """
        Return True when the note is written in this convention.
        """
        pass

    @abstractmethod
    def extract(self, note: str) -> SOAPSegments:
        """
        Split a note written in this convention into the four SOAP segments.
        """
        pass


class HeaderConventionMatcher(BaseConventionMatcher):
    """
    Extracts each section by locating its own header marker and reading up to
    the next occurrence of any other header, or the end of the note.

    Markers are matched case-insensitively on their first occurrence, so a
    missing header only empties its own section.
    """

    headers: Dict[str, str] = {}
    # regex a marker occurrence must be preceded by
    marker_prefix: str = ""
    detect_pattern: Optional[re.Pattern] = None

    def __init__(self):
        self._section_patterns = {
            key: self._compile_section_pattern(key) for key in self.headers
        }

    def _marker(self, marker: str) -> str:
        return self.marker_prefix + re.escape(marker)

    def _compile_section_pattern(self, key: str) -> re.Pattern:
        boundaries = "|".join(
            self._marker(marker) for other, marker in self.headers.items() if other != key
        )
        return re.compile(
            rf"{self._marker(self.headers[key])}\s*(.*?)(?={boundaries}|\Z)",
            re.IGNORECASE | re.DOTALL,
        )

    def matches(self, note: str) -> bool:
        return self.detect_pattern.search(note) is not None

    def extract(self, note: str) -> SOAPSegments:
        sections = {}
        for key, pattern in self._section_patterns.items():
            match = pattern.search(note)
            sections[key] = match.group(1).strip() if match else ""
        return SOAPSegments(**sections)
