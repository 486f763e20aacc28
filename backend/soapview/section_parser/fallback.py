from .base import BaseConventionMatcher
from ..models import SOAPSegments


class FallbackConventionMatcher(BaseConventionMatcher):
    """
    Accepts every note and shows it as one block under Subjective, untouched.
    """

    name = "fallback"

    def matches(self, note: str) -> bool:
        return True

    def extract(self, note: str) -> SOAPSegments:
        return SOAPSegments(subjective=note)
