import re
from .base import HeaderConventionMatcher


class FullWordConventionMatcher(HeaderConventionMatcher):
    """
    Notes headed with SUBJECTIVE:, OBJECTIVE:, ASSESSMENT: and PLAN:.
    Any occurrence of SUBJECTIVE: selects this convention.
    """

    name = "full_word"
    headers = {
        "subjective": "SUBJECTIVE:",
        "objective": "OBJECTIVE:",
        "assessment": "ASSESSMENT:",
        "plan": "PLAN:",
    }
    detect_pattern = re.compile(r"SUBJECTIVE:", re.IGNORECASE)
