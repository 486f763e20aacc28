import re
from .base import HeaderConventionMatcher


class AbbreviatedConventionMatcher(HeaderConventionMatcher):
    """
    Notes headed with S:, O:, A: and P:. Selected only when the note opens
    with S: (leading whitespace allowed).

    A marker only counts at the start of the text or after whitespace, so the
    "s:" ending "Diagnosis:" is not taken for a header.
    """

    name = "abbreviated"
    headers = {
        "subjective": "S:",
        "objective": "O:",
        "assessment": "A:",
        "plan": "P:",
    }
    marker_prefix = r"(?<!\S)"
    detect_pattern = re.compile(r"\A\s*S:", re.IGNORECASE)
