"""
Turns the loosely structured text of one SOAP section into renderable fragments.

Generated notes mix prose, dash separated clauses and ad-hoc sub-headings such as
"Chief Complaint:" or "1. Diagnosis:". The text is first normalized so every
implicit list item sits on its own bullet line, then each line is classified as
plain text or as a heading line whose label should be emphasized.
"""
import re
from typing import Iterable, Iterator, Optional

from .models import Fragment, HeadingRun, PlainRun

BULLET = "• "
MARKDOWN_LINE_BREAK = "  \n"

# " - " used as a list delimiter, possibly spanning a line break
_IMPLICIT_BULLET_RE = re.compile(r"\s+-\s+")
# the same delimiter inside a single line
_INLINE_BULLET_RE = re.compile(r"[^\S\n]+-[^\S\n]+")
_LEADING_BULLET_RE = re.compile(r"^\s*•\s*")
_LIST_ITEM_RE = re.compile(r"^(?:[•\-]|\d+\.)")
_HEADING_RE = re.compile(r"^(•\s*|\d+\.\s*)?([A-Za-z\s/]+:)(.*)$")


def _bullet_first_item(line: str) -> str:
    match = _INLINE_BULLET_RE.search(line)
    if not match:
        return line
    stripped = line.lstrip()
    head = line[:match.start()].strip()
    # "Plan: - rest - fluids" introduces the list rather than being an item of it
    if not head or head.endswith(":") or _LIST_ITEM_RE.match(stripped):
        return line
    indent = line[:len(line) - len(stripped)]
    return indent + BULLET + stripped


def normalize_bullets(content: str) -> str:
    """
    Rewrite dash separated clauses as bullet lines.

    "take ibuprofen - rest - follow up" becomes three lines, each starting with
    "• ". A bullet already leading the text is normalized to exactly "• ".

    Args:
        content: Raw text of one section

    Returns:
        The normalized text, trimmed
    """
    lines = [_bullet_first_item(line) for line in content.split("\n")]
    text = _IMPLICIT_BULLET_RE.sub("\n" + BULLET, "\n".join(lines))
    text = _LEADING_BULLET_RE.sub(BULLET, text, count=1)
    return text.strip()


def _tokenize_line(line: str, line_break: bool) -> Fragment:
    match = _HEADING_RE.match(line)
    if match:
        prefix, label, rest = match.groups()
        return HeadingRun(prefix=prefix or "", label=label, rest=rest, line_break=line_break)
    return PlainRun(text=line, line_break=line_break)


def format_section_content(content: Optional[str]) -> Iterator[Fragment]:
    """
    Lazily yield the fragments of one section, one per normalized line.

    Empty lines are kept as empty PlainRun fragments. Every fragment except the
    last has line_break set so the renderer can restore the line structure.

    Args:
        content: Raw text of one section, empty or None for a missing section

    Yields:
        PlainRun or HeadingRun fragments in line order
    """
    if not content:
        return
    normalized = normalize_bullets(content)
    if not normalized:
        return

    lines = normalized.split("\n")
    last = len(lines) - 1
    for idx, line in enumerate(lines):
        yield _tokenize_line(line, line_break=idx < last)


def fragments_to_markdown(fragments: Iterable[Fragment]) -> str:
    """
    Render fragments as Markdown with bold heading labels.

    A fragment with line_break ends in a Markdown hard break (two trailing
    spaces before the newline).
    """
    parts = []
    for fragment in fragments:
        if isinstance(fragment, HeadingRun):
            label = fragment.label.lstrip()
            # emphasis cannot open on whitespace
            lead = fragment.label[:len(fragment.label) - len(label)]
            parts.append(f"{fragment.prefix}{lead}**{label}**{fragment.rest}")
        else:
            parts.append(fragment.text)
        if fragment.line_break:
            parts.append(MARKDOWN_LINE_BREAK)
    return "".join(parts)
