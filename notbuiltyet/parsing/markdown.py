"""
Markdown helpers for issue-template bodies.

Issue bodies are written by people filling in a GitHub issue form, so every
helper here is tolerant: missing or oddly shaped input yields an empty result
instead of an error.
"""

import re
from typing import Dict, Optional


# Level-3 heading marker at the start of a line ("### Category")
SECTION_MARKER_RE = re.compile(r"^### ", re.MULTILINE)

_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_RE = re.compile(r"\*([^*]+)\*")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_HEADING_PREFIX_RE = re.compile(r"^#+\s+", re.MULTILINE)
_BULLET_PREFIX_RE = re.compile(r"^\s*[-*]\s+", re.MULTILINE)
_NUMBERED_PREFIX_RE = re.compile(r"^\s*\d+\.\s+", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")
_TRAILING_PARTIAL_WORD_RE = re.compile(r"\s+\S*$")

ELLIPSIS = "..."


def parse_sections(body: Optional[str]) -> Dict[str, str]:
    """
    Split an issue body into a mapping of heading -> section text.

    A section starts at a "### " marker at the start of a line and runs
    until the next marker or the end of the body. Heading and text are
    both trimmed.

    Skipped silently:
    - text before the first marker
    - a marker with nothing after it but the heading (no newline)
    - a marker with an empty heading

    If a heading appears twice, the later section wins.

    Args:
        body: Raw issue body (None is treated as empty).

    Returns:
        Dict of heading -> section text (empty if no sections found).
    """
    sections: Dict[str, str] = {}
    if not body:
        return sections

    # parts[0] is whatever precedes the first marker
    parts = SECTION_MARKER_RE.split(body)
    for part in parts[1:]:
        heading, newline, content = part.partition("\n")
        if not newline:
            continue

        heading = heading.strip()
        if not heading:
            continue

        sections[heading] = content.strip()

    return sections


def first_line(text: Optional[str]) -> str:
    """Return the first line of text, trimmed."""
    if not text:
        return ""
    return text.split("\n", 1)[0].strip()


def strip_markdown(text: Optional[str]) -> str:
    """
    Reduce markdown to plain single-line text.

    Removes bold/italic markers (keeping the text), turns links into their
    link text, drops heading markers and list bullets at line starts, then
    collapses all whitespace to single spaces.

    Args:
        text: Markdown text.

    Returns:
        Plain text on one line.
    """
    if not text:
        return ""

    clean = _BOLD_RE.sub(r"\1", text)
    clean = _ITALIC_RE.sub(r"\1", clean)
    clean = _LINK_RE.sub(r"\1", clean)
    clean = _HEADING_PREFIX_RE.sub("", clean)
    clean = _BULLET_PREFIX_RE.sub("", clean)
    clean = _NUMBERED_PREFIX_RE.sub("", clean)
    return _WHITESPACE_RE.sub(" ", clean).strip()


def truncate(text: str, max_length: int) -> str:
    """
    Shorten text to at most max_length characters plus an ellipsis.

    The cut is moved back to the last whitespace run, dropping the last
    word of the cut even when it happens to be complete. A single word
    longer than max_length is cut hard.
    Text already within max_length is returned unchanged.

    Args:
        text: Text to shorten.
        max_length: Maximum length before the ellipsis.

    Returns:
        The original text, or the shortened text ending in "...".
    """
    if len(text) <= max_length:
        return text

    return _TRAILING_PARTIAL_WORD_RE.sub("", text[:max_length]) + ELLIPSIS
