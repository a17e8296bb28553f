"""
Field extractors for the idea issue template.

Each extractor takes the raw text of one template section and returns a
structured value. None of them raise on malformed input; they fall back to
an empty or zero value instead.
"""

import re
from typing import List, Optional

from notbuiltyet.models.catalog import get_moat_class
from notbuiltyet.models.idea import Description, Moat
from notbuiltyet.parsing.markdown import strip_markdown, truncate


# Summary-view length for problem / solution / why
SUMMARY_MAX_LENGTH = 150

# "- [x] Data Moat" (ticked checkbox only)
CHECKED_BOX_RE = re.compile(r"^\s*-\s*\[X\]\s*(.+)", re.IGNORECASE)

# "40-60%" / "40 - 60%"
PERCENT_RANGE_RE = re.compile(r"(\d+)\s*-\s*(\d+)%")

# "75%"
PERCENT_RE = re.compile(r"(\d+)%")

# **Problem:**, **The Solution**, **Why This Matters:** (and a colon after the closing **)
SUBHEADING_RE = re.compile(
    r"\*\*(?:The\s+)?(Problem|Solution|Why\s+This\s+Matters)[:\s]*\*\*:?",
    re.IGNORECASE,
)

# Blank line between paragraphs
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def extract_moats(text: Optional[str]) -> List[Moat]:
    """
    Extract ticked moats from a checkbox list.

    Only "- [x] <label>" lines (any case of x) whose label is a known moat
    are kept. Order of appearance is preserved.

    Args:
        text: Raw "Competitive Moats" section.

    Returns:
        List of Moat (empty if none ticked).
    """
    if not text:
        return []

    moats = []
    for line in text.split("\n"):
        match = CHECKED_BOX_RE.match(line)
        if not match:
            continue

        name = match.group(1).strip()
        css_class = get_moat_class(name)
        if css_class:
            moats.append(Moat(name=name, css_class=css_class))

    return moats


def extract_viability(text: Optional[str]) -> int:
    """
    Extract a viability percentage.

    A range such as "40-60%" gives its midpoint (rounded half up), a single
    "75%" gives that value. Anything else gives 0. The result is clamped
    to 0-100.

    Args:
        text: Raw "Viability Estimate" section.

    Returns:
        Percentage as an integer.
    """
    if not text:
        return 0

    match = PERCENT_RANGE_RE.search(text)
    if match:
        low, high = int(match.group(1)), int(match.group(2))
        value = (low + high + 1) // 2
    else:
        match = PERCENT_RE.search(text)
        if not match:
            return 0
        value = int(match.group(1))

    return max(0, min(100, value))


def parse_description(text: Optional[str], full: bool = False) -> Description:
    """
    Split the "Problem & Solution" section into problem, solution and why.

    Two strategies:
    1. Bold sub-headings (**Problem:**, **Solution:**, **Why This Matters:**).
       Used when at least two are present; the text up to the next
       sub-heading belongs to the previous one. A repeated sub-heading
       keeps its last occurrence.
    2. Otherwise, blank-line separated paragraphs in order: problem,
       solution, why.

    Args:
        text: Raw "Problem & Solution" section.
        full: If False, each field is truncated to SUMMARY_MAX_LENGTH.

    Returns:
        Description with markdown stripped from every field.
    """
    if not text:
        return Description()

    fields = {"problem": "", "solution": "", "why": ""}

    matches = list(SUBHEADING_RE.finditer(text))
    if len(matches) >= 2:
        for i, match in enumerate(matches):
            end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
            content = strip_markdown(text[match.end():end])
            fields[_field_for_label(match.group(1))] = content
    else:
        paragraphs = [p for p in PARAGRAPH_BREAK_RE.split(text) if p.strip()]
        for key, paragraph in zip(("problem", "solution", "why"), paragraphs):
            fields[key] = strip_markdown(paragraph)

    if not full:
        fields = {key: truncate(value, SUMMARY_MAX_LENGTH) for key, value in fields.items()}

    return Description(**fields)


def _field_for_label(label: str) -> str:
    """Map a matched sub-heading label to its Description field."""
    label = label.lower()
    if label in ("problem", "solution"):
        return label
    return "why"
