"""
Parsing module.

Splits issue bodies into template sections and extracts typed fields.
"""

from notbuiltyet.parsing.markdown import (
    parse_sections,
    first_line,
    strip_markdown,
    truncate,
)

from notbuiltyet.parsing.fields import (
    SUMMARY_MAX_LENGTH,
    extract_moats,
    extract_viability,
    parse_description,
)

__all__ = [
    # Markdown helpers
    "parse_sections",
    "first_line",
    "strip_markdown",
    "truncate",
    # Field extractors
    "SUMMARY_MAX_LENGTH",
    "extract_moats",
    "extract_viability",
    "parse_description",
]
