"""
Data models module.

Defines data structures for ideas, moats, descriptions and the output document.
"""

from notbuiltyet.models.idea import (
    Description,
    Idea,
    IdeaStats,
    IdeasDocument,
    Moat,
)

__all__ = [
    "Description",
    "Idea",
    "IdeaStats",
    "IdeasDocument",
    "Moat",
]
