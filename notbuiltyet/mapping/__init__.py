"""
Mapping module.

Converts raw GitHub issues into ranked Idea records.
"""

from notbuiltyet.mapping.mapper import (
    issue_to_idea,
    get_votes,
    sort_ideas,
    map_issues,
)

__all__ = [
    "issue_to_idea",
    "get_votes",
    "sort_ideas",
    "map_issues",
]
