"""
Issue-to-Idea mapping.

Turns one raw GitHub issue (decoded JSON dict) into an Idea by parsing the
issue form sections in its body. Pure functions only: no network, no files.

Template sections read (by exact "### " heading):
    Category, Idea Title, Problem & Solution, Estimated Improvement,
    Competitive Moats, Viability Estimate, Overall Defensibility
"""

from typing import Iterable, List

from notbuiltyet.models.catalog import (
    DEFAULT_CATEGORY,
    DEFAULT_DEFENSIBILITY,
    get_category_class,
    normalize_category,
)
from notbuiltyet.models.idea import Idea
from notbuiltyet.parsing import (
    extract_moats,
    extract_viability,
    first_line,
    parse_description,
    parse_sections,
)


# Issue form headings
SECTION_CATEGORY = "Category"
SECTION_TITLE = "Idea Title"
SECTION_PROBLEM_SOLUTION = "Problem & Solution"
SECTION_IMPROVEMENT = "Estimated Improvement"
SECTION_MOATS = "Competitive Moats"
SECTION_VIABILITY = "Viability Estimate"
SECTION_DEFENSIBILITY = "Overall Defensibility"

# Reaction counted as a vote
VOTE_REACTION = "+1"


def issue_to_idea(issue: dict) -> Idea:
    """
    Build an Idea from a raw GitHub issue.

    Missing or empty sections fall back to defaults: category "Other"
    (also used in place of an unlisted category label),
    the issue's own title, empty text, no moats, 0% viability,
    "Medium" defensibility, 0 votes.

    Args:
        issue: Issue object as returned by the GitHub issues API.

    Returns:
        The normalized Idea.
    """
    sections = parse_sections(issue.get("body") or "")

    category = normalize_category(first_line(sections.get(SECTION_CATEGORY) or DEFAULT_CATEGORY))
    title = first_line(sections.get(SECTION_TITLE) or issue.get("title") or "")
    problem_solution = sections.get(SECTION_PROBLEM_SOLUTION, "")

    return Idea(
        id=issue.get("number"),
        url=issue.get("html_url", ""),
        title=title,
        category=category,
        category_class=get_category_class(category),
        description=parse_description(problem_solution),
        full_description=parse_description(problem_solution, full=True),
        improvement=first_line(sections.get(SECTION_IMPROVEMENT)),
        moats=tuple(extract_moats(sections.get(SECTION_MOATS))),
        viability=extract_viability(sections.get(SECTION_VIABILITY)),
        defensibility=first_line(sections.get(SECTION_DEFENSIBILITY) or DEFAULT_DEFENSIBILITY),
        votes=get_votes(issue),
    )


def get_votes(issue: dict) -> int:
    """Return the issue's +1 reaction count (0 if absent)."""
    reactions = issue.get("reactions") or {}
    return int(reactions.get(VOTE_REACTION) or 0)


def sort_ideas(ideas: Iterable[Idea]) -> List[Idea]:
    """
    Rank ideas by votes, most first.

    The sort is stable: ideas with equal votes keep their fetch order.
    """
    return sorted(ideas, key=lambda idea: -idea.votes)


def map_issues(issues: Iterable[dict]) -> List[Idea]:
    """Map issues to ideas and rank them by votes."""
    return sort_ideas(issue_to_idea(issue) for issue in issues)
