"""
Core data model for the idea board.

Defines the records produced from a vetted GitHub issue (Idea, with its
Description and Moat parts) and the document written to ideas.json.
Field names are snake_case in Python; to_dict() emits the camelCase keys
the board front end reads.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Moat:
    """
    A competitive moat ticked in the issue template.

    Attributes:
        name: One of the known moat names (e.g., "Data Moat").
        css_class: Styling class for the moat badge (e.g., "moat-data").
    """
    name: str
    css_class: str

    def to_dict(self) -> dict:
        return {"name": self.name, "cssClass": self.css_class}


@dataclass(frozen=True)
class Description:
    """Problem / solution / why-it-matters text for one idea."""
    problem: str = ""
    solution: str = ""
    why: str = ""

    def to_dict(self) -> dict:
        return {"problem": self.problem, "solution": self.solution, "why": self.why}


@dataclass(frozen=True)
class Idea:
    """
    A single vetted idea, normalized from one GitHub issue.

    Attributes:
        id: Issue number.
        url: Link to the issue on GitHub.
        title: Idea title (template field, falling back to the issue title).
        category: One of the known categories, "Other" when unrecognized.
        category_class: Styling class for the category tag.
        description: Summary view (fields truncated to 150 characters).
        full_description: Full-length view of the same text.
        improvement: Estimated improvement, first line only.
        moats: Ticked moats in the order they appear.
        viability: Success probability percentage (0-100).
        defensibility: Overall defensibility rating.
        votes: Number of +1 reactions on the issue.
    """
    id: int
    url: str
    title: str
    category: str
    category_class: str
    description: Description = field(default_factory=Description)
    full_description: Description = field(default_factory=Description)
    improvement: str = ""
    moats: Tuple[Moat, ...] = ()
    viability: int = 0
    defensibility: str = "Medium"
    votes: int = 0

    def to_dict(self) -> dict:
        """
        Convert the Idea to the JSON shape used in ideas.json.

        Key order is part of the output format and is kept stable.
        """
        return {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "category": self.category,
            "categoryClass": self.category_class,
            "description": self.description.to_dict(),
            "fullDescription": self.full_description.to_dict(),
            "improvement": self.improvement,
            "moats": [moat.to_dict() for moat in self.moats],
            "viability": self.viability,
            "defensibility": self.defensibility,
            "votes": self.votes,
        }

    def __str__(self) -> str:
        return f"#{self.id} {self.title} [{self.category}] ({self.votes} votes)"


@dataclass(frozen=True)
class IdeaStats:
    """Issue counts per pipeline stage."""
    vetted: int = 0
    being_built: int = 0
    launched: int = 0

    def to_dict(self) -> dict:
        return {
            "vetted": self.vetted,
            "beingBuilt": self.being_built,
            "launched": self.launched,
        }


@dataclass
class IdeasDocument:
    """The complete ideas.json document: stats plus ranked ideas."""
    stats: IdeaStats
    ideas: List[Idea] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "stats": self.stats.to_dict(),
            "ideas": [idea.to_dict() for idea in self.ideas],
        }
