"""
Tests for issue-to-idea mapping.

Tests the lookup tables, defaulting rules, vote counting, ranking
and the end-to-end scenario from a single issue body.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from notbuiltyet.mapping import get_votes, issue_to_idea, map_issues, sort_ideas
from notbuiltyet.models.catalog import (
    CATEGORY_TAG_CLASS,
    MOAT_CSS_CLASS,
    get_category_class,
    get_moat_class,
    normalize_category,
)
from notbuiltyet.models.idea import Idea, Moat
from tests.test_config import EXPECTED, make_issue


# =============================================================================
# Test Catalog
# =============================================================================

class TestCatalog:
    """Tests for the category and moat tables."""

    def test_table_sizes(self):
        assert len(CATEGORY_TAG_CLASS) == EXPECTED["catalog"]["category_count"]
        assert len(MOAT_CSS_CLASS) == EXPECTED["catalog"]["moat_count"]

    def test_other_is_a_known_category(self):
        assert "Other" in CATEGORY_TAG_CLASS
        assert get_category_class("Other") == "tag-other"

    def test_unknown_category(self):
        assert normalize_category("Robotics") == "Other"
        assert get_category_class("Robotics") == EXPECTED["catalog"]["fallback_class"]

    def test_known_category_kept(self):
        assert normalize_category("Agriculture") == "Agriculture"
        assert get_category_class("Agriculture") == "tag-agri"

    def test_unknown_moat(self):
        assert get_moat_class("Secret Sauce") is None

    def test_css_classes_unique(self):
        assert len(set(CATEGORY_TAG_CLASS.values())) == len(CATEGORY_TAG_CLASS)
        assert len(set(MOAT_CSS_CLASS.values())) == len(MOAT_CSS_CLASS)


# =============================================================================
# Test issue_to_idea
# =============================================================================

class TestIssueToIdea:
    """Tests for mapping a raw issue to an Idea."""

    def test_scenario(self, scenario_issue):
        """The single-issue scenario maps to the expected fields."""
        idea = issue_to_idea(scenario_issue)

        assert idea.id == 42
        assert idea.category == "Healthcare"
        assert idea.category_class == "tag-health"
        assert idea.title == "Foo"
        assert idea.viability == 50
        assert idea.votes == 2
        assert idea.description.problem == "text one"
        assert idea.description.solution == "text two"
        assert idea.description.why == ""

    def test_full_body(self, full_issue):
        idea = issue_to_idea(full_issue)

        assert idea.title == "Clinic Queue Predictor"
        assert idea.improvement == "30% fewer walkouts"
        assert idea.moats == (
            Moat(name="Data Moat", css_class="moat-data"),
            Moat(name="Domain Expertise", css_class="moat-domain"),
        )
        assert idea.viability == 50
        assert idea.defensibility == "High"
        assert idea.votes == 5
        assert idea.description.why == "Fewer walkouts means more people get treated the same day."
        assert idea.full_description.problem.startswith("Rural clinics")

    def test_defaults_for_empty_body(self):
        idea = issue_to_idea(make_issue(number=3, body="", title="Raw issue title"))

        assert idea.title == "Raw issue title"
        assert idea.category == "Other"
        assert idea.category_class == "tag-other"
        assert idea.improvement == ""
        assert idea.moats == ()
        assert idea.viability == 0
        assert idea.defensibility == "Medium"
        assert idea.votes == 0
        assert idea.description.problem == ""
        assert idea.full_description.solution == ""

    def test_none_body(self):
        issue = make_issue(body=None)
        assert issue_to_idea(issue).category == "Other"

    def test_empty_section_uses_default(self):
        """A present but empty section is treated like a missing one."""
        body = "### Category\n\n### Overall Defensibility\n\n### Idea Title\n"
        idea = issue_to_idea(make_issue(body=body, title="Fallback"))

        assert idea.category == "Other"
        assert idea.defensibility == "Medium"
        assert idea.title == "Fallback"

    def test_unknown_category_becomes_other(self):
        idea = issue_to_idea(make_issue(body="### Category\nRobotics\n"))
        assert idea.category == "Other"
        assert idea.category_class == "tag-other"

    def test_only_first_line_of_plain_fields(self):
        body = "### Idea Title\nReal Title\nextra notes\n### Category\nFinance\nalso Education\n"
        idea = issue_to_idea(make_issue(body=body))
        assert idea.title == "Real Title"
        assert idea.category == "Finance"

    def test_summary_and_full_descriptions_differ_when_long(self):
        long_text = " ".join(["detail"] * 40)
        body = f"### Problem & Solution\n**Problem:** {long_text}\n**Solution:** fix\n"
        idea = issue_to_idea(make_issue(body=body))

        assert idea.description.problem.endswith("...")
        assert idea.full_description.problem == long_text

    def test_mapping_is_deterministic(self, full_issue):
        first = json.dumps(issue_to_idea(full_issue).to_dict())
        second = json.dumps(issue_to_idea(full_issue).to_dict())
        assert first == second

    def test_input_not_modified(self, full_issue):
        before = dict(full_issue)
        issue_to_idea(full_issue)
        assert full_issue == before

    def test_idea_is_immutable(self, scenario_issue):
        idea = issue_to_idea(scenario_issue)
        with pytest.raises(FrozenInstanceError):
            idea.votes = 100


# =============================================================================
# Test get_votes
# =============================================================================

class TestGetVotes:
    """Tests for vote counting."""

    def test_plus_one(self):
        assert get_votes({"reactions": {"+1": 4, "heart": 9}}) == 4

    def test_missing_reaction(self):
        assert get_votes({"reactions": {"heart": 9}}) == 0

    def test_missing_reactions(self):
        assert get_votes({}) == 0
        assert get_votes({"reactions": None}) == 0


# =============================================================================
# Test ranking
# =============================================================================

def _idea(issue_id: int, votes: int) -> Idea:
    return Idea(
        id=issue_id,
        url=f"https://example.com/{issue_id}",
        title=str(issue_id),
        category="Other",
        category_class="tag-other",
        votes=votes,
    )


class TestSortIdeas:
    """Tests for vote ranking."""

    def test_descending_and_stable(self):
        """Votes [3, 7, 3, 0] for [A, B, C, D] rank as [B, A, C, D]."""
        a, b, c, d = _idea(1, 3), _idea(2, 7), _idea(3, 3), _idea(4, 0)
        assert sort_ideas([a, b, c, d]) == [b, a, c, d]

    def test_returns_new_list(self):
        ideas = [_idea(1, 0), _idea(2, 5)]
        ranked = sort_ideas(ideas)
        assert ranked is not ideas
        assert [i.id for i in ideas] == [1, 2]

    def test_empty(self):
        assert sort_ideas([]) == []

    def test_map_issues_ranks(self, raw_issues):
        ideas = map_issues(raw_issues)
        assert [idea.id for idea in ideas] == [12, 11, 13, 14]
        assert [idea.category for idea in ideas] == ["Education", "Finance", "Logistics", "Other"]
