"""
Known categories and moats for the idea board.

This file is the single source of truth for which template values the board
recognizes. Both tables are closed whitelists:
1. Categories: an unrecognized category is shown as "Other"
2. Moats: an unrecognized moat label is dropped

CUSTOMIZATION:

To add a category or moat:
    1. Add the exact label used in the issue template as a new key
    2. Map it to the CSS class the board stylesheet defines for it
"""

# =============================================================================
# Categories
# =============================================================================

# Mapping of category label -> tag CSS class
CATEGORY_TAG_CLASS: dict[str, str] = {
    "Healthcare": "tag-health",
    "Agriculture": "tag-agri",
    "Education": "tag-edu",
    "Infrastructure": "tag-infra",
    "Finance": "tag-finance",
    "Environment": "tag-env",
    "Logistics": "tag-logistics",
    "Other": "tag-other",
}

DEFAULT_CATEGORY: str = "Other"
DEFAULT_CATEGORY_CLASS: str = CATEGORY_TAG_CLASS[DEFAULT_CATEGORY]


# =============================================================================
# Moats
# =============================================================================

# Mapping of moat label -> badge CSS class
MOAT_CSS_CLASS: dict[str, str] = {
    "Data Moat": "moat-data",
    "Network Effects": "moat-network",
    "Regulatory": "moat-regulatory",
    "Technical": "moat-technical",
    "Domain Expertise": "moat-domain",
    "First Mover": "moat-first-mover",
    "Integration Depth": "moat-integration",
}


# =============================================================================
# Other Defaults
# =============================================================================

DEFAULT_DEFENSIBILITY: str = "Medium"


def get_category_class(category: str) -> str:
    """Get the tag class for a category (fallback class if unknown)."""
    return CATEGORY_TAG_CLASS.get(category, DEFAULT_CATEGORY_CLASS)


def normalize_category(category: str) -> str:
    """
    Return the category if it is known, otherwise "Other".

    An unlisted label is not kept as written: "Robotics" is shown as
    "Other", not as "Robotics" with the fallback tag class.
    """
    return category if category in CATEGORY_TAG_CLASS else DEFAULT_CATEGORY


def get_moat_class(name: str) -> str | None:
    """Get the badge class for a moat, or None if the moat is unknown."""
    return MOAT_CSS_CLASS.get(name)
