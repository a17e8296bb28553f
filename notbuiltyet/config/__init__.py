"""
Configuration module.

Handles environment variables, the GitHub credential, and output settings.
"""

from notbuiltyet.config.config import (
    GITHUB_TOKEN,
    GITHUB_REPOSITORY,
    GITHUB_API_BASE,
    ISSUES_PER_PAGE,
    USER_AGENT,
    REQUEST_TIMEOUT,
    LABEL_VETTED,
    LABEL_BEING_BUILT,
    LABEL_LAUNCHED,
    OUTPUT_PATH,
    validate_config,
    print_config_summary,
)

__all__ = [
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_API_BASE",
    "ISSUES_PER_PAGE",
    "USER_AGENT",
    "REQUEST_TIMEOUT",
    "LABEL_VETTED",
    "LABEL_BEING_BUILT",
    "LABEL_LAUNCHED",
    "OUTPUT_PATH",
    "validate_config",
    "print_config_summary",
]
