"""
Configuration module for the idea board builder.

Loads environment variables from .env file and exposes them as typed configuration values.
GITHUB_TOKEN and GITHUB_REPOSITORY are required; everything else has a safe default.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of notbuiltyet/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# GitHub Access (Required)
# =============================================================================

# Token used as a bearer credential for the issues API
GITHUB_TOKEN: str = os.getenv("GITHUB_TOKEN", "")

# Repository to read ideas from, in "owner/repo" form
GITHUB_REPOSITORY: str = os.getenv("GITHUB_REPOSITORY", "")


# =============================================================================
# GitHub API Settings
# =============================================================================

# Base URL of the REST API (override for GitHub Enterprise)
GITHUB_API_BASE: str = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")

# Page size for paginated issue queries (GitHub caps this at 100)
ISSUES_PER_PAGE: int = int(os.getenv("ISSUES_PER_PAGE", "100"))

# Client identifier sent with every request
USER_AGENT: str = os.getenv("GITHUB_USER_AGENT", "notbuiltyet-build")

# HTTP request timeout in seconds
# Unset by default: requests then waits indefinitely
_timeout = os.getenv("REQUEST_TIMEOUT", "")
REQUEST_TIMEOUT: Optional[float] = float(_timeout) if _timeout else None


# =============================================================================
# Labels
# =============================================================================

LABEL_VETTED: str = "vetted"
LABEL_BEING_BUILT: str = "being-built"
LABEL_LAUNCHED: str = "launched"


# =============================================================================
# Output
# =============================================================================

# Where the JSON document is written (relative paths resolve against the cwd)
OUTPUT_PATH: str = os.getenv("IDEAS_OUTPUT_PATH", "ideas.json")


# =============================================================================
# Helper Functions
# =============================================================================

def validate_config(token: Optional[str] = None, repository: Optional[str] = None) -> list[str]:
    """
    Validate that required configuration is present.

    Args:
        token: Token to check. Defaults to GITHUB_TOKEN.
        repository: Repository to check. Defaults to GITHUB_REPOSITORY.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    if token is None:
        token = GITHUB_TOKEN
    if repository is None:
        repository = GITHUB_REPOSITORY

    errors = []

    if not token:
        errors.append("GITHUB_TOKEN is required")

    if not repository:
        errors.append("GITHUB_REPOSITORY is required")
    elif repository.count("/") != 1 or not all(repository.split("/")):
        errors.append(f"GITHUB_REPOSITORY must look like 'owner/repo', got {repository!r}")

    if not (1 <= ISSUES_PER_PAGE <= 100):
        errors.append("ISSUES_PER_PAGE must be between 1 and 100")

    if REQUEST_TIMEOUT is not None and REQUEST_TIMEOUT <= 0:
        errors.append("REQUEST_TIMEOUT must be a positive number of seconds")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  GITHUB_TOKEN: {'***' if GITHUB_TOKEN else '(not set)'}")
    print(f"  GITHUB_REPOSITORY: {GITHUB_REPOSITORY or '(not set)'}")
    print(f"  GITHUB_API_BASE: {GITHUB_API_BASE}")
    print(f"  ISSUES_PER_PAGE: {ISSUES_PER_PAGE}")
    print(f"  REQUEST_TIMEOUT: {f'{REQUEST_TIMEOUT}s' if REQUEST_TIMEOUT else '(none)'}")
    print(f"  OUTPUT_PATH: {OUTPUT_PATH}")
