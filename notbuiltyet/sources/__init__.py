"""
Data sources module.

Fetcher for the GitHub issues API.
"""

from notbuiltyet.sources.github_issues import GitHubAPIError, GitHubIssuesClient

__all__ = [
    "GitHubAPIError",
    "GitHubIssuesClient",
]
