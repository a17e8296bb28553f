"""
GitHub Issues source implementation.

Fetches label-filtered issues from a repository through the REST API,
following page numbers until the last page.
API Documentation: https://docs.github.com/en/rest/issues/issues#list-repository-issues

No retry: the first non-success response raises
GitHubAPIError and the whole build stops.
"""

from typing import List, Optional
import requests

from notbuiltyet.config import (
    GITHUB_API_BASE,
    ISSUES_PER_PAGE,
    REQUEST_TIMEOUT,
    USER_AGENT,
)


# Issues list endpoint for one repository, filtered by label
GH_ISSUES_URL = "{api_base}/repos/{repository}/issues?labels={label}&state=all"


class GitHubAPIError(Exception):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, url: str):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"API error: {status_code} {reason} ({url})")


class GitHubIssuesClient:
    """
    Reads issues from one GitHub repository.

    Pages are requested one at a time, in order, with a uniform page size.
    Pagination stops at the first empty page or the first page shorter than
    the page size.

    The client keeps no mutable state between calls, so a single instance
    can serve several queries running in parallel threads.
    """

    def __init__(
        self,
        token: str,
        repository: str,
        api_base: str = GITHUB_API_BASE,
        per_page: int = ISSUES_PER_PAGE,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        verbose: bool = False,
    ):
        """
        Initialize GitHubIssuesClient.

        Args:
            token: Bearer token for the API.
            repository: Repository in "owner/repo" form.
            api_base: REST API base URL.
            per_page: Page size (1-100).
            timeout: Request timeout in seconds, None to wait indefinitely.
            verbose: Print a line per fetched page.
        """
        self.repository = repository
        self.api_base = api_base.rstrip("/")
        self.per_page = per_page
        self.timeout = timeout
        self.verbose = verbose
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }

    @property
    def name(self) -> str:
        return "github"

    def issues_url(self, label: str) -> str:
        """Construct the issues query URL for a label."""
        return GH_ISSUES_URL.format(
            api_base=self.api_base,
            repository=self.repository,
            label=label,
        )

    def fetch_all_pages(self, url: str) -> List[dict]:
        """
        Fetch every page of a list endpoint.

        Args:
            url: Query URL, possibly already carrying filter parameters.

        Returns:
            All items from all pages, in API order.

        Raises:
            GitHubAPIError: On any non-success response.
        """
        results: List[dict] = []
        page = 1

        while True:
            data = self._fetch_page(url, page)
            if not data:
                break

            results.extend(data)
            if len(data) < self.per_page:
                break
            page += 1

        return results

    def fetch_issues(self, label: str) -> List[dict]:
        """
        Fetch all issues (open and closed) carrying a label.

        Args:
            label: Label name, e.g. "vetted".

        Returns:
            Raw issue dicts.
        """
        issues = self.fetch_all_pages(self.issues_url(label))
        print(f"[{self.name}] Fetched {len(issues)} issues labeled '{label}'")
        return issues

    def count_by_label(self, label: str) -> int:
        """Count all issues (open and closed) carrying a label."""
        return len(self.fetch_issues(label))

    def _fetch_page(self, url: str, page: int) -> List[dict]:
        """
        Fetch one page.

        Args:
            url: Query URL.
            page: 1-indexed page number.

        Returns:
            The decoded JSON array for this page.

        Raises:
            GitHubAPIError: If the response status is not a success.
        """
        response = requests.get(
            url,
            params={"per_page": self.per_page, "page": page},
            headers=self.headers,
            timeout=self.timeout,
        )
        if not response.ok:
            print(f"[{self.name}] API error: {response.status_code} {response.reason}")
            raise GitHubAPIError(response.status_code, response.reason, url)

        data = response.json()
        if self.verbose:
            print(f"[{self.name}] Page {page}: {len(data)} items")
        return data

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} repository={self.repository!r}>"
