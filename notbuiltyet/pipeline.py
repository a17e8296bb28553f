"""
Idea Board Build Pipeline - Core execution logic.

This module orchestrates the complete build:

    GitHub issues → Parse & map → Rank → ideas.json → Summary

Steps:
1. Fetch the three label queries in parallel
   (vetted issues, being-built count, launched count)
2. Map each vetted issue to an Idea
3. Sort ideas by votes (stable)
4. Write ideas.json (unless dry-run)
5. Return a result for the execution summary

There is no error isolation: any failed query aborts the build before
anything is written.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from notbuiltyet.config import (
    GITHUB_API_BASE,
    GITHUB_REPOSITORY,
    GITHUB_TOKEN,
    ISSUES_PER_PAGE,
    LABEL_BEING_BUILT,
    LABEL_LAUNCHED,
    LABEL_VETTED,
    OUTPUT_PATH,
    REQUEST_TIMEOUT,
)
from notbuiltyet.mapping import map_issues
from notbuiltyet.models.idea import Idea, IdeaStats, IdeasDocument
from notbuiltyet.output import write_document
from notbuiltyet.sources import GitHubIssuesClient


# =============================================================================
# Pipeline Configuration
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Configuration for a build run.

    CLI arguments override environment defaults.
    """
    token: str = GITHUB_TOKEN
    repository: str = GITHUB_REPOSITORY
    output_path: str = OUTPUT_PATH
    api_base: str = GITHUB_API_BASE
    per_page: int = ISSUES_PER_PAGE
    timeout: Optional[float] = REQUEST_TIMEOUT
    dry_run: bool = False
    verbose: bool = False


# =============================================================================
# Pipeline Result
# =============================================================================

@dataclass
class PipelineResult:
    """Complete result of a build run."""
    started_at: datetime
    finished_at: Optional[datetime] = None
    repository: str = ""

    stats: IdeaStats = field(default_factory=IdeaStats)
    ideas: List[Idea] = field(default_factory=list)

    # None if dry-run
    output_path: Optional[Path] = None
    dry_run: bool = False

    @property
    def duration_seconds(self) -> float:
        """Total build duration in seconds."""
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "BUILD SUMMARY",
            "=" * 60,
            f"Repository: {self.repository}",
            f"Started:    {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration:   {self.duration_seconds:.2f}s",
            f"Mode:       {'DRY RUN' if self.dry_run else 'LIVE'}",
            "",
            "Issues:",
            f"  Vetted:       {self.stats.vetted}",
            f"  Being built:  {self.stats.being_built}",
            f"  Launched:     {self.stats.launched}",
            "",
            f"Ideas: {len(self.ideas)}",
        ]

        for idea in self.ideas[:5]:
            lines.append(f"  {idea}")

        if self.output_path:
            lines.append(f"\nOutput: {self.output_path}")
        elif self.dry_run:
            lines.append("\nOutput: SKIPPED (dry-run mode)")

        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Pipeline Class
# =============================================================================

class IdeasBuildPipeline:
    """
    Builds ideas.json from a repository's labeled issues.

    Usage:
        config = PipelineConfig(token="...", repository="owner/repo")
        pipeline = IdeasBuildPipeline(config)
        result = pipeline.run()
        print(result.to_summary())

    run() raises on the first failed query (GitHubAPIError or
    requests.RequestException); nothing is written in that case.
    """

    def __init__(self, config: PipelineConfig = None, client: GitHubIssuesClient = None):
        """
        Initialize the pipeline.

        Args:
            config: Build configuration. Defaults to PipelineConfig().
            client: Issues client. Built from config if not given.
        """
        self.config = config or PipelineConfig()
        self._client = client

    def _get_client(self) -> GitHubIssuesClient:
        """Get the issues client, creating it on first use."""
        if self._client is None:
            self._client = GitHubIssuesClient(
                token=self.config.token,
                repository=self.config.repository,
                api_base=self.config.api_base,
                per_page=self.config.per_page,
                timeout=self.config.timeout,
                verbose=self.config.verbose,
            )
        return self._client

    def _fetch_all(self, client: GitHubIssuesClient) -> tuple[List[dict], IdeaStats]:
        """
        Run the three label queries in parallel.

        Returns:
            Tuple of (vetted_issues, stats).
        """
        with ThreadPoolExecutor(max_workers=3) as executor:
            vetted_future = executor.submit(client.fetch_issues, LABEL_VETTED)
            being_built_future = executor.submit(client.count_by_label, LABEL_BEING_BUILT)
            launched_future = executor.submit(client.count_by_label, LABEL_LAUNCHED)

            vetted_issues = vetted_future.result()
            stats = IdeaStats(
                vetted=len(vetted_issues),
                being_built=being_built_future.result(),
                launched=launched_future.result(),
            )

        return vetted_issues, stats

    def run(self) -> PipelineResult:
        """
        Execute the full build.

        Returns:
            PipelineResult with counts, ranked ideas and output path.
        """
        result = PipelineResult(
            started_at=datetime.now(),
            repository=self.config.repository,
            dry_run=self.config.dry_run,
        )

        print(f"[pipeline] Fetching issues from {self.config.repository}...")
        vetted_issues, stats = self._fetch_all(self._get_client())
        print(f"[pipeline] Found {stats.vetted} vetted issues")

        ideas = map_issues(vetted_issues)
        result.stats = stats
        result.ideas = ideas

        if not self.config.dry_run:
            document = IdeasDocument(stats=stats, ideas=ideas)
            result.output_path = write_document(document, self.config.output_path)

        result.finished_at = datetime.now()
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def run_pipeline(
    token: str = None,
    repository: str = None,
    output_path: str = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> PipelineResult:
    """
    Run the build with specified options.

    Convenience function for programmatic use.

    Args:
        token: GitHub token (default: config value).
        repository: "owner/repo" (default: config value).
        output_path: Where to write ideas.json (default: config value).
        dry_run: If True, skip writing the file.
        verbose: If True, print per-page progress.

    Returns:
        PipelineResult with execution details.
    """
    config = PipelineConfig(
        token=token or GITHUB_TOKEN,
        repository=repository or GITHUB_REPOSITORY,
        output_path=output_path or OUTPUT_PATH,
        dry_run=dry_run,
        verbose=verbose,
    )

    pipeline = IdeasBuildPipeline(config)
    return pipeline.run()
