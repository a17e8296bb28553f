#!/usr/bin/env python3
"""
Idea Board Builder - builds ideas.json from GitHub issues.

Command-line entry point for running the full build:
  - Fetch issues labeled "vetted", "being-built" and "launched"
  - Parse the idea template in each vetted issue
  - Rank ideas by votes
  - Write ideas.json

Requires GITHUB_TOKEN and GITHUB_REPOSITORY (owner/repo) in the environment
or in a .env file.

Usage:
    python main.py                      # Build ideas.json
    python main.py --dry-run            # Fetch and parse only, no file written
    python main.py --output public/ideas.json
    python main.py --verbose            # Show per-page progress

Examples:
    # Local check against another repository
    python main.py --repo owner/ideas --dry-run --verbose

    # CI build
    python main.py
"""

import argparse
import sys

from notbuiltyet import __version__
from notbuiltyet.config import (
    GITHUB_REPOSITORY,
    GITHUB_TOKEN,
    OUTPUT_PATH,
    print_config_summary,
    validate_config,
)
from notbuiltyet.pipeline import (
    IdeasBuildPipeline,
    PipelineConfig,
    PipelineResult,
)
from notbuiltyet.sources import GitHubAPIError


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="notbuiltyet-build",
        description="Build ideas.json from a repository's labeled GitHub issues.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Build ideas.json with defaults
  %(prog)s --dry-run                 Fetch and parse only, skip writing
  %(prog)s --repo owner/repo         Read issues from another repository
  %(prog)s -o public/ideas.json      Write to a different path
  %(prog)s -v --dry-run              Verbose dry-run
        """,
    )

    # Core options
    parser.add_argument(
        "--repo", "-r",
        default=None,
        metavar="OWNER/REPO",
        help="Repository to read issues from (default: $GITHUB_REPOSITORY)",
    )

    parser.add_argument(
        "--output", "-o",
        default=None,
        metavar="PATH",
        help=f"Output file (default: {OUTPUT_PATH})",
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Fetch and parse issues but do not write the output file",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show per-page progress and tracebacks",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Skip the header and print a one-line summary",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Idea Board Builder Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration errors:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def print_result_summary(result: PipelineResult, quiet: bool = False) -> None:
    """Print the build result summary."""
    if quiet:
        target = result.output_path or "(dry run)"
        print(f"{len(result.ideas)} ideas -> {target}")
        return
    print(result.to_summary())


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle --show-config
    if args.show_config:
        show_config()
        return 0

    config = PipelineConfig(
        token=GITHUB_TOKEN,
        repository=args.repo or GITHUB_REPOSITORY,
        output_path=args.output or OUTPUT_PATH,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )

    # Fail before any network call
    errors = validate_config(config.token, config.repository)
    if errors:
        print("Missing or invalid configuration:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    # Print header (unless quiet)
    if not args.quiet:
        print("=" * 60)
        print("Idea Board Build")
        print("=" * 60)

        if args.dry_run:
            print("Mode: DRY RUN (no file written)")

        if args.verbose:
            print("\nConfiguration:")
            print_config_summary()
        print()

    try:
        pipeline = IdeasBuildPipeline(config)
        result = pipeline.run()

        print_result_summary(result, quiet=args.quiet)
        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except GitHubAPIError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\n❌ Build error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
