"""
git-heatmap: A terminal calendar heatmap of one author's commits

Entry point for the application.
"""

import argparse
import logging
import sys

from git_heatmap import config
from git_heatmap.cli import render_report
from git_heatmap.commit_parser import parse_commit_times
from git_heatmap.git_client import GitClient, GitClientError
from git_heatmap.history_calculator import aggregate
from git_heatmap.layout import terminal_width

logger = logging.getLogger(__name__)

USAGE = "Usage: git-heatmap <path> <author-email> [--width N] [--verbose]"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-heatmap",
        description="Show a calendar heatmap of an author's commits.",
    )
    parser.add_argument("path", nargs="?", help="path to the git repository")
    parser.add_argument("email", nargs="?", help="author email to match exactly")
    parser.add_argument(
        "--width", type=int, help="terminal width to lay out for (default: detected)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug details to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.path or not args.email:
        print(USAGE, file=sys.stderr)
        return 1

    if args.width is not None and args.width < 1:
        print(f"Error: --width must be positive, got {args.width}", file=sys.stderr)
        return 1

    try:
        fallback = config.fallback_width()
    except ValueError as e:
        print(f"Configuration Error:\n{e}", file=sys.stderr)
        return 1

    try:
        with GitClient(args.path) as client:
            observations = parse_commit_times(client.author_commit_times(args.email))
    except GitClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    calendar_range = aggregate(observations)
    if not calendar_range.is_empty:
        logger.debug(
            "Calendar spans %s to %s over %d days with commits",
            calendar_range.start,
            calendar_range.end,
            len(observations),
        )

    if args.width is not None:
        width = args.width
        render_report(calendar_range, sys.stdout, lambda: width)
    else:
        render_report(calendar_range, sys.stdout, lambda: terminal_width(fallback))

    return 0


if __name__ == "__main__":
    exit(main())
