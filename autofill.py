#!/usr/bin/env python3
"""
LL Autofill CLI

Fills the blank Result, Record and Rank cells of a LearnedLeague profile's
match results using the player's rundle standings. Each filled Result cell
shows "OEPAA⋅PEPAA" (opponent vs player expected points per game) with a
tooltip of the underlying numbers and a red/green half shading.

Usage:
    python autofill.py --profile-url "https://www.learnedleague.com/profiles.php?12345" -o out.html
    python autofill.py --profile-file profile.html --standings-file standings.html -o out.html
    python autofill.py --profile-file profile.html --standings-csv standings.csv --fills-csv fills.csv
"""

import argparse
import logging
import sys
from pathlib import Path

from llautofill import RetrievalError, autofill_profile, fetch, is_profile_url
from llautofill.config import get_config
from llautofill.logging_config import setup_logging
from llautofill.report import fills_frame, standings_frame
from llautofill.utils import read_html, write_html
from llautofill.validators import validate_standings


def main():
    parser = argparse.ArgumentParser(description="Fill LearnedLeague match results from rundle standings")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--profile-url", "-u",
        help="Profile page URL (profiles.php?<id>)",
    )
    source.add_argument(
        "--profile-file", "-p",
        help="Saved profile page HTML",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="URL the saved profile was loaded from (resolves the rundle link)",
    )
    parser.add_argument(
        "--standings-file", "-s",
        default=None,
        help="Saved standings page HTML (skips fetching the standings)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for the annotated profile HTML",
    )
    parser.add_argument(
        "--standings-csv",
        default=None,
        help="Export parsed standings to CSV",
    )
    parser.add_argument(
        "--fills-csv",
        default=None,
        help="Export filled rows to CSV",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Write a log file to this directory",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug output and standings sanity warnings",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only report warnings and errors",
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logger = setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=level,
        log_to_file=bool(args.log_dir),
    )

    config = get_config()

    if args.profile_url:
        if not is_profile_url(args.profile_url):
            logger.error(f"Not a profile page: {args.profile_url}")
            sys.exit(2)
        profile_url = args.profile_url
        result = fetch(profile_url, config=config)
        if not result.ok:
            logger.error(f"Failed to fetch profile (HTTP {result.status}): {result.error or ''}")
            sys.exit(1)
        profile_html = result.text
    else:
        profile_url = args.base_url or config.base_url
        profile_html = read_html(args.profile_file)

    standings_html = read_html(args.standings_file) if args.standings_file else None

    try:
        outcome = autofill_profile(
            profile_html,
            profile_url=profile_url,
            fetcher=lambda url: fetch(url, config=config),
            config=config,
            standings_html=standings_html,
        )
    except RetrievalError as e:
        logger.error(f"Failed: {e}")
        sys.exit(1)

    if outcome is None:
        logger.warning("Nothing filled")
        sys.exit(0)

    if args.verbose:
        for warning in validate_standings(outcome.index):
            logger.warning(warning)

    print(f"Filled {outcome.rows_filled} row(s) against {len(outcome.index)} standings entries")

    if args.output:
        write_html(args.output, str(outcome.document))
        print(f"Annotated page saved to {args.output}")
    if args.standings_csv:
        standings_frame(outcome.index).write_csv(args.standings_csv)
        print(f"Standings saved to {args.standings_csv}")
    if args.fills_csv:
        fills_frame(outcome.instructions).write_csv(args.fills_csv)
        print(f"Filled rows saved to {args.fills_csv}")


if __name__ == "__main__":
    main()
