"""
Vaccination report scraper: CLI entry point.

Usage:
    python scraper.py [--reports-dir DIR] [--format-version v2] [--dry-run]
    python scraper.py --compare PREVIOUS.ods CURRENT.ods

One cycle:
  1. Ask the ministry page for the name of the current report.
  2. Stop if it is the last report already stored, or not downloadable yet.
  3. Extract the stored (previous) and new (current) reports.  Both must
     extract cleanly before anything is sent.
  4. Render the long-form and short-form summaries and hand them to the
     configured senders.
  5. Store the new report, so the next cycle compares against it.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import dotenv
import httpx

from dto.report import Report
from dto.summary import Summary
from extractors.config import ExtractionConfig, get_extraction_config
from extractors.errors import ExtractionError
from extractors.report import ReportExtractor
from grid.loader import load_document
from rendering.formatter import NumberFormatter
from rendering.telegram import render_long_form
from rendering.twitter import render_short_form
from senders import SendError, Sender, get_senders
from settings import Settings
from sources.ministry import FetchError, MinistryClient
from sources.store import ReportStore

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Pipeline steps
# -------------------------------------------------------------------


def extract_report(content: bytes, name: str, config: ExtractionConfig) -> Report:
    """Parse raw report bytes and extract a ``Report`` (fails fast)."""
    document = load_document(content, name)
    return ReportExtractor(config).extract(document)


def build_summary(
    name: str,
    previous: Report,
    current: Report,
    config: ExtractionConfig,
    formatter: Optional[NumberFormatter] = None,
) -> Summary:
    formatter = formatter or NumberFormatter()
    return Summary(
        report_name=name,
        long_form=render_long_form(previous, current, config.bands, formatter),
        short_form=render_short_form(previous, current, config.bands, formatter),
    )


def run_cycle(
    client: MinistryClient,
    store: ReportStore,
    senders: Sequence[Sender],
    config: ExtractionConfig,
    formatter: Optional[NumberFormatter] = None,
    dry_run: bool = False,
) -> Optional[Summary]:
    """
    Run one fetch → compare → send → store cycle.

    Returns the summary that was sent, or ``None`` when there was nothing
    new to report.
    """
    last_name = store.latest_name()

    next_name = client.fetch_current_name()
    if next_name == last_name:
        logger.info("No new report yet. Still %s.", next_name)
        return None

    next_contents = client.fetch_report(next_name)
    if next_contents is None:
        logger.info("No report yet: %s", next_name)
        return None

    if last_name is None:
        # First run: compare the report against itself.
        logger.info("No previous report stored; using %s as baseline", next_name)
        last_name, last_contents = next_name, next_contents
    else:
        last_contents = store.read(last_name)

    previous = extract_report(last_contents, last_name, config)
    current = extract_report(next_contents, next_name, config)

    logger.info("Handling update: %s", next_name)
    summary = build_summary(next_name, previous, current, config, formatter)

    for sender in senders:
        logger.info("Sending via %s...", sender.name)
        sender.send(summary)

    if not dry_run:
        store.write(next_name, next_contents)

    logger.info("Update handled: %s", next_name)
    return summary


def compare_files(
    previous_path: str,
    current_path: str,
    config: ExtractionConfig,
    formatter: Optional[NumberFormatter] = None,
) -> Summary:
    """Render the summary for two report files already on disk."""
    previous = extract_report(Path(previous_path).read_bytes(), previous_path, config)
    current = extract_report(Path(current_path).read_bytes(), current_path, config)
    return build_summary(Path(current_path).name, previous, current, config, formatter)


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    dotenv.load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="Fetch the latest vaccination report and post what changed.",
    )
    parser.add_argument(
        "-d",
        "--reports-dir",
        default=settings.reports_dir,
        help=f"Directory holding fetched reports (default: {settings.reports_dir})",
    )
    parser.add_argument(
        "-f",
        "--format-version",
        default=settings.format_version,
        help=f"Report layout version to extract with (default: {settings.format_version})",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the messages instead of sending them and store nothing",
    )
    parser.add_argument(
        "--compare",
        nargs=2,
        metavar=("PREVIOUS", "CURRENT"),
        default=None,
        help="Render the comparison of two local report files and exit",
    )
    args = parser.parse_args(argv)

    try:
        config = get_extraction_config(args.format_version)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    formatter = NumberFormatter(settings.locale)

    if args.compare:
        for path in args.compare:
            if not os.path.isfile(path):
                logger.error("File not found: %s", path)
                return 1
        try:
            summary = compare_files(*args.compare, config=config, formatter=formatter)
        except ExtractionError as exc:
            logger.error("Error extracting report: %s", exc)
            return 1
        for sender in get_senders(settings, dry_run=True):
            sender.send(summary)
        return 0

    store = ReportStore(args.reports_dir)
    senders = get_senders(settings, dry_run=args.dry_run)

    try:
        with MinistryClient(timeout=settings.http_timeout_seconds) as client:
            run_cycle(
                client, store, senders, config,
                formatter=formatter,
                dry_run=args.dry_run,
            )
    except (ExtractionError, FetchError, SendError, httpx.HTTPError, OSError) as exc:
        logger.error("Error scraping: %s", exc)
        return 1
    finally:
        for sender in senders:
            sender.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
