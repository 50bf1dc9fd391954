"""CLI entry point and orchestrator."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import AppConfig, load_config
from .downloader import Downloader
from .links import extract_pdf_urls, is_valid_url, remove_duplicates
from .logger import LOGGER_NAME, setup_logger
from .models import HarvestReport
from .storage import append_to_file, ensure_directory


def collect_pdf_urls(config: AppConfig, downloader: Downloader, report: HarvestReport,
                     logger: logging.Logger) -> List[str]:
    """Fetch every index page and return the deduplicated PDF links."""
    pages = []
    for url in config.index_urls:
        report.pages_requested += 1
        text = downloader.fetch_text(url)
        if text:
            report.pages_fetched += 1
        pages.append((url, text))

    combined = "".join(text for _, text in pages)
    if config.snapshot_path:
        append_to_file(config.snapshot_path, combined, logger)

    if config.resolve_relative_links:
        found = []
        for url, text in pages:
            if text:
                found.extend(extract_pdf_urls(text, base_url=url, logger=logger))
    else:
        found = extract_pdf_urls(combined, logger=logger)

    unique = remove_duplicates(found)
    logger.info(f"Found {len(found)} PDF links ({len(unique)} unique)")
    return unique


def run_harvest(config: AppConfig, downloader: Downloader,
                logger: Optional[logging.Logger] = None) -> HarvestReport:
    """Discover PDF links on the index pages and download each one once."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    report = HarvestReport()

    pdf_urls = collect_pdf_urls(config, downloader, report, logger)
    report.candidates = len(pdf_urls)

    ensure_directory(config.output_dir, 0o755, logger)

    for url in pdf_urls:
        if not is_valid_url(url):
            logger.warning(f"Invalid URL, skipping: {url}")
            report.invalid_urls += 1
            continue
        report.record(downloader.download_pdf(url, config.output_dir))

    logger.info(
        f"Done: {report.candidates} candidates, {report.succeeded} downloaded, "
        f"{report.skipped} skipped, {report.failed} failed, {report.invalid_urls} invalid"
    )
    return report


def show_stats(report: HarvestReport):
    print("\n" + "=" * 50)
    print("  HARVEST SUMMARY")
    print("=" * 50)
    rows = [
        ("Index pages", f"{report.pages_fetched}/{report.pages_requested}"),
        ("PDF links", report.candidates),
        ("Invalid URLs", report.invalid_urls),
        ("Downloaded", report.succeeded),
        ("Skipped", report.skipped),
        ("Failed", report.failed),
        ("Bytes written", _format_bytes(report.total_bytes)),
    ]
    for label, value in rows:
        print(f"{label:<20} {value!s:>20}")
    print()


def _format_bytes(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    elif n < 1024 ** 2:
        return f"{n / 1024:.1f} KB"
    elif n < 1024 ** 3:
        return f"{n / 1024 ** 2:.1f} MB"
    else:
        return f"{n / 1024 ** 3:.2f} GB"


def build_config(args: argparse.Namespace) -> AppConfig:
    if os.path.exists(args.config):
        config = load_config(args.config)
    else:
        config = AppConfig()

    if args.url:
        config.index_urls = list(args.url)
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.snapshot is not None:
        config.snapshot_path = args.snapshot
    if args.log_dir is not None:
        config.log_dir = args.log_dir
    if args.resolve_relative:
        config.resolve_relative_links = True
    return config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Download PDFs linked from HTML index pages")
    parser.add_argument("--config", type=str, default="config.yaml",
                        help="Path to config file (defaults are used if it is missing)")
    parser.add_argument("--url", action="append", default=None,
                        help="Index page to scan; repeat for several (overrides config)")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory to write PDFs into")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="File to append fetched index HTML to (empty to disable)")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Directory for the rotating log file (empty for console only)")
    parser.add_argument("--resolve-relative", action="store_true",
                        help="Resolve relative links against the page they appear on")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    logger = setup_logger(config.log_dir, logging.DEBUG if args.verbose else logging.INFO)

    print("PDF Harvester")
    print(f"Output directory: {config.output_dir}")

    with Downloader(config.download, logger=logger) as downloader:
        report = run_harvest(config, downloader, logger)

    show_stats(report)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
