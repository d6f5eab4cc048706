"""Command-line entry point for grm.

Parses arguments, wires up the fetcher and turns its outcome into an
exit code.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import requests

from .config.settings import AppSettings, SettingsManager
from .fetch import (
    AssetDownloader,
    FetchError,
    FetchRequest,
    Fetcher,
    ProgressLogger,
    stdout_reporter,
)
from .github import GitHubClient
from .utils.logging import setup_logging, get_logger


EXIT_OK = 0
EXIT_FAILURE = 1


class SyntaxArgumentParser(argparse.ArgumentParser):
    """Argument parser that prints the syntax and exits 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_help(sys.stderr)
        sys.stderr.write(f"\n{self.prog}: {message}\n")
        sys.exit(EXIT_FAILURE)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = SyntaxArgumentParser(
        prog=prog,
        usage="%(prog)s [flags] <owner/repo>",
        description="Download the latest release of a GitHub repository.",
    )
    parser.add_argument(
        "repository",
        nargs="?",
        metavar="owner/repo",
        help="Repository whose latest release is fetched",
    )
    parser.add_argument(
        "-a", "--asset",
        default="",
        help="Asset name to download from the release",
    )
    parser.add_argument(
        "-o", "--output",
        default="",
        help="Path to write the downloaded asset",
    )
    parser.add_argument(
        "-w", "--working-dir",
        default=None,
        help="Directory holding the tag markers (default: .grm)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def create_fetcher(
    request: FetchRequest,
    settings: AppSettings,
    session: requests.Session,
) -> Fetcher:
    """Wire a Fetcher to a shared HTTP session."""
    client = GitHubClient(
        session=session,
        base_url=settings.api_url,
        timeout=settings.timeout,
    )
    downloader = AssetDownloader(
        session=session,
        timeout=settings.download_timeout or None,
        chunk_size=settings.chunk_size,
    )
    return Fetcher(
        request,
        client,
        downloader,
        reporter=stdout_reporter,
        progress_callback=ProgressLogger(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run grm.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.repository is None:
        parser.print_help()
        return EXIT_FAILURE

    settings = SettingsManager().load()
    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_file=Path(settings.log_file) if settings.log_file else None,
    )
    logger = get_logger("grm.main")

    request = FetchRequest(
        repository=args.repository,
        asset=args.asset,
        output=args.output,
        working_dir=args.working_dir or settings.working_dir,
    )

    with requests.Session() as session:
        fetcher = create_fetcher(request, settings, session)
        try:
            fetcher.fetch()
        except FetchError as e:
            logger.debug(f"Fetch failed: {e!r}")
            print(str(e))
            return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
