"""Fetch workflow: download the latest release of a repository.

The fetcher looks up the latest release, skips it when the tag marker
already records that tag, picks the requested asset (or the source
tarball), downloads it and then records the new tag. Every step either
completes or raises a FetchError; nothing is retried.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from grm.fetch.downloader import AssetDownloader, ProgressCallback
from grm.fetch.exceptions import (
    AssetNotFoundError,
    DownloadError,
    NoReleaseFoundError,
    ReleaseLookupError,
)
from grm.fetch.request import FetchRequest
from grm.fetch.tags import TagStore
from grm.github.client import (
    GitHubClient,
    GitHubError,
    GitHubNotFoundError,
    GitHubRelease,
)

logger = logging.getLogger("grm.fetcher")


# Receives preformatted progress messages, newlines included
Reporter = Callable[[str], None]


def stdout_reporter(message: str) -> None:
    """Write a progress message to stdout as-is."""
    sys.stdout.write(message)
    sys.stdout.flush()


@dataclass
class FetchResult:
    """Outcome of a successful fetch."""
    owner: str
    repo: str
    tag: str
    url: str
    output: str
    bytes_written: int


class Fetcher:
    """Fetches the latest release of one repository."""

    def __init__(
        self,
        request: FetchRequest,
        client: GitHubClient,
        downloader: AssetDownloader,
        tags: Optional[TagStore] = None,
        reporter: Optional[Reporter] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            request: What to fetch and where to write it
            client: Source of release metadata
            downloader: Writes the resolved URL to disk
            tags: Tag marker store (default: one rooted at request.working_dir)
            reporter: Receives human-readable progress messages
            progress_callback: Optional callback for download progress
        """
        self._request = request
        self._client = client
        self._downloader = downloader
        self._tags = tags or TagStore(request.working_dir)
        self._reporter = reporter or stdout_reporter
        self._progress_callback = progress_callback

    @property
    def request(self) -> FetchRequest:
        return self._request

    def fetch(self) -> FetchResult:
        """
        Run the fetch workflow.

        Returns:
            FetchResult describing what was downloaded

        Raises:
            MalformedIdentifierError: If the repository is not owner/repo
            ReleaseLookupError: If the latest release cannot be retrieved
            NoReleaseFoundError: If the repository has no release
            AlreadyUpToDateError: If the recorded tag is the latest one
            AssetNotFoundError: If the requested asset is not in the release
            DownloadError: If the download fails
            TagPersistError: If the tag marker cannot be written
        """
        identifier = self._request.identifier
        owner, repo = identifier.owner, identifier.name

        release = self._latest_release(owner, repo)
        tag = release.tag_name

        self._tags.assert_not_current(owner, repo, tag)

        url = self.resolve_download_url(release)
        output = self.resolve_output_path(url)

        self._reporter(f"Downloading '{url}' to {output}...")

        written = self._downloader.download(
            url, output, progress_callback=self._progress_callback
        )

        self._tags.write(owner, repo, tag)

        self._reporter("Done.\n")
        logger.info(f"Fetched {identifier} {tag} into {output}")

        return FetchResult(
            owner=owner,
            repo=repo,
            tag=tag,
            url=url,
            output=output,
            bytes_written=written,
        )

    def _latest_release(self, owner: str, repo: str) -> GitHubRelease:
        """Look up the latest release, mapping client errors."""
        try:
            release = self._client.get_latest_release(owner, repo)
        except GitHubNotFoundError as e:
            logger.debug(f"Latest release lookup returned not found: {e}")
            raise NoReleaseFoundError(owner, repo)
        except GitHubError as e:
            raise ReleaseLookupError(owner, repo, e)

        if release is None or not release.tag_name:
            raise NoReleaseFoundError(owner, repo)
        return release

    def resolve_download_url(self, release: GitHubRelease) -> str:
        """
        Pick the URL to download from a release.

        Raises:
            AssetNotFoundError: If the requested asset is not attached
            DownloadError: If the source tarball was requested but the
                release has no tarball URL
        """
        if self._request.wants_tarball:
            if not release.tarball_url:
                raise DownloadError("", self._request.output, ValueError(
                    f"release {release.tag_name} has no source tarball"
                ))
            return release.tarball_url

        asset = release.get_asset(self._request.asset)
        if asset is None:
            raise AssetNotFoundError(self._request.asset)
        return asset.download_url

    def resolve_output_path(self, download_url: str) -> str:
        """Requested output path, or the last path segment of the URL."""
        if self._request.output:
            return self._request.output
        return download_url.rsplit("/", 1)[-1]
