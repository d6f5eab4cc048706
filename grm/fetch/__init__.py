"""Fetch workflow for grm.

This module handles fetching the latest release of a repository:
- Fetcher: the end-to-end workflow
- TagStore: tag markers recording the last fetched release
- AssetDownloader: streamed download to disk
- FetchRequest, RepositoryIdentifier: request models
- FetchError and subclasses: one per failure kind
"""

from .request import FetchRequest, RepositoryIdentifier
from .exceptions import (
    FetchError,
    MalformedIdentifierError,
    ReleaseLookupError,
    NoReleaseFoundError,
    AlreadyUpToDateError,
    AssetNotFoundError,
    DownloadError,
    TagPersistError,
)
from .tags import TagStore
from .downloader import (
    AssetDownloader,
    DownloadProgress,
    ProgressCallback,
    ProgressLogger,
)
from .fetcher import Fetcher, FetchResult, Reporter, stdout_reporter

__all__ = [
    # Request models
    "FetchRequest",
    "RepositoryIdentifier",
    # Errors
    "FetchError",
    "MalformedIdentifierError",
    "ReleaseLookupError",
    "NoReleaseFoundError",
    "AlreadyUpToDateError",
    "AssetNotFoundError",
    "DownloadError",
    "TagPersistError",
    # Tag markers
    "TagStore",
    # Downloader
    "AssetDownloader",
    "DownloadProgress",
    "ProgressCallback",
    "ProgressLogger",
    # Workflow
    "Fetcher",
    "FetchResult",
    "Reporter",
    "stdout_reporter",
]
