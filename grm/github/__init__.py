"""GitHub integration for grm.

- GitHubClient: GitHub API integration for latest-release lookups
- GitHubRelease, ReleaseAsset: release payload dataclasses
"""

from .client import (
    GitHubClient,
    GitHubRelease,
    ReleaseAsset,
    GitHubError,
    GitHubConnectionError,
    GitHubRateLimitError,
    GitHubNotFoundError,
)

__all__ = [
    "GitHubClient",
    "GitHubRelease",
    "ReleaseAsset",
    "GitHubError",
    "GitHubConnectionError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
]
