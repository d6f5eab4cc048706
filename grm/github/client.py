"""GitHub API client for release lookups.

Fetches the latest release of a repository and its downloadable assets.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

import requests

logger = logging.getLogger("grm.github_client")


# GitHub API constants
GITHUB_API_BASE = "https://api.github.com"
USER_AGENT = "grm/1.0"

# Sent with every API request
API_HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": USER_AGENT,
}

# Request timeout in seconds
REQUEST_TIMEOUT = 30


class GitHubError(Exception):
    """Base exception for GitHub API errors."""
    pass


class GitHubConnectionError(GitHubError):
    """Raised when unable to connect to GitHub."""
    pass


class GitHubRateLimitError(GitHubError):
    """Raised when GitHub rate limit is exceeded."""
    pass


class GitHubNotFoundError(GitHubError):
    """Raised when repository or release is not found."""
    pass


@dataclass
class ReleaseAsset:
    """Represents a downloadable asset from a GitHub release."""
    name: str
    download_url: str
    size: int = 0
    content_type: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "ReleaseAsset":
        """Create ReleaseAsset from GitHub API response."""
        return cls(
            name=data.get("name") or "",
            download_url=data.get("browser_download_url") or "",
            size=data.get("size") or 0,
            content_type=data.get("content_type") or "",
        )


@dataclass
class GitHubRelease:
    """Represents a GitHub release with its assets."""
    tag_name: str
    tarball_url: Optional[str] = None
    zipball_url: Optional[str] = None
    name: str = ""
    html_url: str = ""
    published_at: Optional[datetime] = None
    assets: List[ReleaseAsset] = field(default_factory=list)

    def get_asset(self, name: str) -> Optional[ReleaseAsset]:
        """Get the first asset with exactly this name."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None

    @classmethod
    def from_api_response(cls, data: dict) -> "GitHubRelease":
        """Create GitHubRelease from GitHub API response."""
        published_at = None
        if data.get("published_at"):
            try:
                published_at = datetime.fromisoformat(
                    data["published_at"].replace("Z", "+00:00")
                )
            except (ValueError, TypeError):
                pass

        assets = [
            ReleaseAsset.from_api_response(a)
            for a in data.get("assets") or []
        ]

        return cls(
            tag_name=data.get("tag_name") or "",
            tarball_url=data.get("tarball_url") or None,
            zipball_url=data.get("zipball_url") or None,
            name=data.get("name") or "",
            html_url=data.get("html_url") or "",
            published_at=published_at,
            assets=assets,
        )


class GitHubClient:
    """Client for the GitHub releases API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = GITHUB_API_BASE,
        timeout: int = REQUEST_TIMEOUT,
    ):
        """
        Initialize GitHub client.

        Args:
            session: HTTP session to use (a new one is created if omitted)
            base_url: Root of the GitHub API
            timeout: Request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()
        if self._owns_session:
            self._session.headers.update(API_HEADERS)

    @property
    def base_url(self) -> str:
        """Root of the GitHub API."""
        return self._base_url

    def _make_request(self, url: str) -> dict:
        """
        Make a GET request to GitHub API.

        Args:
            url: Full URL to request

        Returns:
            JSON response as dict

        Raises:
            GitHubConnectionError: If unable to connect
            GitHubRateLimitError: If rate limit exceeded
            GitHubNotFoundError: If resource not found
            GitHubError: For other errors
        """
        try:
            logger.debug(f"Making request to: {url}")
            response = self._session.get(
                url, headers=API_HEADERS, timeout=self._timeout
            )

            if response.status_code == 200:
                return response.json()
            elif response.status_code == 404:
                raise GitHubNotFoundError(f"Resource not found: {url}")
            elif response.status_code == 403:
                if "rate limit" in response.text.lower():
                    raise GitHubRateLimitError("GitHub API rate limit exceeded")
                raise GitHubError(f"Access denied: {response.text}")
            else:
                raise GitHubError(
                    f"GitHub API error {response.status_code}: {response.text}"
                )

        except requests.exceptions.Timeout:
            logger.error("GitHub request timed out")
            raise GitHubConnectionError("Request timed out connecting to GitHub")
        except requests.exceptions.ConnectionError as e:
            logger.error(f"GitHub connection error: {e}")
            raise GitHubConnectionError(
                "Unable to connect to GitHub. Check your internet connection."
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"GitHub request error: {e}")
            raise GitHubError(f"Request failed: {e}")
        except ValueError as e:
            # requests raises a ValueError subclass for undecodable JSON
            logger.error(f"Invalid JSON from GitHub: {e}")
            raise GitHubError(f"Invalid response from GitHub: {e}")

    def get_latest_release(self, owner: str, repo: str) -> GitHubRelease:
        """
        Get the latest release of a repository.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name

        Returns:
            GitHubRelease representing the latest release

        Raises:
            GitHubConnectionError: If unable to connect
            GitHubNotFoundError: If the repository or its releases are not found
            GitHubError: For other errors
        """
        url = f"{self._base_url}/repos/{owner}/{repo}/releases/latest"
        logger.info(f"Fetching latest release of {owner}/{repo}")

        data = self._make_request(url)
        if not isinstance(data, dict):
            raise GitHubError(f"Unexpected release payload from {url}")
        release = GitHubRelease.from_api_response(data)

        logger.info(f"Found latest release: {release.tag_name}")
        return release

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
