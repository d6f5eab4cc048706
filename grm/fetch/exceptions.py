"""Fetch workflow exceptions for grm.

Each failure of the fetch workflow has its own exception type carrying
the structured details of what went wrong, so callers can branch on the
kind of failure instead of parsing messages.
"""

from typing import Optional


class FetchError(Exception):
    """Base exception for all fetch errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class MalformedIdentifierError(FetchError):
    """Repository identifier is not of the form owner/repo."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__("Expected owner/repo format")


class ReleaseLookupError(FetchError):
    """Latest release could not be retrieved."""

    def __init__(self, owner: str, repo: str, original_error: Exception = None):
        self.owner = owner
        self.repo = repo
        message = f"Failed to look up latest release of {owner}/{repo}"
        super().__init__(message, original_error)


class NoReleaseFoundError(FetchError):
    """Repository has no published release."""

    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo
        super().__init__(f"No release found for {owner}/{repo}")


class AlreadyUpToDateError(FetchError):
    """Latest release tag matches the locally recorded tag."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__("Already up to date, nothing to download")


class AssetNotFoundError(FetchError):
    """Requested asset is not attached to the release."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Can't find '{name}' in release assets")


class DownloadError(FetchError):
    """Download to the output path failed."""

    def __init__(self, url: str, output: str, original_error: Exception = None):
        self.url = url
        self.output = output
        message = f"Failed to download '{url}' to {output}"
        super().__init__(message, original_error)


class TagPersistError(FetchError):
    """Tag marker could not be written."""

    def __init__(self, path: str, original_error: Exception = None):
        self.path = path
        message = f"Failed to write tag to {path}"
        super().__init__(message, original_error)
