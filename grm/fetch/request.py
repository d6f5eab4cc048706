"""Request models for the fetch workflow.

Defines the repository identifier and the fetch request dataclasses.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from grm.config.paths import DEFAULT_WORKING_DIR
from grm.fetch.exceptions import MalformedIdentifierError


@dataclass(frozen=True)
class RepositoryIdentifier:
    """Immutable owner/name pair identifying a repository."""
    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def parse(cls, text: str) -> "RepositoryIdentifier":
        """
        Parse an ``owner/name`` string.

        Exactly one ``/`` is required. Empty parts are accepted, so
        ``"/"`` parses to an empty owner and name.

        Args:
            text: Identifier string

        Returns:
            RepositoryIdentifier instance

        Raises:
            MalformedIdentifierError: If the string has zero or several separators
        """
        parts = text.split("/")
        if len(parts) != 2:
            raise MalformedIdentifierError(text)
        return cls(owner=parts[0], name=parts[1])


@dataclass
class FetchRequest:
    """What to fetch and where to put it."""
    repository: str
    asset: str = ""   # empty: source tarball
    output: str = ""  # empty: last segment of the download URL
    working_dir: Union[str, Path] = DEFAULT_WORKING_DIR

    @property
    def wants_tarball(self) -> bool:
        """True if no asset name was requested."""
        return not self.asset

    @property
    def identifier(self) -> RepositoryIdentifier:
        """Parsed repository identifier."""
        return RepositoryIdentifier.parse(self.repository)
