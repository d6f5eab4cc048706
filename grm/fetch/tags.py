"""Tag markers recording the last fetched release of each repository."""

import logging
from pathlib import Path
from typing import Optional, Union

from grm.config.paths import DEFAULT_WORKING_DIR, get_tag_marker_path
from grm.fetch.exceptions import AlreadyUpToDateError, TagPersistError

logger = logging.getLogger("grm.tags")


class TagStore:
    """Reads and writes tag markers under a working directory."""

    def __init__(self, working_dir: Union[str, Path] = DEFAULT_WORKING_DIR):
        self._working_dir = Path(working_dir)

    @property
    def working_dir(self) -> Path:
        """Root directory of the tag markers."""
        return self._working_dir

    def path_for(self, owner: str, repo: str) -> Path:
        """Marker path for a repository."""
        return get_tag_marker_path(self._working_dir, owner, repo)

    def read(self, owner: str, repo: str) -> Optional[str]:
        """
        Read the recorded tag for a repository.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            The recorded tag, or None if there is no readable marker
        """
        path = self.path_for(owner, repo)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"No tag marker at {path}: {e}")
            return None

    def assert_not_current(self, owner: str, repo: str, tag: str) -> None:
        """
        Check that ``tag`` differs from the recorded tag.

        Raises:
            AlreadyUpToDateError: If the marker holds exactly ``tag``
        """
        recorded = self.read(owner, repo)
        if recorded is not None and recorded == tag:
            logger.info(f"{owner}/{repo} already at {tag}")
            raise AlreadyUpToDateError(tag)

    def write(self, owner: str, repo: str, tag: str) -> Path:
        """
        Record ``tag`` as the last fetched release of a repository.

        The file holds the tag verbatim with no trailing newline.

        Returns:
            Path of the marker written

        Raises:
            TagPersistError: If the directory or file cannot be written
        """
        path = self.path_for(owner, repo)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(tag)
        except OSError as e:
            logger.error(f"Failed to write tag marker {path}: {e}")
            raise TagPersistError(str(path), e)

        logger.debug(f"Recorded tag {tag} at {path}")
        return path
