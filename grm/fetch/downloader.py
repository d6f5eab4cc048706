"""Streaming downloader for release files.

Writes the body of an HTTP GET to a local file chunk by chunk.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import requests

from grm.fetch.exceptions import DownloadError

logger = logging.getLogger("grm.downloader")


@dataclass
class DownloadProgress:
    """Progress information for a download operation."""
    url: str
    bytes_downloaded: int
    total_bytes: int

    @property
    def percentage(self) -> float:
        """Download progress as percentage."""
        if self.total_bytes == 0:
            return 0.0
        return (self.bytes_downloaded / self.total_bytes) * 100


# Progress callback type
ProgressCallback = Callable[[DownloadProgress], None]


class ProgressLogger:
    """Progress callback logging each completed step of a download."""

    def __init__(self, log: Optional[logging.Logger] = None, step: float = 10.0):
        """
        Args:
            log: Logger to write to (default: the downloader logger)
            step: Percentage between two log lines
        """
        self._log = log or logger
        self._step = step
        self._next = step

    def __call__(self, progress: DownloadProgress) -> None:
        # Unknown size: only the final byte count is logged by the downloader
        if progress.total_bytes == 0 or progress.percentage < self._next:
            return

        self._log.debug(
            f"Downloaded {progress.bytes_downloaded}/{progress.total_bytes} bytes "
            f"({progress.percentage:.0f}%)"
        )
        while self._next <= progress.percentage:
            self._next += self._step


class AssetDownloader:
    """Downloads a URL to a file through an HTTP session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        chunk_size: int = 8192,
    ):
        """
        Initialize the downloader.

        Args:
            session: HTTP session to download with (a new one if omitted)
            timeout: Request timeout in seconds, None to wait indefinitely
            chunk_size: Bytes per chunk written to disk
        """
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._timeout = timeout
        self._chunk_size = chunk_size

    def download(
        self,
        url: str,
        output: Union[str, Path],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> int:
        """
        Download ``url`` into ``output``.

        The output file is created (or truncated) before the request is
        made. A partially written file is left in place on failure.

        Args:
            url: URL to GET
            output: Destination file path
            progress_callback: Optional callback for progress updates

        Returns:
            Number of bytes written

        Raises:
            DownloadError: If the file cannot be created or the request fails
        """
        logger.info(f"Downloading {url} to {output}")
        downloaded = 0

        try:
            with open(output, "wb") as f:
                with self._session.get(url, stream=True, timeout=self._timeout) as response:
                    response.raise_for_status()

                    total_size = int(response.headers.get("content-length", 0) or 0)

                    for chunk in response.iter_content(chunk_size=self._chunk_size):
                        if chunk:
                            f.write(chunk)
                            downloaded += len(chunk)
                            if progress_callback:
                                progress_callback(DownloadProgress(
                                    url=url,
                                    bytes_downloaded=downloaded,
                                    total_bytes=total_size,
                                ))

        except (OSError, ValueError, requests.exceptions.RequestException) as e:
            logger.error(f"Download failed: {e}")
            raise DownloadError(url, str(output), e)

        logger.info(f"Downloaded {downloaded} bytes to {output}")
        return downloaded

    def close(self) -> None:
        """Close the HTTP session if this downloader created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "AssetDownloader":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
