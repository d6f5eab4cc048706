"""Pytest configuration and shared fixtures for grm tests."""

import pytest
from pathlib import Path
from typing import Generator


# Test constants
TEST_OWNER = "owner"
TEST_REPO = "repo"


SAMPLE_RELEASE_RESPONSE = {
    "tag_name": "v1.0.0",
    "name": "Release v1.0.0",
    "published_at": "2024-01-15T10:30:00Z",
    "html_url": "https://github.com/owner/repo/releases/tag/v1.0.0",
    "tarball_url": "https://api.github.com/repos/owner/repo/tarball/v1.0.0",
    "zipball_url": "https://api.github.com/repos/owner/repo/zipball/v1.0.0",
    "assets": [
        {
            "name": "asset.file",
            "browser_download_url": "https://github.com/owner/repo/releases/download/v1.0.0/asset.file",
            "size": 5,
            "content_type": "application/octet-stream",
        },
        {
            "name": "checksums.txt",
            "browser_download_url": "https://github.com/owner/repo/releases/download/v1.0.0/checksums.txt",
            "size": 128,
            "content_type": "text/plain",
        },
    ],
}


@pytest.fixture
def sample_release_data() -> dict:
    """Provide a copy of a GitHub latest-release payload."""
    data = dict(SAMPLE_RELEASE_RESPONSE)
    data["assets"] = [dict(a) for a in SAMPLE_RELEASE_RESPONSE["assets"]]
    return data


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    """Provide a temporary tag marker directory."""
    return tmp_path / ".grm"


@pytest.fixture
def temp_settings_file(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a temporary settings file path for testing."""
    settings_file = tmp_path / "settings.json"
    yield settings_file
    # Cleanup handled by tmp_path fixture


@pytest.fixture
def existing_marker(working_dir: Path) -> Path:
    """Create a tag marker holding 'tag0' for owner/repo."""
    marker = working_dir / TEST_OWNER / TEST_REPO
    marker.parent.mkdir(parents=True)
    marker.write_bytes(b"tag0")
    return marker
