"""Mock GitHub server for integration testing.

Uses http.server to run a local server that answers the latest-release
endpoint and serves release files, standing in for both the GitHub API
and the download host.
"""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, Optional

import pytest


class MockGitHubServer:
    """
    Mock HTTP server that serves one repository's latest release.

    Usage:
        with MockGitHubServer() as server:
            server.set_release("owner", "repo", "v1", {"asset.file": b"..."})
            # GitHubClient(base_url=server.url)
    """

    def __init__(self):
        self._server: Optional[ThreadingHTTPServer] = None
        self._thread: Optional[threading.Thread] = None
        self.releases: Dict[str, dict] = {}
        self.files: Dict[str, bytes] = {}
        self.requests: list = []
        self.request_headers: Dict[str, dict] = {}

    @property
    def host(self) -> str:
        """Server host address."""
        return "127.0.0.1"

    @property
    def url(self) -> str:
        """Base URL of the running server."""
        if self._server is None:
            raise RuntimeError("Server not started")
        return f"http://{self.host}:{self._server.server_address[1]}"

    def set_release(self, owner: str, repo: str, tag: str, assets: Dict[str, bytes]) -> None:
        """
        Publish a release with the given asset contents.

        The source tarball is served at /tarball/<tag> with fixed content.
        """
        for name, content in assets.items():
            self.files[f"/download/{tag}/{name}"] = content
        self.files[f"/tarball/{tag}"] = f"tarball {tag}".encode()

        self.releases[f"/repos/{owner}/{repo}/releases/latest"] = {
            "tag_name": tag,
            "name": f"Release {tag}",
            "tarball_url": f"{self.url}/tarball/{tag}",
            "assets": [
                {
                    "name": name,
                    "browser_download_url": f"{self.url}/download/{tag}/{name}",
                    "size": len(content),
                    "content_type": "application/octet-stream",
                }
                for name, content in assets.items()
            ],
        }

    def _make_handler(self):
        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                server.requests.append(self.path)
                server.request_headers[self.path] = dict(self.headers)
                if self.path in server.releases:
                    body = json.dumps(server.releases[self.path]).encode()
                    content_type = "application/json"
                elif self.path in server.files:
                    body = server.files[self.path]
                    content_type = "application/octet-stream"
                else:
                    self.send_response(404)
                    self.send_header("Content-Length", "0")
                    self.end_headers()
                    return

                self.send_response(200)
                self.send_header("Content-Type", content_type)
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args):
                pass

        return Handler

    def start(self) -> None:
        """Start the server on a free port in a background thread."""
        self._server = ThreadingHTTPServer((self.host, 0), self._make_handler())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the server."""
        if self._server:
            self._server.shutdown()
            self._server.server_close()

        self._server = None
        self._thread = None

    def __enter__(self) -> "MockGitHubServer":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()


@pytest.fixture
def github_server():
    """Provide a running mock GitHub server."""
    server = MockGitHubServer()
    server.start()
    yield server
    server.stop()
