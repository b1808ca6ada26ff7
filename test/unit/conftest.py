"""Test fixtures for godown unit tests."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from robyn import Robyn
from robyn import testing as robyn_testing

from godown.content.resolver import PathResolver
from godown.content.service import ContentService
from godown.core.settings import Settings
from godown.main import create_app


# -----------------------------------------------------------------------------
# Mock classes for Robyn Request
# -----------------------------------------------------------------------------


@dataclass
class MockUrl:
    """Mock Url object for Robyn Request."""

    path: str = "/"
    scheme: str = "http"
    host: str = "localhost"


@dataclass
class MockRequest:
    """Mock Request object for Robyn."""

    url: MockUrl = field(default_factory=MockUrl)
    method: str = "GET"
    headers: dict = field(default_factory=dict)


@pytest.fixture
def make_mock_request():
    """Factory fixture to create mock requests."""

    def _make(path: str = "/", method: str = "GET") -> MockRequest:
        return MockRequest(url=MockUrl(path=path), method=method)

    return _make


# -----------------------------------------------------------------------------
# Served root fixtures
# -----------------------------------------------------------------------------


SITE_FILES: dict[str, bytes] = {
    "README.md": b"# Home\n\nWelcome to the **docs**.\n",
    "guide.md": b"# Guide\n\n| a | b |\n|---|---|\n| 1 | 2 |\n",
    "notes": b"plain notes without extension\n",
    "notes.md": b"# Notes in markdown\n",
    "script.sh": b"#!/bin/sh\necho '<hello>' && exit 0\n",
    "blob.bin": bytes(range(256)),
    "empty.txt": b"",
    "logo.png": b"\x89PNG\r\n\x1a\nfake png",
    "style.css": b"body { color: red; }",
    "docs/README.md": b"# Docs index\n",
    "docs/install.md": b"## Install\n",
    "nested/deep/page.md": b"Deep page\n",
    "plain/file.txt": b"not a readme\n",
}


def build_tree(root: Path, files: dict[str, bytes]) -> Path:
    """Write files under root, creating parent directories."""
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    return root


@pytest.fixture
def served_root(tmp_path: Path) -> Path:
    """Directory tree served in tests, next to an outside file that must stay unreachable."""
    (tmp_path / "secret.md").write_bytes(b"# Secret\n")
    return build_tree(tmp_path / "site", SITE_FILES)


@pytest.fixture
def resolver(served_root: Path) -> PathResolver:
    return PathResolver(served_root, index_file="README.md")


@pytest.fixture
def service(served_root: Path) -> ContentService:
    return ContentService(served_root, index_file="README.md")


# -----------------------------------------------------------------------------
# Application fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def app_settings(served_root: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings serving the test tree, unaffected by the caller's environment."""
    for name in ("PORT", "HOST", "STYLE", "INDEX", "ROOT"):
        monkeypatch.delenv(name, raising=False)
    return Settings(ROOT=served_root, INDEX="README.md")


@pytest.fixture
def app(app_settings: Settings) -> Robyn:
    return create_app(app_settings)


@pytest.fixture
def client(app: Robyn):
    """In-process client running middlewares and handlers without a server."""
    with robyn_testing.TestClient(app) as test_client:
        yield test_client
