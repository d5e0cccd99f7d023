"""Shared test fixtures and configuration."""

import hashlib
import tempfile
from pathlib import Path
from typing import Optional

import pytest
from loguru import logger

from describe.git import ContentResolutionError, StagingState, Tree


def blob_hash(content: bytes) -> str:
    """Fake content-addressed hash for test blobs."""
    return hashlib.sha1(content).hexdigest()


class FakeRepository:
    """In-memory repository provider backed by a temporary work tree.

    ``head`` maps paths to committed content; leave it None for a
    repository without commits.
    """

    def __init__(self, work_tree: Path, head: Optional[dict[str, bytes]] = None):
        self.work_tree = work_tree
        self.blobs: dict[str, bytes] = {}
        self.head: Optional[dict[str, str]] = None
        self.index: dict[str, str] = {}
        self.states: dict[str, StagingState] = {}
        self.index_reads = 0
        if head is not None:
            self.head = {path: self._store(content) for path, content in head.items()}
            self.index = dict(self.head)

    def _store(self, content: bytes) -> str:
        digest = blob_hash(content)
        self.blobs[digest] = content
        return digest

    def stage(self, path: str, content: Optional[bytes], state: StagingState, write: bool = True) -> None:
        """Record a staged change, updating index and work tree."""
        self.states[path] = state
        if content is None:
            self.index.pop(path, None)
            return
        self.index[path] = self._store(content)
        if write:
            file_path = self.work_tree / path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(content)

    def status(self) -> dict[str, StagingState]:
        return dict(self.states)

    def head_tree(self) -> Optional[Tree]:
        if self.head is None:
            return None
        return Tree(dict(self.head), read_blob=self.read_blob)

    def index_entries(self) -> dict[str, str]:
        self.index_reads += 1
        return dict(self.index)

    def read_blob(self, blob_hash: str) -> bytes:
        try:
            return self.blobs[blob_hash]
        except KeyError:
            raise ContentResolutionError(f"blob {blob_hash} not found")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def empty_repo(temp_dir):
    """A fake repository with no commits."""
    return FakeRepository(temp_dir)


@pytest.fixture
def make_repo(temp_dir):
    """Factory for fake repositories with a committed HEAD."""

    def _make(head: dict[str, bytes]) -> FakeRepository:
        return FakeRepository(temp_dir, head=head)

    return _make


@pytest.fixture
def config_home(temp_dir, monkeypatch):
    """Point the describe config directory at a temporary location."""
    home = temp_dir / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home / "describe"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks added during a test (e.g. by the CLI)."""
    yield
    logger.remove()
