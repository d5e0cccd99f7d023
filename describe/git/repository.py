"""Repository provider backed by git plumbing commands.

Contains:
- RepositoryProvider: The primitive reads the collector needs
- Tree / TreeFile: A path -> blob listing of the HEAD commit and its resolved files
- GitRepository: RepositoryProvider implemented with the git CLI
- open_repository: Open the repository containing a directory
- parse_porcelain_status: Parse ``git status --porcelain=v1 -z`` output
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from loguru import logger

from describe.git.exceptions import (
    ContentResolutionError,
    GitCommandError,
    GitError,
    RepositoryAccessError,
)
from describe.git.models import StagingState
from describe.git.runner import _run_git_command, _run_git_command_bytes, get_repo_root


# Index column of porcelain v1 status -> staging state
_STATUS_CODES = {
    " ": StagingState.UNMODIFIED,
    "?": StagingState.UNTRACKED,
    "!": StagingState.UNTRACKED,
    "A": StagingState.ADDED,
    "M": StagingState.MODIFIED,
    "T": StagingState.MODIFIED,
    "D": StagingState.DELETED,
    "R": StagingState.RENAMED,
    "C": StagingState.COPIED,
}


@dataclass
class TreeFile:
    """A resolved tree entry: its blob hash and decoded content."""

    blob_hash: str
    content: str


class Tree:
    """Flat ``path -> blob hash`` view of a commit tree.

    Content is read lazily through ``read_blob`` when a file is requested.
    """

    def __init__(
        self,
        entries: Optional[dict[str, str]] = None,
        read_blob: Optional[Callable[[str], bytes]] = None,
    ):
        self.entries = entries or {}
        self._read_blob = read_blob

    def blob_hash(self, path: str) -> str:
        """Look up the blob hash for ``path``.

        Raises:
            ContentResolutionError: If the path is not in the tree.
        """
        try:
            return self.entries[path]
        except KeyError:
            raise ContentResolutionError(f"{path} not found in tree")

    def file(self, path: str) -> TreeFile:
        """Resolve ``path`` to its blob hash and content.

        Raises:
            ContentResolutionError: If the path is absent or its blob cannot be read.
        """
        blob_hash = self.blob_hash(path)
        if self._read_blob is None:
            raise ContentResolutionError(f"No blob reader available for {path}")
        try:
            data = self._read_blob(blob_hash)
        except GitError as e:
            raise ContentResolutionError(f"Failed to read blob {blob_hash} for {path}: {e}") from e
        return TreeFile(blob_hash=blob_hash, content=data.decode("utf-8", errors="replace"))


class RepositoryProvider(Protocol):
    """Primitive repository reads used by the staged change collector."""

    work_tree: Path

    def status(self) -> dict[str, StagingState]:
        """Map each path with a status entry to its index-side state."""
        ...

    def head_tree(self) -> Optional[Tree]:
        """Return the HEAD tree, or None when the repository has no commits."""
        ...

    def index_entries(self) -> dict[str, str]:
        """Map each index path to its blob hash."""
        ...

    def read_blob(self, blob_hash: str) -> bytes:
        """Return the raw content of a blob."""
        ...


def parse_porcelain_status(output: str) -> dict[str, StagingState]:
    """Parse ``git status --porcelain=v1 -z`` output.

    Each record is ``XY <path>`` terminated by NUL; renames and copies are
    followed by a second NUL-terminated field holding the source path. When
    a path has both a staged record and an untracked one, the staged record
    is kept.

    Args:
        output: Raw NUL-separated status output.

    Returns:
        Ordered mapping of path to the staging state of its index column.
    """
    status: dict[str, StagingState] = {}
    fields = output.split("\0")
    i = 0
    while i < len(fields):
        record = fields[i]
        i += 1
        if len(record) < 4:
            continue

        index_code, worktree_code, path = record[0], record[1], record[3:]
        state = _STATUS_CODES.get(index_code, StagingState.UNKNOWN)
        # A path removed from the index but kept on disk is listed twice
        # (`D  p` then `?? p`); the index-side record wins
        if not (path in status and state == StagingState.UNTRACKED):
            status[path] = state

        # Skip the source path of a rename/copy
        if index_code in "RC" or worktree_code in "RC":
            i += 1

    return status


def _parse_nul_records(output: str) -> list[tuple[str, str]]:
    """Split ``<meta>\\t<path>\\0`` records into (meta, path) pairs."""
    records = []
    for record in output.split("\0"):
        if not record:
            continue
        meta, sep, path = record.partition("\t")
        if sep:
            records.append((meta, path))
    return records


class GitRepository:
    """RepositoryProvider implemented with git plumbing commands."""

    def __init__(self, work_tree: Path):
        self.work_tree = Path(work_tree)

    def _git(self, args: list[str]) -> str:
        return _run_git_command(args, cwd=self.work_tree)

    def status(self) -> dict[str, StagingState]:
        """Get work-tree status keyed by path.

        Raises:
            RepositoryAccessError: If status cannot be read.
        """
        try:
            output = self._git(["status", "--porcelain=v1", "-z", "--untracked-files=all", "--no-renames"])
        except GitError as e:
            raise RepositoryAccessError(f"Failed to read repository status: {e}") from e
        return parse_porcelain_status(output)

    def head_commit(self) -> Optional[str]:
        """Get the HEAD commit hash, or None for a repository without commits.

        Raises:
            RepositoryAccessError: If HEAD cannot be resolved for another reason.
        """
        try:
            return self._git(["rev-parse", "--verify", "--quiet", "HEAD^{commit}"]).strip()
        except GitCommandError as e:
            # --verify --quiet exits 1 silently when HEAD is unborn
            if e.returncode == 1 and not e.stderr:
                return None
            raise RepositoryAccessError(f"Failed to resolve HEAD commit: {e}") from e
        except GitError as e:
            raise RepositoryAccessError(f"Failed to resolve HEAD commit: {e}") from e

    def head_tree(self) -> Optional[Tree]:
        """Get the HEAD tree, or None when there are no commits yet.

        Raises:
            RepositoryAccessError: If the commit or its tree cannot be read.
        """
        commit = self.head_commit()
        if commit is None:
            logger.debug("No HEAD found (new repository)")
            return None

        try:
            output = self._git(["ls-tree", "-r", "-z", commit])
        except GitError as e:
            raise RepositoryAccessError(f"Failed to read HEAD tree: {e}") from e

        entries = {}
        for meta, path in _parse_nul_records(output):
            parts = meta.split()
            # <mode> <type> <hash>; submodules are commits, not blobs
            if len(parts) == 3 and parts[1] == "blob":
                entries[path] = parts[2]
        return Tree(entries, read_blob=self.read_blob)

    def index_entries(self) -> dict[str, str]:
        """Get the blob hash of every index entry.

        Raises:
            RepositoryAccessError: If the index cannot be read.
        """
        try:
            output = self._git(["ls-files", "--stage", "-z"])
        except GitError as e:
            raise RepositoryAccessError(f"Failed to read index: {e}") from e

        entries = {}
        for meta, path in _parse_nul_records(output):
            parts = meta.split()
            # <mode> <hash> <stage>
            if len(parts) == 3:
                entries[path] = parts[1]
        return entries

    def read_blob(self, blob_hash: str) -> bytes:
        """Read a blob's raw content.

        Raises:
            GitError: If the blob cannot be read.
        """
        return _run_git_command_bytes(["cat-file", "blob", blob_hash], cwd=self.work_tree)


def open_repository(path: Optional[Path] = None) -> GitRepository:
    """Open the git repository containing ``path`` (default: current directory).

    Raises:
        RepositoryAccessError: If ``path`` is not inside a git repository.
    """
    root = get_repo_root(path)
    logger.debug(f"Opened repository at {root}")
    return GitRepository(root)
