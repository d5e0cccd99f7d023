"""Staged change collector.

Contains:
- StagedChangeCollector: Builds a PatchDocument from a repository's staged changes
- collect_staged_changes: Convenience wrapper returning the rendered diff text
- build_file_header: Per-state diff header lines for a staged file
"""

from typing import Optional

from loguru import logger

from describe.git.budget import LineBudget
from describe.git.exceptions import (
    ContentResolutionError,
    FileReadError,
    GitError,
)
from describe.git.filters import BinaryDetector, PathClassifier
from describe.git.models import FilePatch, PatchDocument, StagedFile, StagingState
from describe.git.repository import RepositoryProvider, Tree
from describe.git.unified import unified_diff


def build_file_header(staged_file: StagedFile) -> list[str]:
    """Build the ``diff --git`` header lines for a staged file.

    Args:
        staged_file: The file with its resolved blob hashes.

    Returns:
        Header lines without trailing newlines.
    """
    path = staged_file.path
    lines = [f"diff --git a/{path} b/{path}"]

    if staged_file.staging_state == StagingState.ADDED:
        lines.append("new file mode 100644")
        lines.append(f"index 0000000..{staged_file.staged_short_hash}")
        lines.append("--- /dev/null")
        lines.append(f"+++ b/{path}")
    elif staged_file.staging_state == StagingState.DELETED:
        lines.append("deleted file mode 100644")
        lines.append(f"index {staged_file.head_short_hash}..0000000")
        lines.append(f"--- a/{path}")
        lines.append("+++ /dev/null")
    else:
        lines.append(f"index {staged_file.head_short_hash}..{staged_file.staged_short_hash} 100644")
        lines.append(f"--- a/{path}")
        lines.append(f"+++ b/{path}")

    return lines


class StagedChangeCollector:
    """Collects staged changes into a line-bounded unified diff document.

    Files are processed one at a time in status order. Paths under ignored
    directories and binary work-tree files are skipped before any content is
    read. Once the rendered line total goes over ``max_lines`` collection
    stops with BudgetExceededError and no document is returned.
    """

    def __init__(
        self,
        classifier: Optional[PathClassifier] = None,
        detector: Optional[BinaryDetector] = None,
    ):
        self.classifier = classifier or PathClassifier()
        self.detector = detector or BinaryDetector()

    def collect(self, repository: RepositoryProvider, max_lines: int) -> PatchDocument:
        """Build the patch document for everything staged in ``repository``.

        Args:
            repository: Source of status, HEAD tree, index and blobs.
            max_lines: Line ceiling for the rendered document; <= 0 disables it.

        Returns:
            The patch document. It is empty when nothing eligible is staged.

        Raises:
            RepositoryAccessError: If status, HEAD, tree or index cannot be read.
            BudgetExceededError: If the rendered document is over ``max_lines``.
        """
        logger.debug("Getting status")
        status = repository.status()

        logger.debug("Getting HEAD")
        head_tree = repository.head_tree()
        if head_tree is None:
            logger.debug("No commits yet, treating HEAD as an empty tree")

        candidates = self._filter_paths(repository, status)
        if not candidates:
            return PatchDocument()

        logger.debug("Getting index")
        index = repository.index_entries()

        logger.debug("Generating diffs for staged files")
        budget = LineBudget(max_lines)
        document = PatchDocument()
        for path, state in candidates:
            staged_file = self._resolve(repository, head_tree, index, path, state)
            patch = FilePatch(
                staged_file=staged_file,
                header_lines=build_file_header(staged_file),
                hunk_text=unified_diff(staged_file.head_content or "", staged_file.staged_content or ""),
            )
            document.line_count = budget.add(patch.line_count)
            document.files.append(patch)

        logger.debug(f"Processed {len(document.files)} staged files ({document.line_count} total lines)")
        return document

    def _filter_paths(
        self,
        repository: RepositoryProvider,
        status: dict[str, StagingState],
    ) -> list[tuple[str, StagingState]]:
        """Keep staged, non-ignored, non-binary paths in status order."""
        candidates = []
        for path, state in status.items():
            if not state.is_staged:
                continue

            if self.classifier.is_ignored(path):
                logger.debug(f"Skipping ignored path: {path}")
                continue

            # Deleted files have nothing in the work tree to sample
            if state != StagingState.DELETED:
                try:
                    if self.detector.is_binary(repository.work_tree / path):
                        logger.debug(f"Skipping binary file: {path}")
                        continue
                except FileReadError as e:
                    logger.debug(f"Error checking if file is binary: {path}: {e}")

            logger.debug(f"Processing staged file: {path} (status: {state.value})")
            candidates.append((path, state))
        return candidates

    def _resolve(
        self,
        repository: RepositoryProvider,
        head_tree: Optional[Tree],
        index: dict[str, str],
        path: str,
        state: StagingState,
    ) -> StagedFile:
        """Resolve HEAD and index content for one path, degrading misses to empty."""
        staged_file = StagedFile(path=path, staging_state=state)

        # Without commits there is no HEAD side at all
        if state != StagingState.ADDED and head_tree is not None:
            staged_file.head_content = ""
            try:
                tree_file = head_tree.file(path)
            except ContentResolutionError as e:
                # Keep the hash for the header even when the blob is unreadable
                staged_file.head_blob_hash = head_tree.entries.get(path)
                logger.warning(f"Using empty HEAD content for {path}: {e}")
            else:
                staged_file.head_blob_hash = tree_file.blob_hash
                staged_file.head_content = tree_file.content

        if state != StagingState.DELETED:
            staged_file.staged_content = ""
            blob_hash = index.get(path)
            if blob_hash is None:
                logger.warning(f"Using empty staged content for {path}: not found in index")
            else:
                staged_file.staged_blob_hash = blob_hash
                try:
                    data = repository.read_blob(blob_hash)
                    staged_file.staged_content = data.decode("utf-8", errors="replace")
                except GitError as e:
                    logger.warning(f"Using empty staged content for {path}: {e}")

        return staged_file


def collect_staged_changes(repository: RepositoryProvider, max_lines: int) -> str:
    """Collect the staged diff of ``repository`` as text.

    Returns:
        The rendered diff, or an empty string when nothing is staged.

    Raises:
        RepositoryAccessError: If the repository cannot be read.
        BudgetExceededError: If the diff is longer than ``max_lines``.
    """
    return StagedChangeCollector().collect(repository, max_lines).render()
