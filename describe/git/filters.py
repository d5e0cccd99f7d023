"""Path and content filters for staged diff collection.

Contains:
- PathClassifier: Flags paths that live under vendor/build directories
- BinaryDetector: Samples a file's leading bytes to spot binary content
- DEFAULT_IGNORED_DIRS: Directory names skipped by default
"""

from pathlib import Path
from typing import Iterable, Union

from describe.git.exceptions import FileReadError


# Directory names whose contents are never described.
# A path is ignored when any of its segments matches one of these exactly.
DEFAULT_IGNORED_DIRS = (
    "vendor",
    "node_modules",
    ".git",
    "dist",
    "build",
    "target",
    ".next",
    ".nuxt",
    "__pycache__",
    ".pytest_cache",
    ".tox",
    "venv",
    ".venv",
)

DEFAULT_SAMPLE_SIZE = 8192
DEFAULT_PRINTABLE_THRESHOLD = 0.95

# Tab, LF and CR count as printable alongside 0x20-0x7E
_WHITESPACE_BYTES = frozenset((0x09, 0x0A, 0x0D))


class PathClassifier:
    """Decides whether a repo-relative path lies under an ignored directory."""

    def __init__(self, ignored_dirs: Iterable[str] = DEFAULT_IGNORED_DIRS):
        self.ignored_dirs = frozenset(ignored_dirs)

    def is_ignored(self, path: str) -> bool:
        """Check if any ``/``-separated segment of ``path`` is an ignored name.

        Args:
            path: Repository-relative path. Backslashes are treated as separators.

        Returns:
            True if the path should be skipped.
        """
        segments = path.replace("\\", "/").split("/")
        return any(segment in self.ignored_dirs for segment in segments)


class BinaryDetector:
    """Classifies files as text or binary from a leading byte sample.

    A sample containing a NUL byte is binary. Otherwise the file is binary
    when fewer than ``threshold`` of its sampled bytes are printable ASCII
    or tab/LF/CR. Text in non-ASCII encodings can be misclassified; that
    is accepted.
    """

    def __init__(
        self,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        threshold: float = DEFAULT_PRINTABLE_THRESHOLD,
    ):
        self.sample_size = sample_size
        self.threshold = threshold

    def is_binary(self, path: Union[str, Path]) -> bool:
        """Check whether the file at ``path`` looks binary.

        Args:
            path: Filesystem path of the file to sample.

        Returns:
            True if the sample looks binary. Empty files are text.

        Raises:
            FileReadError: If the file cannot be opened or read.
        """
        try:
            with open(path, "rb") as f:
                sample = f.read(self.sample_size)
        except OSError as e:
            raise FileReadError(f"Failed to read {path}: {e}") from e

        return self.classify(sample)

    def classify(self, sample: bytes) -> bool:
        """Apply the binary heuristic to an in-memory sample."""
        if not sample:
            return False

        if b"\x00" in sample:
            return True

        printable = sum(1 for b in sample if b in _WHITESPACE_BYTES or 0x20 <= b <= 0x7E)
        return printable / len(sample) < self.threshold
