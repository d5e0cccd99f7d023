"""Data models for staged diff collection.

Contains:
- StagingState: Index-side status of a path
- StagedFile: One staged path with its resolved before/after content
- HunkLine: A tagged line inside a hunk
- DiffHunk: A single unified-diff hunk
- FilePatch: Rendered header and hunk for one file
- PatchDocument: The ordered per-file patches for a whole collection
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class StagingState(Enum):
    """Index-side status of a path, as reported by work-tree status."""

    UNMODIFIED = "Unmodified"
    UNTRACKED = "Untracked"
    ADDED = "Added"
    MODIFIED = "Modified"
    DELETED = "Deleted"
    RENAMED = "Renamed"
    COPIED = "Copied"
    UNKNOWN = "Unknown"

    @property
    def is_staged(self) -> bool:
        """True when the index carries a change for this path."""
        return self not in (StagingState.UNMODIFIED, StagingState.UNTRACKED)


# Abbreviated hash used in headers when a side has no blob
NULL_HASH = "0000000"


@dataclass
class StagedFile:
    """A staged path with its HEAD and index content.

    ``head_content`` is None for additions (and for repositories without
    commits); ``staged_content`` is None for deletions.
    """

    path: str
    staging_state: StagingState
    head_content: Optional[str] = None
    staged_content: Optional[str] = None
    head_blob_hash: Optional[str] = None
    staged_blob_hash: Optional[str] = None

    @property
    def head_short_hash(self) -> str:
        return self.head_blob_hash[:7] if self.head_blob_hash else NULL_HASH

    @property
    def staged_short_hash(self) -> str:
        return self.staged_blob_hash[:7] if self.staged_blob_hash else NULL_HASH


class LineKind(Enum):
    """Tag of a line inside a hunk, valued by its unified-diff prefix."""

    CONTEXT = " "
    REMOVED = "-"
    ADDED = "+"


@dataclass
class HunkLine:
    """A single tagged line in a hunk."""

    kind: LineKind
    text: str

    def render(self) -> str:
        return f"{self.kind.value}{self.text}\n"


@dataclass
class DiffHunk:
    """A unified-diff hunk with 1-based start lines."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: list[HunkLine] = field(default_factory=list)

    @property
    def header(self) -> str:
        """The ``@@ -a,b +c,d @@`` line."""
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"

    def render(self) -> str:
        return self.header + "\n" + "".join(line.render() for line in self.lines)


@dataclass
class FilePatch:
    """Header lines plus rendered hunk for one staged file."""

    staged_file: StagedFile
    header_lines: list[str]
    hunk_text: str

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.header_lines) + self.hunk_text

    @property
    def line_count(self) -> int:
        """Number of rendered lines (newline characters) in this block."""
        return self.render().count("\n")


@dataclass
class PatchDocument:
    """Ordered per-file patches and their aggregate line count."""

    files: list[FilePatch] = field(default_factory=list)
    line_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.files

    def render(self) -> str:
        """Concatenate every file block into one diff text."""
        return "".join(patch.render() for patch in self.files)
