"""Staged diff collection for describe.

This package builds a bounded unified diff of staged changes from primitive
repository reads:
- exceptions: GitError, RepositoryAccessError, FileReadError,
              ContentResolutionError, BudgetExceededError
- runner: _run_git_command, get_repo_root
- models: StagingState, StagedFile, DiffHunk, FilePatch, PatchDocument
- filters: PathClassifier, BinaryDetector, DEFAULT_IGNORED_DIRS
- unified: split_lines, build_hunk, unified_diff
- budget: LineBudget
- repository: GitRepository, Tree, open_repository
- collector: StagedChangeCollector, collect_staged_changes
"""

# Exceptions
from describe.git.exceptions import (
    GitError,
    GitCommandError,
    RepositoryAccessError,
    FileReadError,
    ContentResolutionError,
    BudgetExceededError,
)

# Runner utilities
from describe.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Models
from describe.git.models import (
    StagingState,
    StagedFile,
    LineKind,
    HunkLine,
    DiffHunk,
    FilePatch,
    PatchDocument,
)

# Filters
from describe.git.filters import (
    PathClassifier,
    BinaryDetector,
    DEFAULT_IGNORED_DIRS,
)

# Diff synthesis
from describe.git.unified import (
    split_lines,
    build_hunk,
    unified_diff,
)

# Budget
from describe.git.budget import LineBudget

# Repository provider
from describe.git.repository import (
    RepositoryProvider,
    GitRepository,
    Tree,
    TreeFile,
    open_repository,
)

# Collector
from describe.git.collector import (
    StagedChangeCollector,
    collect_staged_changes,
    build_file_header,
)


__all__ = [
    # Exceptions
    "GitError",
    "GitCommandError",
    "RepositoryAccessError",
    "FileReadError",
    "ContentResolutionError",
    "BudgetExceededError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Models
    "StagingState",
    "StagedFile",
    "LineKind",
    "HunkLine",
    "DiffHunk",
    "FilePatch",
    "PatchDocument",
    # Filters
    "PathClassifier",
    "BinaryDetector",
    "DEFAULT_IGNORED_DIRS",
    # Diff synthesis
    "split_lines",
    "build_hunk",
    "unified_diff",
    # Budget
    "LineBudget",
    # Repository
    "RepositoryProvider",
    "GitRepository",
    "Tree",
    "TreeFile",
    "open_repository",
    # Collector
    "StagedChangeCollector",
    "collect_staged_changes",
    "build_file_header",
]
