"""Git-related exception classes.

Contains all exception classes for repository reads and diff collection:
- GitError: Base exception for git-related errors
- GitCommandError: A git subprocess exited with a non-zero status
- RepositoryAccessError: A status/HEAD/tree/index read failed (fatal)
- FileReadError: A work-tree file could not be sampled (non-fatal)
- ContentResolutionError: A HEAD or blob lookup missed (non-fatal)
- BudgetExceededError: The rendered diff is larger than the line limit
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class GitCommandError(GitError):
    """Raised when a git subprocess exits with a non-zero status."""

    def __init__(self, message: str, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class RepositoryAccessError(GitError):
    """Raised when the repository status, HEAD, tree or index cannot be read."""

    pass


class FileReadError(GitError):
    """Raised when a work-tree file cannot be opened or read."""

    pass


class ContentResolutionError(GitError):
    """Raised when file content cannot be resolved from HEAD or the index."""

    pass


class BudgetExceededError(Exception):
    """Raised when the staged diff exceeds the configured line limit.

    Attributes:
        limit: The configured maximum number of lines.
        actual: The number of lines counted when the limit tripped.
    """

    def __init__(self, limit: int, actual: int):
        self.limit = limit
        self.actual = actual
        super().__init__(
            f"staged changes exceed maximum line limit of {limit} "
            f"(currently at {actual} lines). Consider staging fewer files "
            f"or using --max-lines to increase the limit"
        )
