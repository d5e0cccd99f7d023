"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its text output
- _run_git_command_bytes: Run a git command and return its raw output
- get_repo_root: Get the root directory of a git repository
"""

import subprocess
from pathlib import Path
from typing import Optional

from describe.git.exceptions import GitCommandError, GitError, RepositoryAccessError


def _run_git(args: list[str], cwd: Optional[Path]) -> bytes:
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            check=True,
            cwd=cwd,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        stderr = e.stderr or b""
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        raise GitCommandError(
            f"Git command failed: git {' '.join(args)}\n{stderr.strip()}",
            returncode=e.returncode,
            stderr=stderr.strip(),
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the current directory).

    Returns:
        The stdout of the git command decoded as UTF-8. Output is not
        stripped since NUL-separated formats depend on exact content.

    Raises:
        GitCommandError: If the command exits non-zero.
        GitError: If git cannot be run.
    """
    return _run_git(args, cwd).decode("utf-8", errors="replace")


def _run_git_command_bytes(args: list[str], cwd: Optional[Path] = None) -> bytes:
    """Run a git command and return its undecoded stdout.

    Raises:
        GitCommandError: If the command exits non-zero.
        GitError: If git cannot be run.
    """
    return _run_git(args, cwd)


def get_repo_root(path: Optional[Path] = None) -> Path:
    """Get the root directory of the git repository containing ``path``.

    Args:
        path: A directory inside the repository (defaults to the current directory).

    Returns:
        Path to the repository root.

    Raises:
        RepositoryAccessError: If not in a git repository.
        GitError: If git cannot be run.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=path).strip()
    except GitCommandError as e:
        raise RepositoryAccessError(
            "Not in a git repository. Please run this command from within a git repo."
        ) from e
    return Path(root)
