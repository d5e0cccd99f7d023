"""Single-hunk unified diff synthesis.

Contains:
- split_lines: Split text into lines with newline-as-terminator semantics
- build_hunk: Build the DiffHunk covering all changes between two line lists
- unified_diff: Render the hunk text for two file contents
- CONTEXT_LINES: Number of context lines kept around the change

The diff strips the common prefix and suffix of the two line lists and
reports everything in between as removed then added. It is not a minimal
edit-distance diff: when interior lines repeat, unchanged lines inside the
window still show up as removed and re-added.
"""

from typing import Optional

from describe.git.models import DiffHunk, HunkLine, LineKind


CONTEXT_LINES = 3


def split_lines(text: str) -> list[str]:
    """Split text into lines, treating ``\\n`` as a line terminator.

    A trailing newline closes the last line instead of opening an empty one:
    ``""`` -> ``[]``, ``"a"`` and ``"a\\n"`` -> ``["a"]``,
    ``"a\\n\\n"`` -> ``["a", ""]``. Only ``\\n`` separates lines, so a
    ``\\r`` before it stays in the line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def build_hunk(
    old_lines: list[str],
    new_lines: list[str],
    context: int = CONTEXT_LINES,
) -> Optional[DiffHunk]:
    """Build the single hunk describing ``old_lines`` -> ``new_lines``.

    Args:
        old_lines: Lines before the change.
        new_lines: Lines after the change.
        context: Context lines to keep on each side of the changed region.

    Returns:
        The hunk, or None when the sequences are identical.
    """
    old_len = len(old_lines)
    new_len = len(new_lines)
    shortest = min(old_len, new_len)

    prefix = 0
    while prefix < shortest and old_lines[prefix] == new_lines[prefix]:
        prefix += 1

    # The suffix may not reach back into the prefix window
    suffix = 0
    while (
        suffix < shortest - prefix
        and old_lines[old_len - 1 - suffix] == new_lines[new_len - 1 - suffix]
    ):
        suffix += 1

    old_changed_end = old_len - suffix
    new_changed_end = new_len - suffix
    if prefix == old_changed_end and prefix == new_changed_end:
        return None

    window_start = max(prefix - context, 0)
    old_window_end = min(old_changed_end + context, old_len)
    new_window_end = min(new_changed_end + context, new_len)

    lines = [HunkLine(LineKind.CONTEXT, text) for text in old_lines[window_start:prefix]]
    lines.extend(HunkLine(LineKind.REMOVED, text) for text in old_lines[prefix:old_changed_end])
    lines.extend(HunkLine(LineKind.ADDED, text) for text in new_lines[prefix:new_changed_end])
    lines.extend(HunkLine(LineKind.CONTEXT, text) for text in old_lines[old_changed_end:old_window_end])

    return DiffHunk(
        old_start=window_start + 1,
        old_count=old_window_end - window_start,
        new_start=window_start + 1,
        new_count=new_window_end - window_start,
        lines=lines,
    )


def unified_diff(old_text: str, new_text: str, context: int = CONTEXT_LINES) -> str:
    """Render a unified-diff hunk for two file contents.

    Args:
        old_text: Content before the change (empty for added files).
        new_text: Content after the change (empty for deleted files).
        context: Context lines to keep on each side of the changed region.

    Returns:
        The ``@@`` header followed by tagged lines, each ending in a newline,
        or an empty string when there is no difference.
    """
    hunk = build_hunk(split_lines(old_text), split_lines(new_text), context=context)
    if hunk is None:
        return ""
    return hunk.render()
