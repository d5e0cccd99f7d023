"""Line budget for the collected staged diff."""

from describe.git.exceptions import BudgetExceededError


class LineBudget:
    """Running total of rendered diff lines checked against a ceiling.

    A ``max_lines`` of zero or less disables the check. Reaching the limit
    exactly is allowed; going one line over raises.
    """

    def __init__(self, max_lines: int):
        self.max_lines = max_lines
        self.total = 0

    @property
    def enabled(self) -> bool:
        return self.max_lines > 0

    def add(self, lines: int) -> int:
        """Add ``lines`` to the running total.

        Returns:
            The new total.

        Raises:
            BudgetExceededError: If the total is now above ``max_lines``.
        """
        self.total += lines
        if self.enabled and self.total > self.max_lines:
            raise BudgetExceededError(limit=self.max_lines, actual=self.total)
        return self.total
