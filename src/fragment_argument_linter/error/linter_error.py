from __future__ import annotations

from typing import TYPE_CHECKING, Collection

from ..issues import IssueLevel

if TYPE_CHECKING:
    from ..issues import LintStats, ValidationIssue

__all__ = ["FragmentArgumentLinterError"]


class FragmentArgumentLinterError(Exception):
    """Fragment Argument Linter Error

    Raised when a linter run has found one or more error-level issues. Individual
    issues are never raised, they are collected, and this error carries all of them
    together with the printed report, so that the failure can be diagnosed without
    running the linter again.
    """

    message: str
    """A message describing the failure, including the full report"""

    issues: tuple[ValidationIssue, ...]
    """All issues found during the run, in the order they were found"""

    stats: LintStats
    """Statistics about the run"""

    report: str
    """The printed report"""

    __slots__ = "message", "issues", "stats", "report"

    def __init__(
        self, issues: Collection[ValidationIssue], stats: LintStats, report: str
    ) -> None:
        self.issues = tuple(issues)
        self.stats = stats
        self.report = report
        num_errors = len(self.errors)
        self.message = (
            f"Fragment Argument Linter failed with {num_errors} error(s):\n\n{report}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.issues)} issue(s))"

    @property
    def errors(self) -> tuple[ValidationIssue, ...]:
        """The error-level issues"""
        return tuple(issue for issue in self.issues if issue.level is IssueLevel.ERROR)
