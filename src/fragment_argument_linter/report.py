"""Print linter reports"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from .issues import IssueLevel

if TYPE_CHECKING:
    from .issues import LintResult, ValidationIssue

__all__ = ["print_issue", "print_report"]


_icons = {
    IssueLevel.ERROR: "❌",
    IssueLevel.WARNING: "⚠️",
    IssueLevel.INFO: "ℹ️",
}


def print_report(result: LintResult) -> str:
    """Print a linter result as a Markdown report.

    The issues are grouped by fragment, with the fragments sorted by name and the
    issues of each fragment kept in the order in which they have been found.
    """
    stats = result.stats
    lines = [
        "# GraphQL Fragment Argument Linter Report",
        "",
        "## Summary",
        f"- Fragments checked: {stats.fragments_checked}",
        f"- Fragments with issues: {stats.fragments_with_issues}",
        f"- Total issues: {stats.total_issues}",
        "",
    ]

    if not result.issues:
        lines.append("✅ No issues found! All fragments are valid.")
        return "\n".join(lines)

    issues_by_fragment: dict[str, list[ValidationIssue]] = defaultdict(list)
    for issue in result.issues:
        issues_by_fragment[issue.fragment_name].append(issue)

    lines.extend(["## Issues Found", ""])
    for fragment_name in sorted(issues_by_fragment):
        lines.extend([f"### Fragment: {fragment_name}", ""])
        lines.extend(print_issue(issue) for issue in issues_by_fragment[fragment_name])
        lines.append("")

    return "\n".join(lines)


def print_issue(issue: ValidationIssue) -> str:
    """Print a single issue as one line of Markdown."""
    level = issue.level
    location = issue.location
    printed_location = (
        f" (line {location.line}, column {location.column})" if location else ""
    )
    return (
        f"{_icons[level]} **{level.value.upper()}**: {issue.message}{printed_location}"
    )
