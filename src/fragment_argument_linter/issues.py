"""Validation issues"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, NamedTuple, TypedDict

if TYPE_CHECKING:
    from graphql.language import FormattedSourceLocation, SourceLocation

__all__ = [
    "FormattedValidationIssue",
    "IssueCollector",
    "IssueKind",
    "IssueLevel",
    "LintResult",
    "LintStats",
    "ValidationIssue",
]


class IssueLevel(Enum):
    """The severity of a validation issue"""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(Enum):
    """The kind of inconsistency a validation issue reports"""

    MISSING_PARAMETER_DECLARATION = "missing parameter declaration"
    MISSING_ARGUMENTS_AT_SPREAD = "missing arguments at spread"
    UNEXPECTED_ARGUMENTS_AT_SPREAD = "unexpected arguments at spread"
    UNDEFINED_FRAGMENT_REFERENCE = "undefined fragment reference"


class FormattedValidationIssue(TypedDict, total=False):
    """Formatted validation issue"""

    level: str
    message: str
    fragment_name: str
    locations: list[FormattedSourceLocation]


class ValidationIssue(NamedTuple):
    """An issue found while checking fragment arguments.

    Issues are attributed to the fragment they concern, which is the fragment that
    has been defined in case of definition issues, and the fragment that is being
    spread in case of spread issues.
    """

    level: IssueLevel
    kind: IssueKind
    message: str
    fragment_name: str
    location: SourceLocation | None = None

    @property
    def formatted(self) -> FormattedValidationIssue:
        """Get issue formatted as a dictionary."""
        formatted: FormattedValidationIssue = {
            "level": self.level.value,
            "message": self.message,
            "fragment_name": self.fragment_name,
        }
        if self.location is not None:
            formatted["locations"] = [self.location.formatted]
        return formatted

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if isinstance(other, dict):
            # source locations compare equal to tuples and formatted locations
            compared: dict[str, Any] = {
                "level": self.level.value,
                "message": self.message,
                "fragment_name": self.fragment_name,
            }
            if self.location is not None:
                compared["locations"] = [self.location]
            return compared == other
        return tuple(self) == other

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(tuple(self))


class LintStats(NamedTuple):
    """Statistics about a linter run"""

    fragments_checked: int
    fragments_with_issues: int
    total_issues: int


class IssueCollector:
    """Append-only accumulator for the issues of one linter run.

    A collector is passed to every step that checks a rule, so that the issues end up
    in one list in the order in which the rules fired.
    """

    __slots__ = "_issues", "_fragments_with_issues"

    def __init__(self) -> None:
        self._issues: list[ValidationIssue] = []
        self._fragments_with_issues: set[str] = set()

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue."""
        self._issues.append(issue)
        self._fragments_with_issues.add(issue.fragment_name)

    @property
    def issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(self._issues)

    @property
    def last_issue(self) -> ValidationIssue:
        """The issue that has been added last"""
        return self._issues[-1]

    @property
    def errors(self) -> tuple[ValidationIssue, ...]:
        return tuple(
            issue for issue in self._issues if issue.level is IssueLevel.ERROR
        )

    @property
    def fragments_with_issues(self) -> frozenset[str]:
        return frozenset(self._fragments_with_issues)

    @property
    def total_issues(self) -> int:
        return len(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[ValidationIssue]:
        return iter(self._issues)

    def __bool__(self) -> bool:
        return bool(self._issues)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self._issues)} issue(s)>"


class LintResult(NamedTuple):
    """The result of a linter run"""

    issues: tuple[ValidationIssue, ...]
    stats: LintStats

    @property
    def errors(self) -> tuple[ValidationIssue, ...]:
        """The error-level issues"""
        return tuple(issue for issue in self.issues if issue.level is IssueLevel.ERROR)

    @property
    def is_valid(self) -> bool:
        """Whether no error-level issues have been found"""
        return not any(issue.level is IssueLevel.ERROR for issue in self.issues)
